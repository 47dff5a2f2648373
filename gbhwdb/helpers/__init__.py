"""
Helpers package.
"""

from .exceptions import (
    ConfigurationError,
    DataIntegrityError,
    GbhwdbError,
    MissingGameConfigError,
    MissingGameTypeError,
    PageRenderError,
    PhotoNotFoundError,
)
from .files_helper import PhotoResolver, make_photo_resolver, resolve_photo
from .logging_helper import WarningCollector, configure_logging

__all__ = [
    "ConfigurationError",
    "DataIntegrityError",
    "GbhwdbError",
    "MissingGameConfigError",
    "MissingGameTypeError",
    "PageRenderError",
    "PhotoNotFoundError",
    "PhotoResolver",
    "WarningCollector",
    "configure_logging",
    "make_photo_resolver",
    "resolve_photo",
]
