"""Site output components: page paths, page writing and the default renderer."""

from .page_output_comp import (
    DEFAULT_RENDER_WORKERS,
    PageRenderer,
    resolve_page_target,
    write_page,
    write_pages,
)
from .page_renderer_comp import render_page

__all__ = [
    "DEFAULT_RENDER_WORKERS",
    "PageRenderer",
    "render_page",
    "resolve_page_target",
    "write_page",
    "write_pages",
]
