"""
gbhwdb - Game Boy hardware database site builder.
"""

from gbhwdb.__version__ import __version__

__all__ = ["__version__"]
