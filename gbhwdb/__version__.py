"""Version information for gbhwdb."""

# Semantic versioning: MAJOR.MINOR.PATCH

__version__ = "0.3.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.3.0 - Layered cartridge pipeline
#         - Two-tier mapper classification (board metadata, then layout)
#         - Parallel photo hydration with order preservation
#         - Bounded page writer that reports per-page failures
# 0.2.0 - Configuration service (YAML + env) and rich CLI
# 0.1.0 - Initial cartridge crawler
