"""
Data transfer objects shared across layers.
"""

from .config_dto import ChipRole, GameConfig, GamePlatform, LayoutChip, LayoutConfig, MapperId
from .page_dto import (
    CartridgeGroups,
    GameEntry,
    IndexPageProps,
    MapperPageProps,
    PageDeclaration,
    PageFailure,
    PageType,
    PageWriteReport,
    RunSummary,
)
from .site_dto import BuildSiteWorkflowParams
from .submission_dto import (
    PHOTO_SLOTS,
    BoardMetadata,
    CartridgeMetadata,
    CartridgePhotos,
    CartridgeSubmission,
    MapperMetadata,
    Photo,
    PhotoSlot,
    PhotoStats,
)

__all__ = [
    "PHOTO_SLOTS",
    "BoardMetadata",
    "BuildSiteWorkflowParams",
    "CartridgeGroups",
    "CartridgeMetadata",
    "CartridgePhotos",
    "CartridgeSubmission",
    "ChipRole",
    "GameConfig",
    "GameEntry",
    "GamePlatform",
    "IndexPageProps",
    "LayoutChip",
    "LayoutConfig",
    "MapperId",
    "MapperMetadata",
    "MapperPageProps",
    "PageDeclaration",
    "PageFailure",
    "PageType",
    "PageWriteReport",
    "Photo",
    "PhotoSlot",
    "PhotoStats",
    "RunSummary",
]
