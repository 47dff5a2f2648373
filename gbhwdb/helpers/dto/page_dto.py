"""
DTOs for aggregated cartridge groups, page declarations and run results.

Cross-layer data contracts between the cartridge components, the site
components and the build workflow.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from gbhwdb.helpers.dto.config_dto import GameConfig, MapperId
from gbhwdb.helpers.dto.submission_dto import CartridgeSubmission

PageType = Literal["index", "mapper-detail"]


@dataclass
class CartridgeGroups:
    """Result of aggregation: two independent views over the same submissions.

    by_game: game type -> all submissions of that type, in load order
    by_mapper: mapper id -> classified submissions, in load order (lazy keys)
    unclassified: number of submissions left out of by_mapper
    """

    by_game: dict[str, list[CartridgeSubmission]]
    by_mapper: dict[MapperId, list[CartridgeSubmission]]
    unclassified: int = 0

    @property
    def submission_count(self) -> int:
        return sum(len(submissions) for submissions in self.by_game.values())


@dataclass(frozen=True)
class GameEntry:
    """One game row of the index page."""

    type: str
    cfg: GameConfig | None
    submissions: tuple[CartridgeSubmission, ...]

    @property
    def display_name(self) -> str:
        return self.cfg.name if self.cfg is not None else self.type


@dataclass(frozen=True)
class IndexPageProps:
    games: tuple[GameEntry, ...]
    mappers: tuple[MapperId, ...]


@dataclass(frozen=True)
class MapperPageProps:
    mapper: MapperId
    submissions: tuple[CartridgeSubmission, ...]


@dataclass(frozen=True)
class PageDeclaration:
    """
    A page job handed to the renderer.

    Attributes:
        type: Discriminant tag ("index" or "mapper-detail")
        path: Output path segments, e.g. ("cartridges", "mbc1")
        title: Display title (the renderer appends the site name)
        props: Page payload, IndexPageProps or MapperPageProps
    """

    type: PageType
    path: tuple[str, ...]
    title: str
    props: IndexPageProps | MapperPageProps


@dataclass(frozen=True)
class PageFailure:
    """A page that could not be rendered or written."""

    path: tuple[str, ...]
    error: str


@dataclass
class PageWriteReport:
    written: list[Path] = field(default_factory=list)
    failures: list[PageFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


@dataclass
class RunSummary:
    """Summary shown at the end of a build run."""

    submissions: int
    games: int
    mappers: list[MapperId]
    unclassified: int
    pages_written: int = 0
    page_failures: list[PageFailure] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
