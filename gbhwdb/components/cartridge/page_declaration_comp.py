"""Page declaration component.

Turns aggregated cartridge groups into the page jobs handed to the renderer:
one index page plus one page per populated mapper.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gbhwdb.helpers.dto.config_dto import MapperId
from gbhwdb.helpers.dto.page_dto import (
    CartridgeGroups,
    GameEntry,
    IndexPageProps,
    MapperPageProps,
    PageDeclaration,
)
from gbhwdb.helpers.dto.submission_dto import CartridgeSubmission

if TYPE_CHECKING:
    from gbhwdb.components.config.game_config_comp import ConfigurationStore

INDEX_TITLE = "Game Boy cartridges"
SECTION = "cartridges"


def build_index_page(groups: CartridgeGroups, store: ConfigurationStore) -> PageDeclaration:
    """Index page: games sorted by display name, plus the populated mapper ids."""
    entries = [
        GameEntry(type=game_type, cfg=store.game_config(game_type), submissions=tuple(submissions))
        for game_type, submissions in groups.by_game.items()
    ]
    # Type id breaks ties so equal names still sort reproducibly
    entries.sort(key=lambda entry: (entry.display_name, entry.type))
    return PageDeclaration(
        type="index",
        path=(SECTION, "index"),
        title=INDEX_TITLE,
        props=IndexPageProps(games=tuple(entries), mappers=tuple(groups.by_mapper)),
    )


def build_mapper_page(mapper: MapperId, submissions: list[CartridgeSubmission]) -> PageDeclaration:
    return PageDeclaration(
        type="mapper-detail",
        path=(SECTION, mapper.value),
        title=mapper.value,
        props=MapperPageProps(mapper=mapper, submissions=tuple(submissions)),
    )


def build_page_declarations(groups: CartridgeGroups, store: ConfigurationStore) -> list[PageDeclaration]:
    """Index page first, then one mapper page per populated mapper (by_mapper key order)."""
    pages = [build_index_page(groups, store)]
    pages.extend(build_mapper_page(mapper, submissions) for mapper, submissions in groups.by_mapper.items())
    return pages
