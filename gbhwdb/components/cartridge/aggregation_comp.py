"""
Cartridge aggregation - group submissions by game and by classified mapper.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from gbhwdb.components.cartridge.mapper_classifier_comp import make_classifier
from gbhwdb.helpers.dto.config_dto import MapperId
from gbhwdb.helpers.dto.page_dto import CartridgeGroups
from gbhwdb.helpers.dto.submission_dto import CartridgeSubmission
from gbhwdb.helpers.logging_helper import WarningCollector

if TYPE_CHECKING:
    from gbhwdb.components.config.game_config_comp import ConfigurationStore

logger = logging.getLogger(__name__)


def group_by_game(submissions: Iterable[CartridgeSubmission]) -> dict[str, list[CartridgeSubmission]]:
    """Every submission lands in exactly one group, groups and members in load order."""
    groups: dict[str, list[CartridgeSubmission]] = {}
    for submission in submissions:
        groups.setdefault(submission.type, []).append(submission)
    return groups


def group_by_mapper(
    submissions: Iterable[CartridgeSubmission],
    classifier: Callable[[CartridgeSubmission], MapperId | None],
) -> tuple[dict[MapperId, list[CartridgeSubmission]], int]:
    """
    Group classified submissions by mapper.

    A key exists only if at least one submission was classified to it.

    Returns:
        (by_mapper, unclassified_count)
    """
    groups: dict[MapperId, list[CartridgeSubmission]] = {}
    unclassified = 0
    for submission in submissions:
        mapper = classifier(submission)
        if mapper is None:
            unclassified += 1
            continue
        groups.setdefault(mapper, []).append(submission)
    return groups, unclassified


def aggregate(
    submissions: list[CartridgeSubmission],
    store: ConfigurationStore,
    warnings: WarningCollector | None = None,
) -> CartridgeGroups:
    """Build both views. Pure over already hydrated data."""
    by_game = group_by_game(submissions)
    by_mapper, unclassified = group_by_mapper(submissions, make_classifier(store, warnings))
    logger.info(
        f"[aggregate] {len(submissions)} submissions: {len(by_game)} games, "
        f"{len(by_mapper)} mappers, {unclassified} unclassified"
    )
    return CartridgeGroups(by_game=by_game, by_mapper=by_mapper, unclassified=unclassified)
