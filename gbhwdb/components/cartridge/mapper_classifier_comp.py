"""Mapper classifier component.

Maps a hydrated submission to a canonical MapperId, or to None when the
submission is unclassifiable.

Classification is an ordered chain of strategies. Each strategy returns a
Verdict: either a definite result (a MapperId, or None for unclassifiable)
or NO_OPINION. The first definite verdict wins; an exhausted chain is
unclassifiable.

Current chain:
1. Board metadata: metadata.board.mapper.kind looked up in MAPPER_KINDS
2. Layout: first layout of the game config, mapper role present or not

Explicit board metadata always wins over layout inference; the two sources
are not cross-validated.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from gbhwdb.helpers.dto.config_dto import ChipRole, MapperId
from gbhwdb.helpers.dto.submission_dto import CartridgeSubmission
from gbhwdb.helpers.logging_helper import WarningCollector

if TYPE_CHECKING:
    from gbhwdb.components.config.game_config_comp import ConfigurationStore

logger = logging.getLogger(__name__)

# Hardware revision string (as written on the chip) -> canonical mapper
MAPPER_KINDS: dict[str, MapperId] = {
    "MBC1": MapperId.MBC1,
    "MBC1A": MapperId.MBC1,
    "MBC1B": MapperId.MBC1,
    "MBC1B1": MapperId.MBC1,
    "MBC2": MapperId.MBC2,
    "MBC2A": MapperId.MBC2,
    "MBC3": MapperId.MBC3,
    "MBC3A": MapperId.MBC3,
    "MBC3B": MapperId.MBC3,
    "MBC30": MapperId.MBC30,
    "MBC5": MapperId.MBC5,
    "MBC6": MapperId.MBC6,
    "MBC7": MapperId.MBC7,
    "MMM01": MapperId.MMM01,
    "HuC-1": MapperId.HUC1,
    "HuC-1A": MapperId.HUC1,
    "HuC-3": MapperId.HUC3,
    "TAMA5": MapperId.TAMA5,
}


@dataclass(frozen=True)
class Verdict:
    """Strategy outcome. `definite` False means "no opinion"."""

    definite: bool
    mapper: MapperId | None = None


NO_OPINION = Verdict(definite=False)


def _decided(mapper: MapperId | None) -> Verdict:
    return Verdict(definite=True, mapper=mapper)


ClassificationStrategy = Callable[[CartridgeSubmission, "ConfigurationStore", WarningCollector], Verdict]


def classify_from_board_metadata(
    submission: CartridgeSubmission,
    store: ConfigurationStore,
    warnings: WarningCollector,
) -> Verdict:
    """Use the explicitly submitted mapper revision, if any."""
    kind = submission.mapper_kind()
    if not kind:
        return NO_OPINION
    mapper = MAPPER_KINDS.get(kind)
    if mapper is None:
        warnings.warn(
            f"[classifier] Unsupported mapper type {kind} in submission {submission.display_id()}",
            logger=logger,
        )
    return _decided(mapper)


def classify_from_layout(
    submission: CartridgeSubmission,
    store: ConfigurationStore,
    warnings: WarningCollector,
) -> Verdict:
    """Infer from the game's first layout whether the board has a mapper at all.

    A layout with a mapper role but no submitted revision stays unclassifiable:
    the mapper is known to exist but its revision is never guessed.
    """
    layout = store.first_layout(submission.type)
    if layout is None:
        logger.debug(f"[classifier] No game config or layout for {submission.display_id()}")
        return _decided(None)
    if layout.has_role(ChipRole.MAPPER):
        return _decided(None)
    return _decided(MapperId.NO_MAPPER)


DEFAULT_STRATEGIES: tuple[ClassificationStrategy, ...] = (
    classify_from_board_metadata,
    classify_from_layout,
)


def classify(
    submission: CartridgeSubmission,
    store: ConfigurationStore,
    warnings: WarningCollector | None = None,
    strategies: Sequence[ClassificationStrategy] = DEFAULT_STRATEGIES,
) -> MapperId | None:
    """
    Classify a submission's mapper.

    Args:
        submission: Hydrated submission (only metadata and type are read)
        store: Configuration store for the layout fallback
        warnings: Collector for recoverable problems (unknown revisions)
        strategies: Ordered strategy chain, first definite verdict wins

    Returns:
        MapperId (possibly MapperId.NO_MAPPER), or None when unclassifiable
    """
    if warnings is None:
        warnings = WarningCollector()
    for strategy in strategies:
        verdict = strategy(submission, store, warnings)
        if verdict.definite:
            return verdict.mapper
    return None


def make_classifier(
    store: ConfigurationStore,
    warnings: WarningCollector | None = None,
) -> Callable[[CartridgeSubmission], MapperId | None]:
    """Bind a store and collector, returning a one-argument classifier."""
    collector = warnings if warnings is not None else WarningCollector()

    def _classify(submission: CartridgeSubmission) -> MapperId | None:
        return classify(submission, store, collector)

    return _classify
