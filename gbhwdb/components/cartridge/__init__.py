"""Cartridge pipeline components: loader, classifier, aggregator, page declarations."""

from .aggregation_comp import aggregate, group_by_game, group_by_mapper
from .mapper_classifier_comp import (
    DEFAULT_STRATEGIES,
    MAPPER_KINDS,
    NO_OPINION,
    Verdict,
    classify,
    classify_from_board_metadata,
    classify_from_layout,
    make_classifier,
)
from .page_declaration_comp import build_index_page, build_mapper_page, build_page_declarations
from .submission_loader_comp import (
    hydrate_submission,
    hydrate_submissions,
    load_submissions,
    parse_submissions,
    read_raw_submissions,
)

__all__ = [
    "DEFAULT_STRATEGIES",
    "MAPPER_KINDS",
    "NO_OPINION",
    "Verdict",
    "aggregate",
    "build_index_page",
    "build_mapper_page",
    "build_page_declarations",
    "classify",
    "classify_from_board_metadata",
    "classify_from_layout",
    "group_by_game",
    "group_by_mapper",
    "hydrate_submission",
    "hydrate_submissions",
    "load_submissions",
    "make_classifier",
    "parse_submissions",
    "read_raw_submissions",
]
