"""
Workflow for building the cartridge pages of the site.

This workflow orchestrates one batch run:
- Loads the configuration store (games + layouts)
- Loads the submission batch and hydrates photo stats (bounded concurrency)
- Classifies and aggregates submissions by game and by mapper
- Declares the index page and one page per populated mapper
- Renders and writes pages with a bounded worker pool

ARCHITECTURE:
- This is a PURE WORKFLOW that takes all dependencies as parameters
- Does NOT read configuration files itself; callers (CLI) build the params
- The renderer is injected; render_page is the plain default

ERRORS:
- Data-integrity problems (missing type, missing photo, unresolvable layout
  in strict mode) abort the run before any page is written
- Unknown mapper revisions are warnings collected in the summary
- Page failures do not stop other pages, but the run raises PageRenderError

USAGE:
    from gbhwdb.workflows.site.build_site_wf import build_site_workflow

    summary = build_site_workflow(
        params=BuildSiteWorkflowParams(data_path=..., games_path=..., output_dir=...)
    )
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from gbhwdb.components.cartridge.aggregation_comp import aggregate
from gbhwdb.components.cartridge.page_declaration_comp import build_page_declarations
from gbhwdb.components.cartridge.submission_loader_comp import load_submissions
from gbhwdb.components.config.game_config_comp import ConfigurationStore, load_configuration_store
from gbhwdb.components.site.page_output_comp import PageRenderer, write_pages
from gbhwdb.components.site.page_renderer_comp import render_page
from gbhwdb.helpers.dto.page_dto import CartridgeGroups, PageDeclaration, RunSummary
from gbhwdb.helpers.dto.site_dto import BuildSiteWorkflowParams
from gbhwdb.helpers.dto.submission_dto import CartridgeSubmission
from gbhwdb.helpers.exceptions import MissingGameConfigError, PageRenderError
from gbhwdb.helpers.files_helper import make_photo_resolver
from gbhwdb.helpers.logging_helper import WarningCollector

logger = logging.getLogger(__name__)


def check_game_configs(submissions: Sequence[CartridgeSubmission], store: ConfigurationStore) -> None:
    """
    Fail on submissions that can only be classified through a layout that does not resolve.

    A submission with an explicit mapper revision does not need its layout.

    Raises:
        MissingGameConfigError: Naming the first offending submission
    """
    for submission in submissions:
        if submission.mapper_kind():
            continue
        if store.first_layout(submission.type) is None:
            reason = "game config" if store.game_config(submission.type) is None else "layout"
            raise MissingGameConfigError(
                f"Submission {submission.display_id()} has no mapper metadata and no {reason} "
                f"for game type {submission.type!r}",
                submission=submission.display_id(),
            )


def build_cartridge_pages(
    submissions: list[CartridgeSubmission],
    store: ConfigurationStore,
    warnings: WarningCollector,
    strict_game_config: bool = True,
) -> tuple[CartridgeGroups, list[PageDeclaration]]:
    """Aggregate hydrated submissions and declare pages. No I/O."""
    if strict_game_config:
        check_game_configs(submissions, store)
    groups = aggregate(submissions, store, warnings)
    pages = build_page_declarations(groups, store)
    return groups, pages


def build_site_workflow(
    params: BuildSiteWorkflowParams,
    render: PageRenderer = render_page,
) -> RunSummary:
    """
    Run the whole cartridge pipeline.

    Args:
        params: Paths and concurrency settings
        render: PageDeclaration -> HTML renderer

    Returns:
        RunSummary with counts and warnings

    Raises:
        DataIntegrityError: Broken submission corpus (nothing written)
        ConfigurationError: Broken game/layout configuration (nothing written)
        PageRenderError: At least one page failed (summary attached)
    """
    warnings = WarningCollector()

    store = load_configuration_store(params.games_path, params.layouts_path)
    resolver = make_photo_resolver(params.photo_root)
    submissions = load_submissions(params.data_path, resolver, max_workers=params.hydration_workers)

    groups, pages = build_cartridge_pages(submissions, store, warnings, params.strict_game_config)

    logger.info(f"[site] Writing {len(pages)} pages to {params.output_dir}")
    report = write_pages(pages, render, params.output_dir, max_workers=params.render_workers)

    summary = RunSummary(
        submissions=groups.submission_count,
        games=len(groups.by_game),
        mappers=list(groups.by_mapper),
        unclassified=groups.unclassified,
        pages_written=len(report.written),
        page_failures=list(report.failures),
        warnings=warnings.messages,
    )

    if not report.ok:
        raise PageRenderError(f"{len(report.failures)} of {len(pages)} pages failed to render", summary)

    logger.info("[site] Site generation finished :)")
    return summary
