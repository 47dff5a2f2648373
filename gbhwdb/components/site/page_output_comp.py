"""Page output component.

Resolves output paths for page declarations and writes rendered documents
to disk with a bounded worker pool. A failing page is recorded and logged;
the remaining pages are still attempted.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from gbhwdb.helpers.dto.page_dto import PageDeclaration, PageFailure, PageWriteReport

logger = logging.getLogger(__name__)

PageRenderer = Callable[[PageDeclaration], str]

DEFAULT_RENDER_WORKERS = 16


def resolve_page_target(page: PageDeclaration, output_root: str | Path) -> Path:
    """
    Output file for a page.

    All path segments but the last are directories; the last segment is the
    file name, or the page type when the path is empty.

    Example:
        ("cartridges", "mbc1") -> <root>/cartridges/mbc1.html
    """
    directories = page.path[:-1]
    filename = page.path[-1] if page.path else page.type
    return Path(output_root).resolve().joinpath(*directories, f"{filename}.html")


def write_page(page: PageDeclaration, render: PageRenderer, output_root: str | Path) -> Path:
    """Render one page and write it, creating parent directories."""
    html = f"<!DOCTYPE html>\n{render(page)}"
    target = resolve_page_target(page, output_root)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(html, encoding="utf-8")
    logger.debug(f"[pages] Wrote HTML file {target}")
    return target


def write_pages(
    pages: Sequence[PageDeclaration],
    render: PageRenderer,
    output_root: str | Path,
    max_workers: int = DEFAULT_RENDER_WORKERS,
) -> PageWriteReport:
    """
    Render and write all pages as independent jobs.

    Args:
        pages: Page declarations (treated as an unordered set of jobs)
        render: Renderer producing the HTML document body
        output_root: Root directory of the generated site
        max_workers: Concurrent render/write jobs

    Returns:
        PageWriteReport with written targets (in page order) and failures
    """
    report = PageWriteReport()
    written: dict[int, Path] = {}

    with ThreadPoolExecutor(max_workers=max(1, max_workers), thread_name_prefix="render") as executor:
        futures = {executor.submit(write_page, page, render, output_root): i for i, page in enumerate(pages)}
        for future in as_completed(futures):
            i = futures[future]
            try:
                written[i] = future.result()
            except Exception as e:
                page = pages[i]
                logger.error(f"[pages] Failed to write page {'/'.join(page.path) or page.type}: {e}")
                report.failures.append(PageFailure(path=page.path, error=str(e)))

    report.written = [written[i] for i in sorted(written)]
    report.failures.sort(key=lambda failure: failure.path)
    return report
