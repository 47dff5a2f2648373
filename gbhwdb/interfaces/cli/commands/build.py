"""
Build command: crawl submissions and write the cartridge pages.
"""

from __future__ import annotations

import argparse

from gbhwdb.helpers.exceptions import GbhwdbError, PageRenderError
from gbhwdb.helpers.logging_helper import configure_logging
from gbhwdb.interfaces.cli.commands._options import config_from_args
from gbhwdb.interfaces.cli.ui import COLOR_ERROR, print_error, print_success, show_run_summary, show_spinner
from gbhwdb.workflows.site.build_site_wf import build_site_workflow


def cmd_build(args: argparse.Namespace) -> int:
    """
    Run the full pipeline and report a summary.
    """
    config = config_from_args(args)
    configure_logging(config.get("log_level", "INFO"))
    params = config.make_build_params()

    try:
        summary = show_spinner("Building cartridge pages...", build_site_workflow, params)
    except PageRenderError as e:
        show_run_summary(e.summary, border_style=COLOR_ERROR)
        print_error(str(e))
        return 1
    except GbhwdbError as e:
        print_error(str(e))
        return 1

    show_run_summary(summary)
    print_success(f"Wrote {summary.pages_written} pages to {params.output_dir}")
    return 0
