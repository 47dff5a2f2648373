"""
Classify command: dry run of loading and classification, no pages written.
"""

from __future__ import annotations

import argparse

from gbhwdb.components.cartridge.aggregation_comp import aggregate
from gbhwdb.components.cartridge.submission_loader_comp import (
    hydrate_submissions,
    parse_submissions,
    read_raw_submissions,
)
from gbhwdb.components.config.game_config_comp import load_configuration_store
from gbhwdb.helpers.exceptions import GbhwdbError
from gbhwdb.helpers.files_helper import make_photo_resolver
from gbhwdb.helpers.logging_helper import WarningCollector, configure_logging
from gbhwdb.interfaces.cli.commands._options import config_from_args
from gbhwdb.interfaces.cli.ui import TableDisplay, print_error, print_info, print_warning
from gbhwdb.workflows.site.build_site_wf import check_game_configs


def cmd_classify(args: argparse.Namespace) -> int:
    """
    Show how many submissions land in each mapper group.
    """
    config = config_from_args(args)
    configure_logging(config.get("log_level"))
    params = config.make_build_params()
    warnings = WarningCollector()

    try:
        store = load_configuration_store(params.games_path, params.layouts_path)
        submissions = parse_submissions(read_raw_submissions(params.data_path))
        if not args.no_photos:
            submissions = hydrate_submissions(
                submissions, make_photo_resolver(params.photo_root), max_workers=params.hydration_workers
            )
        if params.strict_game_config:
            check_game_configs(submissions, store)
        groups = aggregate(submissions, store, warnings)
    except GbhwdbError as e:
        print_error(str(e))
        return 1

    counts = {mapper.value: len(members) for mapper, members in groups.by_mapper.items()}
    TableDisplay.show_counts("Submissions by mapper", counts)
    print_info(
        f"{groups.submission_count} submissions, {len(groups.by_game)} games, {groups.unclassified} unclassified"
    )
    for message in warnings.messages:
        print_warning(message)
    return 0
