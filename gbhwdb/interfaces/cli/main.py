#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse

from gbhwdb.__version__ import __version__
from gbhwdb.interfaces.cli.commands.build import cmd_build
from gbhwdb.interfaces.cli.commands.classify import cmd_classify
from gbhwdb.interfaces.cli.commands.layout import cmd_layout


def _add_input_options(s: argparse.ArgumentParser) -> None:
    s.add_argument("--data", help="submission batch JSON (default: build/data/cartridges.json)")
    s.add_argument("--games", help="games config JSON (default: config/games.json)")
    s.add_argument("--layouts", help="YAML file with extra board layouts")
    s.add_argument("--photo-root", dest="photo_root", help="directory relative photo paths resolve against")
    s.add_argument(
        "--lenient", action="store_true", help="treat unconfigured games as unclassifiable instead of failing"
    )
    s.add_argument("--log-level", dest="log_level", help="logging level (default: INFO)")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    p = argparse.ArgumentParser(
        prog="gbhwdb",
        description="Game Boy hardware database - cartridge page builder",
        epilog="Examples:\n"
        "  gbhwdb build                               # Build pages with configured defaults\n"
        "  gbhwdb build --output /tmp/site --workers 4\n"
        "  gbhwdb classify --no-photos                # Dry run: mapper counts only\n"
        "  gbhwdb layout DMG-BEAN-02                  # Chip roles of a board",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Available commands (use 'gbhwdb <command> --help' for command-specific help)",
    )

    # build: Full pipeline
    s = sub.add_parser("build", help="Crawl submissions and write cartridge pages")
    _add_input_options(s)
    s.add_argument("--output", help="site output directory (default: build/site)")
    s.add_argument("--workers", type=int, help="concurrent page render jobs (default: 16)")
    s.set_defaults(func=cmd_build)

    # classify: Dry run
    s = sub.add_parser("classify", help="Classify submissions by mapper without writing pages")
    _add_input_options(s)
    s.add_argument("--no-photos", dest="no_photos", action="store_true", help="skip photo hydration")
    s.set_defaults(func=cmd_classify)

    # layout: Board lookup
    s = sub.add_parser("layout", help="Show the chip layout of a PCB board label")
    s.add_argument("label", help="board label, e.g. DMG-BEAN-02")
    s.add_argument("--layouts", help="YAML file with extra board layouts")
    s.set_defaults(func=cmd_layout)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command provided, show help
    if args.cmd is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
