#!/usr/bin/env python3
"""
Rich UI components for CLI - consistent interface across all commands.
"""

from __future__ import annotations

from typing import Any

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gbhwdb.helpers.dto.config_dto import LayoutConfig
from gbhwdb.helpers.dto.page_dto import RunSummary

console = Console()

# Color scheme constants
COLOR_SUCCESS = "green"
COLOR_ERROR = "red"
COLOR_WARNING = "yellow"
COLOR_INFO = "cyan"


class TableDisplay:
    """
    Formatted tables for run results.
    """

    @staticmethod
    def show_summary(title: str, data: dict[str, Any], border_style: str = COLOR_INFO):
        """Display a summary table."""
        table = Table(title=title, box=box.ROUNDED, show_header=False, border_style=border_style)
        table.add_column("Metric", style="bold")
        table.add_column("Value")

        for key, value in data.items():
            table.add_row(key, str(value))

        console.print(table)

    @staticmethod
    def show_counts(title: str, counts: dict[str, int], key_header: str = "Mapper"):
        """Display a two-column count table."""
        table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold")
        table.add_column(key_header, style=COLOR_INFO)
        table.add_column("Submissions", justify="right")

        for key, count in counts.items():
            table.add_row(key, str(count))

        console.print(table)

    @staticmethod
    def show_layout(label: str, layout: LayoutConfig):
        """Display the chip roles of a board layout."""
        table = Table(title=f"{label} ({layout.id})", box=box.ROUNDED, show_header=True, header_style="bold")
        table.add_column("Designator", style=COLOR_INFO, width=12)
        table.add_column("Role")

        for chip in layout.chips:
            table.add_row(chip.designator, chip.key)

        console.print(table)


def show_run_summary(summary: RunSummary, border_style: str = COLOR_SUCCESS):
    """Display the end-of-run summary and any warnings."""
    TableDisplay.show_summary(
        "Cartridge pages",
        {
            "Submissions": summary.submissions,
            "Games": summary.games,
            "Mappers": ", ".join(m.value for m in summary.mappers) or "-",
            "Unclassified": summary.unclassified,
            "Pages written": summary.pages_written,
            "Page failures": len(summary.page_failures),
            "Warnings": len(summary.warnings),
        },
        border_style=border_style,
    )
    for message in summary.warnings:
        print_warning(message)
    for failure in summary.page_failures:
        print_error(f"{'/'.join(failure.path)}: {failure.error}")


def show_spinner(message: str, task_fn, *args, **kwargs):
    """
    Show a spinner while executing a task.
    Returns the result of task_fn.
    """
    with console.status(f"[bold {COLOR_INFO}]{message}[/bold {COLOR_INFO}]"):
        return task_fn(*args, **kwargs)


def print_success(message: str):
    """Print a success message."""
    console.print(f"[bold {COLOR_SUCCESS}]✓[/bold {COLOR_SUCCESS}] {escape(message)}")


def print_error(message: str):
    """Print an error message."""
    console.print(f"[bold {COLOR_ERROR}]✗[/bold {COLOR_ERROR}] {escape(message)}")


def print_warning(message: str):
    """Print a warning message."""
    console.print(f"[bold {COLOR_WARNING}]⚠[/bold {COLOR_WARNING}] {escape(message)}")


def print_info(message: str):
    """Print an info message."""
    console.print(f"[{COLOR_INFO}]ℹ[/{COLOR_INFO}] {escape(message)}")
