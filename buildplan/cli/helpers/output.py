"""Rendering of resolution results on the terminal."""

import json
from enum import Enum

from rich.console import Console
from rich.table import Table

from buildplan.models.selections import BuildToggle
from buildplan.resolution.resolver import ResolutionResult


class OutputFormat(str, Enum):
    JSON = "json"
    TABLE = "table"


def print_result(result: ResolutionResult, output_format: OutputFormat) -> None:
    if output_format is OutputFormat.TABLE:
        print_result_table(result)
    else:
        print(json.dumps(result.to_dict(), indent=2, sort_keys=True))


def print_result_table(result: ResolutionResult, console: Console | None = None) -> None:
    console = console or Console()

    table = Table(
        title=f"Build selections ({result.host.value} host)",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Component", style="cyan", no_wrap=True)
    table.add_column("Build", style="bold")

    enabled = result.selections.enabled_toggles()
    for toggle in BuildToggle:
        status = "[green]yes[/green]" if toggle in enabled else "[dim]no[/dim]"
        table.add_row(toggle.value, status)

    console.print(table)
    console.print(f"Matched tests: {result.matched_test_count}")
    console.print(f"Unique required artifacts: {len(result.required_artifacts)}")
    console.print(f"Unique optional artifacts: {len(result.optional_artifacts)}")
    if result.unclassified_artifacts:
        console.print(
            "[yellow]Unclassified artifacts:[/yellow] "
            + ", ".join(result.unclassified_artifacts)
        )
