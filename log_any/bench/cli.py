"""Command line entry point: ``log-any-bench``"""

from __future__ import annotations

from typing import Optional, Tuple

import click
from rich.console import Console
from rich.table import Table

from log_any.bench.runner import format_duration, format_results, run_scenario
from log_any.bench.scenario import SCENARIOS

console = Console()


@click.command()
@click.option(
    "--scenario",
    "scenario_name",
    type=click.Choice(sorted(SCENARIOS)),
    default="log_any",
    show_default=True,
    help="Scenario to run",
)
@click.option(
    "--include",
    "-i",
    multiple=True,
    help="Participant to run (repeatable, default: all)",
)
@click.option(
    "--number",
    "-n",
    type=click.IntRange(min=1),
    default=None,
    help="Executions per repeat (default: calibrated automatically)",
)
@click.option(
    "--repeat",
    "-r",
    type=click.IntRange(min=1),
    default=5,
    show_default=True,
    help="Number of repeats; the best one is reported",
)
@click.option("--list", "list_only", is_flag=True, help="List participants and exit")
def main(
    scenario_name: str,
    include: Tuple[str, ...],
    number: Optional[int],
    repeat: int,
    list_only: bool,
) -> None:
    """Benchmark log_any call patterns.

    \b
    Examples:
        log-any-bench
        log-any-bench -i log_trace -i if_trace -r 10
    """
    scenario = SCENARIOS[scenario_name]

    if list_only:
        table = Table(title=f"Participants of {scenario.name}")
        table.add_column("Name", style="cyan")
        table.add_column("Code")
        table.add_column("Summary")
        for participant in scenario.participants:
            table.add_row(participant.name, participant.code_template, participant.summary)
        console.print(table)
        return

    try:
        results = run_scenario(
            scenario,
            number=number,
            repeat=repeat,
            include=include or None,
        )
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--include") from e

    table = Table(title=scenario.summary or scenario.name)
    table.add_column("Participant", style="cyan")
    table.add_column("Rate (/s)", justify="right")
    table.add_column("Time", justify="right")
    table.add_column("vs slowest", justify="right")
    for row in format_results(results):
        table.add_row(
            row["name"],
            f"{row['rate']:,.0f}",
            format_duration(row["time"]),
            f"{row['vs_slowest']:.2f}x",
        )
    console.print(table)


if __name__ == "__main__":
    main()
