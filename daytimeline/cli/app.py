"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console
from rich.table import Table

from ..adapters.busy_file import FileBusySource
from ..config import AppConfig, get_default_config_path
from ..domain.clock import day_of_week_from_date
from ..domain.exceptions import DayTimelineError
from ..domain.models import BusySpan
from ..services.availability import AvailabilityService

app = typer.Typer(
    name="daytimeline",
    help="Find free time windows within a day",
    add_completion=False
)

console = Console()


def _load_config(config_file: Optional[Path]) -> AppConfig:
    """
    Load the config file, falling back to defaults when none exists.

    An explicitly passed path must exist.
    """
    if config_file is not None:
        config = AppConfig.load_from_yaml(config_file)
    else:
        default_path = get_default_config_path()
        config = AppConfig.load_from_yaml(default_path) if default_path.exists() else AppConfig()

    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    return config


def _resolve_busy_file(busy_file: Optional[Path], config: AppConfig) -> Path:
    if busy_file is not None:
        return busy_file
    if config.busy_file:
        return Path(config.busy_file)
    console.print("[red]Error: no busy file given and none configured.[/red]")
    raise typer.Exit(1)


def _day_heading(date: Optional[str]) -> str:
    if not date:
        return "Free time"

    if day_of_week_from_date(date) is None:
        console.print(f"[yellow]Warning: '{date}' is not a YYYY-MM-DD date, ignoring it[/yellow]")
        return "Free time"

    day = pendulum.from_format(date.strip(), "YYYY-MM-DD")
    return f"Free time on {day.format('dddd, DD.MM.YYYY')}"


@app.command()
def free(
    busy_file: Annotated[Optional[Path], typer.Argument(help="YAML/JSON file with busy spans. Defaults to busy_file from the config.")] = None,
    start: Annotated[Optional[str], typer.Option("--start", "-s", help="Range start (HH:MM)")] = None,
    end: Annotated[Optional[str], typer.Option("--end", "-e", help="Range end (HH:MM)")] = None,
    min_duration: Annotated[Optional[int], typer.Option("--min-duration", "-d", min=0, help="Minimum window length in minutes")] = None,
    date: Annotated[Optional[str], typer.Option("--date", help="Day being planned (YYYY-MM-DD), used for the heading")] = None,
    strict: Annotated[bool, typer.Option("--strict", help="Fail on malformed times instead of skipping them.")] = False,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./daytimeline.yaml")] = None,
):
    """
    List the free windows of a day.

    Examples:

        daytimeline free busy.yaml

        daytimeline free busy.yaml --start 08:00 --end 18:00 --min-duration 30

        daytimeline free busy.yaml --date 2024-11-25 --strict
    """
    try:
        config = _load_config(config_file)
        path = _resolve_busy_file(busy_file, config)

        range_start = start or config.defaults.range_start
        range_end = end or config.defaults.range_end
        min_minutes = min_duration if min_duration is not None else config.defaults.min_duration_minutes

        service = AvailabilityService(FileBusySource(path), strict=strict or config.strict)
        windows = service.find_free_windows(range_start, range_end, min_duration_minutes=min_minutes)

    except DayTimelineError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    console.print()
    if not windows:
        console.print(
            f"[yellow]⚠ No free time between {range_start} and {range_end}.[/yellow]"
        )
        console.print()
        return

    table = Table(
        title=_day_heading(date),
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Start", style="bold green")
    table.add_column("End", style="bold green")
    table.add_column("Minutes", justify="right", style="dim")

    for window in windows:
        table.add_row(window.start_time, window.end_time, str(window.duration_minutes()))

    console.print(table)
    console.print()


@app.command()
def check(
    busy_file: Annotated[Path, typer.Argument(help="YAML/JSON file with busy spans")],
    start_time: Annotated[str, typer.Argument(help="Start of the new block (HH:MM)")],
    end_time: Annotated[str, typer.Argument(help="End of the new block (HH:MM)")],
    strict: Annotated[bool, typer.Option("--strict", help="Fail on malformed times instead of skipping them.")] = False,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file")] = None,
):
    """
    Check whether a new block overlaps an existing one.

    Exits with code 2 when a conflict is found.

    Example:

        daytimeline check busy.yaml 10:00 11:00
    """
    try:
        config = _load_config(config_file)

        service = AvailabilityService(FileBusySource(busy_file), strict=strict or config.strict)
        conflicts = service.check_conflicts(BusySpan(start_time=start_time, end_time=end_time))

    except DayTimelineError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if not conflicts:
        console.print(f"[green]✓ {start_time} - {end_time} is free.[/green]")
        return

    console.print(f"[bold red]✗ {start_time} - {end_time} overlaps {len(conflicts)} existing block(s):[/bold red]")
    for span in conflicts:
        console.print(f"  {span.start_time} - {span.end_time}")
    raise typer.Exit(2)


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]daytimeline[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
