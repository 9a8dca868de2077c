"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import List, Optional, Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ..config import TimelineConfig, load_config
from ..domain.exceptions import BreakFileNotFoundError, BreakFileReadError, BulkLoadError, IntervalParseError
from ..domain.models import LineError
from ..domain.overlap_engine import OverlapEngine
from ..services.break_service import BreakService
from .commands import AddInterval, Help, Quit, classify_command

app = typer.Typer(
    name="breakoverlap",
    help="Find the time of day during which most breaks overlap",
    add_completion=False
)

console = Console()

PROMPT = "Your command ( q(uit) / h(elp) / <HH:mm><HH:mm>)"
INVALID_INPUT_MESSAGE = "Could not match input to any valid option. For help, write 'help'"

ConfigOption = Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./breakoverlap.yaml")]
StrictOption = Annotated[bool, typer.Option("--strict-endpoints", help="Reject breaks that start and end at the same time.")]
AllOrNothingOption = Annotated[bool, typer.Option("--all-or-nothing", help="Discard the whole file if a single line cannot be parsed.")]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging.")]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _build_config(config_file: Optional[Path], strict_endpoints: bool, all_or_nothing: bool) -> TimelineConfig:
    """Load the configuration and apply command line overrides."""
    try:
        config = load_config(config_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    overrides = {}
    if strict_endpoints:
        overrides["allow_equal_endpoints"] = False
    if all_or_nothing:
        overrides["all_or_nothing_file_load"] = True
    return config.model_copy(update=overrides) if overrides else config


def _print_result(service: BreakService) -> None:
    console.print(service.format_result(service.current_result()))


def _display_help_text(config: TimelineConfig) -> None:
    console.print("Hopefully this message helps. Your input options are:\n")
    console.print("q/quit\t\tExits the application")
    console.print("h/help\t\tDisplays this help message")
    console.print(
        f"<{config.time_format}><{config.time_format}>\t"
        "Denotes start and end time of a single driver's break. "
        "First = start time, second = end time."
    )
    relation = "<=" if config.allow_equal_endpoints else "<"
    console.print(f"\t\tBoth times must match {config.time_format}. Start must be {relation} end.")
    console.print("\t\tE.g. '10:0012:00' or '06:1523:30'\n")


def _load_file_into_session(service: BreakService, filename: Path) -> None:
    """
    Load break times from a file at session start.

    Failures are reported and the session continues with an empty timeline.
    """
    console.print("Attempting to read from provided file path...")
    try:
        line_errors = service.load_file(filename)
    except (BreakFileNotFoundError, BreakFileReadError, BulkLoadError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        console.print("Continuing with empty list of break times.")
        return

    if line_errors:
        skipped = ";".join(str(error.line_number) for error in line_errors)
        console.print(
            "[yellow]Not all file lines could be parsed as valid break times. "
            "Rest of the lines were read and parsed.[/yellow]"
        )
        console.print(f"Unparsed lines: {skipped}")
    _print_result(service)


def _run_session(service: BreakService) -> None:
    """Read commands until the user quits or input ends."""
    config = service.engine.config
    while True:
        try:
            user_input = typer.prompt(PROMPT, default="", show_default=False)
        except typer.Abort:
            console.print()
            return

        command = classify_command(user_input)
        if isinstance(command, Quit):
            raise typer.Exit(0)
        if isinstance(command, Help):
            _display_help_text(config)
        elif isinstance(command, AddInterval):
            try:
                result = service.add_break(command.text)
            except IntervalParseError:
                console.print(INVALID_INPUT_MESSAGE)
                continue
            console.print(f"\n{service.format_result(result)}\n")


def _line_error_table(line_errors: List[LineError]) -> Table:
    table = Table(
        title="Skipped lines",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Line", style="bold yellow", justify="right")
    table.add_column("Text", style="dim")
    table.add_column("Reason")

    for error in line_errors:
        table.add_row(
            str(error.line_number),
            escape(error.text),
            escape(str(error.error))
        )
    return table


@app.command()
def run(
    filename: Annotated[Optional[Path], typer.Option("--file", "-f", help="Input file for break times.")] = None,
    config_file: ConfigOption = None,
    strict_endpoints: StrictOption = False,
    all_or_nothing: AllOrNothingOption = False,
    verbose: VerboseOption = False,
):
    """
    Start an interactive session, optionally seeded from a file.

    Examples:

        breakoverlap run

        breakoverlap run --file breaks.txt

        breakoverlap run -f breaks.txt --all-or-nothing
    """
    _configure_logging(verbose)
    config = _build_config(config_file, strict_endpoints, all_or_nothing)
    service = BreakService(OverlapEngine(config))

    console.print("Application started.")
    if filename is not None:
        _load_file_into_session(service, filename)

    _run_session(service)


@app.command()
def analyze(
    filename: Annotated[Path, typer.Argument(help="File with one break time per line.")],
    config_file: ConfigOption = None,
    strict_endpoints: StrictOption = False,
    all_or_nothing: AllOrNothingOption = False,
    verbose: VerboseOption = False,
):
    """
    Print the most common break time of a file and exit.
    """
    _configure_logging(verbose)
    config = _build_config(config_file, strict_endpoints, all_or_nothing)
    service = BreakService(OverlapEngine(config))

    try:
        line_errors = service.load_file(filename)
    except (BreakFileNotFoundError, BreakFileReadError, BulkLoadError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    if line_errors:
        console.print()
        console.print(_line_error_table(line_errors))
        console.print()

    console.print(f"Breaks loaded: {service.engine.interval_count}")
    _print_result(service)


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]breakoverlap[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
