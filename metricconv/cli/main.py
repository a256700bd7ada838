# -*- coding: utf-8 -*-
"""
metricconv CLI
==============

Interactive and one-shot front end for the conversion engine. Reading lines,
prompts, messages and the process exit all live here; the engine itself is
a pure function library.
"""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from metricconv.config import MetricConverterConfig, get_config
from metricconv.engine import ConversionEngine
from metricconv.exceptions import MetricConverterException, format_exception_chain
from metricconv.unit_resolver import UnitResolver

logger = logging.getLogger(__name__)

FALLBACK_VERSION = "1.0.0"

WELCOME_MESSAGE = "Welcome to the Metric Unit Converter!"
INSTRUCTIONS_MESSAGE = (
    'Please enter "{quit_token}" to quit or enter a metric conversion query. '
    "The metric conversion query should be in the format:\n"
    "Number UnitToConvertFrom = UnitToConvertTo\n\n"
    "For example, a valid metric conversion query for converting 1 kilogram "
    "to grams is:\n"
    "1 kg = g\n\n"
    "Note that UnitToConvertFrom and UnitToConvertTo must use prefixes and "
    "symbols from the International System of Units (SI)."
)
ERROR_MESSAGE = "Your input is not currently handled by this app."
FAREWELL_MESSAGE = "Thank you for using the Metric Unit Converter. Goodbye!"

app = typer.Typer(
    name="metricconv",
    help="Convert quantities between SI-prefixed units",
    add_completion=False,
)
console = Console()


def _configure_logging(verbose: bool, level_name: str) -> None:
    if verbose:
        level = logging.DEBUG
    elif level_name:
        level = getattr(logging, level_name, logging.WARNING)
    else:
        return
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _print_plain(text: str) -> None:
    console.print(escape(text), highlight=False, soft_wrap=True)


def _report_error(error: MetricConverterException) -> None:
    console.print(f"[red]{ERROR_MESSAGE}[/red]")
    _print_plain(str(error))


def run_repl(config: MetricConverterConfig, engine: Optional[ConversionEngine] = None) -> None:
    """
    Read queries from standard input until the quit token or end of input.

    Args:
        config: Driver configuration (quit token, prompt, instructions)
        engine: Engine to convert with, a new one by default
    """
    engine = engine or ConversionEngine()

    console.print(f"\n[bold green]{WELCOME_MESSAGE}[/bold green]")
    if config.show_instructions:
        _print_plain("\n" + INSTRUCTIONS_MESSAGE.format(quit_token=config.quit_token))

    while True:
        try:
            line = console.input(escape(config.prompt))
        except EOFError:
            logger.info("End of input reached")
            break

        line = line.strip()
        if not line:
            continue
        if line == config.quit_token:
            break

        outcome = engine.try_convert(line)
        if outcome.ok:
            _print_plain(engine.format_result(outcome.result))
        else:
            _report_error(outcome.error)

    console.print(f"\n{FAREWELL_MESSAGE}")


@app.callback(invoke_without_command=True)
def _root(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    metricconv - SI prefix unit converter

    Without a command, starts the interactive converter.
    """
    config = get_config()
    _configure_logging(verbose, config.log_level)

    if version:
        console.print(f"metricconv v{_get_version()}")
        raise typer.Exit(0)

    if ctx.invoked_subcommand is None:
        run_repl(config)


def _get_version() -> str:
    try:
        from .. import __version__

        return __version__
    except ImportError:
        return FALLBACK_VERSION


@app.command()
def version():
    """Show metricconv version"""
    console.print(f"[bold green]metricconv v{_get_version()}[/bold green]")


@app.command()
def repl():
    """Start the interactive converter"""
    run_repl(get_config())


# a query may start with "-", e.g. "-1 kg = g"
@app.command(context_settings={"ignore_unknown_options": True})
def convert(
    query: str = typer.Argument(..., help='Conversion query, e.g. "1 kg = g"'),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
):
    """Convert a single query and exit"""
    engine = ConversionEngine()
    try:
        result = engine.convert(query.strip())
    except MetricConverterException as e:
        logger.info(format_exception_chain(e))
        if as_json:
            console.print_json(e.to_json())
        else:
            _report_error(e)
        raise typer.Exit(1)

    if as_json:
        console.print_json(result.model_dump_json())
    else:
        _print_plain(engine.format_result(result))


@app.command()
def units():
    """List supported root units and prefixes"""
    resolver = UnitResolver()

    root_table = Table(title="Root units", show_header=True, header_style="bold magenta")
    root_table.add_column("Symbol", style="cyan")
    root_table.add_column("Unit", style="green")
    for root_unit in resolver.list_root_units():
        root_table.add_row(root_unit.symbol, root_unit.unit_name)

    prefix_table = Table(title="Prefixes", show_header=True, header_style="bold magenta")
    prefix_table.add_column("Symbol", style="cyan")
    prefix_table.add_column("Name", style="green")
    prefix_table.add_column("Multiplier", justify="right", style="yellow")
    for prefix in resolver.list_prefixes():
        prefix_table.add_row(
            prefix.symbol or "-",
            prefix.name or "(none)",
            f"1e{prefix.exponent}",
        )

    console.print(root_table)
    console.print(prefix_table)
    console.print(Panel.fit(
        "A unit is a prefix followed by a root unit, e.g. [cyan]km[/cyan], "
        "[cyan]mg[/cyan], [cyan]dam[/cyan], [cyan]kmol[/cyan]",
        border_style="blue",
    ))
