"""Command-line interface for wordcounter."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Optional

import click
import structlog
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from wordcounter import __version__
from wordcounter.analysis.models import AnalysisOutcome, StatisticsResult
from wordcounter.config import Config, CounterSettings, load_config
from wordcounter.counter import WordCounter
from wordcounter.exceptions import ConfigError, FetchError
from wordcounter.export import build_export, default_export_name, write_export
from wordcounter.fetch import fetch_html
from wordcounter.formatting import format_badge_number, format_number, format_time, render_report
from wordcounter.observability import configure_logging, export_prometheus

console = Console()
err_console = Console(stderr=True)
logger = structlog.get_logger(__name__)

EXIT_NO_CONTENT = 1
EXIT_ERROR = 2


def _fail(message: str, code: int = EXIT_ERROR) -> None:
    err_console.print(f"[red]Error: {escape(message)}[/red]")
    sys.exit(code)


def _counter_settings(config: Config, **overrides: Any) -> CounterSettings:
    """Apply command-line overrides on top of the configured counter settings."""
    values = config.counter.model_dump()
    values.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return CounterSettings.model_validate(values)
    except ValidationError as e:
        raise click.BadParameter(str(e)) from e


def _build_counter(config: Config, settings: CounterSettings) -> WordCounter:
    return WordCounter.from_config(config.model_copy(update={"counter": settings}))


def _read_source(source: str, config: Config) -> str:
    if source == "-":
        return click.get_text_stream("stdin").read()
    if source.lower().startswith(("http://", "https://")):
        return fetch_html(
            source,
            timeout=config.extraction.fetch_timeout,
            user_agent=config.extraction.user_agent,
        )
    path = Path(source)
    if not path.is_file():
        raise FileNotFoundError(f"No such file: {source}")
    return path.read_text(encoding="utf-8", errors="replace")


def _stats_table(stats: StatisticsResult, title: str) -> Table:
    table = Table(title=escape(title))
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="magenta", justify="right")

    table.add_row("Words", format_number(stats.words))
    table.add_row("Characters (with spaces)", format_number(stats.characters_with_spaces))
    table.add_row("Characters (no spaces)", format_number(stats.characters_no_spaces))
    table.add_row("Sentences", format_number(stats.sentences))
    table.add_row("Paragraphs", format_number(stats.paragraphs))
    table.add_row("Unique words", format_number(stats.unique_words))
    table.add_row("Average word length", f"{stats.avg_word_length:.1f}")
    table.add_row("Longest word", f"{stats.longest_word} ({stats.longest_word_length})")
    table.add_row("Reading time", format_time(stats.reading_time_seconds))
    table.add_row("Speaking time", format_time(stats.speaking_time_seconds))
    table.add_row("Word density", f"{stats.density_percent:.1f}%")
    return table


def _frequency_table(stats: StatisticsResult) -> Table:
    table = Table(title="Most Frequent Words")
    table.add_column("#", justify="right")
    table.add_column("Word", style="cyan")
    table.add_column("Count", style="magenta", justify="right")
    for index, entry in enumerate(stats.word_frequency or (), start=1):
        table.add_row(str(index), entry.word, str(entry.count))
    return table


def _emit(outcome: AnalysisOutcome, config: Config, output: str, title: str) -> None:
    stats = outcome.data
    if stats is None:
        _fail(outcome.error or "Error counting content", EXIT_NO_CONTENT)
        return
    if output == "json":
        click.echo(json.dumps(outcome.to_dict(), indent=2, ensure_ascii=False))
    elif output == "report":
        click.echo(render_report(stats, config.display))
    elif output == "badge":
        click.echo(format_badge_number(stats.words))
    else:
        console.print(_stats_table(stats, title))
        if stats.word_frequency:
            console.print(_frequency_table(stats))


output_option = click.option(
    "--output",
    "-o",
    type=click.Choice(["table", "report", "json", "badge"]),
    default="table",
    show_default=True,
    help="Output format",
)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config", "-c", type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Configuration file path"
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Logging level (overrides the configuration file)",
)
@click.option("--metrics", "show_metrics", is_flag=True, help="Print Prometheus metrics to stderr on exit")
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], log_level: Optional[str], show_metrics: bool) -> None:
    """wordcounter - visible-text word counts and text statistics."""
    try:
        loaded = load_config(config)
    except ConfigError as e:
        _fail(str(e))
        return

    if log_level:
        monitoring = loaded.monitoring.model_copy(update={"log_level": log_level})
        loaded = loaded.model_copy(update={"monitoring": monitoring})
    configure_logging(loaded.monitoring)

    ctx.ensure_object(dict)
    ctx.obj["config"] = loaded
    if show_metrics:
        ctx.call_on_close(lambda: click.echo(export_prometheus(), err=True))


@cli.command()
@click.argument("source")
@click.option("--include-links/--no-include-links", default=None, help="Count link text and URLs")
@click.option("--reading-speed", type=int, default=None, help="Reading speed in words per minute")
@click.option("--speaking-speed", type=int, default=None, help="Speaking speed in words per minute")
@click.option("--frequency/--no-frequency", default=None, help="Report the most frequent words")
@click.option("--top", "top_n", type=int, default=None, help="Number of frequent words to report")
@click.option("--export", "export_path", type=click.Path(dir_okay=False, path_type=Path), help="Write a JSON export")
@click.option("--export-dir", type=click.Path(file_okay=False, path_type=Path), help="Write a timestamped JSON export")
@output_option
@click.pass_context
def page(
    ctx: click.Context,
    source: str,
    include_links: Optional[bool],
    reading_speed: Optional[int],
    speaking_speed: Optional[int],
    frequency: Optional[bool],
    top_n: Optional[int],
    export_path: Optional[Path],
    export_dir: Optional[Path],
    output: str,
) -> None:
    """Count the visible text of an HTML page (file path, URL, or - for stdin)."""
    config: Config = ctx.obj["config"]
    settings = _counter_settings(
        config,
        include_links=include_links,
        reading_speed=reading_speed,
        speaking_speed=speaking_speed,
        show_word_frequency=frequency,
        frequency_word_count=top_n,
    )
    counter = _build_counter(config, settings)

    try:
        html = _read_source(source, config)
    except (FetchError, OSError) as e:
        _fail(str(e))
        return

    soup = counter.parse(html)
    outcome = counter.count_page(soup)
    if not outcome.success or outcome.data is None:
        if output == "json":
            click.echo(json.dumps(outcome.to_dict(), indent=2))
        _fail(outcome.error or "Error counting content", EXIT_NO_CONTENT)
        return

    title = soup.title.get_text(strip=True) if soup.title else ""
    url = source if source.lower().startswith(("http://", "https://")) else ""
    _emit(outcome, config, output, title or source)

    target = export_path or (export_dir / default_export_name() if export_dir else None)
    if target is not None:
        written = write_export(target, build_export(outcome.data, url=url, title=title))
        err_console.print(f"[green]Saved export to {escape(str(written))}[/green]")

    logger.info("Page counted", source=source, strategy=outcome.strategy, words=outcome.data.words)


@cli.command()
@click.argument("text", required=False)
@click.option("--include-links/--no-include-links", default=None, help="Count URLs as [URL] words")
@click.option("--reading-speed", type=int, default=None, help="Reading speed in words per minute")
@click.option("--speaking-speed", type=int, default=None, help="Speaking speed in words per minute")
@click.option("--frequency/--no-frequency", default=None, help="Report the most frequent words")
@click.option("--top", "top_n", type=int, default=None, help="Number of frequent words to report")
@output_option
@click.pass_context
def text(
    ctx: click.Context,
    text: Optional[str],
    include_links: Optional[bool],
    reading_speed: Optional[int],
    speaking_speed: Optional[int],
    frequency: Optional[bool],
    top_n: Optional[int],
    output: str,
) -> None:
    """Count a text selection given as an argument or on stdin."""
    config: Config = ctx.obj["config"]
    settings = _counter_settings(
        config,
        include_links=include_links,
        reading_speed=reading_speed,
        speaking_speed=speaking_speed,
        show_word_frequency=frequency,
        frequency_word_count=top_n,
    )
    if not settings.selective_counter:
        _fail("Selection counting is disabled in the configuration", EXIT_NO_CONTENT)
        return

    counter = _build_counter(config, settings)
    selection = text if text is not None else click.get_text_stream("stdin").read()
    stats = counter.count_selection(selection)
    if stats is None:
        _fail("No words found in the selection", EXIT_NO_CONTENT)
        return

    _emit(AnalysisOutcome.ok(stats, "selection"), config, output, "Selection")


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
