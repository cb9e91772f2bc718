"""
ⒸAngelaMos | 2026
cli.py
"""
from __future__ import annotations

import signal
import sys
from pathlib import Path

import click
import orjson
from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn
from rich.table import Table

from logiclens.analysis.scoring import round_half_up
from logiclens.core import ExportHistory, configure_logging, load_settings
from logiclens.models import Theme

console = Console()

RATING_STYLES = {
    "high": "red",
    "medium": "yellow",
    "moderate": "yellow",
    "low": "green",
}


def _setup(ctx: click.Context, quiet: bool = False):
    """
    Load settings and logging for a command
    """
    settings = load_settings(ctx.obj["config_dir"], **ctx.obj["overrides"])
    configure_logging(json_mode=settings.json_logs, debug=settings.debug, quiet=quiet)
    return settings


def _write_json(data: dict) -> None:
    click.echo(orjson.dumps(data, option=orjson.OPT_INDENT_2).decode("utf-8"))


def _counters_table(title: str, counters, metrics) -> Table:
    table = Table(title=title)
    table.add_column("Construct", style="cyan")
    table.add_column("Count", justify="right")

    for name, value in counters.primitives().items():
        table.add_row(name, str(value))

    table.add_section()
    table.add_row("total", str(counters.total), style="bold")
    table.add_row("complexityScore", f"{metrics.complexity_score:.1f}")
    table.add_row("cyclomaticComplexity", str(metrics.cyclomatic_complexity))
    table.add_row("maintainabilityIndex", f"{metrics.maintainability_index:g}")
    return table


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding config.yaml",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, config_dir: Path | None) -> None:
    """
    LogicLens - control-flow construct counter and report exporter
    """
    ctx.ensure_object(dict)
    ctx.obj["config_dir"] = config_dir
    ctx.obj["overrides"] = {"debug": True} if debug else {}


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
@click.pass_context
def count(ctx: click.Context, file: Path, as_json: bool) -> None:
    """
    Count logical constructs in a single file
    """
    from logiclens.analysis import analyze, evaluate

    _setup(ctx, quiet=as_json)

    stats = analyze(file.read_text(encoding="utf-8"))
    metrics = evaluate(stats)

    if as_json:
        _write_json({"file": str(file), "stats": stats.to_dict(), "metrics": metrics.to_dict()})
        return

    console.print(_counters_table(f"Logical constructs in {file.name}", stats, metrics))
    style = RATING_STYLES[metrics.complexity_rating]
    console.print(
        f"Found [bold]{stats.total}[/bold] logical constructs, "
        f"complexity [{style}]{metrics.complexity_rating}[/{style}]"
    )


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Report path")
@click.option("--title", default=None, help="Report title")
@click.option("--theme", type=click.Choice([t.value for t in Theme]), default=None, help="Report theme")
@click.option("--width", type=int, default=None, help="Chart width")
@click.option("--height", type=int, default=None, help="Chart height")
@click.pass_context
def export(
    ctx: click.Context,
    file: Path,
    output: Path | None,
    title: str | None,
    theme: str | None,
    width: int | None,
    height: int | None,
) -> None:
    """
    Analyze a file and write a VISX report
    """
    from logiclens.analysis import analyze
    from logiclens.export import render

    settings = _setup(ctx)

    stats = analyze(file.read_text(encoding="utf-8"))
    output = output or file.parent / "analysis.visx"

    document = render(
        stats,
        {
            "title": title or settings.report.title or f"Analysis of {file.name}",
            "theme": theme or settings.report.theme,
            "width": width if width is not None else settings.report.width,
            "height": height if height is not None else settings.report.height,
        },
    )
    output.write_text(document, encoding="utf-8")

    if settings.history.enabled:
        store = ExportHistory(settings.db_path, settings.history.max_entries)
        store.record(str(file), str(output), stats)

    console.print(f"[green]VISX file saved to[/green] {output}")


@cli.command()
@click.argument("directory", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--include", multiple=True, help="Glob pattern to include (repeatable)")
@click.option("--exclude", multiple=True, help="Glob pattern to exclude (repeatable)")
@click.option("--limit", type=click.IntRange(min=1), default=None, help="Max files to scan")
@click.option("--top", type=click.IntRange(min=1), default=None, help="Ranked files to show")
@click.option("--export", "export_path", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Write a project VISX report")
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
@click.pass_context
def project(
    ctx: click.Context,
    directory: Path,
    include: tuple[str, ...],
    exclude: tuple[str, ...],
    limit: int | None,
    top: int | None,
    export_path: Path | None,
    as_json: bool,
) -> None:
    """
    Analyze every matching file under a directory and rank them
    """
    from logiclens.analysis import CancellationToken, SourceScanner, analyze_units
    from logiclens.export import render_project

    settings = _setup(ctx, quiet=as_json)
    top_n = top or settings.report.top_n

    scanner = SourceScanner.from_settings(
        settings.scan,
        include_patterns=list(include),
        exclude_patterns=list(exclude),
        max_files=limit,
    )
    files = list(scanner.scan(directory))

    if not files:
        console.print("[yellow]No matching source files found[/yellow]")
        return

    token = CancellationToken()
    with Progress(
        TextColumn("[bold]Analyzing[/bold]"),
        BarColumn(),
        MofNCompleteColumn(),
        TextColumn("{task.description}", style="dim"),
        console=console,
        disable=as_json,
    ) as progress:
        task = progress.add_task("", total=len(files))

        def on_progress(done: int, total: int | None, identifier: str) -> None:
            progress.update(task, completed=done, description=identifier)

        previous_handler = signal.signal(signal.SIGINT, lambda signum, frame: token.cancel())
        try:
            result = analyze_units(files, cancel_token=token, on_progress=on_progress)
        finally:
            signal.signal(signal.SIGINT, previous_handler)

    analysis = result.project
    if analysis is None or analysis.unit_count == 0:
        console.print("[yellow]No files could be analyzed[/yellow]")
        return

    if result.cancelled and not as_json:
        console.print(
            f"[yellow]Scan cancelled after {result.attempted} of {len(files)} files, "
            "showing partial results[/yellow]"
        )

    if as_json:
        data = analysis.to_dict(top_n=top_n)
        data["failures"] = [{"unit": f.identifier, "error": f.error} for f in result.failures]
        data["cancelled"] = result.cancelled
        _write_json(data)
    else:
        _print_project(directory, analysis, top_n)
        for failure in result.failures:
            console.print(f"[red]Failed:[/red] {failure.identifier} ({failure.error})")

    if export_path is not None:
        document = render_project(
            analysis,
            {
                "title": settings.report.title or f"Project Analysis: {directory.resolve().name}",
                "theme": settings.report.theme,
                "width": settings.report.width,
                "height": settings.report.height,
            },
            top_n=top_n,
        )
        export_path.write_text(document, encoding="utf-8")
        if settings.history.enabled:
            store = ExportHistory(settings.db_path, settings.history.max_entries)
            store.record(str(directory), str(export_path), analysis.aggregate)
        if not as_json:
            console.print(f"[green]Project report saved to[/green] {export_path}")


def _print_project(directory: Path, analysis, top_n: int) -> None:
    summary = analysis.metrics
    console.print(f"\n[bold]Project Analysis: {directory}[/bold]")
    console.print(f"  Total files analyzed: {analysis.unit_count}")
    console.print(f"  Total logical constructs: {analysis.aggregate.total}")
    console.print(f"  Project complexity score: {summary.complexity_score:.1f}")
    console.print(f"  Average complexity: {round_half_up(analysis.average_complexity):.1f}\n")

    ranked = analysis.top(top_n)
    table = Table(title=f"Top {len(ranked)} Most Complex Files")
    table.add_column("#", justify="right")
    table.add_column("File", style="green")
    table.add_column("Constructs", justify="right")
    table.add_column("If/Else", justify="right")
    table.add_column("Loops", justify="right")
    table.add_column("Complexity", justify="right")

    for position, unit in enumerate(ranked, start=1):
        stats = unit.counters
        style = RATING_STYLES[unit.rating]
        table.add_row(
            str(position),
            unit.identifier,
            str(stats.total),
            str(stats.if_ + stats.else_if + stats.else_),
            str(stats.for_ + stats.while_ + stats.do_while),
            f"[{style}]{unit.complexity:.1f}[/{style}]",
        )

    console.print(table)


@cli.command()
@click.option("--limit", type=click.IntRange(min=1), default=None, help="Entries to show")
@click.pass_context
def history(ctx: click.Context, limit: int | None) -> None:
    """
    Show recently exported reports
    """
    settings = _setup(ctx)

    store = ExportHistory(settings.db_path, settings.history.max_entries)
    entries = store.recent(limit)

    if not entries:
        console.print("[yellow]No exports recorded[/yellow]")
        return

    table = Table(title="Recent Exports")
    table.add_column("Exported", style="cyan")
    table.add_column("Source", style="green")
    table.add_column("Report", style="dim")
    table.add_column("Constructs", justify="right")
    table.add_column("Complexity", justify="right")

    for entry in entries:
        table.add_row(
            entry.exported_at.strftime("%Y-%m-%d %H:%M:%S"),
            entry.source,
            entry.report_path,
            str(entry.stats.total),
            f"{entry.stats.complexity_score:.1f}",
        )

    console.print(table)


@cli.command()
def version() -> None:
    """
    Show version information
    """
    from logiclens import __version__

    console.print(f"[bold]LogicLens[/bold] v{__version__}")


def main() -> int:
    """
    CLI entry point
    """
    try:
        cli(standalone_mode=False)
        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        return 130
    except click.exceptions.Abort:
        console.print("\n[yellow]Aborted[/yellow]")
        return 130
    except click.ClickException as e:
        e.show()
        return e.exit_code
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
