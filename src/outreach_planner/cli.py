"""
Command-line interface for the Outreach Planner.
"""

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

import click
from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import Config
from .logger import get_planner_adapter, setup_logger
from .models.signals import CATEGORY_INFO, ImpactLevel, SignalCategory
from .models.windows import SignalOverlap, WindowType
from .planner import build_scenario_response, build_signals_response, build_windows_response
from .signals.simulated import build_simulated_signals
from .signals.store import SignalStore
from .temporal.models import BUILTIN_SCENARIOS
from .temporal.scenario import ScenarioTransformer

console = Console()

OVERLAP_LIST = TypeAdapter(List[SignalOverlap])

WINDOW_STYLES = {
    WindowType.SAFER: "green",
    WindowType.CAUTION: "yellow",
    WindowType.HIGH_DISRUPTION: "red",
}


def parse_instant(value: Optional[str]) -> datetime:
    """Parse an ISO-8601 instant; naive values are taken as UTC, None means now."""
    if not value:
        return datetime.now(timezone.utc)
    try:
        instant = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise click.BadParameter(f"'{value}' is not an ISO-8601 instant", param_hint="--now")
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant


def load_store(signals_file: Optional[Path], now: datetime) -> SignalStore:
    """Signals from a JSON file, or the simulated catalog timed from now."""
    if signals_file:
        return SignalStore.from_json(signals_file)
    return SignalStore(build_simulated_signals(now))


def horizon_option(func):
    return click.option(
        "--horizon",
        type=float,
        default=None,
        help="Planning horizon in days (defaults to configuration)"
    )(func)


def source_options(func):
    func = click.option(
        "--now",
        "now_value",
        type=str,
        default=None,
        help="Horizon start as ISO-8601 instant (defaults to the current time)"
    )(func)
    func = click.option(
        "--signals-file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="JSON array of signals (defaults to the simulated catalog)"
    )(func)
    func = click.option(
        "--json",
        "as_json",
        is_flag=True,
        help="Print the response as JSON"
    )(func)
    return func


@click.group()
@click.version_option(version=__version__, prog_name="outreach-planner")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to .env configuration file"
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging"
)
@click.pass_context
def main(ctx: click.Context, config: Optional[Path], verbose: bool) -> None:
    """
    Outreach Planner: temporal signal aggregation for outreach timing.

    Converts scheduled institutional activity into safer, caution and
    high-disruption windows. All bundled data is simulated.
    """
    ctx.ensure_object(dict)

    try:
        cfg = Config.load_from_env(str(config) if config else None)
    except (ValidationError, ValueError) as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(1)

    if verbose:
        cfg.logging.level = "DEBUG"

    ctx.obj["config"] = cfg
    ctx.obj["logger"] = setup_logger(
        name="outreach_planner",
        level=cfg.logging.level,
        log_file=cfg.logging.file_path,
        max_size=cfg.logging.max_size,
        backup_count=cfg.logging.backup_count,
        console_output=verbose
    )


@main.command()
@horizon_option
@source_options
@click.option(
    "--category",
    type=click.Choice([c.value for c in SignalCategory]),
    default=None,
    help="Only list signals of this category"
)
@click.option(
    "--impact",
    type=click.Choice([i.value for i in ImpactLevel]),
    default=None,
    help="Only list signals with this impact level"
)
@click.pass_context
def signals(ctx: click.Context, horizon: Optional[float], now_value: Optional[str],
            signals_file: Optional[Path], as_json: bool,
            category: Optional[str], impact: Optional[str]) -> None:
    """List signals relevant to the planning horizon."""
    cfg: Config = ctx.obj["config"]
    now = parse_instant(now_value)

    try:
        store = load_store(signals_file, now)
        response = build_signals_response(
            store,
            now,
            horizon if horizon is not None else cfg.planner.horizon_days,
            category=SignalCategory(category) if category else None,
            impact=ImpactLevel(impact) if impact else None
        )
    except (ValidationError, ValueError, OSError) as e:
        click.echo(f"Failed to load signals: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(response.model_dump_json(indent=2))
        return

    table = Table(title="Temporal Signals", show_header=True)
    table.add_column("ID", style="cyan")
    table.add_column("Type")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Impact")
    table.add_column("Confidence")
    table.add_column("Description")

    for signal in response.signals:
        table.add_row(
            signal.id,
            CATEGORY_INFO[signal.category]["short"],
            signal.start.isoformat(timespec="minutes"),
            signal.end.isoformat(timespec="minutes"),
            signal.impact_level.value,
            signal.confidence_level.value,
            signal.description
        )

    console.print(table)
    meta = response.meta
    console.print(
        f"{meta.count} signals | minimum latency {meta.minimum_latency_hours:g}h"
        + (" | [bold]contains simulated data[/bold]" if meta.contains_simulated_data else "")
    )


def _print_windows(title: str, response) -> None:
    table = Table(title=title, show_header=True)
    table.add_column("ID", style="cyan")
    table.add_column("Type")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Hours", justify="right")
    table.add_column("Score", justify="right")
    table.add_column("Confidence")
    table.add_column("Drivers")

    for window in response.windows:
        style = WINDOW_STYLES[window.window_type]
        table.add_row(
            window.id,
            f"[{style}]{window.window_type.value}[/{style}]",
            window.start.isoformat(timespec="minutes"),
            window.end.isoformat(timespec="minutes"),
            f"{window.duration.total_seconds() / 3600:.1f}",
            str(window.impact_score),
            window.confidence_summary.value,
            ", ".join(window.driver_signal_ids) or "-"
        )

    console.print(table)


def _print_overlaps(response) -> None:
    table = Table(title="Signal Overlaps", show_header=True)
    table.add_column("ID", style="cyan")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Signals")
    table.add_column("Combined Impact")

    for overlap in response.overlaps:
        table.add_row(
            overlap.id,
            overlap.start.isoformat(timespec="minutes"),
            overlap.end.isoformat(timespec="minutes"),
            " + ".join(overlap.signal_ids),
            overlap.combined_impact.value
        )

    console.print(table)


@main.command()
@horizon_option
@source_options
@click.pass_context
def windows(ctx: click.Context, horizon: Optional[float], now_value: Optional[str],
            signals_file: Optional[Path], as_json: bool) -> None:
    """Compute outreach windows and overlaps for the horizon."""
    cfg: Config = ctx.obj["config"]
    now = parse_instant(now_value)

    try:
        store = load_store(signals_file, now)
        response = build_windows_response(
            store,
            now,
            horizon if horizon is not None else cfg.planner.horizon_days,
            config=cfg.aggregation_config()
        )
    except (ValidationError, ValueError, OSError) as e:
        click.echo(f"Window computation failed: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(response.model_dump_json(indent=2))
        return

    _print_windows("Outreach Windows", response)
    if response.overlaps:
        _print_overlaps(response)


@main.command()
@horizon_option
@source_options
@click.pass_context
def overlaps(ctx: click.Context, horizon: Optional[float], now_value: Optional[str],
             signals_file: Optional[Path], as_json: bool) -> None:
    """List moments where significant signals coincide."""
    cfg: Config = ctx.obj["config"]
    now = parse_instant(now_value)

    try:
        store = load_store(signals_file, now)
        response = build_windows_response(
            store,
            now,
            horizon if horizon is not None else cfg.planner.horizon_days,
            config=cfg.aggregation_config()
        )
    except (ValidationError, ValueError, OSError) as e:
        click.echo(f"Overlap detection failed: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(OVERLAP_LIST.dump_json(response.overlaps, indent=2).decode())
        return

    if not response.overlaps:
        console.print("No overlapping significant signals in this horizon.")
        return
    _print_overlaps(response)


@main.command()
@horizon_option
@source_options
@click.option(
    "--scenario",
    "scenario_tag",
    type=str,
    default=None,
    help=f"Scenario tag ({', '.join(BUILTIN_SCENARIOS)}); unknown tags use the default"
)
@click.pass_context
def scenario(ctx: click.Context, horizon: Optional[float], now_value: Optional[str],
             signals_file: Optional[Path], as_json: bool, scenario_tag: Optional[str]) -> None:
    """Show SPECULATIVE windows under a major-event scenario."""
    cfg: Config = ctx.obj["config"]
    now = parse_instant(now_value)
    tag = scenario_tag or cfg.planner.default_scenario
    horizon_days = horizon if horizon is not None else cfg.planner.horizon_days
    log = get_planner_adapter(ctx.obj["logger"], scenario=tag, horizon_days=horizon_days)

    try:
        store = load_store(signals_file, now)
        response = build_scenario_response(
            store,
            now,
            horizon_days,
            scenario_tag=tag,
            config=cfg.aggregation_config(),
            transformer=ScenarioTransformer()
        )
    except (ValidationError, ValueError, OSError) as e:
        log.error(f"Scenario computation failed: {e}")
        click.echo(f"Scenario computation failed: {e}", err=True)
        sys.exit(1)

    log.info(f"Scenario produced {len(response.windows)} speculative windows")

    if as_json:
        click.echo(response.model_dump_json(indent=2))
        return

    console.print(f"[bold magenta]SPECULATIVE SCENARIO: {response.meta.scenario}[/bold magenta]")
    _print_windows("Scenario Windows", response)
    if response.overlaps:
        _print_overlaps(response)


@main.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Display planner configuration."""
    cfg: Config = ctx.obj["config"]
    aggregation = cfg.aggregation_config()

    table = Table(title="Outreach Planner Status", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Version", __version__)
    table.add_row("Horizon", f"{cfg.planner.horizon_days:g} days")
    table.add_row("Bucket width", str(aggregation.bucket_duration))
    table.add_row("Minimum window", str(aggregation.min_window_duration))
    table.add_row(
        "Impact weights",
        ", ".join(f"{level.value}={weight}" for level, weight in aggregation.impact_weights.items())
    )
    table.add_row("Default scenario", cfg.planner.default_scenario)
    table.add_row(
        "Scenarios",
        ", ".join(f"{tag} ({p.compression_factor:g})" for tag, p in BUILTIN_SCENARIOS.items())
    )
    table.add_row("Log level", cfg.logging.level)

    console.print(table)


if __name__ == "__main__":
    main()
