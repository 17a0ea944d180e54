"""Mood record CLI commands."""

import sys
from typing import Optional

import click
import structlog
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cli.utils import get_components
from moodmap.errors import EmptyDescriptionError, InvalidCoordinate, MoodJournalError
from shared_types import CATEGORY_COLORS

console = Console()
logger = structlog.get_logger()


def styled_label(label) -> str:
    color = CATEGORY_COLORS.get(label, "white")
    return f"[{color}]{label}[/]"


@click.command()
@click.option("--lat", "latitude", type=float, help="Latitude (defaults to map.default_latitude)")
@click.option("--lon", "longitude", type=float, help="Longitude (defaults to map.default_longitude)")
@click.argument("text", required=False)
def add(latitude: Optional[float], longitude: Optional[float], text: Optional[str]):
    """Record how you felt at a place. Opens editor if no text provided."""
    c = get_components()
    map_cfg = c["config"].map
    coordinate = (
        map_cfg.default_latitude if latitude is None else latitude,
        map_cfg.default_longitude if longitude is None else longitude,
    )

    if not text:
        text = click.edit("\n# How did you feel here?\n")
        text = "\n".join(line for line in (text or "").splitlines() if not line.startswith("#"))

    try:
        record = c["journal"].add_record(coordinate, text)
    except EmptyDescriptionError:
        console.print("[yellow]No description provided, cancelled.[/]")
        return
    except InvalidCoordinate as e:
        console.print(f"[red]Invalid location:[/] {e}")
        sys.exit(1)
    except MoodJournalError as e:
        console.print(f"[red]Could not save:[/] {e}")
        sys.exit(1)

    console.print(f"[green]Saved:[/] {styled_label(record.label)} at {record.coordinate}")
    console.print(f"[dim]id: {record.id}[/]")


@click.command("list")
@click.option("-n", "--limit", default=20, help="Max records to show")
def list_records(limit: int):
    """List mood records, newest first."""
    c = get_components()
    records = list(reversed(c["journal"].records))[:limit]

    if not records:
        console.print("[yellow]No records yet. Add one with 'serenity add'.[/]")
        return

    table = Table(show_header=True)
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Mood", no_wrap=True)
    table.add_column("Location", style="dim")
    table.add_column("Note")
    table.add_column("ID", style="dim")

    for r in records:
        note = escape((r.note or "")[:40])
        table.add_row(
            r.created_at.strftime("%Y-%m-%d %H:%M"),
            styled_label(r.label),
            str(r.coordinate),
            note,
            r.id[:8],
        )

    console.print(table)


@click.command()
@click.argument("record_id")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
def delete(record_id: str, yes: bool):
    """Delete a mood record (full id or unique prefix)."""
    c = get_components()
    journal = c["journal"]

    matches = [r for r in journal.records if r.id.startswith(record_id)]
    if not matches:
        console.print(f"[red]Not found:[/] {record_id}")
        sys.exit(1)
    if len(matches) > 1:
        console.print(f"[yellow]Ambiguous id prefix, {len(matches)} records match.[/]")
        sys.exit(1)

    record = matches[0]
    if not yes:
        if not click.confirm(f"Delete {record.label} from {record.created_at:%Y-%m-%d}?"):
            return

    try:
        journal.delete_record(record.id)
    except MoodJournalError as e:
        console.print(f"[red]Could not delete:[/] {e}")
        sys.exit(1)

    console.print(f"[green]Deleted:[/] {record.id}")


@click.command()
@click.argument("text")
def analyze(text: str):
    """Show the mood label and intensity for text without saving."""
    c = get_components()
    result = c["journal"].preview(text)
    console.print(f"{styled_label(result.label)}  intensity {result.intensity:.2f}")
