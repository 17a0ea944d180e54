"""Mood journal export CLI command."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from cli.utils import get_components
from moodmap.errors import PersistenceError
from shared_types import EmotionalCategory

console = Console()

LABEL_CHOICES = [c.name.lower() for c in EmotionalCategory]


@click.command()
@click.option("-o", "--output", required=True, type=click.Path(), help="Output path")
@click.option(
    "-f",
    "--format",
    "fmt",
    default="json",
    type=click.Choice(["json", "markdown"]),
    help="Export format",
)
@click.option("--label", type=click.Choice(LABEL_CHOICES), help="Only export this mood")
@click.option("-d", "--days", type=int, help="Only export the last N days")
def export(output: str, fmt: str, label: Optional[str], days: Optional[int]):
    """Export mood records to JSON or Markdown."""
    from moodmap.export import MoodExporter

    c = get_components()
    exporter = MoodExporter(c["store"])
    category = EmotionalCategory[label.upper()] if label else None

    try:
        if fmt == "json":
            count = exporter.export_json(Path(output), label=category, days=days)
        else:
            count = exporter.export_markdown(Path(output), label=category, days=days)
    except (PersistenceError, OSError) as e:
        console.print(f"[red]Export failed:[/] {e}")
        sys.exit(1)

    console.print(f"[green]Exported {count} records to {output}[/]")
