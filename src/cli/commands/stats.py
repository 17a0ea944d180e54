"""Mood statistics CLI command."""

import click
from rich.console import Console
from rich.table import Table

from cli.commands.mood import styled_label
from cli.utils import get_components
from moodmap import chart_data
from shared_types import CATEGORY_COLORS

console = Console()

BAR_WIDTH = 30


@click.command()
def stats():
    """Show mood distribution, most frequent mood and recent entries."""
    c = get_components()
    summary = c["journal"].summary

    if not summary.has_enough_data:
        console.print("[bold]Not Enough Data[/]")
        console.print("[dim]Add at least 2 different moods to see statistics.[/]")
        return

    rows = chart_data(summary)
    peak = rows[0][1]

    table = Table(show_header=True, title="Mood Distribution")
    table.add_column("Mood")
    table.add_column("Count", justify="right")
    table.add_column("", min_width=BAR_WIDTH)
    for label, count in rows:
        bar = "█" * max(1, round(BAR_WIDTH * count / peak))
        table.add_row(styled_label(label), str(count), f"[{CATEGORY_COLORS[label]}]{bar}[/]")
    console.print(table)

    console.print(f"\n[bold]Most frequent:[/] {styled_label(summary.most_frequent)}")

    recent = Table(show_header=True, title="Recent Entries")
    recent.add_column("Date", style="dim")
    recent.add_column("Mood")
    for r in summary.recent:
        recent.add_row(r.created_at.strftime("%b %d, %Y %H:%M"), styled_label(r.label))
    console.print(recent)
