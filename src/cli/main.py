"""CLI entry point for serenity-stops."""

import sys
from pathlib import Path

import click
from rich.console import Console

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.commands import add, analyze, delete, export, list_records, stats
from cli.config import load_config
from cli.logging_config import setup_logging

console = Console()


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Serenity Stops - map how places make you feel."""
    try:
        config = load_config()
    except ValueError as e:
        console.print(f"[red]Config error:[/] {e}")
        sys.exit(1)

    log_cfg = config.logging
    setup_logging(
        json_mode=log_cfg.json_mode,
        level="DEBUG" if verbose else log_cfg.level,
        log_file=config.paths.log_file if verbose else None,
    )


cli.add_command(add)
cli.add_command(list_records)
cli.add_command(delete)
cli.add_command(analyze)
cli.add_command(stats)
cli.add_command(export)


if __name__ == "__main__":
    cli()
