"""Shared CLI utilities."""

import sys

import structlog
from rich.console import Console

console = Console()
logger = structlog.get_logger()


def get_components():
    """Initialize store, classifier and journal from config."""
    from cli.config import load_config
    from moodmap import LexiconScorer, MarkdownJournalStore, MoodClassifier, MoodJournal
    from moodmap.errors import PersistenceError

    try:
        config = load_config()
    except ValueError as e:
        console.print(f"[red]Config error:[/] {e}")
        sys.exit(1)

    classifier = MoodClassifier(LexiconScorer(negation_window=config.sentiment.negation_window))

    try:
        store = MarkdownJournalStore(config.paths.journal_dir)
        journal = MoodJournal(store, classifier, recent_limit=config.stats.recent_limit).load()
    except PersistenceError as e:
        console.print(f"[red]Journal error:[/] {e}")
        sys.exit(1)

    return {
        "config": config,
        "store": store,
        "classifier": classifier,
        "journal": journal,
    }
