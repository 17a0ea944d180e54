"""CLI command modules."""

from .export import export
from .mood import add, analyze, delete, list_records
from .stats import stats

__all__ = [
    "add",
    "list_records",
    "delete",
    "analyze",
    "stats",
    "export",
]
