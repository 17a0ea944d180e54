"""Mood journal export functionality."""

import json
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional

from shared_types import EmotionalCategory

from .aggregator import summarize
from .records import MoodRecord
from .storage import JournalStore


def record_to_dict(record: MoodRecord) -> dict:
    return {
        "id": record.id,
        "latitude": record.coordinate.latitude,
        "longitude": record.coordinate.longitude,
        "label": str(record.label),
        "created": record.created_at.isoformat(),
        "note": record.note or "",
    }


class MoodExporter:
    """Export mood records to various formats."""

    def __init__(self, store: JournalStore):
        self.store = store

    def export_json(
        self,
        output_path: Path,
        label: Optional[EmotionalCategory] = None,
        days: Optional[int] = None,
    ) -> int:
        """Export records and their summary to JSON.

        Args:
            output_path: Output file path
            label: Only include records with this category
            days: Only include records from last N days

        Returns:
            Number of records exported
        """
        records = self._get_records(label, days)
        summary = summarize(records)

        export_data = {
            "exported_at": datetime.now().isoformat(),
            "count": len(records),
            "summary": {
                "counts": {str(k): v for k, v in summary.counts.items()},
                "most_frequent": str(summary.most_frequent) if summary.most_frequent else None,
            },
            "records": [record_to_dict(r) for r in records],
        }

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(export_data, f, indent=2, ensure_ascii=False)

        return len(records)

    def export_markdown(
        self,
        output_path: Path,
        label: Optional[EmotionalCategory] = None,
        days: Optional[int] = None,
    ) -> int:
        """Export records to Markdown, newest first.

        Returns:
            Number of records exported
        """
        records = self._get_records(label, days)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        lines = [
            "# Mood Journal Export",
            "",
            f"Exported: {datetime.now().strftime('%Y-%m-%d %H:%M')}",
            f"Records: {len(records)}",
            "",
            "---",
            "",
        ]

        for record in reversed(records):
            lines.append(f"## {record.label}")
            lines.append("")
            lines.append(
                f"**Date:** {record.created_at.strftime('%Y-%m-%d %H:%M')} | **Location:** {record.coordinate}"
            )
            lines.append("")
            if record.note:
                lines.append(record.note)
                lines.append("")
            lines.append("---")
            lines.append("")

        with open(output_path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines))

        return len(records)

    def _get_records(
        self,
        label: Optional[EmotionalCategory] = None,
        days: Optional[int] = None,
    ) -> list[MoodRecord]:
        """Get filtered records, oldest first."""
        records = self.store.fetch_all()

        if label:
            records = [r for r in records if r.label == label]

        if days:
            cutoff = datetime.now() - timedelta(days=days)
            records = [r for r in records if r.created_at >= cutoff]

        return records
