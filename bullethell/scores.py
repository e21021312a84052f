"""High-score table kept in a JSON file."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

DEFAULT_SCORES_PATH = "json/scores.json"


@dataclass
class ScoreEntry:
    """One finished game."""

    name: str = "Player"
    score: int = 0
    level: int = 0
    timestamp: str = ""


class ScoreManager:
    """Keeps score entries sorted best first and stores them on disk."""

    def __init__(self, path: Union[str, Path] = DEFAULT_SCORES_PATH) -> None:
        self.path = Path(path)
        self._entries: list[ScoreEntry] = []

    def add_score(self, name: str, score: int, level: int) -> ScoreEntry:
        """Record a score stamped with the local time and save the table."""
        stamp = datetime.now().strftime("%Y-%m-%dT%H:%M:%S")
        entry = ScoreEntry(name, score, level, stamp)
        self._entries.append(entry)
        self.sort()
        self.save()
        return entry

    def save(self, path: Optional[Union[str, Path]] = None) -> None:
        """Write the table as JSON, creating the folder if needed."""
        target = Path(path) if path is not None else self.path
        target.parent.mkdir(parents=True, exist_ok=True)
        payload = [
            {
                "name": entry.name,
                "score": entry.score,
                "level": entry.level,
                "timestamp": entry.timestamp,
            }
            for entry in self._entries
        ]
        target.write_text(json.dumps(payload, indent=4), encoding="utf-8")

    def load(self, path: Optional[Union[str, Path]] = None) -> None:
        """Replace the table with the file's contents.

        A missing file leaves the table empty; a damaged one keeps whatever
        entries were read before the damage.
        """
        self._entries.clear()
        source = Path(path) if path is not None else self.path
        try:
            text = source.read_text(encoding="utf-8")
        except OSError:
            return
        try:
            raw = json.loads(text)
            for item in raw or []:
                self._entries.append(
                    ScoreEntry(
                        name=str(item.get("name", "Player")),
                        score=int(item.get("score", 0)),
                        level=int(item.get("level", 0)),
                        timestamp=str(item.get("timestamp", "")),
                    )
                )
        except (ValueError, TypeError, AttributeError):
            pass

    def sort(self) -> None:
        """Order entries from highest score to lowest."""
        self._entries.sort(key=lambda entry: entry.score, reverse=True)

    def entries(self) -> list[ScoreEntry]:
        """A copy of the entries, best first."""
        return list(self._entries)