"""
Neon Yahtzee - High Score Stores

Top-10 high-score table with two backends: a local JSON file and a
Supabase ``high_scores`` table. Both share the same semantics: entries
are kept sorted by score (descending), capped at ``max_entries``, and
malformed records are dropped on load rather than raised.

Saving is fire-and-forget: backend failures are logged and swallowed so
that a broken store never interrupts play.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from pydantic import ValidationError
from supabase import Client

from src.config.settings import Settings
from src.database.models import HighScore

logger = logging.getLogger(__name__)

MAX_HIGH_SCORES = 10


def rank_high_scores(entries: Iterable[HighScore], limit: int = MAX_HIGH_SCORES) -> list[HighScore]:
    """Sort descending by score and keep the top ``limit``.

    The sort is stable, so an earlier entry wins a tie.
    """
    return sorted(entries, key=lambda e: e.score, reverse=True)[:limit]


def parse_high_scores(raw: Any) -> list[HighScore]:
    """Validate raw records, discarding anything malformed."""
    if not isinstance(raw, list):
        if raw is not None:
            logger.warning("High score data is not a list; ignoring it")
        return []

    valid: list[HighScore] = []
    for item in raw:
        try:
            valid.append(HighScore.model_validate(item))
        except ValidationError:
            continue

    if len(valid) != len(raw):
        logger.warning(
            "Discarded %d malformed high score entries", len(raw) - len(valid)
        )
    return valid


class HighScoreStore:
    """Base class for high-score backends.

    Subclasses implement :meth:`_read_raw`, :meth:`_write` and
    :meth:`_clear`; ranking and validation live here.
    """

    def __init__(self, max_entries: int = MAX_HIGH_SCORES) -> None:
        self.max_entries = max_entries

    def load(self) -> list[HighScore]:
        """Return the table, best first. Never raises."""
        try:
            raw = self._read_raw()
        except Exception:
            logger.exception("Error loading high scores")
            return []
        return rank_high_scores(parse_high_scores(raw), self.max_entries)

    def save(self, entry: HighScore) -> None:
        """Merge ``entry`` into the table. Never raises."""
        try:
            entries = rank_high_scores([*self.load(), entry], self.max_entries)
            self._write(entries, entry)
            logger.info("Saved high score %d for %s", entry.score, entry.player_name)
        except Exception:
            logger.exception("Error saving high score")

    def clear(self) -> None:
        try:
            self._clear()
        except Exception:
            logger.exception("Error clearing high scores")

    def best(self) -> int:
        """Top score on the table, 0 when empty."""
        entries = self.load()
        return entries[0].score if entries else 0

    def is_new_high_score(self, score: int) -> bool:
        return score > self.best()

    # -- Backend hooks ---------------------------------------------------

    def _read_raw(self) -> Any:
        raise NotImplementedError

    def _write(self, entries: list[HighScore], new_entry: HighScore) -> None:
        raise NotImplementedError

    def _clear(self) -> None:
        raise NotImplementedError


class JsonHighScoreStore(HighScoreStore):
    """High scores in a local JSON file (list of ``HighScore`` objects)."""

    def __init__(self, path: Path | str, max_entries: int = MAX_HIGH_SCORES) -> None:
        super().__init__(max_entries)
        self.path = Path(path)

    def _read_raw(self) -> Any:
        if not self.path.exists():
            return []
        try:
            return json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            logger.warning("High score file %s is corrupt; starting empty", self.path)
            return []

    def _write(self, entries: list[HighScore], new_entry: HighScore) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = [e.model_dump(by_alias=True) for e in entries]
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        tmp_path.replace(self.path)

    def _clear(self) -> None:
        self.path.unlink(missing_ok=True)


class SupabaseHighScoreStore(HighScoreStore):
    """High scores in the Supabase ``high_scores`` table.

    Expected columns: ``score`` (int), ``date`` (text), ``player_name``
    (text). Rows below the top ``max_entries`` are left in the table and
    simply not returned.
    """

    def __init__(self, client: Client, max_entries: int = MAX_HIGH_SCORES) -> None:
        super().__init__(max_entries)
        self.client = client
        self.table = client.table("high_scores")

    def _read_raw(self) -> Any:
        data = (
            self.table
            .select("score, date, player_name")
            .order("score", desc=True)
            .limit(self.max_entries)
            .execute()
        )
        return data.data

    def _write(self, entries: list[HighScore], new_entry: HighScore) -> None:
        if new_entry not in entries:
            return
        self.table.insert(new_entry.model_dump()).execute()

    def _clear(self) -> None:
        self.table.delete().gte("score", 0).execute()


def get_high_score_store(settings: Settings) -> HighScoreStore:
    """Build the store selected by ``settings.high_score_backend``."""
    if settings.high_score_backend == "supabase":
        from src.database.client import get_supabase_client

        return SupabaseHighScoreStore(get_supabase_client(), settings.max_high_scores)
    return JsonHighScoreStore(settings.resolved_high_scores_path, settings.max_high_scores)
