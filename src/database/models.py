"""
Neon Yahtzee - Persistence Models

Pydantic models for persisted records.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr, field_validator


class HighScore(BaseModel):
    """A finished game on the high-score table.

    Loading is lenient: any numeric score and any string date or name is
    kept, so tables written by older clients (``...Z`` timestamps, long
    names) survive. Name length is enforced where names are entered.

    Serialized with the ``playerName`` alias so existing local files keep
    their shape; ``player_name`` is accepted too (Supabase rows).
    """

    score: StrictInt | StrictFloat
    date: StrictStr
    player_name: StrictStr = Field(alias="playerName")

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("score")
    @classmethod
    def _whole_scores_as_int(cls, value: int | float) -> int | float:
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value

    @classmethod
    def create(
        cls,
        score: int,
        player_name: str = "Player",
        when: datetime | None = None,
    ) -> "HighScore":
        """Build an entry stamped with ``when`` (default: now, UTC)."""
        when = when or datetime.now(timezone.utc)
        return cls(score=score, date=when.isoformat(), player_name=player_name)
