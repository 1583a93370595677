from typing import List, Optional

from pydantic import BaseModel, Field

from questlog.core.codec import LineReader
from questlog.core.constants import (
    BADGE_SEPARATOR,
    BADGES_PREFIX,
    POINTS_PER_LEVEL,
    SCORE_PREFIX,
)
from questlog.core.errors import FormatError


class PlayerProfile(BaseModel):
    """Aggregate score and badges across all goals."""

    score: int = 0
    badges: List[str] = Field(default_factory=list)

    def add_points(self, delta: int) -> int:
        # No negative global score
        self.score = max(0, self.score + delta)
        return self.score

    @property
    def level(self) -> int:
        return 1 + self.score // POINTS_PER_LEVEL

    @property
    def points_into_level(self) -> int:
        return self.score % POINTS_PER_LEVEL

    @property
    def points_to_next(self) -> int:
        return POINTS_PER_LEVEL - self.points_into_level

    def award_badge(self, label: str) -> bool:
        """Add a badge unless already held. Returns True when it was added."""
        if label in self.badges:
            return False
        self.badges.append(label)
        return True

    def merge(self, other: "PlayerProfile") -> None:
        """Fold a loaded profile in: score only rises, badges are unioned."""
        if other.score > self.score:
            self.add_points(other.score - self.score)
        for badge in other.badges:
            self.award_badge(badge)

    def serialize(self) -> str:
        # SCORE:<int>
        # BADGES:<comma-separated>
        return f"{SCORE_PREFIX}{self.score}\n{BADGES_PREFIX}{BADGE_SEPARATOR.join(self.badges)}"

    @classmethod
    def deserialize(cls, reader: LineReader) -> "PlayerProfile":
        """Read the SCORE and BADGES lines.

        A line that does not carry the expected prefix is left unread and
        the field keeps its default.
        """
        profile = cls()

        line: Optional[str] = reader.peek()
        if line is not None and line.startswith(SCORE_PREFIX):
            reader.readline()
            raw = line[len(SCORE_PREFIX):].strip()
            try:
                profile.score = max(0, int(raw))
            except ValueError:
                raise FormatError(f"Invalid score value: {raw!r}") from None

        line = reader.peek()
        if line is not None and line.startswith(BADGES_PREFIX):
            reader.readline()
            for badge in line[len(BADGES_PREFIX):].split(BADGE_SEPARATOR):
                badge = badge.strip()
                if badge:
                    profile.award_badge(badge)

        return profile
