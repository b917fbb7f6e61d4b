"""Game configuration, phases and immutable round records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass
class GameConfig:
    """Configuration for one game of War."""

    warcards: int = 4  # Cards each player commits per war
    seed_sequence: int = 0  # Stream selector under the fixed base seed

    def validate(self) -> None:
        """Raise ValueError if config is invalid."""
        if self.warcards < 1:
            raise ValueError("warcards must be >= 1")
        if self.seed_sequence < 0:
            raise ValueError("seed_sequence must be >= 0")


class Phase(Enum):
    """Game loop states."""

    PLAYING = "playing"
    TIED = "tied"  # War escalation in progress
    FINISHED = "finished"


@dataclass(frozen=True)
class RoundRecord:
    """Observable state of the four piles after one round.

    Each pile is rendered top to bottom.
    """

    round: int
    p1_play: str
    p2_play: str
    p1_discard: str
    p2_discard: str
    war: bool = False

    def line(self) -> str:
        """Comma-separated output line."""
        return ",".join((self.p1_play, self.p2_play, self.p1_discard, self.p2_discard))


@dataclass(frozen=True)
class GameResult:
    """Result of a completed game."""

    winner: Optional[int]  # 1 or 2, None if neither player could draw
    rounds: int
    wars: int
    records: tuple[RoundRecord, ...]
