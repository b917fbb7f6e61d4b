"""Play many seeded games and summarise their outcomes."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from warsim.simulation.state import GameConfig
from warsim.simulation.war import WarGame

logger = logging.getLogger(__name__)


@dataclass
class SurveyConfig:
    """Configuration for a batch of games."""
    games: int = 100            # One game per seed sequence
    warcards: int = 4
    start_sequence: int = 0     # First seed sequence played

    def validate(self) -> None:
        """Raise ValueError if config is invalid."""
        if self.games < 1:
            raise ValueError("games must be >= 1")
        if self.warcards < 1:
            raise ValueError("warcards must be >= 1")
        if self.start_sequence < 0:
            raise ValueError("start_sequence must be >= 0")


@dataclass(frozen=True)
class SurveyReport:
    """Aggregate statistics for a batch of games."""
    games: int
    warcards: int
    p1_wins: int
    p2_wins: int
    mean_rounds: float
    median_rounds: float
    max_rounds: int
    mean_wars: float

    @property
    def p1_win_rate(self) -> float:
        return self.p1_wins / self.games

    def summary_lines(self) -> list[str]:
        """Human-readable report."""
        return [
            f"Games: {self.games} (warcards={self.warcards})",
            f"Player 1 wins: {self.p1_wins} ({self.p1_win_rate:.1%})",
            f"Player 2 wins: {self.p2_wins}",
            f"Rounds: mean {self.mean_rounds:.1f}, median {self.median_rounds:.1f}, max {self.max_rounds}",
            f"Wars per game: {self.mean_wars:.2f}",
        ]


def run_survey(config: SurveyConfig) -> SurveyReport:
    """Play ``config.games`` consecutive seed sequences."""
    config.validate()

    winners = np.zeros(config.games, dtype=np.int64)
    rounds = np.zeros(config.games, dtype=np.int64)
    wars = np.zeros(config.games, dtype=np.int64)

    for i in range(config.games):
        game = WarGame(GameConfig(
            warcards=config.warcards,
            seed_sequence=config.start_sequence + i,
        ))
        result = game.play()
        winners[i] = result.winner or 0
        rounds[i] = result.rounds
        wars[i] = result.wars
        if (i + 1) % 100 == 0:
            logger.info(f"  Played {i + 1}/{config.games} games")

    return SurveyReport(
        games=config.games,
        warcards=config.warcards,
        p1_wins=int(np.count_nonzero(winners == 1)),
        p2_wins=int(np.count_nonzero(winners == 2)),
        mean_rounds=float(np.mean(rounds)),
        median_rounds=float(np.median(rounds)),
        max_rounds=int(np.max(rounds)),
        mean_wars=float(np.mean(wars)),
    )
