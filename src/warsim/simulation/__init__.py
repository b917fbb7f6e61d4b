"""Deck engine and War game loop."""

from warsim.simulation.deck import Deck, DeckContractError, split
from warsim.simulation.state import GameConfig, GameResult, Phase, RoundRecord
from warsim.simulation.war import WarGame, draw_next, play_war_game, resolve_war

__all__ = [
    "Deck",
    "DeckContractError",
    "split",
    "GameConfig",
    "GameResult",
    "Phase",
    "RoundRecord",
    "WarGame",
    "draw_next",
    "play_war_game",
    "resolve_war",
]
