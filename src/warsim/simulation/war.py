"""War game simulation."""

from __future__ import annotations

import logging
from typing import Iterator, Optional

import numpy as np

from warsim.rng import make_rng
from warsim.simulation.deck import Deck, split
from warsim.simulation.state import GameConfig, GameResult, Phase, RoundRecord

logger = logging.getLogger(__name__)


def draw_next(
    rng: np.random.Generator,
    play: Deck,
    discard: Optional[Deck] = None,
) -> Optional[int]:
    """Draw the next card from the play pile.

    When the play pile is empty the discard pile is shuffled and becomes
    the new play pile. Passing no discard pile only drains ``play``.

    Returns:
        The drawn card, or None when no card is available
    """
    card = play.pop()
    if card is not None:
        return card

    if discard is not None and len(discard):
        logger.debug(f"Recycling {len(discard)} discards into play pile")
        discard.shuffle(rng)
        split(discard, len(discard), play, discard)
        return play.pop()

    return None


def resolve_war(a: Deck, b: Deck) -> int:
    """Decide which spoils pile wins a war.

    Both decks are sorted so their highest cards are compared first. Each
    step the greater-or-equal card knocks out the other; equal cards knock
    out each other. Cards are never moved between the decks.

    Returns:
        Negative if a wins, positive if b wins, 0 on a tie
    """
    a.sort()
    b.sort()
    ca, cb = a.cards(), b.cards()

    na, nb = len(ca), len(cb)
    while na > 0 and nb > 0:
        top_a, top_b = ca[na - 1], cb[nb - 1]
        if top_a >= top_b:
            nb -= 1
        if top_b >= top_a:
            na -= 1

    return nb - na


class WarGame:
    """One seeded game of War between two players."""

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        """Shuffle a full deck and deal half to each player."""
        self.config = config or GameConfig()
        self.config.validate()
        self.rng = make_rng(self.config.seed_sequence)

        # Player 1 keeps the bottom half of the shuffled deck
        self.p1_play = Deck.full()
        self.p1_play.shuffle(self.rng)
        self.p2_play = Deck.empty()
        split(self.p1_play, len(self.p1_play) // 2, self.p1_play, self.p2_play)

        self.p1_discard = Deck.empty()
        self.p2_discard = Deck.empty()
        self.p1_spoils = Deck.empty()
        self.p2_spoils = Deck.empty()

        self.phase = Phase.PLAYING
        self.war_depth = 0
        self.winner: Optional[int] = None
        self.round = 0
        self.wars = 0

    def piles(self) -> tuple[Deck, ...]:
        """All six piles: play, discard and spoils for each player."""
        return (
            self.p1_play, self.p2_play,
            self.p1_discard, self.p2_discard,
            self.p1_spoils, self.p2_spoils,
        )

    def snapshot(self, war: bool = False) -> RoundRecord:
        """Record the current state of the play and discard piles."""
        return RoundRecord(
            round=self.round,
            p1_play=self.p1_play.render(),
            p2_play=self.p2_play.render(),
            p1_discard=self.p1_discard.render(),
            p2_discard=self.p2_discard.render(),
            war=war,
        )

    def play_round(self) -> Optional[RoundRecord]:
        """Play one round.

        Returns:
            The state after the round, or None once a player cannot draw
        """
        if self.phase == Phase.FINISHED:
            return None

        c1 = draw_next(self.rng, self.p1_play, self.p1_discard)
        if c1 is None:
            p2_has_cards = len(self.p2_play) + len(self.p2_discard) > 0
            self._finish(2 if p2_has_cards else None)
            return None

        c2 = draw_next(self.rng, self.p2_play, self.p2_discard)
        if c2 is None:
            # Return the unplayed card so the final piles still hold all 52
            self.p1_play.push(c1)
            self._finish(1)
            return None

        self.round += 1
        war = c1 == c2
        if c1 > c2:
            self.p1_discard.push(c1)
            self.p1_discard.push(c2)
        elif c2 > c1:
            self.p2_discard.push(c1)
            self.p2_discard.push(c2)
        else:
            self._war(c1, c2)

        return self.snapshot(war=war)

    def rounds(self) -> Iterator[RoundRecord]:
        """Play rounds until the game ends, yielding each round's record."""
        while True:
            record = self.play_round()
            if record is None:
                return
            yield record

    def play(self) -> GameResult:
        """Play the game to completion."""
        records = tuple(self.rounds())
        return GameResult(
            winner=self.winner,
            rounds=self.round,
            wars=self.wars,
            records=records,
        )

    def _commit(self, play: Deck, discard: Deck, spoils: Deck) -> None:
        """Move up to ``warcards`` cards from a player's supply to spoils."""
        for _ in range(self.config.warcards):
            card = draw_next(self.rng, play, discard)
            if card is None:
                break
            spoils.push(card)
            self.war_depth += 1

    def _war(self, c1: int, c2: int) -> None:
        """Escalate a tied round and hand out the cards at stake."""
        self.phase = Phase.TIED
        self.wars += 1
        self.war_depth = 0

        self._commit(self.p1_play, self.p1_discard, self.p1_spoils)
        self._commit(self.p2_play, self.p2_discard, self.p2_spoils)
        logger.debug(
            f"Round {self.round}: war on {c1}, "
            f"spoils {len(self.p1_spoils)} vs {len(self.p2_spoils)}"
        )

        result = resolve_war(self.p1_spoils, self.p2_spoils)
        if result < 0:
            self._collect(self.p1_discard, c1, c2)
        elif result > 0:
            self._collect(self.p2_discard, c1, c2)
        else:
            logger.debug(f"Round {self.round}: war tied, spoils returned")
            self.p1_discard.push(c1)
            self._drain(self.p1_spoils, self.p1_discard)
            self.p2_discard.push(c2)
            self._drain(self.p2_spoils, self.p2_discard)

        self.war_depth = 0
        self.phase = Phase.PLAYING

    def _collect(self, discard: Deck, c1: int, c2: int) -> None:
        """Give both tied cards and all spoils to one discard pile."""
        discard.push(c1)
        discard.push(c2)
        self._drain(self.p1_spoils, discard)
        self._drain(self.p2_spoils, discard)

    def _drain(self, spoils: Deck, discard: Deck) -> None:
        card = draw_next(self.rng, spoils)
        while card is not None:
            discard.push(card)
            card = draw_next(self.rng, spoils)

    def _finish(self, winner: Optional[int]) -> None:
        self.phase = Phase.FINISHED
        self.winner = winner
        logger.debug(
            f"Game over after {self.round} rounds ({self.wars} wars): "
            f"{'player ' + str(winner) if winner else 'nobody'} wins"
        )


def play_war_game(warcards: int = 4, seed_sequence: int = 0) -> GameResult:
    """Play a complete War game and return results."""
    game = WarGame(GameConfig(warcards=warcards, seed_sequence=seed_sequence))
    return game.play()
