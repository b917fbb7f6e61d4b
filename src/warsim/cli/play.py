"""CLI command for simulating one game of War."""

from __future__ import annotations

import logging

import click

from warsim.simulation.state import GameConfig
from warsim.simulation.war import WarGame

logger = logging.getLogger(__name__)


@click.command()
@click.argument("warcards", type=click.IntRange(min=1), default=4, required=False)
@click.argument("seed_sequence", type=click.IntRange(min=0), default=0, required=False)
@click.option("--summary", is_flag=True, help="Report winner and round count on stderr")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(warcards: int, seed_sequence: int, summary: bool, verbose: bool):
    """Simulate War until one player cannot draw.

    WARCARDS is the number of cards each player commits to a war (default 4).
    SEED_SEQUENCE selects a reproducible random stream (default 0).

    Each round prints four comma-separated piles, top card first: player 1
    play, player 2 play, player 1 discard, player 2 discard.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)

    game = WarGame(GameConfig(warcards=warcards, seed_sequence=seed_sequence))
    for record in game.rounds():
        click.echo(record.line())

    if summary:
        winner = game.winner if game.winner is not None else "none"
        click.echo(f"winner={winner} rounds={game.round} wars={game.wars}", err=True)


if __name__ == "__main__":
    main()
