"""CLI command for surveying many seeded games."""

from __future__ import annotations

import logging

import click

from warsim.analysis.survey import SurveyConfig, run_survey

logger = logging.getLogger(__name__)


@click.command()
@click.option("-n", "--games", type=click.IntRange(min=1), default=100, help="Number of games to play")
@click.option("-w", "--warcards", type=click.IntRange(min=1), default=4, help="Cards committed per war")
@click.option("--start-sequence", type=click.IntRange(min=0), default=0, help="First seed sequence")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(games: int, warcards: int, start_sequence: int, verbose: bool):
    """Play one game per seed sequence and report outcome statistics."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    config = SurveyConfig(games=games, warcards=warcards, start_sequence=start_sequence)
    logger.info(f"Surveying {games} games from sequence {start_sequence}...")
    report = run_survey(config)

    for line in report.summary_lines():
        click.echo(line)


if __name__ == "__main__":
    main()
