#!/usr/bin/env python3
"""Compare game length across war card counts.

Plays the same seed sequences with warcards 1 through 6 and prints how
long games last and how often wars break out.

Usage:
    python examples/warcards_demo.py
"""

from warsim.analysis.survey import SurveyConfig, run_survey


def main() -> None:
    print(f"{'warcards':>8}  {'mean':>7}  {'median':>7}  {'max':>5}  {'wars':>5}  {'p1 win':>6}")
    for warcards in range(1, 7):
        report = run_survey(SurveyConfig(games=200, warcards=warcards))
        print(
            f"{warcards:>8}  {report.mean_rounds:>7.1f}  {report.median_rounds:>7.1f}  "
            f"{report.max_rounds:>5}  {report.mean_wars:>5.2f}  {report.p1_win_rate:>6.1%}"
        )


if __name__ == "__main__":
    main()
