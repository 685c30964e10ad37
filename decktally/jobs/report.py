"""
Print matchup statistics for a game log.

Loads the results CSV, aggregates matchups, and prints the raw matchup
table followed by deck-vs-field and per-player records.

Usage:
    python -m decktally.jobs.report --data-path data3.csv --deck "Rb" --player Grant
"""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from decktally.analysis.aggregator import build_matchup_table
from decktally.analysis.reports import render_report
from decktally.config import settings
from decktally.models.errors import GameParseError, SourceReadError
from decktally.parsers.deck_text import parse_deck
from decktally.parsers.game_log_csv import load_game_log

logger = logging.getLogger(__name__)


def run_report(
    game_log_path: Path,
    report_decks: Sequence[str],
    report_players: Sequence[str],
) -> list[str]:
    """
    Load a game log and render the full report.

    Args:
        game_log_path: Results CSV to read
        report_decks: Deck texts to show vs. field records for
        report_players: Player names to show records for

    Returns:
        Report lines, ready to print

    Raises:
        SourceReadError: If the game log cannot be read
        GameParseError: If a requested deck has an unknown color
    """
    decks = [parse_deck(text) for text in report_decks]

    records = load_game_log(game_log_path)
    table = build_matchup_table(records)

    return render_report(table, records, decks, list(report_players))


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for the matchup report."""
    parser = argparse.ArgumentParser(description="Summarize deck matchups from a game log")
    parser.add_argument(
        "--data-path",
        type=Path,
        default=settings.game_log_path,
        help=f"Game log CSV (default: {settings.game_log_path})",
    )
    parser.add_argument(
        "--deck",
        action="append",
        dest="decks",
        help="Deck to report vs. field, e.g. 'Rb Midrange' (repeatable)",
    )
    parser.add_argument(
        "--player",
        action="append",
        dest="players",
        help="Player to report a record for (repeatable)",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        lines = run_report(
            args.data_path,
            args.decks or settings.report_decks,
            args.players or settings.report_players,
        )
    except SourceReadError as e:
        logger.error("Failed to load game log: %s", e)
        raise SystemExit(1) from e
    except GameParseError as e:
        parser.error(f"invalid report deck: {e}")

    for line in lines:
        print(line)


if __name__ == "__main__":
    main()
