"""
Game record normalization.

Turns one logged game into directional matchup observations. Every valid
game produces two: the logging player's side and its complement, so the
aggregate table always sees a game from both players' perspectives.
"""

import logging

from decktally.models.errors import GameParseError
from decktally.models.game_log import GameLogRecord
from decktally.models.matchup import Matchup
from decktally.parsers.deck_text import parse_deck

logger = logging.getLogger(__name__)


def normalize(record: GameLogRecord) -> list[Matchup]:
    """
    Convert a game log record into matchup observations.

    Args:
        record: One row of the game log

    Returns:
        The player's matchup followed by its complement, or an empty list
        if either deck cannot be parsed. Never raises for bad deck text.
    """
    try:
        deck = parse_deck(record.deck)
        opponent = parse_deck(record.opp_deck)
    except GameParseError as e:
        logger.warning("Skipping bad game log record %r: %s", record, e)
        return []

    won = record.player_won
    matchup = Matchup(
        deck=deck,
        opponent=opponent,
        win=1 if won else 0,
        loss=0 if won else 1,
    )
    return [matchup, matchup.complement()]
