"""
Read-side queries over the aggregated matchups and the raw game log.

Nothing here mutates state. Formatting helpers produce the console lines
printed by the report job.
"""

from collections.abc import Iterable, Sequence
from typing import NamedTuple

from decktally.analysis.aggregator import MatchupTable
from decktally.models.deck import Deck
from decktally.models.game_log import GameLogRecord
from decktally.models.matchup import Matchup


class Record(NamedTuple):
    """A (wins, losses) pair."""

    wins: int
    losses: int

    @property
    def total(self) -> int:
        return self.wins + self.losses

    @property
    def win_rate(self) -> float | None:
        if self.total == 0:
            return None
        return self.wins / self.total


def deck_vs_field(table: MatchupTable, deck: Deck) -> Record:
    """
    Record of a deck against every opponent it has faced.

    Only entries where `deck` is the owning side count, so each game is
    counted once for this deck.
    """
    wins = 0
    losses = 0
    for matchup in table:
        if matchup.deck == deck:
            wins += matchup.win
            losses += matchup.loss
    return Record(wins, losses)


def player_record(records: Iterable[GameLogRecord], player: str) -> Record:
    """
    Record of one player, computed from the raw log.

    Unlike deck_vs_field this counts records whose decks failed to parse.
    """
    wins = 0
    losses = 0
    for record in records:
        if record.player != player:
            continue
        if record.player_won:
            wins += 1
        else:
            losses += 1
    return Record(wins, losses)


def format_matchup(matchup: Matchup) -> str:
    return str(matchup)


def format_field_record(deck: Deck, record: Record) -> str:
    return f"{deck} vs. field: {record.wins} - {record.losses}"


def format_player_record(player: str, record: Record) -> str:
    return f"{player}'s record: {record.wins} - {record.losses}"


def render_report(
    table: MatchupTable,
    records: Sequence[GameLogRecord],
    decks: Sequence[Deck],
    players: Sequence[str],
) -> list[str]:
    """
    Build the full text report.

    Layout:
        Raw Matchup data:
        <one line per matchup, in key order>
        <two blank lines>
        <deck vs. field line per requested deck>
        <two blank lines>
        <record line per requested player>
    """
    lines = ["Raw Matchup data:"]
    lines.extend(format_matchup(matchup) for matchup in table)

    lines.extend(["", ""])
    for deck in decks:
        lines.append(format_field_record(deck, deck_vs_field(table, deck)))

    lines.extend(["", ""])
    for player in players:
        lines.append(format_player_record(player, player_record(records, player)))

    return lines
