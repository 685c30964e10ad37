"""
Matchup aggregation.

Merges matchup observations into running totals keyed by the ordered
(deck, opponent) pair. Entries are created on first sight and only ever
accumulate; nothing is removed during a run.
"""

import logging
from collections.abc import Iterable, Iterator

from decktally.analysis.normalizer import normalize
from decktally.models.deck import Deck
from decktally.models.errors import KeyMismatchError
from decktally.models.game_log import GameLogRecord
from decktally.models.matchup import Matchup

logger = logging.getLogger(__name__)


class MatchupTable:
    """Aggregated matchups for one run, iterated in (deck, opponent) order."""

    def __init__(self) -> None:
        self._entries: dict[tuple[Deck, Deck], Matchup] = {}

    def observe(self, matchup: Matchup) -> None:
        """Merge one observation into the entry for its key."""
        entry = self._entries.get(matchup.key)
        if entry is None:
            entry = Matchup(deck=matchup.deck, opponent=matchup.opponent)
            self._entries[matchup.key] = entry

        try:
            entry.add(matchup)
        except KeyMismatchError as e:
            logger.error("Error adding matchup, keys not matched: %s", e)

    def observe_all(self, matchups: Iterable[Matchup]) -> None:
        for matchup in matchups:
            self.observe(matchup)

    def observe_record(self, record: GameLogRecord) -> bool:
        """
        Normalize a game log record and merge its matchups.

        Returns:
            False if the record was skipped because a deck could not be parsed
        """
        matchups = normalize(record)
        self.observe_all(matchups)
        return bool(matchups)

    def get(self, deck: Deck, opponent: Deck) -> Matchup | None:
        return self._entries.get((deck, opponent))

    def keys(self) -> list[tuple[Deck, Deck]]:
        return sorted(self._entries)

    def __iter__(self) -> Iterator[Matchup]:
        for key in self.keys():
            yield self._entries[key]

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries


def build_matchup_table(records: Iterable[GameLogRecord]) -> MatchupTable:
    """
    Aggregate every record into a new table.

    Args:
        records: Fully loaded game log

    Returns:
        MatchupTable holding both perspectives of every valid game
    """
    table = MatchupTable()
    total = 0
    skipped = 0

    for record in records:
        total += 1
        if not table.observe_record(record):
            skipped += 1

    logger.info(
        "Aggregated %d records into %d matchups (%d skipped)",
        total,
        len(table),
        skipped,
    )
    return table
