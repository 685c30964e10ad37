from collections.abc import Callable
from pathlib import Path

import pytest

from decktally.models.game_log import GameLogRecord

GAME_LOG_HEADER = "player,deck,won,lost,opp_deck,notes"


@pytest.fixture
def make_record() -> Callable[..., GameLogRecord]:
    """Factory for game log records with sensible defaults."""

    def _make(
        player: str = "Grant",
        deck: str = "White Aggro",
        won: int = 2,
        lost: int = 1,
        opp_deck: str = "Rb Midrange",
        notes: str = "",
    ) -> GameLogRecord:
        return GameLogRecord(
            player=player,
            deck=deck,
            won=won,
            lost=lost,
            opp_deck=opp_deck,
            notes=notes,
        )

    return _make


@pytest.fixture
def sample_game_log() -> str:
    """Sample results CSV with one unparseable deck."""
    return f"""{GAME_LOG_HEADER}
Grant,White Aggro,2,1,Rb Midrange,
Noah,Rb Midrange,2,0,White Aggro,close game 1
Isaac,Grixis,1,2,5c Atraxa,
Eamonn,5c Atraxa,2,2,Grixis Midrange,went to time
Grant,Zz Foo,2,0,White Aggro,typo in deck
Noah,rb midrange,0,2,Grixis,"flooded, then screwed"
"""


@pytest.fixture
def sample_game_log_path(tmp_path: Path, sample_game_log: str) -> Path:
    path = tmp_path / "games.csv"
    path.write_text(sample_game_log)
    return path
