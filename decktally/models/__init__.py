from decktally.models.deck import Deck
from decktally.models.errors import (
    ErrorKind,
    GameParseError,
    KeyMismatchError,
    SourceReadError,
    TallyError,
)
from decktally.models.game_log import GameLogRecord
from decktally.models.identity import (
    DEFAULT_ARCHETYPE,
    Archetype,
    ColorIdentity,
    parse_archetype,
    parse_color,
)
from decktally.models.matchup import Matchup

__all__ = [
    "Archetype",
    "ColorIdentity",
    "DEFAULT_ARCHETYPE",
    "Deck",
    "ErrorKind",
    "GameLogRecord",
    "GameParseError",
    "KeyMismatchError",
    "Matchup",
    "SourceReadError",
    "TallyError",
    "parse_archetype",
    "parse_color",
]
