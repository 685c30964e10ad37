from decktally.parsers.deck_text import parse_deck
from decktally.parsers.game_log_csv import (
    REQUIRED_COLUMNS,
    SchemaValidationError,
    load_game_log,
    validate_schema,
)

__all__ = [
    "REQUIRED_COLUMNS",
    "SchemaValidationError",
    "load_game_log",
    "parse_deck",
    "validate_schema",
]
