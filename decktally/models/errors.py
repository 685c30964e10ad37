"""
Error taxonomy for game log processing.

Only SourceReadError is fatal for a run. Parse errors are contained per
record by the normalizer, and key mismatches are logged by the aggregator.
"""

from enum import Enum
from pathlib import Path
from typing import Any


class ErrorKind(str, Enum):
    """Classification of processing failures."""

    COLOR = "color"
    # Archetype parsing falls back to the default, so this kind is never raised.
    ARCHETYPE = "archetype"
    KEY_MISMATCH = "key_mismatch"
    SOURCE_READ = "source_read"


class TallyError(Exception):
    """Base class for all DeckTally errors."""

    def __init__(self, kind: ErrorKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)


class GameParseError(TallyError):
    """Raised when a token from a game log cannot be parsed."""

    def __init__(self, kind: ErrorKind, token: str):
        self.token = token
        super().__init__(kind, f"Unrecognized {kind.value} token: {token!r}")


class KeyMismatchError(TallyError):
    """
    Raised when two matchups with different keys are merged.

    Unreachable through the aggregator, which always merges into the
    entry for the observed key.
    """

    def __init__(self, expected: tuple[Any, Any], actual: tuple[Any, Any]):
        self.expected = expected
        self.actual = actual
        super().__init__(
            ErrorKind.KEY_MISMATCH,
            f"Cannot merge matchup {actual[0]} vs {actual[1]} "
            f"into {expected[0]} vs {expected[1]}",
        )


class SourceReadError(TallyError):
    """Raised when the game log source is missing or malformed."""

    def __init__(self, path: Path | str, detail: str):
        self.path = Path(path)
        self.detail = detail
        super().__init__(ErrorKind.SOURCE_READ, f"Cannot read game log {self.path}: {detail}")
