"""Load and validate the game results CSV.

Every problem found here is fatal for the run: a missing file, missing
columns, or a single row that does not validate.
"""

import logging
from pathlib import Path

import pandas as pd
from pydantic import ValidationError

from decktally.models.errors import SourceReadError
from decktally.models.game_log import GameLogRecord

logger = logging.getLogger(__name__)


class SchemaValidationError(SourceReadError):
    """Raised when the CSV doesn't have the expected columns."""

    pass


# Columns every game log must provide
REQUIRED_COLUMNS = frozenset([
    "player",
    "deck",
    "won",
    "lost",
    "opp_deck",
    "notes",
])


def read_game_log_csv(file_path: Path) -> pd.DataFrame:
    """Read the raw CSV into a DataFrame of strings.

    Args:
        file_path: Path to the CSV file

    Returns:
        DataFrame with one row per logged game

    Raises:
        SourceReadError: If the file cannot be opened, is empty, or is not valid CSV
    """
    try:
        # Keep every cell as text; empty notes must stay "" rather than NaN
        return pd.read_csv(
            file_path,
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
        )
    except FileNotFoundError as e:
        raise SourceReadError(file_path, "file not found") from e
    except OSError as e:
        raise SourceReadError(file_path, e.strerror or str(e)) from e
    except pd.errors.EmptyDataError as e:
        raise SourceReadError(file_path, "file is empty") from e
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise SourceReadError(file_path, str(e)) from e


def validate_schema(df: pd.DataFrame, file_path: Path) -> None:
    """Validate that DataFrame has required columns.

    Raises:
        SchemaValidationError: If required columns are missing
    """
    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise SchemaValidationError(file_path, f"missing required columns: {sorted(missing)}")


def rows_to_records(df: pd.DataFrame, file_path: Path) -> list[GameLogRecord]:
    """Validate each row into a GameLogRecord.

    Raises:
        SourceReadError: On the first row that fails validation
    """
    records: list[GameLogRecord] = []
    columns = sorted(REQUIRED_COLUMNS)

    for row_number, row in enumerate(df[columns].to_dict(orient="records"), start=1):
        try:
            records.append(GameLogRecord.model_validate(row))
        except ValidationError as e:
            raise SourceReadError(
                file_path, f"invalid row {row_number}: {e.errors()[0]['msg']}"
            ) from e

    return records


def load_game_log(file_path: Path | str) -> list[GameLogRecord]:
    """Load every game from a results CSV.

    Args:
        file_path: Path to the CSV with columns player, deck, won, lost, opp_deck, notes

    Returns:
        Records in file order
    """
    file_path = Path(file_path)
    df = read_game_log_csv(file_path)
    validate_schema(df, file_path)
    records = rows_to_records(df, file_path)
    logger.info("Loaded %d game log records from %s", len(records), file_path)
    return records
