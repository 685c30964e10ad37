from decktally.analysis.aggregator import MatchupTable, build_matchup_table
from decktally.analysis.normalizer import normalize
from decktally.analysis.reports import (
    Record,
    deck_vs_field,
    player_record,
    render_report,
)

__all__ = [
    "MatchupTable",
    "Record",
    "build_matchup_table",
    "deck_vs_field",
    "normalize",
    "player_record",
    "render_report",
]
