"""Raw game log rows as read from the results CSV."""

from pydantic import BaseModel, ConfigDict, Field


class GameLogRecord(BaseModel):
    """One logged game from a single player's point of view."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    player: str = Field(..., description="Name of the player who logged the game")
    deck: str = Field(..., description='Player deck as "<color> <archetype>"')
    won: int = Field(..., ge=0, description="Games won in the match")
    lost: int = Field(..., ge=0, description="Games lost in the match")
    opp_deck: str = Field(..., description='Opponent deck as "<color> <archetype>"')
    notes: str = Field(default="", description="Free text, not used for statistics")

    @property
    def player_won(self) -> bool:
        """True if the player won the match. Ties count as losses."""
        return self.won > self.lost
