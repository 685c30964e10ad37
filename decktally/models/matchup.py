from dataclasses import dataclass

from decktally.models.deck import Deck
from decktally.models.errors import KeyMismatchError


@dataclass
class Matchup:
    """
    Win/loss record of one deck against one opponent deck.

    The key is the ordered pair (deck, opponent), so A vs B and B vs A
    are separate records of the same pairing.

    Attributes:
        deck: The deck this record belongs to
        opponent: The deck it played against
        win: Games won by `deck`
        loss: Games lost by `deck`
    """

    deck: Deck
    opponent: Deck
    win: int = 0
    loss: int = 0

    def __post_init__(self) -> None:
        if self.win < 0 or self.loss < 0:
            raise ValueError(f"Matchup counts must be non-negative, got {self.win}-{self.loss}")

    @property
    def key(self) -> tuple[Deck, Deck]:
        return (self.deck, self.opponent)

    @property
    def total(self) -> int:
        return self.win + self.loss

    @property
    def win_rate(self) -> float | None:
        """Fraction of games won, or None before any game is recorded."""
        if self.total == 0:
            return None
        return self.win / self.total

    def complement(self) -> "Matchup":
        """The same games seen from the opponent's side."""
        return Matchup(deck=self.opponent, opponent=self.deck, win=self.loss, loss=self.win)

    def add(self, other: "Matchup") -> "Matchup":
        """
        Merge another observation of the same matchup into this one.

        Raises:
            KeyMismatchError: If `other` has a different key. Counts are unchanged.
        """
        if other.key != self.key:
            raise KeyMismatchError(self.key, other.key)
        self.win += other.win
        self.loss += other.loss
        return self

    def __str__(self) -> str:
        return f"{self.deck} {self.win} - {self.loss} {self.opponent}"
