from dataclasses import dataclass

from decktally.models.identity import DEFAULT_ARCHETYPE, Archetype, ColorIdentity


@dataclass(frozen=True, order=True, slots=True)
class Deck:
    """
    A deck as tracked for matchup statistics.

    Two decks with the same color identity and archetype are the same deck,
    however they were written in the log. Ordering is by color identity,
    then archetype.

    Attributes:
        color_id: Colors the deck plays
        archetype: Play style category
    """

    color_id: ColorIdentity
    archetype: Archetype = DEFAULT_ARCHETYPE

    @classmethod
    def of(cls, color_id: ColorIdentity, archetype: Archetype | None = None) -> "Deck":
        """Build a deck directly, defaulting the archetype to Midrange."""
        return cls(color_id=color_id, archetype=archetype or DEFAULT_ARCHETYPE)

    def __str__(self) -> str:
        return f"{self.color_id} {self.archetype}"
