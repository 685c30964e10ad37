"""
Color identity and archetype enumerations.

Both are closed sets ordered by declaration. Color parsing is strict,
archetype parsing is lenient and falls back to Midrange.
"""

from enum import Enum

from decktally.models.errors import ErrorKind, GameParseError


class _DeclarationOrder(Enum):
    """Enum base ordered by member declaration sequence."""

    @property
    def rank(self) -> int:
        return type(self)._member_names_.index(self.name)

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.rank < other.rank  # type: ignore[attr-defined]

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.rank <= other.rank  # type: ignore[attr-defined]

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.rank > other.rank  # type: ignore[attr-defined]

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.rank >= other.rank  # type: ignore[attr-defined]

    def __str__(self) -> str:
        return str(self.value)


class ColorIdentity(_DeclarationOrder):
    """The colors a deck plays. Values are the canonical tokens."""

    # Mono
    WHITE = "White"
    BLACK = "Black"
    RED = "Red"
    GREEN = "Green"
    BLUE = "Blue"

    # Two-color pairs
    UW = "Uw"
    UB = "Ub"
    UR = "Ur"
    UG = "Ug"
    RG = "Rg"
    RW = "Rw"
    RB = "Rb"
    GW = "Gw"
    GB = "Gb"
    BW = "Bw"

    # Shards and wedges
    NAYA = "Naya"
    GRIXIS = "Grixis"
    ESPER = "Esper"
    BANT = "Bant"
    JUND = "Jund"
    ABZAN = "Abzan"
    JESKAI = "Jeskai"
    SULTAI = "Sultai"
    MARDU = "Mardu"
    TEMUR = "Temur"

    FOUR_COLOR = "4c"
    FIVE_COLOR = "5c"


class Archetype(_DeclarationOrder):
    """Strategic category of a deck."""

    AGGRO = "Aggro"
    MIDRANGE = "Midrange"
    COMBO = "Combo"
    LEGENDS = "Legends"
    TOXIC = "Toxic"
    ATRAXA = "Atraxa"
    TEMPO = "Tempo"
    VEHICLES = "Vehicles"
    DOMAIN = "Domain"


DEFAULT_ARCHETYPE = Archetype.MIDRANGE

_COLORS_BY_TOKEN: dict[str, ColorIdentity] = {c.value.lower(): c for c in ColorIdentity}

# Vehicles and Domain are format-only: log entries naming them count as Midrange.
PARSEABLE_ARCHETYPES: frozenset[Archetype] = frozenset(
    {
        Archetype.AGGRO,
        Archetype.MIDRANGE,
        Archetype.COMBO,
        Archetype.LEGENDS,
        Archetype.TOXIC,
        Archetype.ATRAXA,
        Archetype.TEMPO,
    }
)
_ARCHETYPES_BY_TOKEN: dict[str, Archetype] = {a.value.lower(): a for a in PARSEABLE_ARCHETYPES}


def parse_color(text: str) -> ColorIdentity:
    """
    Parse a color token such as "Rb", "grixis" or "5c".

    Raises:
        GameParseError: If the token is not a known color identity
    """
    color = _COLORS_BY_TOKEN.get(text.strip().lower())
    if color is None:
        raise GameParseError(ErrorKind.COLOR, text)
    return color


def parse_archetype(text: str | None) -> Archetype:
    """Parse an archetype token. Unknown or missing tokens yield Midrange."""
    if not text:
        return DEFAULT_ARCHETYPE
    return _ARCHETYPES_BY_TOKEN.get(text.strip().lower(), DEFAULT_ARCHETYPE)
