"""
Parser for deck descriptions in the game log.

Format:
    <color> [<archetype>]

Example:
    Rb Midrange
    grixis
    5c Atraxa

The color token is required and must be a known color identity. The
archetype token is optional; a missing or unknown archetype becomes
Midrange. Tokens are separated by single spaces, so a doubled space
leaves an empty archetype token and the deck resolves to Midrange.
Tokens after the archetype are ignored.
"""

from decktally.models.deck import Deck
from decktally.models.identity import parse_archetype, parse_color


def parse_deck(text: str) -> Deck:
    """
    Parse deck text into a Deck.

    Args:
        text: Deck description from a log row, e.g. "White Aggro"

    Returns:
        Deck with the parsed color identity and archetype

    Raises:
        GameParseError: If the color token is missing or unrecognized
    """
    tokens = text.strip().split(" ")
    color_token = tokens[0]
    archetype_token = tokens[1] if len(tokens) > 1 else None

    return Deck(
        color_id=parse_color(color_token),
        archetype=parse_archetype(archetype_token),
    )
