"""Card constants and face glyphs.

War only compares face values, so a card is a bare ``int`` in
``[0, FACES)`` where 0 is a two and 12 is an ace. Suits are never tracked.
"""

FACES = 13
SUITS = 4
DECK_SIZE = FACES * SUITS  # No pile can ever hold more than the full deck

# One glyph per face; "0" stands for ten so every card renders as one character
FACE_GLYPHS = "234567890JQKA"


def is_card(value: object) -> bool:
    """Check that value is a valid face value."""
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < FACES


def card_glyph(card: int) -> str:
    """Format a face value as its single-character glyph."""
    return FACE_GLYPHS[card]
