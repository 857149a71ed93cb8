"""Deck shape rules.

Card ids are not checked against the catalog and duplicates are allowed.
"""

from enum import Enum
from typing import Any

DECK_SIZE = 10


class DeckValidationError(str, Enum):
    MISSING_NAME = "Missing deck name"
    INVALID_NAME = "Deck name must be a string"
    INVALID_CARD_COUNT = f"A deck must contain exactly {DECK_SIZE} cards"


def validate_deck_input(name: Any, card_ids: Any) -> DeckValidationError | None:
    """Check the deck name and card list. The first failing rule wins.

    Args:
        name (Any): Deck name sent by the client
        card_ids (Any): Card ids sent by the client

    Returns:
        DeckValidationError | None: The broken rule, None if the input is valid
    """
    if not name:
        return DeckValidationError.MISSING_NAME
    if not isinstance(name, str):
        return DeckValidationError.INVALID_NAME

    # a string is a sequence too, but never a list of card ids
    if not isinstance(card_ids, (list, tuple)) or len(card_ids) != DECK_SIZE:
        return DeckValidationError.INVALID_CARD_COUNT

    return None
