"""Deck use cases: validation, ownership and repository calls for each operation.

The caller passes the owner id asserted by the authentication layer; the
workflow never looks at tokens. Ownership is enforced by the repository
queries themselves, so a deck of another user fails exactly like a missing one.
"""

import logging
import re
from typing import Any, List

from tcg_backend.domain.deck_rules import validate_deck_input
from tcg_backend.exceptions import (
    DeckNotFoundError,
    InternalError,
    InvalidIdError,
    InvalidInputError,
    PersistenceError,
)
from tcg_backend.models.schema_models import DeckSchema, DeckSummarySchema
from tcg_backend.services.deck_db import DeckRepository

DECK_ID_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")
INVALID_DECK_ID = "Invalid deck ID"
DECK_NOT_FOUND = "Deck not found"
INTERNAL_SERVER_ERROR = "Internal server error"


def parse_deck_id(raw_id: Any) -> int:
    """Parse the deck id taken from the URL.

    The whole value must be the integer: a numeric prefix such as "12abc" is
    rejected rather than read as 12.

    Raises:
        InvalidIdError: The id is not a decimal integer
    """
    if isinstance(raw_id, int) and not isinstance(raw_id, bool):
        return raw_id
    if isinstance(raw_id, str) and DECK_ID_PATTERN.fullmatch(raw_id):
        return int(raw_id)
    raise InvalidIdError(INVALID_DECK_ID)


def check_deck_input(name: Any, cards: Any) -> None:
    error = validate_deck_input(name, cards)
    if error is not None:
        raise InvalidInputError(error.value)


class DeckWorkflow:
    def __init__(self, repository: DeckRepository):
        self.repository = repository

    async def create_deck(self, owner_id: int, name: Any, cards: Any) -> DeckSchema:
        """Validate the input and create the deck with all of its cards

        Args:
            owner_id (int): Authenticated user
            name (Any): Deck name from the request body
            cards (Any): Card ids from the request body

        Raises:
            InvalidInputError: Missing name or not exactly 10 cards
            InternalError: The deck could not be stored

        Returns:
            DeckSchema: The created deck
        """
        check_deck_input(name, cards)
        try:
            return await self.repository.create_deck(owner_id, name, cards)
        except PersistenceError as e:
            logging.error(f"Create deck failed for user {owner_id}: {e}")
            raise InternalError(INTERNAL_SERVER_ERROR) from e

    async def list_my_decks(self, owner_id: int) -> List[DeckSummarySchema]:
        try:
            return await self.repository.list_decks_by_owner(owner_id)
        except PersistenceError as e:
            logging.error(f"List decks failed for user {owner_id}: {e}")
            raise InternalError(INTERNAL_SERVER_ERROR) from e

    async def get_deck(self, owner_id: int, raw_id: Any) -> DeckSchema:
        deck_id = parse_deck_id(raw_id)
        return await self._find_owned_deck(deck_id, owner_id)

    async def update_deck(self, owner_id: int, raw_id: Any, name: Any, cards: Any) -> DeckSchema:
        """Rename the deck and replace its whole card set

        Raises:
            InvalidIdError: The id is not an integer
            InvalidInputError: Missing name or not exactly 10 cards
            DeckNotFoundError: No deck with this id for this user
            InternalError: The deck could not be updated
        """
        deck_id = parse_deck_id(raw_id)
        check_deck_input(name, cards)
        await self._find_owned_deck(deck_id, owner_id)
        try:
            updated_deck = await self.repository.replace_deck_cards(deck_id, owner_id, name, cards)
        except PersistenceError as e:
            logging.error(f"Update deck {deck_id} failed for user {owner_id}: {e}")
            raise InternalError(INTERNAL_SERVER_ERROR) from e
        # deleted between the ownership check and the update
        if updated_deck is None:
            raise DeckNotFoundError(DECK_NOT_FOUND)
        return updated_deck

    async def delete_deck(self, owner_id: int, raw_id: Any) -> None:
        deck_id = parse_deck_id(raw_id)
        await self._find_owned_deck(deck_id, owner_id)
        try:
            await self.repository.delete_deck(deck_id, owner_id)
        except PersistenceError as e:
            logging.error(f"Delete deck {deck_id} failed for user {owner_id}: {e}")
            raise InternalError(INTERNAL_SERVER_ERROR) from e

    async def _find_owned_deck(self, deck_id: int, owner_id: int) -> DeckSchema:
        try:
            deck = await self.repository.find_deck_by_id_and_owner(deck_id, owner_id)
        except PersistenceError as e:
            logging.error(f"Read deck {deck_id} failed for user {owner_id}: {e}")
            raise InternalError(INTERNAL_SERVER_ERROR) from e
        if deck is None:
            raise DeckNotFoundError(DECK_NOT_FOUND)
        return deck
