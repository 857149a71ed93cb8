"""DB service layer for deck use cases.

- The workflow never touches DB sessions directly; it calls a DeckRepository.
- This layer owns session/transaction boundaries.
- Every query is scoped to the owner, so another user's deck looks missing.
"""

import logging
from typing import List, Protocol, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from tcg_backend.crud import CreateData, DeleteData, ReadData, UpdateData
from tcg_backend.exceptions import PersistenceError
from tcg_backend.models.schema_models import DeckSchema, DeckSummarySchema


class DeckRepository(Protocol):
    async def create_deck(self, owner_id: int, name: str, card_ids: Sequence[int]) -> DeckSchema: ...

    async def list_decks_by_owner(self, owner_id: int) -> List[DeckSummarySchema]: ...

    async def find_deck_by_id_and_owner(self, deck_id: int, owner_id: int) -> DeckSchema | None: ...

    async def replace_deck_cards(
        self, deck_id: int, owner_id: int, name: str, card_ids: Sequence[int]
    ) -> DeckSchema | None: ...

    async def delete_deck(self, deck_id: int, owner_id: int) -> None: ...


class SqlAlchemyDeckRepository:
    def __init__(self, Session: async_sessionmaker):
        self.Session: async_sessionmaker = Session

    async def create_deck(self, owner_id: int, name: str, card_ids: Sequence[int]) -> DeckSchema:
        """Create the deck and its DeckCard rows in one transaction."""
        try:
            async with self.Session() as session:
                async with session.begin():
                    deck = await CreateData.add_deck_data(owner_id, name, card_ids, session)
                    deck_data = DeckSchema.model_validate(deck)
        except SQLAlchemyError as e:
            logging.error(f"Failed to create deck data: {e}")
            raise PersistenceError("Failed to create deck data", e) from e
        logging.info(f"Deck {deck_data.id} created for user {owner_id}")
        return deck_data

    async def list_decks_by_owner(self, owner_id: int) -> List[DeckSummarySchema]:
        try:
            async with self.Session() as session:
                rows = await ReadData.read_deck_summaries(owner_id, session)
        except SQLAlchemyError as e:
            logging.error(f"Failed to read deck summaries: {e}")
            raise PersistenceError("Failed to read deck summaries", e) from e
        return [DeckSummarySchema(id=deck_id, name=name) for deck_id, name in rows]

    async def find_deck_by_id_and_owner(self, deck_id: int, owner_id: int) -> DeckSchema | None:
        try:
            async with self.Session() as session:
                deck = await ReadData.read_deck_data(deck_id, owner_id, session)
                if deck is None:
                    return None
                return DeckSchema.model_validate(deck)
        except SQLAlchemyError as e:
            logging.error(f"Failed to read deck data: {e}")
            raise PersistenceError("Failed to read deck data", e) from e

    async def replace_deck_cards(
        self, deck_id: int, owner_id: int, name: str, card_ids: Sequence[int]
    ) -> DeckSchema | None:
        """Rename the deck and replace its whole card set in one transaction.

        Returns:
            DeckSchema | None: The updated deck, None if the owner has no such deck
        """
        try:
            async with self.Session() as session:
                async with session.begin():
                    deck = await ReadData.read_deck_data(deck_id, owner_id, session, load_cards=False)
                    if deck is None:
                        return None
                    await UpdateData.replace_deck_cards_no_commit(deck, name, card_ids, session)
        except SQLAlchemyError as e:
            logging.error(f"Failed to replace deck cards: {e}")
            raise PersistenceError("Failed to replace deck cards", e) from e
        logging.info(f"Deck {deck_id} updated for user {owner_id}")
        return await self.find_deck_by_id_and_owner(deck_id, owner_id)

    async def delete_deck(self, deck_id: int, owner_id: int) -> None:
        try:
            async with self.Session() as session:
                async with session.begin():
                    await DeleteData.delete_deck_no_commit(deck_id, owner_id, session)
        except SQLAlchemyError as e:
            logging.error(f"Failed to delete deck data: {e}")
            raise PersistenceError("Failed to delete deck data", e) from e
        logging.info(f"Deck {deck_id} deleted for user {owner_id}")
