"""CRUD helpers.

These helpers never commit: the service layer opens the transaction with
session.begin() and owns the boundary. Errors propagate to the caller.
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from typing import List, Sequence

from tcg_backend.models.schemas import Card, Deck, DeckCard, User


class CreateData:
    @staticmethod
    async def add_deck_data(user_id: int, name: str, card_ids: Sequence[int], session: AsyncSession) -> Deck:
        """Add a deck and one DeckCard row per card id

        Args:
            user_id (int): Owner of the deck
            name (str): Deck name
            card_ids (Sequence[int]): Card ids, duplicates allowed
            session (AsyncSession): Session with an open transaction

        Returns:
            Deck: The flushed deck with its id and timestamps set
        """
        new_deck = Deck(
            name=name,
            user_id=user_id,
            cards=[DeckCard(card_id=card_id) for card_id in card_ids],
        )
        session.add(new_deck)
        await session.flush()
        return new_deck

    @staticmethod
    async def add_user_data(
        email: str, username: str, hash_password: str, salt: str, session: AsyncSession
    ) -> User:
        new_user = User(
            email=email,
            username=username,
            hash_password=hash_password,
            salt=salt,
        )
        session.add(new_user)
        await session.flush()
        return new_user

    @staticmethod
    async def add_card_data(card: dict, session: AsyncSession) -> Card:
        new_card = Card(**card)
        session.add(new_card)
        await session.flush()
        return new_card


class ReadData:
    @staticmethod
    async def read_deck_data(
        deck_id: int, user_id: int, session: AsyncSession, load_cards: bool = True
    ) -> Deck | None:
        """Read a deck scoped to its owner

        Args:
            deck_id (int): To identify the deck
            user_id (int): Owner the deck must belong to
            load_cards (bool): Also load the DeckCard rows

        Returns:
            Deck | None: None if the deck does not exist or belongs to another user
        """
        stmt = select(Deck).where(Deck.id == deck_id, Deck.user_id == user_id)
        if load_cards:
            stmt = stmt.options(selectinload(Deck.cards))
        result = await session.execute(stmt)
        return result.scalars().first()

    @staticmethod
    async def read_deck_summaries(user_id: int, session: AsyncSession) -> List[tuple[int, str]]:
        stmt = select(Deck.id, Deck.name).where(Deck.user_id == user_id).order_by(Deck.id)
        result = await session.execute(stmt)
        return [(row.id, row.name) for row in result.all()]

    @staticmethod
    async def read_all_cards(session: AsyncSession) -> List[Card]:
        """Read every card ordered by pokedex number"""
        stmt = select(Card).order_by(Card.pokedex_number)
        result = await session.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    async def read_pokedex_numbers(session: AsyncSession) -> set[int]:
        result = await session.execute(select(Card.pokedex_number))
        return set(result.scalars().all())

    @staticmethod
    async def read_user_by_email(email: str, session: AsyncSession) -> User | None:
        stmt = select(User).where(User.email == email)
        result = await session.execute(stmt)
        return result.scalars().first()


class UpdateData:
    @staticmethod
    async def replace_deck_cards_no_commit(
        deck: Deck, name: str, card_ids: Sequence[int], session: AsyncSession
    ) -> None:
        """Rename the deck, delete all of its DeckCard rows and insert the new ones

        NOTE: Must run inside session.begin() so that the deck never has zero cards
        for other readers.
        """
        deck.name = name
        await session.execute(delete(DeckCard).where(DeckCard.deck_id == deck.id))
        session.add_all([DeckCard(deck_id=deck.id, card_id=card_id) for card_id in card_ids])
        await session.flush()


class DeleteData:
    @staticmethod
    async def delete_deck_no_commit(deck_id: int, user_id: int, session: AsyncSession) -> None:
        """Delete the DeckCard rows of the deck, then the deck itself"""
        owned = select(Deck.id).where(Deck.id == deck_id, Deck.user_id == user_id)
        await session.execute(delete(DeckCard).where(DeckCard.deck_id.in_(owned)))
        await session.execute(delete(Deck).where(Deck.id == deck_id, Deck.user_id == user_id))
