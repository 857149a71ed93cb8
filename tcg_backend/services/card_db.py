"""DB service layer for the read-only card catalog."""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from tcg_backend.crud import CreateData, ReadData
from tcg_backend.exceptions import PersistenceError
from tcg_backend.models.schema_models import CardSchema


async def read_all_cards(Session: async_sessionmaker) -> List[CardSchema]:
    try:
        async with Session() as session:
            cards = await ReadData.read_all_cards(session)
            return [CardSchema.model_validate(card) for card in cards]
    except SQLAlchemyError as e:
        logging.error(f"Error fetching cards: {e}")
        raise PersistenceError("Failed to read cards", e) from e


async def create_missing_cards(Session: async_sessionmaker, cards: List[dict]) -> int:
    """Insert the cards whose pokedex number is not in the catalog yet.

    Args:
        Session (async_sessionmaker): Session factory
        cards (List[dict]): Card column values

    Returns:
        int: Number of inserted cards
    """
    async with Session() as session:
        async with session.begin():
            known_numbers = await ReadData.read_pokedex_numbers(session)
            missing = [card for card in cards if card["pokedex_number"] not in known_numbers]
            for card in missing:
                await CreateData.add_card_data(card, session)
    return len(missing)
