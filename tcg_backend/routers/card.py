from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import async_sessionmaker

from tcg_backend.db import get_session_factory
from tcg_backend.exceptions import PersistenceError
from tcg_backend.models.schema_models import CardSchema
from tcg_backend.services import card_db

card_router = APIRouter(prefix="/cards", tags=["cards"])


class CardAPI:
    @staticmethod
    @card_router.get("", response_model=List[CardSchema])
    async def get_all_cards(Session: async_sessionmaker = Depends(get_session_factory)) -> List[CardSchema]:
        """Return every card of the catalog ordered by pokedex number"""
        try:
            return await card_db.read_all_cards(Session)
        except PersistenceError:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Internal server error",
            )
