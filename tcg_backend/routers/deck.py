import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import async_sessionmaker

from tcg_backend.authentication.token_authentication import token_auth
from tcg_backend.db import get_session_factory
from tcg_backend.exceptions import DeckError
from tcg_backend.models.dc_models import AuthUserModel, DeckModel
from tcg_backend.models.schema_models import DeckSchema, DeckSummarySchema
from tcg_backend.services.deck_db import SqlAlchemyDeckRepository
from tcg_backend.services.deck_workflow import DeckWorkflow

deck_router = APIRouter(prefix="/decks", tags=["decks"])


def get_deck_workflow(Session: async_sessionmaker = Depends(get_session_factory)) -> DeckWorkflow:
    return DeckWorkflow(SqlAlchemyDeckRepository(Session))


async def read_deck_body(request: Request) -> DeckModel:
    """Parse the deck body leniently.

    A missing body, malformed JSON or anything other than a JSON object counts as
    an empty body, so the deck rules report it as a 400.
    """
    try:
        return DeckModel.model_validate_json(await request.body())
    except ValidationError as e:
        logging.debug(f"Unreadable deck body: {e.error_count()} error(s)")
        return DeckModel()


def to_http_exception(error: DeckError) -> HTTPException:
    logging.debug(f"Deck request failed: {error.status_code} {error.message}")
    return HTTPException(status_code=error.status_code, detail=error.message)


class DeckAPI:
    @staticmethod
    @deck_router.post("", status_code=status.HTTP_201_CREATED, response_model=str)
    async def create_deck(
        deck: DeckModel = Depends(read_deck_body),
        user: AuthUserModel = Depends(token_auth.get_current_user),
        workflow: DeckWorkflow = Depends(get_deck_workflow),
    ) -> str:
        """Create a deck of 10 cards owned by the authenticated user

        Args:
            deck (DeckModel): name and cards (10 card ids)
            user (AuthUserModel): Identity from the bearer token

        Returns:
            str: Confirmation message with the deck name
        """
        try:
            created_deck = await workflow.create_deck(user.user_id, deck.name, deck.cards)
        except DeckError as e:
            raise to_http_exception(e)
        return f"Deck created successfully: {created_deck.name}"

    @staticmethod
    @deck_router.get("/mine", response_model=List[DeckSummarySchema])
    async def list_my_decks(
        user: AuthUserModel = Depends(token_auth.get_current_user),
        workflow: DeckWorkflow = Depends(get_deck_workflow),
    ) -> List[DeckSummarySchema]:
        try:
            return await workflow.list_my_decks(user.user_id)
        except DeckError as e:
            raise to_http_exception(e)

    @staticmethod
    @deck_router.get("/{deck_id}", response_model=DeckSchema)
    async def get_deck(
        deck_id: str,
        user: AuthUserModel = Depends(token_auth.get_current_user),
        workflow: DeckWorkflow = Depends(get_deck_workflow),
    ) -> DeckSchema:
        """Return the deck with its cards. Decks of other users are reported as not found."""
        try:
            return await workflow.get_deck(user.user_id, deck_id)
        except DeckError as e:
            raise to_http_exception(e)

    @staticmethod
    @deck_router.patch("/{deck_id}", response_model=str)
    async def update_deck(
        deck_id: str,
        deck: DeckModel = Depends(read_deck_body),
        user: AuthUserModel = Depends(token_auth.get_current_user),
        workflow: DeckWorkflow = Depends(get_deck_workflow),
    ) -> str:
        """Rename the deck and replace all of its cards"""
        try:
            updated_deck = await workflow.update_deck(user.user_id, deck_id, deck.name, deck.cards)
        except DeckError as e:
            raise to_http_exception(e)
        return f"Deck updated successfully: {updated_deck.name}"

    @staticmethod
    @deck_router.delete("/{deck_id}", response_model=str)
    async def delete_deck(
        deck_id: str,
        user: AuthUserModel = Depends(token_auth.get_current_user),
        workflow: DeckWorkflow = Depends(get_deck_workflow),
    ) -> str:
        try:
            await workflow.delete_deck(user.user_id, deck_id)
        except DeckError as e:
            raise to_http_exception(e)
        return "Deck deleted successfully"
