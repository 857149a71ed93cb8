import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.middleware.cors import CORSMiddleware

from tcg_backend.db import Session, engine
from tcg_backend.domain.card_catalog import generate_starter_card_data
from tcg_backend.load_secrets import log_level, seed_cards
from tcg_backend.models.dc_models import MessageModel
from tcg_backend.models.schemas import Base
from tcg_backend.routers import auth, card, deck
from tcg_backend.services import card_db

logging.basicConfig(level=log_level)
logging.getLogger("aiosqlite").setLevel(logging.WARNING)


async def create_table() -> None:
    """Create table if not exists"""
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except IntegrityError as e:
        logging.warning(f"Table already exists or other integrity error: {e}")


@asynccontextmanager
async def lifespan(app):
    """Create the tables and the starter card catalog.
    This function is called to start the server.
    """
    await create_table()
    if seed_cards:
        inserted = await card_db.create_missing_cards(Session, generate_starter_card_data())
        logging.info(f"Seeded {inserted} cards")
    try:
        yield
    finally:
        await engine.dispose()
        logging.info("Stop Server")


app = FastAPI(lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(auth.auth_router)
app.include_router(card.card_router)
app.include_router(deck.deck_router)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logging.error(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


@app.get("/health", response_model=MessageModel)
async def health() -> MessageModel:
    return MessageModel(status="ok", message="TCG backend server is running")
