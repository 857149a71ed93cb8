"""Pytest fixtures for the TCG backend tests."""

from datetime import datetime
from pathlib import Path
from typing import Dict, Generator, List, Sequence

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from tcg_backend.authentication.token_authentication import token_auth
from tcg_backend.db import get_session_factory
from tcg_backend.domain.card_catalog import generate_starter_card_data
from tcg_backend.exceptions import PersistenceError
from tcg_backend.main import app
from tcg_backend.models.schema_models import DeckCardSchema, DeckSchema, DeckSummarySchema
from tcg_backend.models.schemas import Base, Card
from tcg_backend.routers.deck import get_deck_workflow
from tcg_backend.services.deck_workflow import DeckWorkflow

OWNER_ID = 1
OTHER_USER_ID = 2


class InMemoryDeckRepository:
    """DeckRepository double that keeps decks in a dict and records every call."""

    def __init__(self):
        self.decks: Dict[int, dict] = {}
        self.next_id = 1
        self.calls: List[str] = []
        self.fail = False

    def _check_failure(self, operation: str) -> None:
        self.calls.append(operation)
        if self.fail:
            raise PersistenceError(f"{operation} failed: connection refused")

    def _to_schema(self, deck_id: int) -> DeckSchema:
        deck = self.decks[deck_id]
        return DeckSchema(
            id=deck_id,
            name=deck["name"],
            user_id=deck["user_id"],
            created_at=deck["created_at"],
            updated_at=deck["updated_at"],
            cards=[DeckCardSchema(deck_id=deck_id, card_id=card_id) for card_id in deck["cards"]],
        )

    async def create_deck(self, owner_id: int, name: str, card_ids: Sequence[int]) -> DeckSchema:
        self._check_failure("create_deck")
        deck_id = self.next_id
        self.next_id += 1
        now = datetime.now()
        self.decks[deck_id] = {
            "name": name,
            "user_id": owner_id,
            "cards": list(card_ids),
            "created_at": now,
            "updated_at": now,
        }
        return self._to_schema(deck_id)

    async def list_decks_by_owner(self, owner_id: int) -> List[DeckSummarySchema]:
        self._check_failure("list_decks_by_owner")
        return [
            DeckSummarySchema(id=deck_id, name=deck["name"])
            for deck_id, deck in sorted(self.decks.items())
            if deck["user_id"] == owner_id
        ]

    async def find_deck_by_id_and_owner(self, deck_id: int, owner_id: int) -> DeckSchema | None:
        self._check_failure("find_deck_by_id_and_owner")
        deck = self.decks.get(deck_id)
        if deck is None or deck["user_id"] != owner_id:
            return None
        return self._to_schema(deck_id)

    async def replace_deck_cards(
        self, deck_id: int, owner_id: int, name: str, card_ids: Sequence[int]
    ) -> DeckSchema | None:
        self._check_failure("replace_deck_cards")
        deck = self.decks.get(deck_id)
        if deck is None or deck["user_id"] != owner_id:
            return None
        deck["name"] = name
        deck["cards"] = list(card_ids)
        deck["updated_at"] = datetime.now()
        return self._to_schema(deck_id)

    async def delete_deck(self, deck_id: int, owner_id: int) -> None:
        self._check_failure("delete_deck")
        deck = self.decks.get(deck_id)
        if deck is not None and deck["user_id"] == owner_id:
            del self.decks[deck_id]


def make_session_factory(db_path: Path) -> async_sessionmaker:
    # NullPool: no connection outlives the event loop that opened it.
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)
    return async_sessionmaker(
        autocommit=False, class_=AsyncSession, expire_on_commit=False, bind=engine
    )


def prepare_database(db_path: Path, seed: bool = True) -> None:
    """Create the tables (and the starter cards) with a synchronous engine, outside any event loop."""
    engine = create_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(engine)
    if seed:
        with engine.begin() as conn:
            conn.execute(Card.__table__.insert(), generate_starter_card_data())
    engine.dispose()


# --- Repository fixtures ---
@pytest.fixture
def fake_repository() -> InMemoryDeckRepository:
    return InMemoryDeckRepository()


@pytest.fixture
def workflow(fake_repository: InMemoryDeckRepository) -> DeckWorkflow:
    return DeckWorkflow(fake_repository)


# --- Database fixtures ---
@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "test_tcg.sqlite3"


@pytest.fixture
def session_factory(db_path: Path) -> async_sessionmaker:
    """Session factory bound to a fresh SQLite file with every table created and no cards."""
    prepare_database(db_path, seed=False)
    return make_session_factory(db_path)


@pytest.fixture
def seeded_session_factory(db_path: Path) -> async_sessionmaker:
    """Session factory bound to a fresh SQLite file holding the starter cards."""
    prepare_database(db_path)
    return make_session_factory(db_path)


# --- HTTP fixtures ---
def auth_header(user_id: int = OWNER_ID, email: str = "blue@example.com") -> Dict[str, str]:
    return {"Authorization": f"Bearer {token_auth.create_access_token(user_id, email)}"}


@pytest.fixture
def deck_client(fake_repository: InMemoryDeckRepository) -> Generator[TestClient, None, None]:
    """TestClient whose deck routes use the in-memory repository."""
    app.dependency_overrides[get_deck_workflow] = lambda: DeckWorkflow(fake_repository)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def db_client(seeded_session_factory: async_sessionmaker) -> Generator[TestClient, None, None]:
    """TestClient whose routes use a fresh SQLite database seeded with the starter cards."""
    app.dependency_overrides[get_session_factory] = lambda: seeded_session_factory
    yield TestClient(app)
    app.dependency_overrides.clear()
