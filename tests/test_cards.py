"""Tests for the card catalog, the starter cards and the health check."""

from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker

from tcg_backend.domain.battle_rules import PokemonType
from tcg_backend.domain.card_catalog import STARTER_CARDS, generate_starter_card_data
from tcg_backend.services import card_db


def test_starter_cards_cover_every_type():
    assert {card_type for _, _, card_type, _, _ in STARTER_CARDS} == set(PokemonType)


def test_starter_cards_have_unique_pokedex_numbers():
    numbers = [card["pokedex_number"] for card in generate_starter_card_data()]

    assert len(numbers) == len(set(numbers))


async def test_create_missing_cards_is_idempotent(session_factory: async_sessionmaker):
    cards = generate_starter_card_data()

    assert await card_db.create_missing_cards(session_factory, cards) == len(cards)
    assert await card_db.create_missing_cards(session_factory, cards) == 0
    assert len(await card_db.read_all_cards(session_factory)) == len(cards)


async def test_read_all_cards_is_ordered_by_pokedex_number(session_factory: async_sessionmaker):
    await card_db.create_missing_cards(session_factory, list(reversed(generate_starter_card_data())))

    cards = await card_db.read_all_cards(session_factory)

    numbers = [card.pokedex_number for card in cards]
    assert numbers == sorted(numbers)


def test_get_all_cards(db_client: TestClient):
    response = db_client.get("/cards")

    assert response.status_code == 200
    cards = response.json()
    assert len(cards) == len(STARTER_CARDS)
    assert [card["pokedex_number"] for card in cards] == sorted(card["pokedex_number"] for card in cards)
    pikachu = next(card for card in cards if card["name"] == "Pikachu")
    assert pikachu["type"] == "Electric"
    assert pikachu["attack"] == 55
    assert pikachu["img_url"].endswith("/25.png")


def test_health(deck_client: TestClient):
    response = deck_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "message": "TCG backend server is running"}
