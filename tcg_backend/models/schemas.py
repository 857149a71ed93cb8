from datetime import datetime

from sqlalchemy.orm import DeclarativeBase, relationship
from sqlalchemy.schema import Column, ForeignKey
from sqlalchemy.types import DateTime, Enum, Integer, String

from tcg_backend.domain.battle_rules import PokemonType


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    email = Column(String, unique=True, index=True, nullable=False)
    username = Column(String, nullable=False)
    hash_password = Column(String, nullable=False)
    salt = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    decks = relationship(
        "Deck",
        back_populates="user",
        cascade="all, delete",
    )


class Card(Base):
    __tablename__ = "card"
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String, nullable=False)
    type = Column(Enum(PokemonType, name="pokemon_type"), nullable=False)
    hp = Column(Integer, nullable=False)
    attack = Column(Integer, nullable=False)
    pokedex_number = Column(Integer, unique=True, nullable=False)
    img_url = Column(String)
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    deck_cards = relationship(
        "DeckCard",
        back_populates="card",
    )


class Deck(Base):
    __tablename__ = "deck"
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String, nullable=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    user = relationship(
        "User",
        back_populates="decks",
    )
    cards = relationship(
        "DeckCard",
        back_populates="deck",
        cascade="all, delete-orphan",
        order_by="DeckCard.id",
    )


class DeckCard(Base):
    # No unique constraint on (deck_id, card_id): a deck may hold the same card twice.
    __tablename__ = "deck_card"
    id = Column(Integer, primary_key=True, autoincrement=True)
    deck_id = Column(Integer, ForeignKey("deck.id", ondelete="CASCADE"), index=True, nullable=False)
    card_id = Column(Integer, ForeignKey("card.id"), nullable=False)

    deck = relationship(
        "Deck",
        back_populates="cards",
    )
    card = relationship(
        "Card",
        back_populates="deck_cards",
    )
