from pydantic import BaseModel
from typing import List
from datetime import datetime

from tcg_backend.domain.battle_rules import PokemonType


class CardSchema(BaseModel):
    id: int
    name: str
    type: PokemonType
    hp: int
    attack: int
    pokedex_number: int
    img_url: str | None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class DeckCardSchema(BaseModel):
    deck_id: int
    card_id: int

    class Config:
        from_attributes = True


class DeckSummarySchema(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class DeckSchema(BaseModel):
    id: int
    name: str
    user_id: int
    created_at: datetime
    updated_at: datetime
    cards: List[DeckCardSchema] = []

    class Config:
        from_attributes = True


class UserSchema(BaseModel):
    """User data returned to the client. Password material is never included."""
    id: int
    email: str
    username: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class CredentialSchema(BaseModel):
    """User data with the password hash and salt, only used for sign-in checks."""
    id: int
    email: str
    username: str
    hash_password: str
    salt: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
