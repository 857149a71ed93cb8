from pydantic import BaseModel
from typing import Any, Optional

from tcg_backend.models.schema_models import UserSchema


class DeckModel(BaseModel):
    """Body of POST /decks and PATCH /decks/{id}.

    Both fields are optional and `cards` is untyped so that shape errors are
    reported by the deck rules (400) instead of the request parser (422).
    """
    name: Optional[Any] = None
    cards: Optional[Any] = None


class SignUpModel(BaseModel):
    email: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None


class SignInModel(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class AuthUserModel(BaseModel):
    """Identity asserted by a valid bearer token."""
    user_id: int
    email: str


class TokenModel(BaseModel):
    token: str
    user: UserSchema


class MessageModel(BaseModel):
    status: str
    message: str
