"""DB service layer for user accounts."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from tcg_backend.crud import CreateData, ReadData
from tcg_backend.exceptions import PersistenceError
from tcg_backend.models.schema_models import CredentialSchema, UserSchema


async def read_credentials(Session: async_sessionmaker, email: str) -> CredentialSchema | None:
    try:
        async with Session() as session:
            user = await ReadData.read_user_by_email(email, session)
            if user is None:
                return None
            return CredentialSchema.model_validate(user)
    except SQLAlchemyError as e:
        logging.error(f"Error reading user data: {e}")
        raise PersistenceError("Failed to read user data", e) from e


async def create_user_data(
    Session: async_sessionmaker, email: str, username: str, hash_password: str, salt: str
) -> UserSchema:
    try:
        async with Session() as session:
            async with session.begin():
                user = await CreateData.add_user_data(email, username, hash_password, salt, session)
                user_data = UserSchema.model_validate(user)
    except SQLAlchemyError as e:
        logging.error(f"Error creating user data: {e}")
        raise PersistenceError("Failed to create user data", e) from e
    return user_data
