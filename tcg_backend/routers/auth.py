from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import async_sessionmaker

from tcg_backend.authentication.token_authentication import token_auth
from tcg_backend.db import get_session_factory
from tcg_backend.models.dc_models import SignInModel, SignUpModel, TokenModel

auth_router = APIRouter(prefix="/auth", tags=["auth"])


class AuthAPI:
    @staticmethod
    @auth_router.post("/sign-up", status_code=status.HTTP_201_CREATED, response_model=TokenModel)
    async def sign_up(
        sign_up_data: SignUpModel,
        Session: async_sessionmaker = Depends(get_session_factory),
    ) -> TokenModel:
        return await token_auth.sign_up(Session, sign_up_data)

    @staticmethod
    @auth_router.post("/sign-in", response_model=TokenModel)
    async def sign_in(
        sign_in_data: SignInModel,
        Session: async_sessionmaker = Depends(get_session_factory),
    ) -> TokenModel:
        return await token_auth.sign_in(Session, sign_in_data)
