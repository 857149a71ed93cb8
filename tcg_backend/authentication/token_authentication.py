import argparse
import asyncio
import hashlib
import logging
import secrets
from datetime import datetime, timedelta, timezone

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import async_sessionmaker

from tcg_backend.db import Session, engine
from tcg_backend.exceptions import PersistenceError
from tcg_backend.load_secrets import jwt_expires_days, jwt_secret, pepper_data
from tcg_backend.models.dc_models import AuthUserModel, SignInModel, SignUpModel, TokenModel
from tcg_backend.models.schema_models import UserSchema
from tcg_backend.models.schemas import Base
from tcg_backend.services import account_db

JWT_ALGORITHM = "HS256"
security = HTTPBearer(auto_error=False)


def unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def internal_server_error() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )


class TokenAuthentication:
    def __init__(self, secret: str = jwt_secret, expires_days: int = jwt_expires_days, pepper: str = pepper_data):
        self.secret = secret
        self.expires_days = expires_days
        self.pepper = pepper

    def hash_password(self, password: str, salt: str) -> str:
        return hashlib.sha256((password + salt + self.pepper).encode()).hexdigest()

    def verify_password(self, password: str, salt: str, hash_password: str) -> bool:
        return secrets.compare_digest(self.hash_password(password, salt), hash_password)

    def create_access_token(self, user_id: int, email: str) -> str:
        """Sign a bearer token for the user

        Args:
            user_id (int): ID of the user
            email (str): Email of the user

        Returns:
            str: Token which expires after `expires_days` days
        """
        payload = {
            "userId": user_id,
            "email": email,
            "exp": datetime.now(timezone.utc) + timedelta(days=self.expires_days),
        }
        return jwt.encode(payload, self.secret, algorithm=JWT_ALGORITHM)

    def decode_access_token(self, token: str) -> AuthUserModel:
        """Verify the token signature and expiry

        Raises:
            HTTPException: The token is invalid or expired

        Returns:
            AuthUserModel: The user identity carried by the token
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[JWT_ALGORITHM])
            return AuthUserModel(user_id=payload.get("userId"), email=payload.get("email"))
        except (jwt.InvalidTokenError, ValidationError) as e:
            logging.debug(f"Rejected token: {e}")
            raise unauthorized("Invalid or expired token")

    async def get_current_user(
        self, credentials: HTTPAuthorizationCredentials | None = Depends(security)
    ) -> AuthUserModel:
        """Dependency for protected routes. Reads the "Authorization: Bearer <token>" header.

        Raises:
            HTTPException: No token, or the token is invalid or expired
        """
        if credentials is None or not credentials.credentials:
            raise unauthorized("No token provided")
        return self.decode_access_token(credentials.credentials)

    async def sign_up(self, Session: async_sessionmaker, sign_up_data: SignUpModel) -> TokenModel:
        """Create a new user and return a token for it

        Raises:
            HTTPException: 400 if a field is missing, 409 if the email is used, 500 on database error
        """
        if not sign_up_data.email or not sign_up_data.username or not sign_up_data.password:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing data")

        try:
            existing_user = await account_db.read_credentials(Session, sign_up_data.email)
            if existing_user is not None:
                raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already used")

            salt = secrets.token_hex(8)
            user: UserSchema = await account_db.create_user_data(
                Session,
                sign_up_data.email,
                sign_up_data.username,
                self.hash_password(sign_up_data.password, salt),
                salt,
            )
        except PersistenceError:
            raise internal_server_error()

        logging.info(f"User {user.id} signed up")
        return TokenModel(token=self.create_access_token(user.id, user.email), user=user)

    async def sign_in(self, Session: async_sessionmaker, sign_in_data: SignInModel) -> TokenModel:
        """Check the credentials and return a token

        Raises:
            HTTPException: 400 if a field is missing, 401 on wrong credentials, 500 on database error
        """
        if not sign_in_data.email or not sign_in_data.password:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing data")

        try:
            credentials = await account_db.read_credentials(Session, sign_in_data.email)
        except PersistenceError:
            raise internal_server_error()

        if credentials is None or not self.verify_password(
            sign_in_data.password, credentials.salt, credentials.hash_password
        ):
            raise unauthorized("Invalid credentials")

        user = UserSchema.model_validate(credentials.model_dump())
        return TokenModel(token=self.create_access_token(user.id, user.email), user=user)


token_auth = TokenAuthentication()


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create a user account")
    parser.add_argument("--email", type=str, help="Email", required=True)
    parser.add_argument("--username", type=str, help="Username", required=True)
    parser.add_argument("--password", type=str, help="Password", required=True)
    return parser


async def main(email: str, username: str, password: str):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    token = await token_auth.sign_up(Session, SignUpModel(email=email, username=username, password=password))
    print(token.user.id, token.user.email, token.token)


if __name__ == "__main__":
    parser = get_parser()
    args = parser.parse_args()
    asyncio.run(main(args.email, args.username, args.password))
