"""
Sign-up service - business logic for creating an account.
Validates the body, checks email/phone uniqueness, hashes the password and persists the user.
The endpoint stays thin; this class is tested against a real session.
"""

import logging
from typing import Any

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import IntegrityError

from app.core.errors import SignUpError
from app.core.security import hash_password
from app.db.models.user import User
from app.db.repositories.user_repository import UserRepository
from app.schemas.user import NewUser, SignUpRequest, parse_sign_up

logger = logging.getLogger(__name__)

EMAIL_TAKEN_MSG = "Email already exits"
PHONE_TAKEN_MSG = "Phone number already exits"


class SignUpService:
    """Handles the sign-up use case on top of a UserRepository."""

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def sign_up(self, body: Any) -> User:
        data = parse_sign_up(body)
        await self._ensure_unique(data)
        # bcrypt is CPU-bound; keep it off the event loop
        password_hash = await run_in_threadpool(hash_password, data.password)
        new_user = NewUser(
            full_name=data.full_name,
            email=data.email,
            phone=data.phone,
            password_hash=password_hash,
        )
        try:
            user = await self.user_repo.create_user(new_user)
            await self.user_repo.session.commit()
        except IntegrityError as exc:
            # A concurrent sign-up won the race between our checks and the insert.
            await self.user_repo.session.rollback()
            logger.warning("Unique constraint violated on sign-up insert: %s", exc.orig)
            await self._ensure_unique(data)
            raise
        return user

    async def _ensure_unique(self, data: SignUpRequest) -> None:
        """Email is checked first; a taken email short-circuits the phone lookup."""
        if await self.user_repo.email_exists(data.email):
            raise SignUpError.conflict(EMAIL_TAKEN_MSG)
        if await self.user_repo.phone_exists(data.phone):
            raise SignUpError.conflict(PHONE_TAKEN_MSG)
