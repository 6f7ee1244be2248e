"""
User repository - existence checks and user creation for sign-up.
"""

from sqlalchemy import exists, select

from app.db.models.user import User
from app.db.repositories.base_repository import BaseRepository
from app.schemas.user import NewUser


class UserRepository(BaseRepository[User]):
    """User-specific queries. Extends base CRUD with account lookups."""

    def __init__(self, session):
        super().__init__(session, User)

    async def email_exists(self, email: str) -> bool:
        result = await self.session.execute(select(exists().where(User.email == email)))
        return bool(result.scalar())

    async def phone_exists(self, phone: str) -> bool:
        result = await self.session.execute(select(exists().where(User.phone == phone)))
        return bool(result.scalar())

    async def create_user(self, data: NewUser) -> User:
        """Insert the user row and return it with its generated id. Caller commits."""
        user = User(
            full_name=data.full_name,
            email=data.email,
            phone=data.phone,
            password_hash=data.password_hash,
        )
        return await self.add(user)
