# Repository pattern: abstract data access

from app.db.repositories.user_repository import UserRepository

__all__ = ["UserRepository"]
