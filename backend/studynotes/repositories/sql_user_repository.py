"""
Mini Study Notes Backend — SQL User Repository
===============================================

What:  UserRepository over async SQLAlchemy, one `users` row per aggregate.
How:   Lookups select the row and map it to a detached User. Writes flush and
       commit immediately, so each call is a single durable document write and
       the per-username lock in the service covers the whole read-modify-write.
Errors:
    - Unique-index violations on insert become DuplicateUserError (400)
    - Any other SQLAlchemy failure is logged and wrapped in DatabaseError (500)
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from studynotes.exceptions import DatabaseError, DuplicateUserError
from studynotes.mappers.user_mapper import UserDocumentMapper
from studynotes.models.user import UserDocument
from studynotes.repositories.base import UserRepository
from studynotes.schemas.user import User

logger = logging.getLogger(__name__)


class SqlUserRepository(UserRepository):
    """Repository for User aggregates stored as `users` rows."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.mapper = UserDocumentMapper()

    # ── Lookups ───────────────────────────────────────────────────────────

    async def find_by_username(self, username: str) -> Optional[User]:
        stmt = select(UserDocument).where(UserDocument.username == username)
        return await self._find_one(stmt, operation="find_by_username")

    async def find_by_email(self, email: str) -> Optional[User]:
        stmt = select(UserDocument).where(UserDocument.email == email)
        return await self._find_one(stmt, operation="find_by_email")

    async def exists_by_username(self, username: str) -> bool:
        stmt = select(UserDocument.id).where(UserDocument.username == username).limit(1)
        return await self._exists(stmt, operation="exists_by_username")

    async def exists_by_email(self, email: str) -> bool:
        stmt = select(UserDocument.id).where(UserDocument.email == email).limit(1)
        return await self._exists(stmt, operation="exists_by_email")

    async def find_all(self) -> List[User]:
        try:
            result = await self.db.execute(select(UserDocument))
            rows = result.scalars().all()
        except SQLAlchemyError as e:
            raise self._database_error("find_all", e)
        return [self.mapper.to_domain(row) for row in rows]

    async def count(self) -> int:
        try:
            result = await self.db.execute(select(func.count()).select_from(UserDocument))
        except SQLAlchemyError as e:
            raise self._database_error("count", e)
        return result.scalar() or 0

    # ── Writes ────────────────────────────────────────────────────────────

    async def insert(self, user: User) -> User:
        self.db.add(self.mapper.to_orm(user))
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.info("Insert rejected by unique index for user '%s'", user.username)
            raise DuplicateUserError(
                context={"username": user.username, "original_error": type(e).__name__},
            )
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise self._database_error("insert", e)
        return user

    async def save(self, user: User) -> User:
        try:
            row = await self.db.get(UserDocument, user.id)
            if row is None:
                self.db.add(self.mapper.to_orm(user))
            else:
                self.mapper.to_orm(user, row)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise self._database_error("save", e)
        return user

    async def delete(self, user: User) -> None:
        try:
            await self.db.execute(delete(UserDocument).where(UserDocument.id == user.id))
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise self._database_error("delete", e)

    async def delete_all(self) -> None:
        try:
            await self.db.execute(delete(UserDocument))
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise self._database_error("delete_all", e)

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _find_one(self, stmt, operation: str) -> Optional[User]:
        try:
            result = await self.db.execute(stmt)
            row = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise self._database_error(operation, e)
        return self.mapper.to_domain(row) if row else None

    async def _exists(self, stmt, operation: str) -> bool:
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            raise self._database_error(operation, e)
        return result.scalar_one_or_none() is not None

    def _database_error(self, operation: str, error: Exception) -> DatabaseError:
        logger.error("Database error in %s: %s", operation, str(error), exc_info=True)
        return DatabaseError(
            context={"operation": operation, "error_type": type(error).__name__},
        )
