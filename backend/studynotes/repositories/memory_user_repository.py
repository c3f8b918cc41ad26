"""
In-memory UserRepository.

Keeps deep copies of aggregates keyed by id, so callers never share mutable
state with the store, the same as with a real document store. Used by the
test suite and by STORAGE_BACKEND=memory for local runs. Data lives only as
long as the process.
"""

from typing import Dict, List, Optional
from uuid import UUID

from studynotes.exceptions import DuplicateUserError
from studynotes.repositories.base import UserRepository
from studynotes.schemas.user import User


class InMemoryUserRepository(UserRepository):
    """Process-local store; dict insertion order is the listing order."""

    def __init__(self) -> None:
        self._users: Dict[UUID, User] = {}

    async def find_by_username(self, username: str) -> Optional[User]:
        for user in self._users.values():
            if user.username == username:
                return user.model_copy(deep=True)
        return None

    async def find_by_email(self, email: str) -> Optional[User]:
        for user in self._users.values():
            if user.email == email:
                return user.model_copy(deep=True)
        return None

    async def exists_by_username(self, username: str) -> bool:
        return any(u.username == username for u in self._users.values())

    async def exists_by_email(self, email: str) -> bool:
        return any(u.email == email for u in self._users.values())

    async def insert(self, user: User) -> User:
        if any(
            u.username == user.username or u.email == user.email
            for u in self._users.values()
        ):
            raise DuplicateUserError(context={"username": user.username})
        self._users[user.id] = user.model_copy(deep=True)
        return user

    async def save(self, user: User) -> User:
        self._users[user.id] = user.model_copy(deep=True)
        return user

    async def delete(self, user: User) -> None:
        self._users.pop(user.id, None)

    async def delete_all(self) -> None:
        self._users.clear()

    async def find_all(self) -> List[User]:
        return [u.model_copy(deep=True) for u in self._users.values()]

    async def count(self) -> int:
        return len(self._users)
