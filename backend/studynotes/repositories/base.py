"""
Mini Study Notes Backend — Abstract User Repository
====================================================

What:  Abstract base class defining the contract for User aggregate storage.
Why:   The service only talks to this interface, so the SQL-backed store and
       the in-memory store are interchangeable (the latter keeps service and
       API tests free of any database).
How:   Concrete implementations inherit from UserRepository and implement
       every method below.
Who:   Called by StudyNotesService; constructed by studynotes.dependencies.

Contract:
    - Every method returns detached aggregates. Mutating a returned User does
      nothing until it is passed back to save().
    - save() replaces the stored aggregate wholesale, embedded subjects and
      notes included. There is no partial update.
    - Writes are durable when the call returns; there is no transaction
      spanning several calls and no optimistic concurrency token.

Implementations:
    - SqlUserRepository: async SQLAlchemy, one row per aggregate
    - InMemoryUserRepository: process-local dict of deep copies
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from studynotes.schemas.user import User


class UserRepository(ABC):
    """Typed accessors over the user store: lookups, existence checks, writes."""

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Full aggregate for this username, or None."""
        ...

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Full aggregate for this email, or None."""
        ...

    @abstractmethod
    async def exists_by_username(self, username: str) -> bool:
        ...

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        ...

    @abstractmethod
    async def insert(self, user: User) -> User:
        """
        Store a new aggregate.

        Raises:
            DuplicateUserError: username or email is already stored.
        """
        ...

    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Replace the stored aggregate with this one (insert if unknown).

        Username and email are immutable; only the subject tree is rewritten.
        """
        ...

    @abstractmethod
    async def delete(self, user: User) -> None:
        ...

    @abstractmethod
    async def delete_all(self) -> None:
        ...

    @abstractmethod
    async def find_all(self) -> List[User]:
        ...

    @abstractmethod
    async def count(self) -> int:
        ...
