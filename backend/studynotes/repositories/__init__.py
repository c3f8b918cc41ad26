# Repositories package init
"""
Mini Study Notes Backend — Repository Layer
============================================

What:  Storage access for User aggregates behind one abstract interface.

Repository Inventory:
    - UserRepository (abstract): lookup, existence-check and write contract
    - SqlUserRepository: async SQLAlchemy implementation (production)
    - InMemoryUserRepository: dict-backed implementation (tests, local runs)

There is no Subject repository: subjects only exist embedded in
their user's document.
"""

from studynotes.repositories.base import UserRepository
from studynotes.repositories.memory_user_repository import InMemoryUserRepository
from studynotes.repositories.sql_user_repository import SqlUserRepository

__all__ = ["UserRepository", "InMemoryUserRepository", "SqlUserRepository"]
