"""
Mini Study Notes Backend — Dependency Wiring
=============================================

What:  FastAPI dependencies that build the repository and service per request.
Why:   The store is handed to the service at construction instead of being a
       module-level singleton the service reaches for. Tests replace
       get_user_repository through app.dependency_overrides.

Chain:
    get_db_session ──▶ get_user_repository ──▶ get_study_notes_service ──▶ route

    With STORAGE_BACKEND=memory the session is still created but never used
    (AsyncSession connects lazily), and the process-wide in-memory repository
    is returned instead.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from studynotes.config import settings
from studynotes.database import get_db_session
from studynotes.repositories import InMemoryUserRepository, SqlUserRepository, UserRepository
from studynotes.services.study_notes_service import StudyNotesService

# Backing store for STORAGE_BACKEND=memory; lives as long as the process
memory_user_repository = InMemoryUserRepository()


async def get_user_repository(
    db: AsyncSession = Depends(get_db_session),
) -> UserRepository:
    if settings.storage_backend == "memory":
        return memory_user_repository
    return SqlUserRepository(db)


async def get_study_notes_service(
    repository: UserRepository = Depends(get_user_repository),
) -> StudyNotesService:
    return StudyNotesService(repository)
