"""
Mini Study Notes Backend — User, Subject and Study Note Routes
===============================================================

What:  The /api/v1/users resource tree.
How:   Each handler resolves StudyNotesService through dependency injection,
       calls one service method, and shapes the success response.
       Failures are raised by the service and turned into responses by the
       global exception handlers in main.py (plain-text 400/404 bodies).

Route Inventory:
    GET    /api/v1/users                                         user count
    DELETE /api/v1/users/all                                     delete every user
    GET    /api/v1/users/{username}                              user aggregate
    POST   /api/v1/users/{username}/{email}                      create user
    DELETE /api/v1/users/{username}                              delete user
    POST   /api/v1/users/{username}/subjects/{subject_name}      create subject
    DELETE /api/v1/users/{username}/subjects/{subject_name}      delete subject
    PUT    /api/v1/users/{username}/subjects/{subject_name}/{new_subject_name}
                                                                 rename subject
    GET    /api/v1/users/{username}/subjects                     list subjects
    POST   /api/v1/users/{username}/subjects/{subject_name}/notes
                                                                 add study note
    GET    /api/v1/users/{username}/subjects/{subject_name}/notes
                                                                 list study notes

Ordering:
    /all is registered before /{username} so DELETE /all never reaches the
    single-user delete.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response

from studynotes.dependencies import get_study_notes_service
from studynotes.schemas.user import (
    ErrorResponse,
    StudyNote,
    StudyNoteCreate,
    Subject,
    User,
)
from studynotes.services.study_notes_service import StudyNotesService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/users", tags=["Users"])

_TEXT_400 = {400: {"description": "Precondition failed (plain-text reason)"}}
_SERVER_ERROR = {500: {"description": "Server error", "model": ErrorResponse}}


def _ok() -> Response:
    """Empty 200, the success answer of every mutating endpoint."""
    return Response(status_code=200)


# ══════════════════════════════════════════════════════════════════════════
# Users
# ══════════════════════════════════════════════════════════════════════════


@router.get("", response_model=int, summary="Count users")
@router.get("/", response_model=int, include_in_schema=False)
async def get_user_count(
    service: StudyNotesService = Depends(get_study_notes_service),
) -> int:
    return await service.count_users()


@router.delete("/all", summary="Delete every user", responses=_SERVER_ERROR)
async def delete_all_users(
    service: StudyNotesService = Depends(get_study_notes_service),
) -> Response:
    await service.delete_all_users()
    return _ok()


@router.get(
    "/{username}",
    response_model=User,
    responses={404: {"description": "Username does not exist (empty body)"}, **_SERVER_ERROR},
    summary="Get a user with all subjects and notes",
)
async def get_user(
    username: str,
    service: StudyNotesService = Depends(get_study_notes_service),
) -> User:
    return await service.get_user(username)


@router.post(
    "/{username}/{email}",
    responses={**_TEXT_400, **_SERVER_ERROR},
    summary="Create a user",
    description=(
        "Creates a user with an empty subject list. Fails with 400 if the "
        "username, the email, or both are already taken."
    ),
)
async def create_user(
    username: str,
    email: str,
    service: StudyNotesService = Depends(get_study_notes_service),
) -> Response:
    await service.create_user(username, email)
    return _ok()


@router.delete(
    "/{username}",
    responses={404: {"description": "Username does not exist"}, **_SERVER_ERROR},
    summary="Delete a user and everything they own",
)
async def delete_user(
    username: str,
    service: StudyNotesService = Depends(get_study_notes_service),
) -> Response:
    await service.delete_user(username)
    return _ok()


# ══════════════════════════════════════════════════════════════════════════
# Subjects
# ══════════════════════════════════════════════════════════════════════════


@router.get(
    "/{username}/subjects",
    response_model=List[Subject],
    responses={400: {"description": "Username does not exist (empty body)"}, **_SERVER_ERROR},
    summary="List a user's subjects",
)
async def list_subjects(
    username: str,
    service: StudyNotesService = Depends(get_study_notes_service),
) -> List[Subject]:
    return await service.list_subjects(username)


@router.post(
    "/{username}/subjects/{subject_name}",
    responses={**_TEXT_400, **_SERVER_ERROR},
    summary="Create a subject",
)
async def create_subject(
    username: str,
    subject_name: str,
    service: StudyNotesService = Depends(get_study_notes_service),
) -> Response:
    await service.create_subject(username, subject_name)
    return _ok()


@router.delete(
    "/{username}/subjects/{subject_name}",
    responses={**_TEXT_400, **_SERVER_ERROR},
    summary="Delete a subject and its notes",
)
async def delete_subject(
    username: str,
    subject_name: str,
    service: StudyNotesService = Depends(get_study_notes_service),
) -> Response:
    await service.delete_subject(username, subject_name)
    return _ok()


@router.put(
    "/{username}/subjects/{subject_name}/{new_subject_name}",
    responses={**_TEXT_400, **_SERVER_ERROR},
    summary="Rename a subject",
)
async def rename_subject(
    username: str,
    subject_name: str,
    new_subject_name: str,
    service: StudyNotesService = Depends(get_study_notes_service),
) -> Response:
    await service.rename_subject(username, subject_name, new_subject_name)
    return _ok()


# ══════════════════════════════════════════════════════════════════════════
# Study Notes
# ══════════════════════════════════════════════════════════════════════════


@router.post(
    "/{username}/subjects/{subject_name}/notes",
    responses={**_TEXT_400, **_SERVER_ERROR},
    summary="Append a study note to a subject",
)
async def create_study_note(
    username: str,
    subject_name: str,
    note: StudyNoteCreate,
    service: StudyNotesService = Depends(get_study_notes_service),
) -> Response:
    await service.create_study_note(username, subject_name, note)
    return _ok()


@router.get(
    "/{username}/subjects/{subject_name}/notes",
    response_model=List[StudyNote],
    responses={400: {"description": "Unknown user or subject (empty body)"}, **_SERVER_ERROR},
    summary="List a subject's study notes in the order they were added",
)
async def list_study_notes(
    username: str,
    subject_name: str,
    service: StudyNotesService = Depends(get_study_notes_service),
) -> List[StudyNote]:
    return await service.list_study_notes(username, subject_name)
