"""
Mini Study Notes Backend — Study Notes Service (Precondition Chains)
=====================================================================

What:  Business logic for users, subjects and study notes.
Why:   Keeps every rule (uniqueness, existence, ordering of checks) out of the
       HTTP layer so it can be tested against an in-memory repository.
How:   Each operation loads the User aggregate once, runs its precondition
       chain against that copy, raises on the first failed check, and
       otherwise mutates the aggregate and saves it whole.
Who:   Called by routes/users.py; receives its repository by injection.

Operation Shape:
    ┌──────────┐    ┌────────────────────┐    ┌──────────┐    ┌──────────┐
    │  Load    │───▶│  Preconditions     │───▶│  Mutate  │───▶│  Save    │
    │  once    │    │  (first fail wins) │    │  in RAM  │    │  whole   │
    └──────────┘    └────────────────────┘    └──────────┘    └──────────┘

    Subject and note mutations run under the username's lock (UsernameLocks),
    so load → check → save is not interleaved with another request for the
    same user in this process.

Failure Mapping:
    Top-level user lookup/delete on a missing user → NotFoundError (404)
    Everything else that fails a check             → BadRequestError (400)
    The exact messages are part of the API contract.
"""

import logging
from typing import List, NoReturn

from studynotes.exceptions import BadRequestError, NotFoundError
from studynotes.repositories.base import UserRepository
from studynotes.schemas.user import StudyNote, StudyNoteCreate, Subject, User
from studynotes.services.locks import UsernameLocks, username_locks

logger = logging.getLogger(__name__)

# ── Client-facing messages ────────────────────────────────────────────────
USERNAME_AND_EMAIL_TAKEN = "Username and Email already taken."
USERNAME_TAKEN = "Username already taken."
EMAIL_TAKEN = "Email already taken."
USERNAME_MISSING = "Username does not exist."
SUBJECT_NAME_TAKEN = "Subject name already exists."
SUBJECT_MISSING = "Subject does not exist."
NEW_SUBJECT_NAME_TAKEN = "New subject name already exists."
NOTE_USERNAME_MISSING = "Username does not exist"


class StudyNotesService:
    """
    Request handling for the /api/v1/users resource tree.

    Responsibilities:
        - Users: count, delete all, get, create, delete
        - Subjects: create, delete, rename, list
        - Study notes: create, list

    Not thread-safe across processes: two workers editing the same user can
    still lose one of the writes.
    """

    def __init__(self, repository: UserRepository, locks: UsernameLocks = username_locks):
        self.repository = repository
        self.locks = locks

    # ══════════════════════════════════════════════════════════════════════
    # Users
    # ══════════════════════════════════════════════════════════════════════

    async def count_users(self) -> int:
        return await self.repository.count()

    async def delete_all_users(self) -> None:
        await self.repository.delete_all()
        logger.info("Deleted all users")

    async def get_user(self, username: str) -> User:
        """
        Raises:
            NotFoundError: no such user (404 with an empty body)
        """
        user = await self.repository.find_by_username(username)
        if user is None:
            raise NotFoundError(context={"username": username})
        return user

    async def create_user(self, username: str, email: str) -> User:
        """
        Create a user with an empty subject list.

        Precondition chain:
            1. username AND email taken → USERNAME_AND_EMAIL_TAKEN
            2. username taken           → USERNAME_TAKEN
            3. email taken              → EMAIL_TAKEN

        A concurrent create that slips past these checks is rejected by the
        store's unique indexes (DuplicateUserError, also a 400).
        """
        username_taken = await self.repository.exists_by_username(username)
        email_taken = await self.repository.exists_by_email(email)

        if username_taken and email_taken:
            self._reject(USERNAME_AND_EMAIL_TAKEN, username=username, email=email)
        if username_taken:
            self._reject(USERNAME_TAKEN, username=username)
        if email_taken:
            self._reject(EMAIL_TAKEN, email=email)

        user = await self.repository.insert(User(username=username, email=email))
        logger.info("Created user '%s' (%s)", username, user.id)
        return user

    async def delete_user(self, username: str) -> None:
        """
        Raises:
            NotFoundError: no such user (404 naming the username)
        """
        async with self.locks.hold(username):
            user = await self.repository.find_by_username(username)
            if user is None:
                raise NotFoundError(
                    message=f"Username {username} does not exist",
                    context={"username": username},
                )
            await self.repository.delete(user)
        logger.info("Deleted user '%s'", username)

    # ══════════════════════════════════════════════════════════════════════
    # Subjects
    # ══════════════════════════════════════════════════════════════════════

    async def create_subject(self, username: str, subject_name: str) -> Subject:
        async with self.locks.hold(username):
            user = await self._require_user(username, USERNAME_MISSING)
            if user.has_subject(subject_name):
                self._reject(SUBJECT_NAME_TAKEN, username=username, subject=subject_name)

            subject = Subject(name=subject_name)
            user.subjects.append(subject)
            await self.repository.save(user)

        logger.info("User '%s' created subject '%s'", username, subject_name)
        return subject

    async def delete_subject(self, username: str, subject_name: str) -> None:
        async with self.locks.hold(username):
            user = await self._require_user(username, USERNAME_MISSING)
            subject = user.find_subject(subject_name)
            if subject is None:
                self._reject(SUBJECT_MISSING, username=username, subject=subject_name)

            user.subjects.remove(subject)
            await self.repository.save(user)

        logger.info("User '%s' deleted subject '%s'", username, subject_name)

    async def rename_subject(
        self, username: str, subject_name: str, new_subject_name: str
    ) -> Subject:
        """
        Precondition chain:
            1. user exists              → USERNAME_MISSING
            2. old name exists          → SUBJECT_MISSING
            3. new name not yet used    → NEW_SUBJECT_NAME_TAKEN

        Renaming a subject to its own name fails at step 3.
        """
        async with self.locks.hold(username):
            user = await self._require_user(username, USERNAME_MISSING)
            subject = user.find_subject(subject_name)
            if subject is None:
                self._reject(SUBJECT_MISSING, username=username, subject=subject_name)
            if user.has_subject(new_subject_name):
                self._reject(
                    NEW_SUBJECT_NAME_TAKEN, username=username, subject=new_subject_name
                )

            subject.name = new_subject_name
            await self.repository.save(user)

        logger.info(
            "User '%s' renamed subject '%s' to '%s'", username, subject_name, new_subject_name
        )
        return subject

    async def list_subjects(self, username: str) -> List[Subject]:
        user = await self._require_user(username, "")
        return user.subjects

    # ══════════════════════════════════════════════════════════════════════
    # Study Notes
    # ══════════════════════════════════════════════════════════════════════

    async def create_study_note(
        self, username: str, subject_name: str, note: StudyNoteCreate
    ) -> StudyNote:
        async with self.locks.hold(username):
            user = await self._require_user(username, NOTE_USERNAME_MISSING)
            subject = user.find_subject(subject_name)
            if subject is None:
                self._reject(
                    f"Username does not have a subject with the name '{subject_name}'",
                    username=username,
                    subject=subject_name,
                )

            study_note = note.to_note()
            subject.notes.append(study_note)
            await self.repository.save(user)

        logger.info(
            "User '%s' added a note to subject '%s' (%d notes)",
            username, subject_name, len(subject.notes),
        )
        return study_note

    async def list_study_notes(self, username: str, subject_name: str) -> List[StudyNote]:
        user = await self._require_user(username, "")
        subject = user.find_subject(subject_name)
        if subject is None:
            self._reject("", username=username, subject=subject_name)
        return subject.notes

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _require_user(self, username: str, message: str) -> User:
        user = await self.repository.find_by_username(username)
        if user is None:
            self._reject(message, username=username)
        return user

    @staticmethod
    def _reject(message: str, **context: str) -> NoReturn:
        logger.debug("Precondition failed: %r %s", message, context)
        raise BadRequestError(message=message, context=context)
