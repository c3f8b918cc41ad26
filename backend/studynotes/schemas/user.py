"""
Mini Study Notes Backend — Domain Model & API Schemas
======================================================

What:  Pydantic models for the User aggregate (User → Subject → StudyNote),
       the note request body, and the error/health responses.
Why:   The aggregate is both what the service mutates and what the API returns,
       so a single set of validated models serves both roles.
How:   Field names are snake_case in Python and camelCase on the wire
       (`creationDate`, `isFavourite`). Input accepts either spelling.

Ownership:
    User ──owns──▶ Subject ──owns──▶ StudyNote
    Composition only: no back-references, no sharing between users.
    The whole tree is persisted as one document (see models/user.py).
"""

import uuid
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

_CAMEL_CONFIG = {"alias_generator": to_camel, "populate_by_name": True}


# ══════════════════════════════════════════════════════════════════════════
# Aggregate
# ══════════════════════════════════════════════════════════════════════════


class StudyNote(BaseModel):
    """
    A single note inside a subject.

    Notes have no identifier of their own; they are addressed by their
    position in the subject's note list, which preserves append order.
    """
    content: str = Field(description="Free-form note text")
    colour: str = Field(description="Colour tag, e.g. 'yellow' or '#ffcc00'")
    creation_date: date = Field(
        default_factory=date.today,
        description="Server-local date the note was created",
    )
    is_favourite: bool = Field(default=False, description="Favourite flag")

    model_config = _CAMEL_CONFIG


class Subject(BaseModel):
    """A named group of notes. Names are unique within one user."""
    id: uuid.UUID = Field(default_factory=uuid.uuid4, description="Subject identifier")
    name: str = Field(description="Subject name, unique per user")
    notes: List[StudyNote] = Field(default_factory=list)

    model_config = _CAMEL_CONFIG


class User(BaseModel):
    """
    The aggregate root and unit of persistence.

    `username` and `email` are globally unique and never change after
    creation. Only the embedded subject list is mutated, and every mutation
    is persisted by saving the whole aggregate.
    """
    id: uuid.UUID = Field(default_factory=uuid.uuid4, description="User identifier")
    creation_date: date = Field(
        default_factory=date.today,
        description="Server-local date the account was created",
    )
    username: str = Field(description="Unique user name")
    email: str = Field(description="Unique email address")
    subjects: List[Subject] = Field(default_factory=list)

    model_config = _CAMEL_CONFIG

    def find_subject(self, name: str) -> Optional[Subject]:
        """First subject with exactly this name, or None."""
        return next((s for s in self.subjects if s.name == name), None)

    def has_subject(self, name: str) -> bool:
        return self.find_subject(name) is not None


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class StudyNoteCreate(BaseModel):
    """
    Body of POST /api/v1/users/{username}/subjects/{subject_name}/notes.

    The creation date is always assigned by the server.
    """
    content: str = Field(description="Free-form note text")
    colour: str = Field(description="Colour tag")
    is_favourite: bool = Field(default=False)

    model_config = _CAMEL_CONFIG

    def to_note(self) -> StudyNote:
        return StudyNote(
            content=self.content,
            colour=self.colour,
            is_favourite=self.is_favourite,
        )


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """JSON body for 5xx responses. 4xx responses are plain text."""
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer checks."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    storage_backend: str = Field(description="Configured repository: sql or memory")
    database: str = Field(description="Database connectivity: connected, disconnected, unused")
    uptime_seconds: float = Field(description="Seconds since service started")
