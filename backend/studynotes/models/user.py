"""
Mini Study Notes Backend — User Document ORM Model
===================================================

What:  ORM model for the `users` table, one row per User aggregate.
Why:   The aggregate is stored as a document: identity columns that need
       lookups and uniqueness, plus the embedded subject/note tree as JSON.
How:   JSONB on PostgreSQL, generic JSON elsewhere (SQLite in tests).
Who:   Read and written only by SqlUserRepository through UserDocumentMapper.

Table Design Rationale:
    - username / email: unique indexes back up the service's uniqueness checks
      when two create requests race
    - subjects: the full ordered subject list with notes embedded; replaced
      wholesale on every save, never patched
    - no subject or note tables: they are never addressed outside their user
"""

import uuid
from datetime import date
from typing import Any, Dict, List

from sqlalchemy import JSON, Date, String, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from studynotes.database import Base


class UserDocument(Base):
    """One stored User aggregate."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        comment="User identifier, generated on creation",
    )

    username: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Globally unique user name",
    )

    email: Mapped[str] = mapped_column(
        String(320),
        nullable=False,
        unique=True,
        index=True,
        comment="Globally unique email address",
    )

    creation_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        default=date.today,
        comment="Date the account was created",
    )

    # camelCase keys, ISO dates, string UUIDs (the API's JSON shape)
    subjects: Mapped[List[Dict[str, Any]]] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"),
        nullable=False,
        default=list,
        comment="Embedded subjects with their notes, in insertion order",
    )

    def __repr__(self) -> str:
        return f"<UserDocument(id={self.id}, username='{self.username}')>"
