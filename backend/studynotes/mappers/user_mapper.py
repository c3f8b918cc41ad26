"""Mapper for UserDocument ORM ↔ User aggregate conversion."""

from typing import Optional

from studynotes.models.user import UserDocument
from studynotes.schemas.user import Subject, User


class UserDocumentMapper:
    """Mapper for UserDocument ORM ↔ User aggregate conversion."""

    def to_domain(self, orm_model: UserDocument) -> User:
        """Convert a stored row into a detached User aggregate."""
        return User(
            id=orm_model.id,
            creation_date=orm_model.creation_date,
            username=orm_model.username,
            email=orm_model.email,
            subjects=[Subject.model_validate(s) for s in orm_model.subjects or []],
        )

    def to_orm(self, domain_entity: User, orm_model: Optional[UserDocument] = None) -> UserDocument:
        """Convert a User aggregate into a row, replacing the embedded tree."""
        subjects = [
            s.model_dump(mode="json", by_alias=True) for s in domain_entity.subjects
        ]
        if orm_model:
            # Update existing. A fresh list is assigned so the JSON column is
            # marked dirty.
            orm_model.subjects = subjects
            return orm_model

        # Create new
        return UserDocument(
            id=domain_entity.id,
            username=domain_entity.username,
            email=domain_entity.email,
            creation_date=domain_entity.creation_date,
            subjects=subjects,
        )
