"""
User Model - Identity Records

Purpose: Store one row per identity-provider subject.

Key Fields:
- `firebase_uid`: Immutable subject from the identity provider (unique, one-to-one)
- `display_name` / `email` / `photo_url`: Public profile, refreshed on every sync
"""
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime, UTC
import uuid

from .database import Base


class User(Base):
    """User identity and public profile"""
    __tablename__ = "users"

    # Primary key
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    # Identity provider subject
    firebase_uid = Column(String(128), unique=True, nullable=False, index=True)

    # Public profile
    email = Column(String(255), nullable=True)
    display_name = Column(String(255), nullable=True)
    photo_url = Column(String(1024), nullable=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False)

    # Owned rows, removed with the user
    categories = relationship(
        "ContactCategory", back_populates="owner",
        cascade="all, delete-orphan", passive_deletes=True,
    )
    hangouts = relationship(
        "Hangout", back_populates="owner",
        cascade="all, delete-orphan", passive_deletes=True,
    )

    def apply_identity(self, email=None, name=None, picture=None):
        """Copy profile claims from a verified identity onto this user."""
        self.email = email
        self.display_name = name
        self.photo_url = picture

    def to_public_dict(self):
        """Profile fields shown to other users"""
        return {
            "id": self.id,
            "displayName": self.display_name,
            "email": self.email,
            "photoUrl": self.photo_url,
        }

    def __repr__(self):
        identifier = self.email or self.firebase_uid or self.id[:8]
        return f"<User {identifier}>"
