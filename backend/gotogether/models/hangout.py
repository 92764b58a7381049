"""
Hangout Model - Location/Time-Scoped Events

Tracks each hangout (owner, where, when) and who may see it when it
is not public.
"""
from sqlalchemy import Column, String, DateTime, Boolean, Float, Text, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from datetime import datetime, UTC
import uuid

from .database import Base


class Hangout(Base):
    """Hangout event owned by a user"""
    __tablename__ = "hangouts"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    # Location
    location = Column(String(255), nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)

    # Timing
    starts_at = Column(DateTime(timezone=True), nullable=False, index=True)
    ends_at = Column(DateTime(timezone=True), nullable=True)

    is_public = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False)

    owner = relationship("User", back_populates="hangouts")
    visibility = relationship(
        "HangoutVisibility", back_populates="hangout",
        cascade="all, delete-orphan", passive_deletes=True,
        order_by="HangoutVisibility.created_at.desc()",
    )


class HangoutVisibility(Base):
    """Grants visibility of a hangout to a contact category or a single user"""
    __tablename__ = "hangout_visibility"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    hangout_id = Column(String(36), ForeignKey('hangouts.id', ondelete='CASCADE'), nullable=False, index=True)
    category_id = Column(String(36), ForeignKey('contact_categories.id', ondelete='CASCADE'), nullable=True)
    user_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False)

    hangout = relationship("Hangout", back_populates="visibility")

    __table_args__ = (
        CheckConstraint(
            'category_id IS NOT NULL OR user_id IS NOT NULL',
            name='ck_visibility_target',
        ),
    )
