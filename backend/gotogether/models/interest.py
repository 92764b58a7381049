"""
Interest Model - Interest Tags and User Selections
"""
from sqlalchemy import Column, String, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime, UTC
import uuid

from .database import Base


class Interest(Base):
    """Interest tag (e.g. Outdoors, Music)"""
    __tablename__ = "interests"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(100), unique=True, nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False)


class UserInterest(Base):
    """Interest selected by a user"""
    __tablename__ = "user_interests"

    user_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), primary_key=True)
    interest_id = Column(String(36), ForeignKey('interests.id', ondelete='CASCADE'), primary_key=True, index=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False)

    interest = relationship("Interest")
