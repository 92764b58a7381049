"""
Database Models Package

This module exports all SQLAlchemy models for the GoTogether backend.

Tables:
1. users - Identity records synced from the identity provider
2. contacts - Directed contact edges (PENDING / ACCEPTED)
3. contact_categories - User-owned contact labels
4. interests / user_interests - Interest tags and user selections
5. hangouts / hangout_visibility - Events and their visibility grants
"""

from .database import (
    engine,
    AsyncSessionLocal,
    Base,
    init_db,
    reset_db,
    get_db,
)

from .user import User
from .contact import Contact, ContactCategory, ContactStatus
from .interest import Interest, UserInterest
from .hangout import Hangout, HangoutVisibility

__all__ = [
    # Database utilities
    "engine",
    "AsyncSessionLocal",
    "Base",
    "init_db",
    "reset_db",
    "get_db",

    # Models
    "User",
    "Contact",
    "ContactCategory",
    "ContactStatus",
    "Interest",
    "UserInterest",
    "Hangout",
    "HangoutVisibility",
]
