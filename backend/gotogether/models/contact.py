"""
Contact Model - Directed Contact Edges

One row is one direction of a relationship (user_id -> contact_id).
A friendship is two ACCEPTED rows, one in each direction.
"""
from sqlalchemy import Column, String, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from datetime import datetime, UTC
import uuid

from gotogether.config.constants import CONTACT_STATUS_PENDING, CONTACT_STATUS_ACCEPTED
from .database import Base


class ContactStatus:
    PENDING = CONTACT_STATUS_PENDING
    ACCEPTED = CONTACT_STATUS_ACCEPTED


class Contact(Base):
    """Directed contact edge between two users"""
    __tablename__ = "contacts"

    # Composite key: at most one edge per ordered pair
    user_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), primary_key=True)
    contact_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), primary_key=True, index=True)

    status = Column(String(20), default=ContactStatus.PENDING, nullable=False, index=True)

    # Category chosen by user_id for this edge (per direction)
    category_id = Column(
        String(36), ForeignKey('contact_categories.id', ondelete='SET NULL'), nullable=True
    )

    # Custom nickname for the contact (optional)
    nickname = Column(String(255), nullable=True)

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False)

    user = relationship("User", foreign_keys=[user_id])
    contact = relationship("User", foreign_keys=[contact_id])
    category = relationship("ContactCategory")

    __table_args__ = (
        CheckConstraint('user_id <> contact_id', name='ck_contact_no_self_edge'),
        CheckConstraint("status IN ('PENDING', 'ACCEPTED')", name='ck_contact_status'),
    )

    @property
    def is_accepted(self) -> bool:
        return self.status == ContactStatus.ACCEPTED

    def __repr__(self):
        return f"<Contact {self.user_id[:8]}->{self.contact_id[:8]} {self.status}>"


class ContactCategory(Base):
    """User-owned label for classifying contacts"""
    __tablename__ = "contact_categories"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    color = Column(String(20), nullable=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False)

    owner = relationship("User", back_populates="categories")

    def to_summary(self):
        return {"id": self.id, "name": self.name, "color": self.color}
