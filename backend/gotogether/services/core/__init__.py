"""
Core Infrastructure Module

This module contains shared infrastructure components used across the application:
- ContactRepository: Contact edge persistence behind the contact gateway

Usage:
    from gotogether.services.core import get_contact_repository
"""

from gotogether.services.core.repositories import ContactRepository, get_contact_repository

__all__ = [
    # Repositories
    "ContactRepository",
    "get_contact_repository",
]
