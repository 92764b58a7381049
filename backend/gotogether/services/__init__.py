"""Business Logic Services.

This package contains all service modules that implement the core
business logic of the GoTogether backend.

Service Categories:
- Contacts: Contact request lifecycle (contact_service), categories
- Users: User records and identity sync
- Interests: Interest tags and user selections
- Hangouts: Hangout events, filtering and visibility
- Core: Repositories

External integrations:
- identity_service: Bearer token verification
"""
