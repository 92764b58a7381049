"""
Application-wide constants for configuration and tuning.

Note: Environment-dependent settings (DB, identity provider) belong in settings.py.
This file is for operational parameters that rarely change between environments.
"""

# ==============================================================================
# DATABASE
# ==============================================================================

# Connection pool size for the async engine (PostgreSQL only)
DB_POOL_SIZE: int = 10

# Extra connections allowed above the pool size under load
DB_POOL_MAX_OVERFLOW: int = 20

# ==============================================================================
# CONTACTS
# ==============================================================================

CONTACT_STATUS_PENDING: str = "PENDING"
CONTACT_STATUS_ACCEPTED: str = "ACCEPTED"

# ==============================================================================
# HANGOUT LISTING
# ==============================================================================

HANGOUTS_DEFAULT_PAGE_SIZE: int = 25
HANGOUTS_MAX_PAGE_SIZE: int = 100

# ==============================================================================
# INTERESTS
# ==============================================================================

# Default interest tags installed by scripts/seed_interests.py
DEFAULT_INTERESTS: tuple = (
    ("Outdoors", "Hiking, camping, nature"),
    ("Gaming", "Video games and board games"),
    ("Music", "Concerts, jam sessions"),
    ("Food", "Dining out, cooking"),
    ("Tech", "Meetups, hack nights"),
    ("Fitness", "Gym, running, yoga"),
)
