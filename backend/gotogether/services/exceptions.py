"""
Service Exceptions

Domain errors raised by the service layer. Routers translate them into
HTTP responses; nothing here knows about HTTP.
"""


class GoTogetherError(Exception):
    """Base exception for service errors"""
    pass


class ValidationError(GoTogetherError):
    """Raised when input is missing or self-referential"""
    pass


class NotFoundError(GoTogetherError):
    """Raised when a user, edge, category, interest or hangout is missing"""
    pass


class ConflictError(GoTogetherError):
    """Raised when a uniqueness rule would be broken"""
    pass


class DuplicateKeyError(ConflictError):
    """Raised by repositories when the store rejects a duplicate key"""
    pass


class DuplicateRequestError(ConflictError):
    """Raised when a contact edge already exists for the ordered pair"""
    pass


class AlreadyAcceptedError(GoTogetherError):
    """Raised when accepting a request that is already ACCEPTED"""
    pass


class EdgeNotFoundError(NotFoundError):
    """Raised by the contact repository when an edge is absent"""
    pass


class IdentityError(GoTogetherError):
    """Raised when a bearer token cannot be verified"""
    pass
