"""
Domain exceptions raised by the service layer.

Every error a service raises derives from AppError and carries the HTTP
status the API layer answers with. Routers never catch these; the handler
registered in app.main renders them.
"""


class AppError(Exception):
    """Base class for all application errors."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Malformed or out-of-range input."""
    status_code = 400


class AuthenticationError(AppError):
    """Credentials did not establish an identity."""
    status_code = 401


class AuthorizationError(AppError):
    """Identity is known but the action is forbidden."""
    status_code = 403


class NotFoundError(AppError):
    """Referenced entity does not exist."""
    status_code = 404


class ConflictError(AppError):
    """Uniqueness violation."""
    status_code = 409


class StorageInvariantError(AppError):
    """The store acknowledged a write that it cannot confirm."""
    status_code = 500


class CollaborationUnavailableError(AppError):
    """The collaboration lookup failed for infrastructure reasons."""
    status_code = 503
