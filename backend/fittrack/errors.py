# fittrack/errors.py
"""
Domain error taxonomy.

Services raise these; `fittrack.main` renders them as
`{"detail": message, "kind": kind}` with the matching status code.
"""
from __future__ import annotations


class DomainError(Exception):
    kind = "error"
    status_code = 500

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    default_message = "Internal error"


class NotFound(DomainError):
    """Entity absent, or owned by someone else (the two are never distinguished)."""
    kind = "not_found"
    status_code = 404
    default_message = "Not found"


class DuplicateIdentity(DomainError):
    kind = "duplicate_identity"
    status_code = 400
    default_message = "Username or email already exists"


class InvalidCredentials(DomainError):
    kind = "invalid_credentials"
    status_code = 401
    default_message = "Invalid email or password"


class AccountDisabled(DomainError):
    kind = "account_disabled"
    status_code = 403
    default_message = "Account is deactivated"


class ValidationError(DomainError):
    kind = "validation_error"
    status_code = 422
    default_message = "Invalid input"


class DependencyUnavailable(DomainError):
    """The database could not be reached. The only kind worth retrying."""
    kind = "dependency_unavailable"
    status_code = 503
    default_message = "Database unavailable"
