"""Domain error types for the Webeze backend.

Services raise these instead of HTTP exceptions. Each error carries the HTTP
status it maps to, and the server's exception handlers turn it into a JSON
``{"detail": ...}`` response.
"""

from __future__ import annotations


class WebezeError(Exception):
    """Base error for all Webeze domain exceptions."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(WebezeError):
    """Raised when a requested resource does not exist or is not visible to the caller."""

    status_code = 404

    def __init__(self, resource: str, identifier: object) -> None:
        super().__init__(f"{resource} {identifier} not found")
        self.resource = resource
        self.identifier = identifier


class ConflictError(WebezeError):
    """Raised when a write would violate a uniqueness rule."""

    status_code = 409


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when registering an email that already has an account."""

    def __init__(self) -> None:
        super().__init__("Email is already registered")


class SubDomainTakenError(ConflictError):
    """Raised when a company sub-domain is already in use."""

    def __init__(self, sub_domain: str) -> None:
        super().__init__(f"Sub-domain '{sub_domain}' is already taken")
        self.sub_domain = sub_domain


class AuthenticationError(WebezeError):
    """Raised when credentials or access tokens are missing or invalid."""

    status_code = 401


class PermissionDeniedError(WebezeError):
    """Raised when an authenticated user may not perform an operation."""

    status_code = 403
