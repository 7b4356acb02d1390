"""Errors raised by domain services.

The API maps each class to one HTTP status in
``acadly.interface.api.errors``; the message of the first four is safe
to show to the client as-is.
"""


class DomainError(Exception):
    """Root of every error the domain raises on purpose."""


class ValidationError(DomainError):
    """Input that passed the schema but breaks a domain rule."""


class ConflictError(DomainError):
    """The write would duplicate something unique, such as an email."""


class AuthenticationError(DomainError):
    """No session, a bad session, or bad credentials."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class NotFoundError(DomainError):
    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"No {resource.lower()} with id {identifier}")


class NotAuthorizedError(DomainError):
    """The actor's role lacks the capability the operation needs.

    The client only sees a generic message; the details are for logs.
    """

    def __init__(self, capability: str, profile_id: str, role: str):
        self.capability = capability
        self.profile_id = profile_id
        self.role = role
        super().__init__(f"{role} {profile_id} lacks {capability}")
