class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidDateError(ValidationError):
    """Raised when a record date cannot be parsed as YYYY-MM-DD."""

    def __init__(self, value):
        super().__init__(f"Invalid date: {value!r} (expected YYYY-MM-DD)")
        self.value = value


class NotFoundError(DomainError):
    """Raised when update/delete/get targets an id missing from its collection."""

    def __init__(self, kind, record_id: str):
        label = getattr(kind, "value", kind)
        super().__init__(f"{label} record {record_id!r} not found")
        self.kind = kind
        self.record_id = record_id


class IdentityCollisionError(DomainError):
    """Raised when a store is asked to insert an id it already holds.

    This is an invariant violation, never a user error.
    """


class SessionClosedError(DomainError):
    """Raised when submitting an edit session that is not open."""
