"""Shared domain error messages and error types."""

INVALID_SCHEMA = "invalid schema"
INVALID_RECEIPT = "The receipt is invalid"
RECEIPT_NOT_FOUND = "No receipt found for that id"


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Submitted receipt failed structural validation."""


class NotFoundError(DomainError):
    """Requested receipt does not exist."""


class StorageError(RuntimeError):
    """Underlying persistence engine failed.

    Kept apart from DomainError: this is a server-side failure, not a
    problem with the caller's input.
    """


def receipt_not_found(receipt_id: str) -> str:
    """Return message for missing receipt."""
    return f"Receipt '{receipt_id}' not found"
