"""Exceptions raised by services and translated to HTTP errors by the API."""

from __future__ import annotations


class RecordNotFoundError(LookupError):
    """Raised when a referenced record does not exist.

    Attributes:
        kind: Human readable record kind, e.g. "Project" or "Fix".
        record_id: Identifier that was looked up.
    """

    def __init__(self, kind: str, record_id: int | str) -> None:
        super().__init__(f"{kind} not found")
        self.kind = kind
        self.record_id = record_id


class InvalidActionError(ValueError):
    """Raised when an action request is missing required input."""
