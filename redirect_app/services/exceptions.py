"""Exceptions raised by the redirect service layer.

Expected outcomes (invalid input, unknown alias, duplicate alias) each have
their own type so callers can react to them. Anything else that goes wrong
in the storage backend is wrapped in StorageFailure.
"""

from typing import List


class RedirectError(Exception):
    """Base exception for all redirect service errors."""
    pass


class ValidationFailed(RedirectError):
    """A caller-supplied alias or url violated one or more rules."""

    def __init__(self, field: str, messages: List[str]):
        self.field = field
        self.messages = list(messages)
        formatted = ", ".join(f"[{m}]" for m in self.messages)
        super().__init__(f"Validation error in {field}: {formatted}")


class NotFound(RedirectError):
    """No redirect exists for the alias."""

    def __init__(self, alias: str):
        self.alias = alias
        super().__init__(f"Redirect '{alias}' not found")


class Conflict(RedirectError):
    """A redirect with this alias already exists."""

    def __init__(self, alias: str):
        self.alias = alias
        super().__init__(f"Redirect '{alias}' already exists")


class StorageFailure(RedirectError):
    """The storage backend failed. detail is for logs, not for clients."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Database error: {detail}")
