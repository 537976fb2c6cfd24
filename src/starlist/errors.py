"""Exception hierarchy for Starlist."""

from __future__ import annotations


class StarlistError(Exception):
    """Base exception."""


class NotFoundError(StarlistError):
    """Requested starred entry or referenced restaurant does not exist."""

    def __init__(self, kind: str, item_id: object) -> None:
        super().__init__(f"{kind} not found: {item_id}")
        self.kind = kind
        self.item_id = item_id


class StoreError(StarlistError):
    """The backing store reported an error.

    ``payload`` is the raw error mapping as the store returned it.
    """

    def __init__(self, payload: dict) -> None:
        super().__init__(payload.get("message") or "Store operation failed")
        self.payload = payload


class ConfigError(StarlistError):
    """Invalid configuration."""
