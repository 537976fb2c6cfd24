"""The starred-list service interface shared by every backend."""

from __future__ import annotations

from abc import ABC, abstractmethod


class StarredStore(ABC):
    """Five operations over the owned starred entries, plus catalog reads.

    Records returned by the starred operations are already joined with their
    restaurant and flattened (see ``starlist.flatten``). Entries whose
    restaurant can no longer be resolved are left out of ``list_starred`` and
    are reported as missing by ``get_starred``.
    """

    backend_name: str = ""

    @abstractmethod
    async def list_starred(self) -> list[dict]:
        """All starred entries in insertion order."""

    @abstractmethod
    async def get_starred(self, starred_id: str) -> dict:
        """One starred entry. Raises NotFoundError."""

    @abstractmethod
    async def add_starred(self, restaurant_id: str, comment: str | None = None) -> dict:
        """Star a restaurant and return the new record.

        ``comment`` is accepted for compatibility and ignored: new entries
        always start with a null comment. Raises NotFoundError if the
        restaurant does not exist, StoreError if the insert fails.
        """

    @abstractmethod
    async def delete_starred(self, starred_id: str) -> None:
        """Raises NotFoundError or StoreError."""

    @abstractmethod
    async def update_comment(self, starred_id: str, new_comment: str | None) -> None:
        """Raises NotFoundError or StoreError."""

    @abstractmethod
    async def list_restaurants(self) -> list[dict]:
        """The full restaurant catalog."""

    @abstractmethod
    async def get_restaurant(self, restaurant_id: str) -> dict | None:
        """A catalog entry by id, or None."""

    async def close(self) -> None:
        """Release backend resources. No-op by default."""
