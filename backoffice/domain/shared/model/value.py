"""Shared value objects."""

from typing import Any

from pydantic import RootModel


class IntId(RootModel[int]):
    """Integer identifier assigned by the database.

    Orderable so that hierarchy siblings can be sorted by ``(display_order, id)``.
    """

    def __str__(self) -> str:
        return str(self.root)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.root))

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, IntId):
            return NotImplemented
        return self.root < other.root
