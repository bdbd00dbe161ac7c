"""Value objects for the access domain."""

from dataclasses import dataclass
from enum import StrEnum

from backoffice.domain.shared.model.value import IntId


class RoleId(IntId):
    """Unique identifier for a Role."""


class MenuId(IntId):
    """Unique identifier for a Menu."""


class MenuType(StrEnum):
    """How a menu entry is rendered by the UI."""

    GROUP = "GROUP"
    PAGE = "PAGE"
    NEW_TAB = "NEW_TAB"
    W_POPUP = "W_POPUP"


@dataclass(frozen=True)
class MenuAuthority:
    """An authority code attached to a menu, with the action types it allows."""

    authority: str
    types: tuple[str, ...] = ()
    display_order: int = 0
