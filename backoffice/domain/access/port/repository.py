"""Repository ports for the access domain."""

from abc import abstractmethod
from typing import Protocol

from backoffice.domain.access.model.grant import RoleMenuGrant
from backoffice.domain.access.model.role import Menu, Role
from backoffice.domain.access.model.value import RoleId
from backoffice.domain.shared.port import Port


class RoleRepository(Port, Protocol):
    """Flat storage of the role hierarchy."""

    @abstractmethod
    async def get(self, role_id: RoleId) -> Role | None:
        """Get a role by ID."""
        ...

    @abstractmethod
    async def list_all(self) -> list[Role]:
        """Get every role, in no particular order."""
        ...


class MenuRepository(Port, Protocol):
    """Flat storage of the menu hierarchy."""

    @abstractmethod
    async def list_all(self) -> list[Menu]:
        """Get every menu, in no particular order."""
        ...


class RoleMenuGrantRepository(Port, Protocol):
    """Role-to-menu permission index."""

    @abstractmethod
    async def list_by_role(self, role_id: RoleId) -> list[RoleMenuGrant]:
        """Get all grants of a role. Unknown roles have none."""
        ...
