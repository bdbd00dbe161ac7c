"""Port for password hashing and verification."""

from abc import abstractmethod
from typing import Protocol

from backoffice.domain.shared.port import Port


class CredentialStore(Port, Protocol):
    """One-way password hashing."""

    @abstractmethod
    def hash(self, plaintext: str) -> str:
        """Hash a plaintext password for storage."""
        ...

    @abstractmethod
    def verify(self, stored_hash: str, candidate: str) -> bool:
        """Check a candidate password against a stored hash.

        Returns False, never raises, for a malformed or unknown hash.
        """
        ...

    @abstractmethod
    def dummy_verify(self) -> None:
        """Spend the time of one verification without checking anything.

        Called when there is no stored hash to check against, so an unknown
        login takes as long to reject as a wrong password.
        """
        ...
