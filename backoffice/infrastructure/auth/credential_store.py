"""passlib-backed CredentialStore."""

import logging

from passlib.context import CryptContext

from backoffice.config import PasswordConfig
from backoffice.domain.auth.port.credential_store import CredentialStore

logger = logging.getLogger(__name__)


class PasslibCredentialStore(CredentialStore):
    """Hashes with the first configured scheme; verifies any configured one."""

    def __init__(self, config: PasswordConfig) -> None:
        self._context = CryptContext(
            schemes=config.schemes,
            deprecated="auto",
            pbkdf2_sha256__rounds=config.pbkdf2_rounds,
        )

    def hash(self, plaintext: str) -> str:
        return self._context.hash(plaintext)

    def verify(self, stored_hash: str, candidate: str) -> bool:
        try:
            return self._context.verify(candidate, stored_hash)
        except ValueError:
            logger.warning("Stored password hash is not in a configured scheme")
            return False

    def dummy_verify(self) -> None:
        self._context.dummy_verify()
