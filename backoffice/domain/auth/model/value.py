"""Value objects for the auth domain."""

from dataclasses import dataclass
from datetime import datetime

from backoffice.domain.shared.model.value import IntId


class AdminId(IntId):
    """Unique identifier for an Admin."""


@dataclass(frozen=True)
class IssuedToken:
    """An access token as handed to the client, with its identifying claims."""

    raw: str
    token_id: str  # JWT "jti"
    expires_at: datetime
