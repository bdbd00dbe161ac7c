"""Auth domain models."""

from .admin import Admin
from .caller import CallerContext
from .identity import Anonymous, Identity
from .token import RevokedToken
from .value import AdminId, IssuedToken

__all__ = [
    "Admin",
    "AdminId",
    "Anonymous",
    "CallerContext",
    "Identity",
    "IssuedToken",
    "RevokedToken",
]
