"""Profile domain models."""

from .config import AdminConfig
from .profile import AdminProfile

__all__ = ["AdminConfig", "AdminProfile"]
