"""Authentication module - the caller's own profile."""

from schoolbase.modules.auth.router import router
from schoolbase.modules.auth.schemas import ProfileResponse, ProfileUpdate

__all__ = ["router", "ProfileResponse", "ProfileUpdate"]
