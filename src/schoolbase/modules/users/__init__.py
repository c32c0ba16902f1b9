"""
Users module - User profiles (role and school of each identity).
"""

from schoolbase.modules.users.models import UserProfile
from schoolbase.modules.users.repository import UserProfileRepository

__all__ = ["UserProfile", "UserProfileRepository"]
