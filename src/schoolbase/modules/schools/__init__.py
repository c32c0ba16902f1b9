"""
Schools module - School tenant management.
"""

from schoolbase.modules.schools.models import School
from schoolbase.modules.schools.repository import SchoolRepository

__all__ = ["School", "SchoolRepository"]
