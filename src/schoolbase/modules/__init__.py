"""
Feature modules.

Importing this package registers every ORM model so string relationships
resolve regardless of which module is imported first.
"""

from schoolbase.modules.schools.models import School
from schoolbase.modules.students.models import Guardian, Student
from schoolbase.modules.users.models import UserProfile

__all__ = ["Guardian", "School", "Student", "UserProfile"]
