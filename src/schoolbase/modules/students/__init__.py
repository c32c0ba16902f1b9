"""
Students module - Tenant-scoped student records and guardians.
"""

from schoolbase.modules.students.models import Guardian, Student
from schoolbase.modules.students.repository import GuardianRepository, StudentRepository

__all__ = ["Guardian", "GuardianRepository", "Student", "StudentRepository"]
