"""
Student Models

Student records and their guardians. Every student belongs to exactly one
school; guardians inherit the school of their student.
"""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, String, Text
from sqlalchemy.dialects.postgresql import ARRAY, UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from schoolbase.modules.shared import BaseModel

if TYPE_CHECKING:
    from schoolbase.modules.schools.models import School


class Student(BaseModel):
    """
    Student record.

    school_id is set from the authenticated principal at creation and is
    never changed afterwards.
    """

    __tablename__ = "students"

    # ON DELETE CASCADE: deleting a school removes its students
    school_id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        ForeignKey("schools.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
    class_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    profile_photo_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    allergies: Mapped[list[str] | None] = mapped_column(ARRAY(Text), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    school: Mapped["School"] = relationship(
        "School",
        back_populates="students",
        lazy="noload",
    )
    guardians: Mapped[list["Guardian"]] = relationship(
        "Guardian",
        back_populates="student",
        lazy="noload",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Student(id={self.id}, school_id={self.school_id})>"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Guardian(BaseModel):
    """Parent or guardian contact for a student."""

    __tablename__ = "guardians"

    # ON DELETE CASCADE: guardians go with their student
    student_id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    relation: Mapped[str | None] = mapped_column(String(50), nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    profile_photo_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    student: Mapped["Student"] = relationship(
        "Student",
        back_populates="guardians",
        lazy="noload",
    )

    def __repr__(self) -> str:
        return f"<Guardian(id={self.id}, student_id={self.student_id})>"
