"""
School Models

Database models for school (tenant) management.
Each school is a tenant in the multi-tenant architecture.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship

from schoolbase.modules.shared import BaseModel

if TYPE_CHECKING:
    from schoolbase.modules.students.models import Student
    from schoolbase.modules.users.models import UserProfile


class School(BaseModel):
    """
    School tenant model.

    All school-scoped data (students, guardians, staff profiles) references
    this model via school_id. Created by platform staff.
    """

    __tablename__ = "schools"

    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    subdomain: Mapped[str] = mapped_column(String(63), nullable=False, unique=True, index=True)
    admin_email: Mapped[str] = mapped_column(String(255), nullable=False)

    # Subscription
    package: Mapped[str] = mapped_column(String(50), nullable=False, default="Basic")
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="Active")
    student_limit: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    teacher_limit: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    admin_limit: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Free-form settings objects
    branding_settings: Mapped[dict] = mapped_column(JSONB, nullable=False, default=dict)
    module_settings: Mapped[dict] = mapped_column(JSONB, nullable=False, default=dict)

    # Locale and academic calendar
    timezone: Mapped[str] = mapped_column(String(64), nullable=False, default="UTC")
    currency_code: Mapped[str] = mapped_column(String(3), nullable=False, default="USD")
    academic_year_start: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    academic_year_end: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    # Relationships
    students: Mapped[list["Student"]] = relationship(
        "Student",
        back_populates="school",
        lazy="noload",
        passive_deletes=True,
    )
    user_profiles: Mapped[list["UserProfile"]] = relationship(
        "UserProfile",
        back_populates="school",
        lazy="noload",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<School(id={self.id}, name={self.name}, status={self.status})>"
