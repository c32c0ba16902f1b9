"""
User Profile Models

Identity lives in the managed auth service; this table holds the
application-side profile that decides a user's role and school.
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.dialects.postgresql import ENUM, UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from schoolbase.core.roles import UserRole
from schoolbase.modules.shared import BaseModel

if TYPE_CHECKING:
    from schoolbase.modules.schools.models import School


class UserProfile(BaseModel):
    """
    Profile row for an identity-provider user.

    Multi-tenant: school_id is NULL for platform roles (SuperAdmin,
    AppManager_*) and set for every school role.
    """

    __tablename__ = "user_profiles"

    # Identity-provider user id (auth.users.id)
    user_id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        unique=True,
        index=True,
        nullable=False,
    )

    # ON DELETE SET NULL: profiles survive school deletion without a tenant
    school_id: Mapped[str | None] = mapped_column(
        UUID(as_uuid=False),
        ForeignKey("schools.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    role: Mapped[UserRole] = mapped_column(
        ENUM(
            UserRole,
            name="user_role",
            create_type=False,
            values_callable=lambda roles: [r.value for r in roles],
        ),
        nullable=False,
    )

    # Profile fields
    full_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    profile_photo_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    school: Mapped["School | None"] = relationship(
        "School",
        back_populates="user_profiles",
        lazy="noload",
    )

    def __repr__(self) -> str:
        return f"<UserProfile(user_id={self.user_id}, role={self.role.value})>"
