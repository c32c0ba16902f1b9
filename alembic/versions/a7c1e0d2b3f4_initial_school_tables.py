"""initial school tables

Revision ID: a7c1e0d2b3f4
Revises:
Create Date: 2026-10-19 09:00:00.000000

This migration:
1. Creates the user_role enum type
2. Creates the schools table (tenants)
3. Creates students and guardians, cascading from schools
4. Creates user_profiles keyed by the identity-provider user id
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "a7c1e0d2b3f4"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

USER_ROLES = (
    "SuperAdmin",
    "AppManager_Management",
    "AppManager_Sales",
    "AppManager_Finance",
    "AppManager_Support",
    "SchoolAdmin",
    "SchoolDataEditor",
    "SchoolFinanceManager",
    "ClassTeacher",
    "Teacher",
    "Parent",
    "Subscriber",
    "Student_User",
)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create the tenant, student and profile tables."""
    user_role_enum = postgresql.ENUM(*USER_ROLES, name="user_role", create_type=False)
    user_role_enum.create(op.get_bind(), checkfirst=True)

    op.create_table(
        "schools",
        sa.Column("id", postgresql.UUID(as_uuid=False), nullable=False),
        *_timestamps(),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("subdomain", sa.String(length=63), nullable=False),
        sa.Column("admin_email", sa.String(length=255), nullable=False),
        # Subscription
        sa.Column("package", sa.String(length=50), nullable=False),
        sa.Column("status", sa.String(length=50), nullable=False),
        sa.Column("student_limit", sa.Integer(), nullable=False),
        sa.Column("teacher_limit", sa.Integer(), nullable=False),
        sa.Column("admin_limit", sa.Integer(), nullable=False),
        # Settings
        sa.Column(
            "branding_settings",
            postgresql.JSONB(astext_type=sa.Text()),
            server_default=sa.text("'{}'::jsonb"),
            nullable=False,
        ),
        sa.Column(
            "module_settings",
            postgresql.JSONB(astext_type=sa.Text()),
            server_default=sa.text("'{}'::jsonb"),
            nullable=False,
        ),
        # Locale and academic calendar
        sa.Column("timezone", sa.String(length=64), nullable=False),
        sa.Column("currency_code", sa.String(length=3), nullable=False),
        sa.Column("academic_year_start", sa.DateTime(timezone=True), nullable=True),
        sa.Column("academic_year_end", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_schools_name"), "schools", ["name"], unique=False)
    op.create_index(op.f("ix_schools_subdomain"), "schools", ["subdomain"], unique=True)

    op.create_table(
        "students",
        sa.Column("id", postgresql.UUID(as_uuid=False), nullable=False),
        *_timestamps(),
        sa.Column("school_id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("class_name", sa.String(length=100), nullable=True),
        sa.Column("profile_photo_url", sa.Text(), nullable=True),
        sa.Column("allergies", postgresql.ARRAY(sa.Text()), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["school_id"], ["schools.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_students_school_id"), "students", ["school_id"], unique=False)

    op.create_table(
        "guardians",
        sa.Column("id", postgresql.UUID(as_uuid=False), nullable=False),
        *_timestamps(),
        sa.Column("student_id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("relation", sa.String(length=50), nullable=True),
        sa.Column("phone_number", sa.String(length=20), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("profile_photo_url", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["student_id"], ["students.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_guardians_student_id"), "guardians", ["student_id"], unique=False)

    op.create_table(
        "user_profiles",
        sa.Column("id", postgresql.UUID(as_uuid=False), nullable=False),
        *_timestamps(),
        sa.Column("user_id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("school_id", postgresql.UUID(as_uuid=False), nullable=True),
        sa.Column("role", user_role_enum, nullable=False),
        sa.Column("full_name", sa.String(length=200), nullable=True),
        sa.Column("phone_number", sa.String(length=20), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("profile_photo_url", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["school_id"], ["schools.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_user_profiles_user_id"), "user_profiles", ["user_id"], unique=True)
    op.create_index(
        op.f("ix_user_profiles_school_id"), "user_profiles", ["school_id"], unique=False
    )


def downgrade() -> None:
    """Drop all tables and the user_role enum."""
    op.drop_index(op.f("ix_user_profiles_school_id"), table_name="user_profiles")
    op.drop_index(op.f("ix_user_profiles_user_id"), table_name="user_profiles")
    op.drop_table("user_profiles")

    op.drop_index(op.f("ix_guardians_student_id"), table_name="guardians")
    op.drop_table("guardians")

    op.drop_index(op.f("ix_students_school_id"), table_name="students")
    op.drop_table("students")

    op.drop_index(op.f("ix_schools_subdomain"), table_name="schools")
    op.drop_index(op.f("ix_schools_name"), table_name="schools")
    op.drop_table("schools")

    postgresql.ENUM(name="user_role").drop(op.get_bind(), checkfirst=True)
