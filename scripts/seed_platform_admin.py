"""
Seed Platform Admin Profile

Gives an existing identity-provider user the SuperAdmin role. The user must
already exist in the auth service (invite them from the dashboard first);
this script only creates the matching user_profiles row.

Usage:
    pip install -e .
    python scripts/seed_platform_admin.py <auth-user-uuid> ["Full Name"]
"""

import asyncio
import sys

from schoolbase.core.database import async_session_maker, close_db
from schoolbase.core.roles import UserRole
from schoolbase.modules import School  # noqa: F401 - needed for relationship resolution
from schoolbase.modules.users.repository import UserProfileRepository


async def seed_platform_admin(user_id: str, full_name: str | None = None) -> None:
    """Create a SuperAdmin profile for ``user_id`` if it doesn't exist."""
    async with async_session_maker() as db:
        existing = await UserProfileRepository.get_by_user_id(db, user_id)

        if existing:
            print(f"Profile already exists for user: {user_id}")
            print(f"  ID: {existing.id}")
            print(f"  Role: {existing.role.value}")
            return

        profile = await UserProfileRepository.create(
            db,
            user_id=user_id,
            role=UserRole.SUPER_ADMIN,
            school_id=None,  # Platform roles have no school
            full_name=full_name,
        )
        await db.commit()

        print("Platform admin profile created successfully!")
        print(f"  User ID: {user_id}")
        print(f"  Name: {full_name or '-'}")
        print(f"  ID: {profile.id}")
        print(f"  Role: {profile.role.value}")

    await close_db()


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    asyncio.run(seed_platform_admin(sys.argv[1], sys.argv[2] if len(sys.argv) > 2 else None))
