#!/usr/bin/env python3
"""
Create (or promote) the bootstrap admin account.

Defaults come from BOOTSTRAP_ADMIN_EMAIL / BOOTSTRAP_ADMIN_PASSWORD /
BOOTSTRAP_ADMIN_NAME. An existing account with that email is promoted to
admin and reactivated; its password is only replaced with --reset-password.

Usage:
    python scripts/create_admin.py
    python scripts/create_admin.py --email admin@example.com --password s3cret
    python scripts/create_admin.py --reset-password
"""

import asyncio
import sys
import argparse
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.core.config import settings  # noqa: E402
from app.core.database import session_scope, init_db, close_db  # noqa: E402
from app.core.security import get_password_hash  # noqa: E402
from app.models.user import UserRole  # noqa: E402
from app.services.user_service import user_service  # noqa: E402


async def create_admin(email: str, password: str, name: str, reset_password: bool = False) -> int:
    await init_db()

    async with session_scope() as db:
        existing = await user_service.get_by_email(db, email)

        if existing:
            existing.role = UserRole.ADMIN.value
            existing.is_active = True
            if reset_password:
                existing.hashed_password = get_password_hash(password)
            await db.commit()
            print(f"[CreateAdmin] Promoted existing user to admin: {existing.email}")
        else:
            user = await user_service.create_user(
                db,
                name=name,
                email=email,
                password=password,
                role=UserRole.ADMIN,
            )
            print(f"[CreateAdmin] Created admin user: {user.email}")

    await close_db()
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Create or promote the admin account")
    parser.add_argument("--email", default=settings.BOOTSTRAP_ADMIN_EMAIL)
    parser.add_argument("--password", default=settings.BOOTSTRAP_ADMIN_PASSWORD)
    parser.add_argument("--name", default=settings.BOOTSTRAP_ADMIN_NAME)
    parser.add_argument("--reset-password", action="store_true", help="Overwrite the password of an existing account")
    args = parser.parse_args()

    if not args.password:
        print("[CreateAdmin] ERROR: set BOOTSTRAP_ADMIN_PASSWORD or pass --password")
        return 1

    return asyncio.run(create_admin(args.email, args.password, args.name, args.reset_password))


if __name__ == "__main__":
    sys.exit(main())
