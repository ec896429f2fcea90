"""
Change a user's role out of band.

Usage:
    python scripts/promote_user.py <email> [user|admin]

Tokens already issued keep their old role until they expire; the user has
to log in again to receive a token with the new role.
"""

import argparse
import asyncio
import sys

from dotenv import load_dotenv

load_dotenv()

from motor.motor_asyncio import AsyncIOMotorClient  # noqa: E402

from app.core.config import config  # noqa: E402
from app.db.mongodb import USERS_COLLECTION  # noqa: E402
from app.models.user import Role  # noqa: E402
from app.repositories.user import UserRepository  # noqa: E402


async def promote(email: str, role: Role) -> int:
    client = AsyncIOMotorClient(config.mongodb_url)
    try:
        users = UserRepository(client[config.mongodb_database][USERS_COLLECTION])
        user = await users.set_role(email.strip(), role)
    finally:
        client.close()

    if user is None:
        print(f"No user with email {email}")
        return 1
    print(f"{user.email} now has role '{user.role.value}'")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Change a user's role")
    parser.add_argument("email")
    parser.add_argument("role", nargs="?", default=Role.ADMIN.value, choices=[r.value for r in Role])
    args = parser.parse_args(argv)
    return asyncio.run(promote(args.email, Role(args.role)))


if __name__ == "__main__":
    sys.exit(main())
