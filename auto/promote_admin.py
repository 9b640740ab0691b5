#!/usr/bin/env python3
"""
Promote Admin Script.

Sets ``role="admin"`` on an existing user, identified by e-mail. Users
are created when they first sign in through the front end (``POST
/users``), so run this after the first admin has signed in once.

Usage:
    uv run python auto/promote_admin.py --email admin@example.com
    uv run python auto/promote_admin.py --email old-admin@example.com --demote

Environment Variables:
    ADMIN_EMAIL: E-mail to promote when --email is omitted
    DATABASE_URL: Database to connect to (same as the API)
"""

from argparse import ArgumentParser, Namespace, RawDescriptionHelpFormatter
from asyncio import run as asyncio_run
from os import environ
from pathlib import Path
from sys import exit as sys_exit
from sys import path as sys_path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys_path.insert(0, str(project_root))

from blog_api.db import close_db, create_engine, create_session_maker, transaction  # noqa: E402
from blog_api.errors import RecordNotFoundError  # noqa: E402
from blog_api.models import Role, UserDB  # noqa: E402
from blog_api.repositories import UserRepository  # noqa: E402


async def set_role(email: str, role: Role) -> UserDB:
    """
    Set the role of the user registered under ``email``.

    Parameters
    ----------
    email : str
        E-mail of an existing user.
    role : Role
        Role to assign.

    Returns
    -------
    UserDB
        The updated user.

    Raises
    ------
    RecordNotFoundError
        If no user has that e-mail.
    """
    engine = create_engine()
    try:
        async with transaction(create_session_maker(engine)) as session:
            repo = UserRepository(session)
            user = await repo.get_by_email(email)
            if user is None:
                msg = f"No user with email '{email}'. Sign in through the front end first."
                raise RecordNotFoundError(msg)
            return await repo.set_role(user.id, role)
    finally:
        await close_db(engine)


def parse_args() -> Namespace:
    parser = ArgumentParser(
        description="Grant or revoke the admin role for an existing user.",
        formatter_class=RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--email",
        default=environ.get("ADMIN_EMAIL"),
        help="E-mail of the user (default: $ADMIN_EMAIL)",
    )
    parser.add_argument(
        "--demote",
        action="store_true",
        help="Set the role back to 'user' instead of promoting",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    if not args.email:
        print("❌ An e-mail is required (--email or ADMIN_EMAIL).")
        return 2

    role = Role.USER if args.demote else Role.ADMIN
    try:
        user = asyncio_run(set_role(args.email, role))
    except RecordNotFoundError as e:
        print(f"❌ {e}")
        return 1

    print(f"✅ {user.email} is now '{user.role}'")
    print(f"   ID:  {user.id}")
    print(f"   UID: {user.uid or '-'}")
    return 0


if __name__ == "__main__":
    sys_exit(main())
