"""Create a login account. Users are never created through the HTTP API.

Usage: python scripts/create_user.py NAME EMAIL [ROLE]

ROLE defaults to Staff; use Admin for administrators.
"""

import getpass
import sys
import os

# Add parent dir to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from eventplanner.config import get_settings
from eventplanner.application.services.auth_service import create_user
from eventplanner.domain.models.user import User
from eventplanner.infrastructure.database import Database
from eventplanner.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


def main(argv: list[str]) -> int:
    if len(argv) not in (2, 3):
        print(__doc__)
        return 2
    name, email = argv[0], argv[1]
    role = argv[2] if len(argv) == 3 else "Staff"

    password = getpass.getpass("Password: ")
    if not password or password != getpass.getpass("Repeat password: "):
        print("Passwords are empty or do not match.")
        return 1

    database = Database(get_settings().DATABASE_URL)
    database.create_all()
    db = database.session()
    try:
        repo = SQLAlchemyUserRepository(db, User)
        if repo.get_by_email(email):
            print(f"A user with email {email} already exists.")
            return 1
        user = create_user(repo, name=name, email=email, password=password, role=role)
        print(f"Created user #{user.id} {user.email} ({user.role})")
    finally:
        db.close()
        database.dispose()
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
