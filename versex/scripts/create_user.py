"""
Create a user (e.g. the first admin). Run from project root:
  python -m versex.scripts.create_user USERNAME EMAIL PASSWORD [role]
Example:
  python -m versex.scripts.create_user admin admin@home.lan your-secure-password Admin
"""
import argparse
import sys

from pydantic import ValidationError

from versex.core.database import SessionLocal
from versex.schemas.users import NewUserRequest
from versex.services.errors import ServiceError
from versex.services.users import create_user


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Versex dashboard user.")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("email", help="E-mail address")
    parser.add_argument("password", help="Password (8-128 chars)")
    parser.add_argument("role", nargs="?", default="User", choices=["User", "Admin"])
    parser.add_argument("--first-name", default="")
    parser.add_argument("--last-name", default="")
    args = parser.parse_args(argv)

    try:
        req = NewUserRequest(
            username=args.username.strip(),
            email=args.email,
            password=args.password,
            first_name=args.first_name,
            last_name=args.last_name,
            roles=[args.role],
        )
    except ValidationError as e:
        print(f"Invalid user: {e}", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        user = create_user(db, req)
        print(f"Created user '{user.username}' with role '{args.role}'.")
        return 0
    except ServiceError as e:
        print(f"Could not create user: {e.message}", file=sys.stderr)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
