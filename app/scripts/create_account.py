"""Create a FinSight account (user + workspace) from the command line.

Usage:
    python -m app.scripts.create_account --email admin@example.com --password <password> --workspace Acme
"""

from __future__ import annotations

import argparse
import sys

from app.db.session import SessionLocal
from app.exceptions import DuplicateEmailError, FinSightError, ValidationError
from app.services.signup import signup


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a FinSight account")
    parser.add_argument("--email", required=True, help="Email for the new user")
    parser.add_argument("--password", required=True, help="Password for the new user")
    parser.add_argument("--workspace", required=True, help="Name of the user's first workspace")
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        result = signup(db, args.email, args.password, args.workspace)
    except (ValidationError, DuplicateEmailError) as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1
    except FinSightError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 2
    else:
        print(
            f"User '{result.user.email}' created successfully (id={result.user.id}, "
            f"workspace id={result.workspace.id})."
        )
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
