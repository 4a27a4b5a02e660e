"""
Print a bcrypt hash for a password, to be stored in usuarios.password_hash.
Run from project root:
  python -m app.scripts.hash_password PASSWORD [--rounds N]
Nothing is written to the database.
"""
import argparse
import sys

from app.core.config import get_settings
from app.core.security import hash_password


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Hash a password for the usuarios table.")
    parser.add_argument("password", help="Plain-text password")
    parser.add_argument(
        "--rounds",
        type=int,
        default=None,
        help="bcrypt cost (4-31); defaults to BCRYPT_ROUNDS",
    )
    args = parser.parse_args(argv)

    if not args.password:
        print("Password must not be empty.", file=sys.stderr)
        return 1
    rounds = args.rounds if args.rounds is not None else get_settings().BCRYPT_ROUNDS
    if rounds < 4 or rounds > 31:
        print("Rounds must be between 4 and 31.", file=sys.stderr)
        return 1

    print(hash_password(args.password, rounds=rounds))
    return 0


if __name__ == "__main__":
    sys.exit(main())
