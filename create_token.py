"""Print a long-lived bearer token for a dashboard user.

Usage:
    python create_token.py [email] [--days N]

The e-mail must belong to an account in the running server's store
(the seeded admin by default), and ``SECRET_KEY`` must match the
server's.
"""
import argparse

from youth_ministry_api.app.core.security import create_access_token


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("email", nargs="?", default="admin@youthblossom.org")
    parser.add_argument("--days", type=int, default=365, help="token lifetime in days")
    args = parser.parse_args()
    print(create_access_token({"sub": args.email}, expires_in=args.days * 24 * 60 * 60))


if __name__ == "__main__":
    main()
