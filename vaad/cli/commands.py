"""
CLI management commands.

Usage:
    python -m vaad.cli.commands hash-password
    python -m vaad.cli.commands generate-secret
    python -m vaad.cli.commands init-db
"""
from __future__ import annotations

import argparse
import getpass
import logging
import secrets
import sys

from vaad.auth.config import MIN_SECRET_KEY_LENGTH
from vaad.auth.passwords import BCRYPT_ROUNDS, hash_password
from vaad.utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def cmd_hash_password(password: str | None, rounds: int) -> None:
    """Print a bcrypt hash suitable for ADMIN_PASSWORD_HASH."""
    if password is None:
        password = getpass.getpass("Admin password: ")
        confirm = getpass.getpass("Repeat password: ")
        if password != confirm:
            logger.error("Passwords do not match")
            sys.exit(1)

    if not password:
        logger.error("Password must not be empty")
        sys.exit(1)

    try:
        hashed = hash_password(password, rounds=rounds)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    print(hashed)


def cmd_generate_secret() -> None:
    """Print a random signing key suitable for JWT_SECRET_KEY."""
    print(secrets.token_urlsafe(MIN_SECRET_KEY_LENGTH))


def cmd_init_db() -> None:
    """Create all tables in the configured database."""
    from vaad.db.database import engine
    from vaad.models import Base

    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")


def main(argv: list[str] | None = None) -> None:
    """Main CLI entrypoint."""
    setup_logging("vaad", level=logging.INFO)

    parser = argparse.ArgumentParser(
        description="Va'ad Horim management commands",
        prog="python -m vaad.cli.commands"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    hash_parser = subparsers.add_parser(
        "hash-password",
        help="Hash the admin password for ADMIN_PASSWORD_HASH"
    )
    hash_parser.add_argument(
        "--password",
        help="Password to hash (prompted for when omitted)"
    )
    hash_parser.add_argument(
        "--rounds",
        type=int,
        default=BCRYPT_ROUNDS,
        help=f"bcrypt cost factor (default: {BCRYPT_ROUNDS})"
    )

    subparsers.add_parser(
        "generate-secret",
        help="Generate a random JWT_SECRET_KEY"
    )

    subparsers.add_parser(
        "init-db",
        help="Create database tables"
    )

    args = parser.parse_args(argv)

    if args.command == "hash-password":
        cmd_hash_password(args.password, args.rounds)
    elif args.command == "generate-secret":
        cmd_generate_secret()
    elif args.command == "init-db":
        cmd_init_db()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
