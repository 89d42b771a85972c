# catalog/cli.py
"""
Management commands: ``catalog init-db``, ``catalog seed``, ``catalog issue-token``.
"""

import argparse
import logging
import sys
from typing import List, Optional

from catalog.core.config import settings
from catalog.core.database import SessionLocal, init_db
from catalog.core.security import issue_token
from catalog.database.seeders import seed_database
from catalog.models.user import User

logger = logging.getLogger("catalog.cli")


def _init_db(args: argparse.Namespace) -> int:
    init_db()
    logger.info("Tables created")
    return 0


def _seed(args: argparse.Namespace) -> int:
    result = seed_database(
        supplier_count=args.suppliers,
        product_count=args.products,
        seed=args.seed,
    )
    print(f"Seeded {len(result.supplier_ids)} suppliers and {len(result.product_ids)} products")
    return 0


def _issue_token(args: argparse.Namespace) -> int:
    init_db()
    db = SessionLocal()
    try:
        user = db.query(User).filter(User.email == args.email).first()
        if user is None:
            user = User(name=args.name or args.email.split("@")[0], email=args.email)
            db.add(user)
            db.commit()
            db.refresh(user)
            logger.info(f"Created user {user.id} <{user.email}>")

        print(issue_token(db, user, args.token_name))
    finally:
        db.close()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="catalog", description="Supplier catalog management")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level (default: %(default)s)")
    subcommands = parser.add_subparsers(dest="command", required=True)

    init_parser = subcommands.add_parser("init-db", help="Create the database tables")
    init_parser.set_defaults(handler=_init_db)

    seed_parser = subcommands.add_parser("seed", help="Fill the database with fake suppliers and products")
    seed_parser.add_argument("--suppliers", type=int, default=None, help=f"Suppliers to create (default: {settings.SEED_SUPPLIERS})")
    seed_parser.add_argument("--products", type=int, default=None, help=f"Products to create (default: {settings.SEED_PRODUCTS})")
    seed_parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible data")
    seed_parser.set_defaults(handler=_seed)

    token_parser = subcommands.add_parser("issue-token", help="Print a bearer token for a user, creating the user if needed")
    token_parser.add_argument("--email", required=True)
    token_parser.add_argument("--name", default=None, help="Display name for a new user")
    token_parser.add_argument("--token-name", default="cli", help="Label stored with the token (default: %(default)s)")
    token_parser.set_defaults(handler=_issue_token)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
