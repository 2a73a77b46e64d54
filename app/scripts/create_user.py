"""
Create a user (e.g. first admin). Run from project root:
  python -m app.scripts.create_user USERNAME EMAIL PASSWORD [role]
Example:
  python -m app.scripts.create_user admin admin@example.com your-secure-password admin
"""
import argparse
import logging
import sys

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.core.security import TokenConfig
from app.services.credentials import CredentialService, UserAlreadyExistsError

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Storefront API user.")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("email", help="Email used to log in")
    parser.add_argument("password", help="Password (1-128 chars)")
    parser.add_argument("role", nargs="?", default="user", choices=["user", "admin"])
    args = parser.parse_args(argv)

    username = args.username.strip()
    email = args.email.strip()
    if not username or len(username) > 255:
        logger.error("Invalid username length.")
        return 1
    if not email or len(email) > 255:
        logger.error("Invalid email length.")
        return 1
    if not args.password or len(args.password) > 128:
        logger.error("Password must be 1-128 characters.")
        return 1

    db = SessionLocal()
    try:
        settings = get_settings()
        service = CredentialService(
            db,
            TokenConfig.from_settings(settings),
            settings.PASSWORD_HASH_SCHEME,
        )
        try:
            service.register(username, email, args.password, role=args.role)
        except UserAlreadyExistsError:
            logger.error("User '%s' already exists.", username)
            return 1
        logger.info("Created user '%s' with role '%s'.", username, args.role)
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    sys.exit(main())
