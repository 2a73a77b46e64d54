"""Credential service: user registration, login and token issuance."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.security import (
    PASSWORD_HASH_SCHEMES,
    TokenConfig,
    hash_password,
    issue_token,
    verify_password,
)
from app.models.user import User

logger = logging.getLogger(__name__)

DEFAULT_ROLE = "user"


class CredentialError(Exception):
    """Base class for registration and login failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UserAlreadyExistsError(CredentialError):
    """Raised when registering a username that is already taken."""

    def __init__(self, message: str = "User already exists.") -> None:
        super().__init__(message)


class UserNotFoundError(CredentialError):
    """Raised when no user matches the login email."""

    def __init__(self, message: str = "User not found") -> None:
        super().__init__(message)


class InvalidCredentialsError(CredentialError):
    """Raised when the password does not match the stored hash."""

    def __init__(self, message: str = "Invalid password") -> None:
        super().__init__(message)


class CredentialService:
    """
    Registers users and exchanges email/password for a signed JWT.

    The service is stateless; the session is the only shared state and the
    token config and hash scheme are fixed at construction.
    """

    def __init__(
        self,
        session: Session,
        token_config: TokenConfig,
        hash_scheme: str = "bcrypt",
    ) -> None:
        if hash_scheme not in PASSWORD_HASH_SCHEMES:
            raise ValueError(f"Unknown password hash scheme: {hash_scheme!r}")
        self.session = session
        self.token_config = token_config
        self.hash_scheme = hash_scheme

    def register(
        self,
        username: str,
        email: str,
        password: str,
        role: str = DEFAULT_ROLE,
    ) -> User:
        """
        Create a user unless the username is taken.

        Only username is checked for collisions; a second account may reuse an
        existing email. The unique index on username turns a concurrent
        duplicate insert into UserAlreadyExistsError as well.
        """
        existing = self.session.query(User).filter(User.username == username).first()
        if existing is not None:
            logger.info("Registration rejected: username taken", extra={"username": username})
            raise UserAlreadyExistsError()

        user = User(
            username=username,
            email=email,
            password_hash=hash_password(password, self.hash_scheme),
            role=role,
        )
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.info(
                "Registration rejected: concurrent insert for username",
                extra={"username": username},
            )
            raise UserAlreadyExistsError() from e
        self.session.refresh(user)
        logger.info("User registered", extra={"user_id": user.id, "role": user.role})
        return user

    def login(self, email: str, password: str) -> str:
        """Verify the password for the account with this email; return a JWT."""
        user = (
            self.session.query(User)
            .filter(User.email == email)
            .order_by(User.id)
            .first()
        )
        if user is None:
            logger.info("Login failed: unknown email")
            raise UserNotFoundError()
        if not verify_password(password, user.password_hash):
            logger.info("Login failed: password mismatch", extra={"user_id": user.id})
            raise InvalidCredentialsError()
        token = issue_token(user, self.token_config)
        logger.info("Login succeeded", extra={"user_id": user.id})
        return token
