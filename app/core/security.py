"""Password hashing and JWT issuance/verification for authentication."""

import base64
import hashlib
import hmac
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt

if TYPE_CHECKING:
    from app.core.config import Settings
    from app.models.user import User

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12

# Schemes accepted by hash_password.
PASSWORD_HASH_SCHEMES = ("bcrypt", "sha256")

# Min/max lengths for username and password.
USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 255
PASSWORD_MIN_LEN = 1
PASSWORD_MAX_LEN = 128

# Claims every issued token carries and every verified token must have.
REQUIRED_CLAIMS = ("exp", "iat", "iss", "aud", "username", "email", "role")


class TokenError(Exception):
    """Base class for bearer token verification failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class TokenExpiredError(TokenError):
    """Raised when a token's exp is at or before the current instant."""


class TokenInvalidError(TokenError):
    """Raised for a bad signature, wrong issuer/audience, or malformed token."""


@dataclass(frozen=True)
class TokenConfig:
    """Signing parameters handed to the credential service at construction."""

    secret: str
    issuer: str
    audience: str
    expire_minutes: int
    algorithm: str = "HS256"

    @classmethod
    def from_settings(cls, s: "Settings") -> "TokenConfig":
        return cls(
            secret=s.JWT_SECRET.get_secret_value(),
            issuer=s.JWT_ISSUER,
            audience=s.JWT_AUDIENCE,
            expire_minutes=s.JWT_EXPIRE_MINUTES,
            algorithm=s.JWT_ALGORITHM,
        )


@dataclass(frozen=True)
class TokenClaims:
    """Identity claims recovered from a verified token."""

    username: str
    email: str
    role: str


def hash_password_sha256(plain_password: str) -> str:
    """Single-pass, unsalted SHA-256 digest, base64 encoded (legacy format)."""
    digest = hashlib.sha256(plain_password.encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii")


def _bcrypt_input(plain_password: str) -> bytes:
    # bcrypt ignores everything past 72 bytes; the 44-byte digest keeps every
    # byte of the password significant.
    return hash_password_sha256(plain_password).encode("ascii")


def hash_password_bcrypt(plain_password: str) -> str:
    """Salted bcrypt over the SHA-256 digest of the password. Each call yields a different string."""
    pw_bytes = _bcrypt_input(plain_password)
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def hash_password(plain_password: str, scheme: str) -> str:
    """Hash a plain-text password for storage with the given scheme."""
    if scheme == "sha256":
        return hash_password_sha256(plain_password)
    if scheme == "bcrypt":
        return hash_password_bcrypt(plain_password)
    raise ValueError(f"Unknown password hash scheme: {scheme!r}")


def is_bcrypt_hash(hashed: str) -> bool:
    return hashed.startswith(("$2a$", "$2b$", "$2y$"))


def verify_password(plain_password: str, hashed: str) -> bool:
    """
    Verify a plain password against a stored hash.

    Accepts both bcrypt hashes and legacy base64 SHA-256 digests, so rows
    written before the switch to bcrypt keep working.
    """
    if not hashed:
        return False
    if is_bcrypt_hash(hashed):
        pw_bytes = _bcrypt_input(plain_password)
        try:
            return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
        except (ValueError, TypeError):
            return False
    return hmac.compare_digest(hash_password_sha256(plain_password), hashed)


def issue_token(user: "User", config: TokenConfig, now: datetime | None = None) -> str:
    """Create a signed JWT carrying username, email, role, iss, aud, iat and exp."""
    now = now or datetime.now(UTC)
    expire = now + timedelta(minutes=config.expire_minutes)
    payload: dict[str, Any] = {
        "username": user.username,
        "email": user.email,
        "role": user.role,
        "iss": config.issuer,
        "aud": config.audience,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(payload, config.secret, algorithm=config.algorithm)


def verify_token(token: str, config: TokenConfig) -> TokenClaims:
    """
    Validate signature, issuer, audience and expiry; return the identity claims.

    Raises TokenExpiredError once exp has passed and TokenInvalidError on any
    other failure.
    """
    try:
        payload = jwt.decode(
            token,
            config.secret,
            algorithms=[config.algorithm],
            audience=config.audience,
            issuer=config.issuer,
            options={"require": list(REQUIRED_CLAIMS)},
        )
    except jwt.ExpiredSignatureError as e:
        raise TokenExpiredError("Token expired") from e
    except jwt.PyJWTError as e:
        raise TokenInvalidError("Invalid token") from e

    username, email, role = payload["username"], payload["email"], payload["role"]
    if not all(isinstance(v, str) for v in (username, email, role)):
        raise TokenInvalidError("Invalid token payload")
    return TokenClaims(username=username, email=email, role=role)
