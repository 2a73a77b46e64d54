"""Registration, login and auth dependencies (get_current_user, require_admin)."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.database import get_db
from app.core.security import (
    TokenConfig,
    TokenExpiredError,
    TokenInvalidError,
    verify_token,
)
from app.schemas.auth import (
    CurrentUser,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    TokenResponse,
)
from app.services.credentials import (
    CredentialService,
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)

router = APIRouter()
security = HTTPBearer(auto_error=False)


def get_token_config() -> TokenConfig:
    """Dependency: signing parameters built from validated settings."""
    return TokenConfig.from_settings(get_settings())


def get_credential_service(
    db: Annotated[Session, Depends(get_db)],
    token_config: Annotated[TokenConfig, Depends(get_token_config)],
) -> CredentialService:
    return CredentialService(db, token_config, get_settings().PASSWORD_HASH_SCHEME)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


@router.post("/register", response_model=MessageResponse)
def register(
    body: RegisterRequest,
    service: Annotated[CredentialService, Depends(get_credential_service)],
) -> MessageResponse:
    """Create an account. Fails with 400 when the username is already taken."""
    try:
        service.register(body.username, body.email, body.password)
    except UserAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    return MessageResponse(message="User registered successfully.")


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    service: Annotated[CredentialService, Depends(get_credential_service)],
) -> TokenResponse:
    """
    Authenticate with email and password; returns a JWT.
    Include the token in the Authorization header as: Bearer <token>
    """
    try:
        token = service.login(body.email, body.password)
    except (UserNotFoundError, InvalidCredentialsError) as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message) from e
    return TokenResponse(token=token, token_type="bearer")


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    token_config: Annotated[TokenConfig, Depends(get_token_config)],
) -> CurrentUser:
    """Dependency: require a valid Bearer JWT and return its identity. Raises 401 otherwise."""
    if credentials is None:
        raise _unauthorized("Not authenticated")
    try:
        claims = verify_token(credentials.credentials, token_config)
    except (TokenExpiredError, TokenInvalidError) as e:
        raise _unauthorized(e.message) from e
    return CurrentUser(username=claims.username, email=claims.email, role=claims.role)


def require_admin(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency: require authenticated user with role 'admin'. Raises 403 for non-admin."""
    if current_user.role != "admin":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user


@router.get("/me", response_model=CurrentUser)
def me(current_user: Annotated[CurrentUser, Depends(get_current_user)]) -> CurrentUser:
    """Echo the identity carried by the presented token."""
    return current_user
