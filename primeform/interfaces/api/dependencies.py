"""FastAPI dependency utilities."""

import secrets
from hashlib import sha256

from fastapi import Depends, Header, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from primeform.config import get_settings
from primeform.domain.entities import User
from primeform.infrastructure.database import get_db
from primeform.infrastructure.push import NullPushGateway, PushGateway
from primeform.infrastructure.repositories import UserRepository
from primeform.infrastructure.security import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")

_INVALID_CREDENTIALS = "Could not validate credentials"


def password_signature(user: User) -> str:
    """Return the claim that invalidates tokens when the password changes."""

    return sha256(f"{user.password}:{int(user.is_active)}".encode()).hexdigest()


def _unauthorized(detail: str = _INVALID_CREDENTIALS) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the authenticated user for the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _unauthorized() from exc

    email = payload.get("sub")
    signature_claim = payload.get("pwd_sig")
    if not isinstance(email, str) or not isinstance(signature_claim, str):
        raise _unauthorized()

    user = UserRepository(db).get_by_email(email)
    if user is None:
        raise _unauthorized("User not found")

    if not secrets.compare_digest(signature_claim, password_signature(user)):
        raise _unauthorized()

    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user from the provided token."""

    return resolve_current_user(token, db)


def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    """Ensure the authenticated user is active."""

    if not current_user.is_active:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Inactive user",
        )
    return current_user


def get_push_gateway(request: Request) -> PushGateway:
    """Return the push gateway built when the application started."""

    gateway = getattr(request.app.state, "push_gateway", None)
    return gateway if gateway is not None else NullPushGateway()


def require_cron_key(x_cron_key: str | None = Header(default=None)) -> None:
    """Reject cron calls without the configured shared secret."""

    expected = get_settings().cron_api_key
    if not expected:
        return
    if x_cron_key is None or not secrets.compare_digest(x_cron_key, expected):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid cron key",
        )


def require_development() -> None:
    """Hide endpoints that only make sense while developing."""

    if not get_settings().is_development:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
