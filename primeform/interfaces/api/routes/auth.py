"""Endpoints for signing up and obtaining access tokens."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from primeform.application.use_cases.users import (
    AuthenticationStatus,
    authenticate_user,
    create_user,
    record_login,
)
from primeform.domain.exceptions import EmailAlreadyRegisteredError
from primeform.infrastructure.database import get_db
from primeform.infrastructure.push import PushGateway
from primeform.interfaces.api.dependencies import get_push_gateway
from primeform.interfaces.api.routes_helpers import issue_token
from primeform.interfaces.api.schemas import SignupRequest, Token

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/signup", response_model=Token, status_code=status.HTTP_201_CREATED)
def signup(
    payload: SignupRequest,
    db: Session = Depends(get_db),
    push_gateway: PushGateway = Depends(get_push_gateway),
) -> Token:
    """Register a new account and return an access token for it."""

    try:
        user = create_user(
            db,
            push_gateway,
            full_name=payload.full_name,
            email=payload.email,
            password=payload.password,
            language=payload.language,
        )
    except EmailAlreadyRegisteredError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    return issue_token(user)


# The signature is the one expected by OAuth2PasswordRequestForm.
@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
) -> Token:
    """Authenticate the user by email and return a JWT."""

    user, auth_status = authenticate_user(db, form_data.username, form_data.password)

    if auth_status is AuthenticationStatus.INVALID_CREDENTIALS:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if auth_status is AuthenticationStatus.INACTIVE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Inactive user",
            headers={"WWW-Authenticate": "Bearer"},
        )

    record_login(db, user.id)
    return issue_token(user)
