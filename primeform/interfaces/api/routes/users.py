"""Routes for the authenticated user's account, device and profile."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from primeform.application.use_cases.profiles import get_profile, save_profile
from primeform.application.use_cases.users import (
    change_password,
    clear_device_token,
    register_device_token,
    update_settings,
)
from primeform.domain.entities import User
from primeform.domain.exceptions import UserNotFoundError
from primeform.infrastructure.database import get_db
from primeform.infrastructure.push import PushGateway
from primeform.interfaces.api.dependencies import get_current_active_user, get_push_gateway
from primeform.interfaces.api.routes_helpers import issue_token, sweep_result_to_schema
from primeform.interfaces.api.schemas import (
    PasswordChange,
    PushTokenRegister,
    PushTokenRegistrationRead,
    Token,
    UserProfileRead,
    UserProfileUpdate,
    UserRead,
    UserSettingsUpdate,
)

router = APIRouter(prefix="/users", tags=["users"])
logger = logging.getLogger(__name__)


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_active_user)):
    """Return the authenticated user."""

    return UserRead.model_validate(current_user)


@router.patch("/me/settings", response_model=UserRead)
def update_current_user_settings(
    payload: UserSettingsUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Update notification switches and language of the authenticated user."""

    try:
        user = update_settings(
            db,
            user_id=current_user.id,
            **payload.model_dump(exclude_unset=True),
        )
    except UserNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return UserRead.model_validate(user)


@router.put("/me/password", response_model=Token)
def update_password(
    payload: PasswordChange,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Change the password and return a token; previously issued tokens are revoked."""

    try:
        user = change_password(
            db,
            user_id=current_user.id,
            current_password=payload.current_password,
            new_password=payload.new_password,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return issue_token(user)


@router.post("/me/push-token", response_model=PushTokenRegistrationRead)
def register_push_token(
    payload: PushTokenRegister,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
    push_gateway: PushGateway = Depends(get_push_gateway),
):
    """Store the device token and send the pending notifications to it."""

    try:
        result = register_device_token(
            db, push_gateway, user_id=current_user.id, token=payload.token
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return sweep_result_to_schema(result)


@router.delete("/me/push-token", status_code=status.HTTP_204_NO_CONTENT)
def delete_push_token(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Response:
    """Forget the device token of the authenticated user."""

    clear_device_token(db, user_id=current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me/profile", response_model=UserProfileRead)
def read_profile(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        profile = get_profile(db, user_id=current_user.id)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return UserProfileRead.model_validate(profile)


@router.put("/me/profile", response_model=UserProfileRead)
def upsert_profile(
    payload: UserProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
    push_gateway: PushGateway = Depends(get_push_gateway),
):
    """Create or replace the fitness profile of the authenticated user."""

    try:
        profile = save_profile(
            db, push_gateway, user_id=current_user.id, **payload.model_dump()
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return UserProfileRead.model_validate(profile)
