"""Endpoints for diet and workout plans."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from primeform.application.use_cases.plans import create_plan, get_active_plan, list_plans
from primeform.domain.entities import PlanType, User
from primeform.infrastructure.database import get_db
from primeform.infrastructure.push import PushGateway
from primeform.interfaces.api.dependencies import get_current_active_user, get_push_gateway
from primeform.interfaces.api.schemas import PlanCreate, PlanRead

router = APIRouter(prefix="/plans", tags=["plans"])


@router.post("/{plan_type}", response_model=PlanRead, status_code=status.HTTP_201_CREATED)
def create(
    plan_type: PlanType,
    payload: PlanCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
    push_gateway: PushGateway = Depends(get_push_gateway),
):
    """Store a new plan, replacing the active one of the same type."""

    try:
        plan = create_plan(
            db,
            push_gateway,
            user_id=current_user.id,
            plan_type=plan_type,
            name=payload.name,
            details=payload.details,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return PlanRead.model_validate(plan)


@router.get("/{plan_type}", response_model=list[PlanRead])
def list_by_type(
    plan_type: PlanType,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    plans = list_plans(db, user_id=current_user.id, plan_type=plan_type)
    return [PlanRead.model_validate(plan) for plan in plans]


@router.get("/{plan_type}/active", response_model=PlanRead)
def read_active(
    plan_type: PlanType,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        plan = get_active_plan(db, user_id=current_user.id, plan_type=plan_type)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return PlanRead.model_validate(plan)
