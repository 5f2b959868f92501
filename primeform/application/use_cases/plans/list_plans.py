"""Use case for listing the plans of a user."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from primeform.domain.entities import Plan, PlanType
from primeform.infrastructure.repositories import PlanRepository


def list_plans(session: Session, *, user_id: int, plan_type: PlanType) -> Sequence[Plan]:
    """Return every plan of ``plan_type`` owned by the user, newest first."""

    return PlanRepository(session).list_for_user(user_id, plan_type)
