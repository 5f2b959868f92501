"""Use case for storing a newly generated diet or workout plan."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from primeform.application.use_cases.notifications import NotificationDispatcher
from primeform.domain.entities import NotificationKind, Plan, PlanType
from primeform.domain.exceptions import NotificationStoreError, UserNotFoundError
from primeform.infrastructure.push import PushGateway
from primeform.infrastructure.repositories import PlanRepository, UserRepository

logger = logging.getLogger(__name__)

PLAN_CREATED_KINDS = {
    PlanType.DIET: NotificationKind.DIET_PLAN_CREATED,
    PlanType.WORKOUT: NotificationKind.WORKOUT_PLAN_CREATED,
}


def create_plan(
    session: Session,
    push_gateway: PushGateway,
    *,
    user_id: int,
    plan_type: PlanType,
    name: str,
    details: dict[str, Any] | None = None,
) -> Plan:
    """Activate a new plan for the user and notify them about it.

    A failure to record the notification is logged; the plan is kept.
    """

    if UserRepository(session).get(user_id) is None:
        raise UserNotFoundError(user_id)

    name = name.strip()
    if not name:
        raise ValueError("Plan name is required")

    plan = PlanRepository(session).create(
        Plan(
            id=None,
            user_id=user_id,
            plan_type=plan_type,
            name=name,
            details=dict(details or {}),
        )
    )

    try:
        NotificationDispatcher(session, push_gateway).dispatch(
            user_id,
            PLAN_CREATED_KINDS[plan_type],
            {"plan_id": plan.id, "plan_details": {"planName": plan.name}},
        )
    except NotificationStoreError:
        logger.warning("Plan %s was created but its notification was not stored", plan.id)

    return plan
