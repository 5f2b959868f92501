"""Use case for retrieving the active plan of a given type."""

from sqlalchemy.orm import Session

from primeform.domain.entities import Plan, PlanType
from primeform.infrastructure.repositories import PlanRepository


def get_active_plan(session: Session, *, user_id: int, plan_type: PlanType) -> Plan:
    """Return the active plan or raise ``LookupError`` when there is none."""

    plan = PlanRepository(session).get_active(user_id, plan_type)
    if plan is None:
        raise LookupError(f"No active {plan_type.value} plan found")
    return plan
