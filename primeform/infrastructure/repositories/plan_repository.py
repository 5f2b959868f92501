"""Persistence helpers for diet and workout plans."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from primeform.domain.entities import Plan, PlanType
from primeform.infrastructure.models import PlanModel
from primeform.utils import from_storage, storage_now


class PlanRepository:
    """Provide CRUD operations for :class:`Plan` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, plan: Plan) -> Plan:
        """Store ``plan`` as the only active plan of its type for the user."""

        if plan.is_active:
            (
                self.session.query(PlanModel)
                .filter(
                    PlanModel.user_id == plan.user_id,
                    PlanModel.plan_type == plan.plan_type.value,
                    PlanModel.is_active.is_(True),
                )
                .update({PlanModel.is_active: False}, synchronize_session=False)
            )
        model = PlanModel(
            user_id=plan.user_id,
            plan_type=plan.plan_type.value,
            name=plan.name,
            details=dict(plan.details or {}),
            is_active=plan.is_active,
            created_at=storage_now(),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def get_active(self, user_id: int, plan_type: PlanType) -> Plan | None:
        model = (
            self.session.query(PlanModel)
            .filter(
                PlanModel.user_id == user_id,
                PlanModel.plan_type == plan_type.value,
                PlanModel.is_active.is_(True),
            )
            .order_by(PlanModel.created_at.desc(), PlanModel.id.desc())
            .first()
        )
        return self._to_entity(model) if model else None

    def list_for_user(self, user_id: int, plan_type: PlanType) -> Sequence[Plan]:
        query = (
            self.session.query(PlanModel)
            .filter(
                PlanModel.user_id == user_id,
                PlanModel.plan_type == plan_type.value,
            )
            .order_by(PlanModel.created_at.desc(), PlanModel.id.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: PlanModel) -> Plan:
        return Plan(
            id=model.id,
            user_id=model.user_id,
            plan_type=PlanType(model.plan_type),
            name=model.name,
            details=dict(model.details or {}),
            is_active=model.is_active,
            created_at=from_storage(model.created_at),
        )


__all__ = ["PlanRepository"]
