"""Use cases for managing diet and workout plans."""

from .create_plan import PLAN_CREATED_KINDS, create_plan
from .get_active_plan import get_active_plan
from .list_plans import list_plans

__all__ = ["PLAN_CREATED_KINDS", "create_plan", "get_active_plan", "list_plans"]
