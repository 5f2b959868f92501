"""Pure preference gating applied before a notification is recorded."""

from __future__ import annotations

from primeform.domain.entities import (
    DispatchDecision,
    NotificationKind,
    NotificationPreferences,
    SuppressionReason,
)

from .catalog import get_profile

_WORKOUT_CATEGORY = frozenset(
    {NotificationKind.WORKOUT_REMINDER, NotificationKind.GYM_REMINDER}
)


def evaluate_preferences(
    kind: NotificationKind,
    preferences: NotificationPreferences,
    *,
    has_device_token: bool,
) -> DispatchDecision:
    """Decide whether ``kind`` is recorded and pushed for these preferences.

    Transactional kinds are never suppressed. Reminders are dropped when push
    is disabled globally or their category switch is off; the global switch
    is checked first.
    """

    if kind.is_reminder:
        if not preferences.push_enabled:
            return DispatchDecision.suppressed(SuppressionReason.PUSH_DISABLED)
        if kind is NotificationKind.DIET_REMINDER and not preferences.diet_reminders_enabled:
            return DispatchDecision.suppressed(SuppressionReason.CATEGORY_DISABLED)
        if kind in _WORKOUT_CATEGORY and not preferences.workout_reminders_enabled:
            return DispatchDecision.suppressed(SuppressionReason.CATEGORY_DISABLED)

    return DispatchDecision(
        should_create_record=True,
        should_push_now=has_device_token and get_profile(kind).push_immediately,
    )


__all__ = ["evaluate_preferences"]
