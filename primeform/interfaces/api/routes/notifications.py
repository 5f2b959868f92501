"""Endpoints for the notification inbox of the authenticated user."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from primeform.application.use_cases.notifications import (
    NotificationDispatcher,
    bulk_update_notifications,
    count_unread,
    delete_notification,
    get_notification_stats,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)
from primeform.domain.entities import User
from primeform.domain.exceptions import NotificationNotFoundError
from primeform.infrastructure.database import get_db
from primeform.infrastructure.push import PushGateway
from primeform.interfaces.api.dependencies import (
    get_current_active_user,
    get_push_gateway,
    require_development,
)
from primeform.interfaces.api.routes_helpers import (
    dispatch_result_to_schema,
    notification_to_schema,
)
from primeform.interfaces.api.schemas import (
    AffectedCountRead,
    DispatchResultRead,
    NotificationBulkRequest,
    NotificationPageRead,
    NotificationRead,
    NotificationStatsRead,
    NotificationTestRequest,
    UnreadCountRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _not_found(exc: NotificationNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.get("/", response_model=NotificationPageRead)
def read_notifications(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    include_read: bool = Query(True),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationPageRead:
    """Return the notifications of the authenticated user, newest first."""

    result = list_notifications(
        db, current_user.id, page=page, limit=limit, include_read=include_read
    )
    return NotificationPageRead(
        items=[notification_to_schema(notification) for notification in result.items],
        page=result.page,
        limit=result.limit,
        has_more=result.has_more,
        unread_count=count_unread(db, current_user.id),
    )


@router.get("/unread-count", response_model=UnreadCountRead)
def read_unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> UnreadCountRead:
    return UnreadCountRead(unread_count=count_unread(db, current_user.id))


@router.get("/stats", response_model=NotificationStatsRead)
def read_stats(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationStatsRead:
    stats = get_notification_stats(db, current_user.id)
    return NotificationStatsRead(
        total=stats.total,
        unread=stats.unread,
        read=stats.read,
        by_kind=stats.by_kind,
    )


@router.patch("/mark-all-read", response_model=AffectedCountRead)
def mark_all_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> AffectedCountRead:
    return AffectedCountRead(count=mark_all_notifications_read(db, current_user.id))


@router.post("/bulk", response_model=AffectedCountRead)
def bulk_update(
    payload: NotificationBulkRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> AffectedCountRead:
    """Mark as read or delete several notifications at once."""

    try:
        count = bulk_update_notifications(
            db, current_user.id, action=payload.action, notification_ids=payload.ids
        )
    except NotificationNotFoundError as exc:
        raise _not_found(exc) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return AffectedCountRead(count=count)


@router.post(
    "/test",
    response_model=DispatchResultRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_development)],
)
def send_test_notification(
    payload: NotificationTestRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
    push_gateway: PushGateway = Depends(get_push_gateway),
) -> DispatchResultRead:
    """Dispatch a notification of any kind to yourself (development only)."""

    context = {
        "title": payload.title,
        "message": payload.message,
        "priority": payload.priority.value if payload.priority else None,
        "metadata": payload.metadata,
    }
    result = NotificationDispatcher(db, push_gateway).dispatch(
        current_user.id, payload.kind, context
    )
    return dispatch_result_to_schema(result)


@router.patch("/{notification_id}/read", response_model=NotificationRead)
def mark_read(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationRead:
    try:
        notification = mark_notification_read(db, current_user.id, notification_id)
    except NotificationNotFoundError as exc:
        raise _not_found(exc) from exc
    return notification_to_schema(notification)


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Response:
    try:
        delete_notification(db, current_user.id, notification_id)
    except NotificationNotFoundError as exc:
        raise _not_found(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
