"""Delete notifications whose retention period has elapsed.

    python -m scripts.purge_expired_notifications
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from primeform.application.use_cases.notifications import purge_expired_notifications
from primeform.infrastructure.database import SessionLocal, initialize_database

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")


def main() -> None:
    """Purge expired notifications and report how many were removed."""

    initialize_database()
    session = SessionLocal()
    try:
        deleted = purge_expired_notifications(session)
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Database error while purging notifications: {exc}") from exc
    finally:
        session.close()

    print(f"Expired notifications deleted: {deleted}")


if __name__ == "__main__":
    main()
