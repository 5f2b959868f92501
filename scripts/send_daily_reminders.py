"""Send the daily diet, workout and gym reminders to every registered device.

Meant to be run once a day by cron::

    python -m scripts.send_daily_reminders
"""

from __future__ import annotations

import argparse
import logging

from sqlalchemy.exc import SQLAlchemyError

from primeform.application.use_cases.reminders import (
    send_daily_reminders,
    send_daily_reminders_to_all_users,
)
from primeform.infrastructure.database import SessionLocal, initialize_database
from primeform.infrastructure.push import build_push_gateway

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")
logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the reminder batch."""

    parser = argparse.ArgumentParser(
        description="Send the daily reminder notifications of the PrimeForm API.",
    )
    parser.add_argument(
        "--user-id",
        type=int,
        default=None,
        help="Only send the reminders of this user (default: every user with a device token)",
    )
    return parser.parse_args()


def main() -> None:
    """Run the reminder batch using the provided command line arguments."""

    args = parse_args()
    initialize_database()
    push_gateway = build_push_gateway()

    session = SessionLocal()
    try:
        if args.user_id is not None:
            outcomes = send_daily_reminders(session, push_gateway, user_id=args.user_id)
            for outcome in outcomes:
                print(f"  {outcome.kind.value}: {outcome.status} {outcome.reason or ''}".rstrip())
            return

        summary = send_daily_reminders_to_all_users(session, push_gateway)
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Database error while sending reminders: {exc}") from exc
    finally:
        session.close()

    print(
        "Daily reminders sent:\n"
        f"  Users: {summary.users}\n"
        f"  Sent: {summary.sent}\n"
        f"  Failed: {summary.failed}\n"
        f"  Suppressed: {summary.suppressed}\n"
        f"  Skipped: {summary.skipped}\n"
        f"  Users with errors: {len(summary.failed_users)}"
    )


if __name__ == "__main__":
    main()
