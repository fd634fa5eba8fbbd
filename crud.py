"""
Database operations for bookings.

Each function issues one statement against the ``bookings`` table. Driver
errors are logged with their traceback and re-raised as ``StorageError`` with
a message that is safe to show to the client.
"""

import logging
from contextlib import contextmanager

from sqlalchemy import func, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from errors import NotFoundError, StorageError
from models import Booking, BOOKING_PENDING, BOOKING_ACCEPTED, BOOKING_REJECTED


logger = logging.getLogger(__name__)

# columns returned to customers checking their booking status
STATUS_FIELDS = (
    "id", "service", "date", "time", "status", "created_at",
    "suggested_date", "suggested_time",
    "confirmed_date", "confirmed_time",
    "note", "name", "phone",
)


@contextmanager
def storage_errors(db: Session, message: str):
    try:
        yield
    except SQLAlchemyError:
        logger.exception(message)
        db.rollback()
        raise StorageError(message)


def database_time(db: Session):
    return db.execute(text("SELECT CURRENT_TIMESTAMP")).scalar()


def create_booking(db: Session, fields: dict) -> Booking:
    with storage_errors(db, "Server error creating booking"):
        booking = Booking(**fields)
        # customers never pick their own status
        booking.status = BOOKING_PENDING
        db.add(booking)
        db.commit()
        db.refresh(booking)

    logger.info("Booking %s created for %s", booking.id, booking.service)
    return booking


def get_booking(db: Session, booking_id: int) -> dict:
    with storage_errors(db, "Server error fetching booking status"):
        booking = db.query(Booking).filter(Booking.id == booking_id).first()

    if not booking:
        raise NotFoundError()

    return {field: getattr(booking, field) for field in STATUS_FIELDS}


def list_bookings(db: Session) -> list:
    with storage_errors(db, "Server error fetching bookings"):
        bookings = (
            db.query(Booking)
            .order_by(Booking.created_at.desc(), Booking.id.desc())
            .all()
        )

    return [b.to_dict() for b in bookings]


def _set_status(db: Session, booking_id: int, status: str, date_column, time_column,
                new_date, new_time, message: str) -> dict:
    # COALESCE keeps the stored value when the admin leaves a field blank
    with storage_errors(db, message):
        updated = (
            db.query(Booking)
            .filter(Booking.id == booking_id)
            .update(
                {
                    Booking.status: status,
                    date_column: func.coalesce(new_date or None, date_column),
                    time_column: func.coalesce(new_time or None, time_column),
                },
                synchronize_session=False,
            )
        )
        db.commit()

        booking = None
        if updated:
            booking = db.query(Booking).filter(Booking.id == booking_id).first()

    if not booking:
        raise NotFoundError()

    logger.info("Booking %s marked %s", booking_id, status)
    return booking.to_dict()


def accept_booking(db: Session, booking_id: int, confirmed_date=None, confirmed_time=None) -> dict:
    return _set_status(
        db, booking_id, BOOKING_ACCEPTED,
        Booking.confirmed_date, Booking.confirmed_time,
        confirmed_date, confirmed_time,
        "Server error accepting booking",
    )


def reject_booking(db: Session, booking_id: int, suggested_date=None, suggested_time=None) -> dict:
    return _set_status(
        db, booking_id, BOOKING_REJECTED,
        Booking.suggested_date, Booking.suggested_time,
        suggested_date, suggested_time,
        "Server error rejecting booking",
    )


def delete_booking(db: Session, booking_id: int) -> int:
    with storage_errors(db, "Server error deleting booking"):
        deleted = (
            db.query(Booking)
            .filter(Booking.id == booking_id)
            .delete(synchronize_session=False)
        )
        db.commit()

    if not deleted:
        raise NotFoundError()

    logger.info("Booking %s deleted", booking_id)
    return booking_id
