import logging
import os
import re
from typing import Optional

from fastapi import FastAPI, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

import crud
from auth import authenticate_admin, get_current_admin
from config import Settings, get_settings
from database import Base, engine, get_db
from errors import BookingError, ValidationError
from schemas import BookingCreate, AdminLogin, BookingAccept, BookingReject
from utils.validators import validate_booking


settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# ===============================
# BOOKING ID
# ===============================
_BOOKING_ID = re.compile(r"[0-9]+")
# upper bound of the integer primary key column
MAX_BOOKING_ID = 2**31 - 1


def parse_booking_id(raw: str) -> int:
    raw = raw.strip()
    if not _BOOKING_ID.fullmatch(raw) or not 0 < int(raw) <= MAX_BOOKING_ID:
        raise ValidationError("Invalid booking ID")
    return int(raw)


# ===============================
# APP INIT
# ===============================
app = FastAPI(title="Car Groomers Booking Backend")


# ===============================
# CORS
# ===============================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


# ===============================
# ERRORS
# ===============================
@app.exception_handler(BookingError)
def booking_error_handler(request: Request, exc: BookingError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(RequestValidationError)
def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info("Malformed request body on %s", request.url.path)
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


# ===============================
# DB INIT
# ===============================
Base.metadata.create_all(bind=engine)


# ===============================
# HEALTH CHECK
# ===============================
@app.get("/api/health")
def health(db: Session = Depends(get_db)):
    try:
        db_time = crud.database_time(db)
    except SQLAlchemyError:
        logger.exception("Database health check failed")
        return JSONResponse(
            status_code=503,
            content={"ok": False, "error": "Database connection failed"},
        )

    return {
        "ok": True,
        "message": "Server is running",
        "db_time": db_time,
    }


# =====================================================
# PUBLIC API: CUSTOMER BOOKING (NO JWT)
# =====================================================
@app.post("/api/book")
def create_booking(data: Optional[BookingCreate] = None, db: Session = Depends(get_db)):
    fields = validate_booking(data or BookingCreate())
    booking = crud.create_booking(db, fields)

    return {
        "success": True,
        "message": "Booking request submitted successfully!",
        "bookingId": booking.id,
    }


@app.get("/api/booking/{booking_id}")
def booking_status(booking_id: str, db: Session = Depends(get_db)):
    booking = crud.get_booking(db, parse_booking_id(booking_id))
    return {"booking": booking}


# =====================================================
# ADMIN AUTH
# =====================================================
@app.post("/api/admin/login")
def admin_login(
    data: Optional[AdminLogin] = None,
    current_settings: Settings = Depends(get_settings)
):
    data = data or AdminLogin()
    token = authenticate_admin(data.username, data.password, current_settings)
    return {"success": True, "token": token}


# =====================================================
# ADMIN APIs: JWT PROTECTED
# =====================================================
@app.get("/api/admin/bookings")
def view_bookings(
    db: Session = Depends(get_db),
    admin=Depends(get_current_admin)
):
    return {"bookings": crud.list_bookings(db)}


@app.post("/api/admin/bookings/{booking_id}/accept")
def accept_booking(
    booking_id: str,
    data: Optional[BookingAccept] = None,
    db: Session = Depends(get_db),
    admin=Depends(get_current_admin)
):
    data = data or BookingAccept()
    booking = crud.accept_booking(
        db,
        parse_booking_id(booking_id),
        confirmed_date=data.confirmed_date,
        confirmed_time=data.confirmed_time,
    )
    return {"success": True, "booking": booking}


@app.post("/api/admin/bookings/{booking_id}/reject")
def reject_booking(
    booking_id: str,
    data: Optional[BookingReject] = None,
    db: Session = Depends(get_db),
    admin=Depends(get_current_admin)
):
    data = data or BookingReject()
    booking = crud.reject_booking(
        db,
        parse_booking_id(booking_id),
        suggested_date=data.suggested_date,
        suggested_time=data.suggested_time,
    )
    return {"success": True, "booking": booking}


@app.delete("/api/admin/bookings/{booking_id}")
def delete_booking(
    booking_id: str,
    db: Session = Depends(get_db),
    admin=Depends(get_current_admin)
):
    deleted_id = crud.delete_booking(db, parse_booking_id(booking_id))
    return {"success": True, "deletedId": deleted_id}


# ===============================
# STATIC FRONTEND
# ===============================
# mounted last so the catch-all "/" never shadows the API routes
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
PUBLIC_DIR = os.path.join(BASE_DIR, "public")
if os.path.isdir(PUBLIC_DIR):
    app.mount("/", StaticFiles(directory=PUBLIC_DIR, html=True), name="public")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.port)
