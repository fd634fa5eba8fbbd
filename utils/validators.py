import re
from datetime import date, datetime

from errors import ValidationError
from utils.normalize import clean_phone, clean_text, service_list


ALLOWED_SERVICES = (
    "PPF",
    "Ceramic Coating",
    "Window Tint",
    "Full Detailing",
    "Interior Cleaning",
    "Exterior Wash",
    "Custom Combo Plan",
)

REQUIRED_FIELDS_MESSAGE = "All fields are required"
INVALID_PHONE_MESSAGE = "Phone number must be exactly 10 digits (spaces / + / - allowed)."
INVALID_DATE_MESSAGE = "Preferred date must be between today and next 1 year."

_PHONE_PATTERN = re.compile(r"[0-9]{10}")
_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def is_valid_phone(phone) -> bool:
    return _PHONE_PATTERN.fullmatch(clean_phone(phone)) is not None


def is_valid_service(service) -> bool:
    return service in ALLOWED_SERVICES


def one_year_after(day: date) -> date:
    try:
        return day.replace(year=day.year + 1)
    except ValueError:
        # Feb 29 has no counterpart next year; roll over like a calendar would
        return date(day.year + 1, 3, 1)


def is_valid_booking_date(date_str, today: date = None) -> bool:
    """True when ``date_str`` is a real YYYY-MM-DD date from today up to one year ahead."""
    if not isinstance(date_str, str) or not _DATE_PATTERN.fullmatch(date_str):
        return False

    try:
        booking_date = datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        return False

    if today is None:
        today = date.today()

    return today <= booking_date <= one_year_after(today)


def invalid_service_message(service) -> str:
    return f"Invalid service selected: {service}. Allowed: {', '.join(ALLOWED_SERVICES)}"


def service_missing(service) -> bool:
    if not service_list(service):
        return True
    # a blank scalar counts as absent; a list is checked entry by entry
    return not isinstance(service, (list, tuple)) and clean_text(service) == ""


def flatten_service(service) -> str:
    services = service_list(service)
    for item in services:
        if not is_valid_service(item):
            raise ValidationError(invalid_service_message(item))
    return ", ".join(services)


def validate_booking(data, today: date = None) -> dict:
    """
    Check a submitted booking and return the fields to persist.

    Order matters: presence, phone, service, then date. The first failing
    check raises ValidationError; nothing is written before all pass.
    """
    required = [data.name, data.phone, data.date, data.time]
    if any(clean_text(value) == "" for value in required) or service_missing(data.service):
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)

    phone = clean_phone(data.phone)
    if not is_valid_phone(phone):
        raise ValidationError(INVALID_PHONE_MESSAGE)

    service = flatten_service(data.service)

    if not is_valid_booking_date(data.date, today=today):
        raise ValidationError(INVALID_DATE_MESSAGE)

    return {
        "name": clean_text(data.name),
        "phone": phone,
        "service": service.strip(),
        "date": data.date,
        "time": clean_text(data.time),
        "note": clean_text(data.note),
    }
