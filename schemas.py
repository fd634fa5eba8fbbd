from pydantic import BaseModel
from typing import List, Optional, Union


# -------------------
# BOOKING (FRONTEND)
# -------------------
# Fields stay optional here so a missing field surfaces as the single
# "All fields are required" error instead of per-field 422s.
class BookingCreate(BaseModel):
    name: Optional[str] = None
    phone: Optional[Union[str, int]] = None
    service: Optional[Union[str, List[Union[str, int]]]] = None
    date: Optional[str] = None
    time: Optional[str] = None
    note: Optional[str] = None


# -------------------
# ADMIN AUTH
# -------------------
class AdminLogin(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


# -------------------
# BOOKING STATUS
# -------------------
class BookingAccept(BaseModel):
    confirmed_date: Optional[str] = None
    confirmed_time: Optional[str] = None


class BookingReject(BaseModel):
    suggested_date: Optional[str] = None
    suggested_time: Optional[str] = None
