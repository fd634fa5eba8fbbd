from sqlalchemy import Column, Integer, String, Text, DateTime
from datetime import datetime
from database import Base


BOOKING_PENDING = "pending"
BOOKING_ACCEPTED = "accepted"
BOOKING_REJECTED = "rejected"


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String, nullable=False)
    phone = Column(String(10), nullable=False)
    service = Column(Text, nullable=False)
    date = Column(String(10), nullable=False)
    time = Column(String, nullable=False)
    note = Column(Text, default="")

    status = Column(String, nullable=False, default=BOOKING_PENDING)

    # set by the admin on reject
    suggested_date = Column(String)
    suggested_time = Column(String)

    # set by the admin on accept
    confirmed_date = Column(String)
    confirmed_time = Column(String)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)

    def to_dict(self):
        return {column.name: getattr(self, column.name) for column in self.__table__.columns}
