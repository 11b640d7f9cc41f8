from .booking_id import BookingId
from .stay_period import StayPeriod

__all__ = ["BookingId", "StayPeriod"]
