from .entity import BookingRequest
from .repository import BookingDAO
from .value_object import BookingId, StayPeriod

__all__ = [
    "BookingRequest",
    "BookingId",
    "StayPeriod",
    "BookingDAO",
]
