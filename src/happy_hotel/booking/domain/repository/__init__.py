from .booking_dao import BookingDAO

__all__ = ["BookingDAO"]
