from .booking_request import BookingRequest

__all__ = ["BookingRequest"]
