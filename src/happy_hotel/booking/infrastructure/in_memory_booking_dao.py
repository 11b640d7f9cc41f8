from happy_hotel.booking.domain.entity import BookingRequest
from happy_hotel.booking.domain.repository import BookingDAO
from happy_hotel.booking.domain.value_object import BookingId
from happy_hotel.shared.domain.exception import ResourceNotFoundException


class InMemoryBookingDAO(BookingDAO):
    """辞書に予約を保持する BookingDAO の具象実装"""

    def __init__(self) -> None:
        self._bookings: dict[BookingId, BookingRequest] = {}

    def save(self, booking_request: BookingRequest) -> BookingId:
        booking_id = BookingId.generate()
        self._bookings[booking_id] = booking_request
        return booking_id

    def get(self, booking_id: BookingId) -> BookingRequest:
        booking_request = self._bookings.get(booking_id)
        if booking_request is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")
        return booking_request

    def delete(self, booking_id: BookingId) -> None:
        if booking_id not in self._bookings:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")
        del self._bookings[booking_id]

    def get_all_booking_ids(self) -> list[BookingId]:
        return list(self._bookings)
