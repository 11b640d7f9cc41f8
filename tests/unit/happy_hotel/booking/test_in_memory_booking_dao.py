import pytest

from happy_hotel.booking.domain.value_object import BookingId
from happy_hotel.booking.infrastructure.in_memory_booking_dao import (
    InMemoryBookingDAO,
)
from happy_hotel.shared.domain.exception import ResourceNotFoundException


class TestInMemoryBookingDAO:
    def test_save_and_get(self, create_booking_request):
        dao = InMemoryBookingDAO()
        booking_request = create_booking_request()

        booking_id = dao.save(booking_request)

        assert isinstance(booking_id, BookingId)
        assert dao.get(booking_id) is booking_request
        assert dao.get_all_booking_ids() == [booking_id]

    def test_delete(self, create_booking_request):
        dao = InMemoryBookingDAO()
        booking_id = dao.save(create_booking_request())

        dao.delete(booking_id)

        assert dao.get_all_booking_ids() == []
        with pytest.raises(ResourceNotFoundException):
            dao.get(booking_id)

    def test_get_unknown_booking_raises(self):
        with pytest.raises(ResourceNotFoundException, match="Booking not found"):
            InMemoryBookingDAO().get(BookingId(value="missing"))

    def test_delete_unknown_booking_raises(self):
        with pytest.raises(ResourceNotFoundException):
            InMemoryBookingDAO().delete(BookingId(value="missing"))
