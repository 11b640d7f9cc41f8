import pytest

from happy_hotel.booking.domain.value_object import BookingId


class TestBookingId:
    def test_str_returns_value(self):
        assert str(BookingId(value="booking-1")) == "booking-1"

    def test_empty_value_raises_error(self):
        with pytest.raises(ValueError, match="BookingId cannot be empty"):
            BookingId(value="")

    def test_generate_returns_unique_ids(self):
        assert BookingId.generate() != BookingId.generate()
