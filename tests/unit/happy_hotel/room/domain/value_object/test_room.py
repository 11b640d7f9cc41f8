import pytest

from happy_hotel.room.domain.value_object import Room


class TestRoom:
    def test_valid_room(self):
        room = Room(room_id="1.1", capacity=2)
        assert room.room_id == "1.1"
        assert room.capacity == 2
        assert str(room) == "1.1"

    def test_empty_id_raises_error(self):
        with pytest.raises(ValueError, match="Room id cannot be empty"):
            Room(room_id="  ", capacity=2)

    def test_zero_capacity_raises_error(self):
        with pytest.raises(ValueError, match="Room capacity must be positive"):
            Room(room_id="1.1", capacity=0)

    @pytest.mark.parametrize(
        "guest_count, expected",
        [(1, True), (4, True), (5, False)],
    )
    def test_can_accommodate(self, guest_count, expected):
        room = Room(room_id="2.2", capacity=4)
        assert room.can_accommodate(guest_count) is expected
