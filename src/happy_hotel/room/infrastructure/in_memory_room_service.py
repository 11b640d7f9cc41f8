from happy_hotel.booking.domain.entity import BookingRequest
from happy_hotel.room.domain.service import RoomService
from happy_hotel.room.domain.value_object import Room
from happy_hotel.shared.domain.exception import BusinessRuleViolationException
from happy_hotel.shared.utils import get_logger

logger = get_logger()

DEFAULT_ROOMS = (
    Room(room_id="1.1", capacity=2),
    Room(room_id="1.2", capacity=2),
    Room(room_id="1.3", capacity=5),
    Room(room_id="2.1", capacity=3),
    Room(room_id="2.2", capacity=4),
)


class InMemoryRoomService(RoomService):
    """メモリ上で空室状況を管理する RoomService の具象実装"""

    def __init__(self, rooms: tuple[Room, ...] | list[Room] = DEFAULT_ROOMS) -> None:
        # 部屋ID -> (部屋, 空室かどうか)。挿入順を保持する
        self._rooms: dict[str, tuple[Room, bool]] = {
            room.room_id: (room, True) for room in rooms
        }

    def get_available_rooms(self) -> list[Room]:
        """空室の一覧を返す"""
        return [room for room, available in self._rooms.values() if available]

    def find_available_room_id(self, booking_request: BookingRequest) -> str:
        """人数を収容できる最初の空室の部屋IDを返す"""
        for room in self.get_available_rooms():
            if room.can_accommodate(booking_request.guest_count):
                return room.room_id
        raise BusinessRuleViolationException(
            f"No room available for {booking_request.guest_count} guests"
        )

    def get_room_count(self) -> int:
        return len(self._rooms)

    def book_room(self, room_id: str) -> None:
        """部屋を予約済みにする"""
        room, available = self._get(room_id)
        if not available:
            raise BusinessRuleViolationException(f"Room already booked: {room_id}")
        self._rooms[room_id] = (room, False)
        logger.info("Room booked", extra={"room_id": room_id})

    def unbook_room(self, room_id: str) -> None:
        """部屋を空室に戻す"""
        room, _ = self._get(room_id)
        self._rooms[room_id] = (room, True)
        logger.info("Room released", extra={"room_id": room_id})

    def _get(self, room_id: str) -> tuple[Room, bool]:
        if room_id not in self._rooms:
            raise BusinessRuleViolationException(f"Room not found: {room_id}")
        return self._rooms[room_id]
