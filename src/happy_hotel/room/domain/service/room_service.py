from abc import ABC, abstractmethod

from happy_hotel.booking.domain.entity import BookingRequest
from happy_hotel.room.domain.value_object import Room


class RoomService(ABC):
    """客室サービスのインターフェース

    Domain 層で定義し、具象実装は Infrastructure 層で行う。
    """

    @abstractmethod
    def get_available_rooms(self) -> list[Room]:
        """空室の一覧を返す"""
        raise NotImplementedError

    @abstractmethod
    def find_available_room_id(self, booking_request: BookingRequest) -> str:
        """予約リクエストに割り当て可能な部屋IDを返す

        Raises:
            BusinessRuleViolationException: 空室がない場合
        """
        raise NotImplementedError

    @abstractmethod
    def get_room_count(self) -> int:
        """全客室数を返す"""
        raise NotImplementedError

    @abstractmethod
    def book_room(self, room_id: str) -> None:
        """部屋を予約済みにする"""
        raise NotImplementedError

    @abstractmethod
    def unbook_room(self, room_id: str) -> None:
        """部屋を空室に戻す"""
        raise NotImplementedError
