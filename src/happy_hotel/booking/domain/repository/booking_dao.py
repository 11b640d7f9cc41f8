from abc import ABC, abstractmethod

from happy_hotel.booking.domain.entity import BookingRequest
from happy_hotel.booking.domain.value_object import BookingId


class BookingDAO(ABC):
    """予約の永続化インターフェース"""

    @abstractmethod
    def save(self, booking_request: BookingRequest) -> BookingId:
        """予約を保存し、採番した予約IDを返す"""
        raise NotImplementedError

    @abstractmethod
    def get(self, booking_id: BookingId) -> BookingRequest:
        """予約IDで検索する

        Raises:
            ResourceNotFoundException: 予約が存在しない場合
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, booking_id: BookingId) -> None:
        """予約を削除する"""
        raise NotImplementedError

    @abstractmethod
    def get_all_booking_ids(self) -> list[BookingId]:
        """保存済みの予約ID一覧"""
        raise NotImplementedError
