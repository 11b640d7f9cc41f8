from abc import ABC, abstractmethod

from happy_hotel.booking.domain.value_object import BookingId


class MailSender(ABC):
    """予約確認メール送信のインターフェース"""

    @abstractmethod
    def send_booking_confirmation(self, booking_id: BookingId) -> None:
        """予約確認メールを送信する

        Raises:
            BusinessRuleViolationException: 送信に失敗した場合
        """
        raise NotImplementedError
