from abc import ABC, abstractmethod
from decimal import Decimal

from happy_hotel.booking.domain.entity import BookingRequest
from happy_hotel.payment.domain.value_object import PaymentId


class PaymentService(ABC):
    """決済サービスのインターフェース"""

    @abstractmethod
    def pay(self, booking_request: BookingRequest, price: Decimal) -> PaymentId:
        """予約代金を決済する

        Raises:
            BusinessRuleViolationException: 決済が拒否された場合
        """
        raise NotImplementedError
