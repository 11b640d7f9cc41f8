from happy_hotel.booking.domain.entity import BookingRequest
from happy_hotel.payment.domain.enum import PaymentStatus
from happy_hotel.payment.domain.value_object import PaymentId
from happy_hotel.shared.domain.entity import Entity
from happy_hotel.shared.domain.exception import BusinessRuleViolationException
from happy_hotel.shared.domain.value_object import Money


class Payment(Entity[PaymentId]):
    """決済エンティティ"""

    def __init__(
        self,
        id: PaymentId,
        booking_request: BookingRequest,
        amount: Money,
        status: PaymentStatus = PaymentStatus.PENDING,
    ) -> None:
        super().__init__(id)
        self._booking_request = booking_request
        self._amount = amount
        self._status = status

    @property
    def booking_request(self) -> BookingRequest:
        return self._booking_request

    @property
    def amount(self) -> Money:
        return self._amount

    @property
    def status(self) -> PaymentStatus:
        return self._status

    def complete(self) -> None:
        """決済を完了する"""
        if self._status != PaymentStatus.PENDING:
            raise BusinessRuleViolationException(
                f"Cannot complete payment in {self._status} status"
            )
        self._status = PaymentStatus.COMPLETED
