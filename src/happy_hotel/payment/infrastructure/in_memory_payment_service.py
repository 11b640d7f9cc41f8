from decimal import Decimal

from happy_hotel.booking.domain.entity import BookingRequest
from happy_hotel.payment.domain.entity import Payment
from happy_hotel.payment.domain.service import PaymentService
from happy_hotel.payment.domain.value_object import PaymentId
from happy_hotel.shared.domain.exception import BusinessRuleViolationException
from happy_hotel.shared.domain.value_object import Money
from happy_hotel.shared.utils import get_logger

logger = get_logger()


class InMemoryPaymentService(PaymentService):
    """メモリ上に決済を記録する PaymentService の具象実装

    少人数の高額決済は拒否する。
    """

    SMALL_PAYMENT_LIMIT = Decimal("200.0")
    SMALL_GROUP_SIZE = 3

    def __init__(self) -> None:
        self._payments: dict[PaymentId, Payment] = {}

    def pay(self, booking_request: BookingRequest, price: Decimal) -> PaymentId:
        if (
            price > self.SMALL_PAYMENT_LIMIT
            and booking_request.guest_count < self.SMALL_GROUP_SIZE
        ):
            raise BusinessRuleViolationException("Only small payments are supported.")

        payment = Payment(
            id=PaymentId.generate(),
            booking_request=booking_request,
            amount=Money.usd(price),
        )
        payment.complete()
        self._payments[payment.id] = payment

        logger.info(
            "Payment completed",
            extra={"payment_id": str(payment.id), "amount": str(payment.amount)},
        )
        return payment.id

    def get_payment(self, payment_id: PaymentId) -> Payment | None:
        """決済IDで記録済みの決済を返す"""
        return self._payments.get(payment_id)
