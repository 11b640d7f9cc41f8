from .entity import Payment
from .enum import PaymentStatus
from .service import PaymentService
from .value_object import PaymentId

__all__ = [
    "Payment",
    "PaymentId",
    "PaymentStatus",
    "PaymentService",
]
