from .payment_status import PaymentStatus

__all__ = ["PaymentStatus"]
