from unittest.mock import patch

import pytest

from happy_hotel.booking.applications.booking_service import BookingService
from happy_hotel.booking.infrastructure.in_memory_booking_dao import (
    InMemoryBookingDAO,
)
from happy_hotel.mail.infrastructure.logger_mail_sender import LoggerMailSender
from happy_hotel.payment.infrastructure.in_memory_payment_service import (
    InMemoryPaymentService,
)
from happy_hotel.room.infrastructure.in_memory_room_service import (
    InMemoryRoomService,
)


@pytest.fixture
def in_memory_service():
    """インメモリ実装で組み立てた BookingService を各ハンドラに差し込む"""
    service = BookingService(
        payment_service=InMemoryPaymentService(),
        room_service=InMemoryRoomService(),
        booking_dao=InMemoryBookingDAO(),
        mail_sender=LoggerMailSender(),
    )
    with (
        patch("happy_hotel.booking.handlers.reserve.service", service),
        patch("happy_hotel.booking.handlers.cancel.service", service),
        patch("happy_hotel.booking.handlers.price.service", service),
        patch("happy_hotel.booking.handlers.availability.service", service),
    ):
        yield service
