from dataclasses import dataclass
from datetime import date
from unittest.mock import MagicMock

import pytest

from happy_hotel.booking.applications.booking_service import BookingService
from happy_hotel.booking.domain.entity import BookingRequest
from happy_hotel.booking.domain.repository import BookingDAO
from happy_hotel.mail.domain.service import MailSender
from happy_hotel.payment.domain.service import PaymentService
from happy_hotel.room.domain.service import RoomService


@pytest.fixture
def create_booking_request():
    """BookingRequest を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        user_id: str = "1",
        date_from: date = date(2022, 1, 1),
        date_to: date = date(2022, 1, 10),
        guest_count: int = 10,
        prepaid: bool = False,
    ) -> BookingRequest:
        return BookingRequest(
            user_id=user_id,
            date_from=date_from,
            date_to=date_to,
            guest_count=guest_count,
            prepaid=prepaid,
        )

    return _factory


@pytest.fixture
def mock_payment_service():
    return MagicMock(spec=PaymentService)


@pytest.fixture
def mock_room_service():
    return MagicMock(spec=RoomService)


@pytest.fixture
def mock_booking_dao():
    return MagicMock(spec=BookingDAO)


@pytest.fixture
def mock_mail_sender():
    return MagicMock(spec=MailSender)


@pytest.fixture
def booking_service(
    mock_payment_service, mock_room_service, mock_booking_dao, mock_mail_sender
):
    """全コラボレータをモックにした BookingService"""
    return BookingService(
        payment_service=mock_payment_service,
        room_service=mock_room_service,
        booking_dao=mock_booking_dao,
        mail_sender=mock_mail_sender,
    )


@pytest.fixture
def lambda_context():
    """Powertools の inject_lambda_context 用ダミーコンテキスト"""

    @dataclass
    class LambdaContext:
        function_name: str = "test"
        memory_limit_in_mb: int = 128
        invoked_function_arn: str = "arn:aws:lambda:ap-northeast-1:123456789012:function:test"
        aws_request_id: str = "da658bd3-2d6f-4e7b-8ec2-937234644fdc"

    return LambdaContext()
