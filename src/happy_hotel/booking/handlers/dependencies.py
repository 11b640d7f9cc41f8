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
from happy_hotel.shared.domain.service import CurrencyConverter

# =============================================================================
# 依存関係の組み立て（Composition Root）
# =============================================================================
# インメモリ状態は同一プロセス内のハンドラ間でのみ共有される（Lambda 関数ごとに別プロセス）
booking_service = BookingService(
    payment_service=InMemoryPaymentService(),
    room_service=InMemoryRoomService(),
    booking_dao=InMemoryBookingDAO(),
    mail_sender=LoggerMailSender(),
    currency_converter=CurrencyConverter(),
)
