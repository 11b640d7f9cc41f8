from happy_hotel.booking.domain.value_object import BookingId
from happy_hotel.mail.domain.service import MailSender
from happy_hotel.shared.utils import get_logger

logger = get_logger()


class LoggerMailSender(MailSender):
    """メールの代わりにログへ予約確認を出力する MailSender"""

    def send_booking_confirmation(self, booking_id: BookingId) -> None:
        logger.info("Booking confirmation sent", extra={"booking_id": str(booking_id)})
