from decimal import Decimal

from happy_hotel.booking.domain.entity import BookingRequest
from happy_hotel.booking.domain.repository import BookingDAO
from happy_hotel.booking.domain.value_object import BookingId
from happy_hotel.mail.domain.service import MailSender
from happy_hotel.payment.domain.service import PaymentService
from happy_hotel.room.domain.service import RoomService
from happy_hotel.shared.domain.service import CurrencyConverter
from happy_hotel.shared.utils import get_logger

logger = get_logger()


class BookingService:
    """ホテル予約ユースケース

    客室・決済・永続化・通知の各コラボレータを順に呼び出すだけの薄い層。
    コラボレータが送出した例外はそのまま呼び出し元へ伝播し、
    補償処理（ロールバック）は行わない。
    """

    BASE_PRICE_USD = Decimal("50.0")

    def __init__(
        self,
        payment_service: PaymentService,
        room_service: RoomService,
        booking_dao: BookingDAO,
        mail_sender: MailSender,
        currency_converter: CurrencyConverter | None = None,
    ) -> None:
        self._payment_service = payment_service
        self._room_service = room_service
        self._booking_dao = booking_dao
        self._mail_sender = mail_sender
        self._currency_converter = currency_converter or CurrencyConverter()

    def get_available_place_count(self) -> int:
        """空室の定員合計を返す（呼び出しごとに再取得する）"""
        return sum(room.capacity for room in self._room_service.get_available_rooms())

    def calculate_price(self, booking_request: BookingRequest) -> Decimal:
        """宿泊料金（米ドル）を計算する"""
        return (
            self.BASE_PRICE_USD
            * booking_request.guest_count
            * booking_request.nights()
        )

    def calculate_price_euro(self, booking_request: BookingRequest) -> Decimal:
        """宿泊料金をユーロ換算で返す"""
        return self._currency_converter.to_euro(self.calculate_price(booking_request))

    def make_booking(self, booking_request: BookingRequest) -> BookingId:
        """予約を行う

        Returns:
            BookingId: 採番された予約ID

        Raises:
            BusinessRuleViolationException: 空室なし・決済失敗・通知失敗の場合
        """
        # 1. 部屋を確保
        room_id = self._room_service.find_available_room_id(booking_request)

        # 2. 料金を計算し、事前決済なら支払う
        price = self.calculate_price(booking_request)
        if booking_request.prepaid:
            self._payment_service.pay(booking_request, price)

        # 3. 部屋を割り当てて永続化
        booking_request.assign_room(room_id)
        booking_id = self._booking_dao.save(booking_request)
        self._room_service.book_room(room_id)
        logger.info(
            "Booking saved",
            extra={
                "booking_id": str(booking_id),
                "room_id": room_id,
                "price": str(price),
                "prepaid": booking_request.prepaid,
            },
        )

        # 4. 確認メールを送信（失敗しても保存済みの予約は取り消さない）
        self._mail_sender.send_booking_confirmation(booking_id)
        return booking_id

    def cancel_booking(self, booking_id: BookingId) -> None:
        """予約をキャンセルする

        Raises:
            ResourceNotFoundException: 予約が存在しない場合
        """
        booking_request = self._booking_dao.get(booking_id)
        if booking_request.room_id is not None:
            self._room_service.unbook_room(booking_request.room_id)
        self._booking_dao.delete(booking_id)
        logger.info("Booking cancelled", extra={"booking_id": str(booking_id)})
