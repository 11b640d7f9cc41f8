from aws_lambda_powertools.utilities.parser import event_parser
from aws_lambda_powertools.utilities.typing import LambdaContext

from happy_hotel.booking.domain.entity import BookingRequest
from happy_hotel.booking.handlers.dependencies import booking_service
from happy_hotel.booking.handlers.request_models import MakeBookingRequest
from happy_hotel.booking.handlers.response_models import (
    BookingData,
    domain_error_response,
    error_response,
    success_response,
)
from happy_hotel.shared.domain import DomainException, Money
from happy_hotel.shared.utils import get_logger

logger = get_logger()

service = booking_service


@logger.inject_lambda_context
@event_parser(model=MakeBookingRequest)
def lambda_handler(event: MakeBookingRequest, context: LambdaContext) -> dict:
    """予約 Lambda ハンドラ

    @event_parser デコレータで自動バリデーション後、予約処理を実行する。
    """
    logger.info("Received make booking request", extra={"user_id": event.user_id})

    try:
        booking_request = BookingRequest(
            user_id=event.user_id,
            date_from=event.date_from,
            date_to=event.date_to,
            guest_count=event.guest_count,
            prepaid=event.prepaid,
        )
        # レスポンス表示用。予約処理自体は make_booking 内で料金を計算する
        price = Money.usd(service.calculate_price(booking_request))
        booking_id = service.make_booking(booking_request)
        return success_response(
            BookingData(
                booking_id=str(booking_id),
                room_id=str(booking_request.room_id),
                price_amount=str(price.amount),
                price_currency=str(price.currency),
            )
        )

    except DomainException as e:
        logger.warning("Booking rejected", extra={"reason": str(e)})
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to make booking")
        return error_response("INTERNAL_ERROR", "Internal server error")
