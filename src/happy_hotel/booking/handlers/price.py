from aws_lambda_powertools.utilities.parser import event_parser
from aws_lambda_powertools.utilities.typing import LambdaContext

from happy_hotel.booking.domain.entity import BookingRequest
from happy_hotel.booking.handlers.dependencies import booking_service
from happy_hotel.booking.handlers.request_models import StayRequest
from happy_hotel.booking.handlers.response_models import PriceData, success_response
from happy_hotel.shared.utils import get_logger

logger = get_logger()

service = booking_service


@logger.inject_lambda_context
@event_parser(model=StayRequest)
def lambda_handler(event: StayRequest, context: LambdaContext) -> dict:
    """料金見積もり Lambda Handler（副作用なし）"""
    logger.info("Received price quote request")

    # 見積もりのみのためユーザーは匿名
    booking_request = BookingRequest(
        user_id="anonymous",
        date_from=event.date_from,
        date_to=event.date_to,
        guest_count=event.guest_count,
        prepaid=False,
    )
    return success_response(
        PriceData(
            nights=booking_request.nights(),
            price_usd=str(service.calculate_price(booking_request)),
            price_eur=str(service.calculate_price_euro(booking_request)),
        )
    )
