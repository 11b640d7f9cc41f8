from aws_lambda_powertools.utilities.typing import LambdaContext

from happy_hotel.booking.domain.value_object import BookingId
from happy_hotel.booking.handlers.dependencies import booking_service
from happy_hotel.booking.handlers.request_models import CancelBookingRequest
from happy_hotel.booking.handlers.response_models import (
    CancellationData,
    domain_error_response,
    success_response,
)
from happy_hotel.shared.domain import DomainException
from happy_hotel.shared.utils import get_logger

logger = get_logger()

service = booking_service


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """予約キャンセル Lambda Handler"""
    logger.info("Received cancel booking request")

    payload = event.get("Payload", event)
    request = CancelBookingRequest.model_validate(payload)
    booking_id = BookingId(value=request.booking_id)

    try:
        service.cancel_booking(booking_id)
    except DomainException as e:
        logger.warning("Cancellation rejected", extra={"reason": str(e)})
        return domain_error_response(e)

    return success_response(CancellationData(booking_id=str(booking_id)))
