from aws_lambda_powertools.utilities.typing import LambdaContext

from happy_hotel.booking.handlers.dependencies import booking_service
from happy_hotel.booking.handlers.response_models import (
    AvailabilityData,
    success_response,
)
from happy_hotel.shared.utils import get_logger

logger = get_logger()

service = booking_service


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """空き定員数取得 Lambda Handler"""
    available_places = service.get_available_place_count()
    logger.info("Counted available places", extra={"available_places": available_places})
    return success_response(AvailabilityData(available_places=available_places))
