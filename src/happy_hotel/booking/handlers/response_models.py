from pydantic import BaseModel

from happy_hotel.shared.domain.exception import (
    DomainException,
    ResourceNotFoundException,
)


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    booking_id: str
    room_id: str
    price_amount: str
    price_currency: str


class CancellationData(BaseModel):
    """キャンセル結果のレスポンスモデル"""

    booking_id: str


class PriceData(BaseModel):
    """料金見積もりのレスポンスモデル"""

    nights: int
    price_usd: str
    price_eur: str


class AvailabilityData(BaseModel):
    """空室状況のレスポンスモデル"""

    available_places: int


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: BookingData | CancellationData | PriceData | AvailabilityData


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: list | None = None


def success_response(
    data: BookingData | CancellationData | PriceData | AvailabilityData,
) -> dict:
    return SuccessResponse(data=data).model_dump()


def error_response(error_code: str, message: str, details: list | None = None) -> dict:
    """エラーレスポンスを生成"""
    return ErrorResponse(
        error_code=error_code,
        message=message,
        details=details,
    ).model_dump(exclude_none=True)


def domain_error_response(error: DomainException) -> dict:
    """ドメイン例外をエラーレスポンスに変換"""
    if isinstance(error, ResourceNotFoundException):
        return error_response("NOT_FOUND", str(error))
    return error_response("BUSINESS_RULE_VIOLATION", str(error))
