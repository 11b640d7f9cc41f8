from datetime import date

from pydantic import BaseModel, Field, model_validator


class StayRequest(BaseModel):
    """滞在条件のリクエストモデル"""

    date_from: date = Field(
        ...,
        description="チェックイン日（YYYY-MM-DD形式）",
        examples=["2022-01-01"],
    )
    date_to: date = Field(
        ...,
        description="チェックアウト日（YYYY-MM-DD形式）",
        examples=["2022-01-10"],
    )
    guest_count: int = Field(..., gt=0, description="宿泊人数")

    @model_validator(mode="after")
    def check_dates(self) -> "StayRequest":
        if self.date_to <= self.date_from:
            raise ValueError("Check-out date must be after check-in date")
        return self


class MakeBookingRequest(StayRequest):
    """予約リクエストモデル"""

    user_id: str = Field(..., min_length=1)
    prepaid: bool = Field(default=False, description="事前決済するかどうか")


class CancelBookingRequest(BaseModel):
    """予約キャンセルリクエストモデル"""

    booking_id: str = Field(..., min_length=1)
