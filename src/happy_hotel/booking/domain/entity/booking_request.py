from datetime import date

from happy_hotel.booking.domain.value_object.stay_period import StayPeriod


class BookingRequest:
    """予約リクエスト

    部屋の割り当て（assign_room）以外は不変。
    """

    def __init__(
        self,
        user_id: str,
        date_from: date,
        date_to: date,
        guest_count: int,
        prepaid: bool,
        room_id: str | None = None,
    ) -> None:
        if guest_count < 1:
            raise ValueError("Guest count must be positive")
        self._user_id = user_id
        self._stay_period = StayPeriod(check_in=date_from, check_out=date_to)
        self._guest_count = guest_count
        self._prepaid = prepaid
        self._room_id = room_id

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def date_from(self) -> date:
        return self._stay_period.check_in

    @property
    def date_to(self) -> date:
        return self._stay_period.check_out

    @property
    def stay_period(self) -> StayPeriod:
        return self._stay_period

    @property
    def guest_count(self) -> int:
        return self._guest_count

    @property
    def prepaid(self) -> bool:
        return self._prepaid

    @property
    def room_id(self) -> str | None:
        return self._room_id

    def nights(self) -> int:
        """宿泊数"""
        return self._stay_period.nights()

    def assign_room(self, room_id: str) -> None:
        """割り当てられた部屋を記録する"""
        self._room_id = room_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BookingRequest):
            return False
        return (
            self._user_id == other._user_id
            and self._stay_period == other._stay_period
            and self._guest_count == other._guest_count
            and self._prepaid == other._prepaid
            and self._room_id == other._room_id
        )

    # room_id が変わりうるため hash 不可
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"BookingRequest(user_id={self._user_id!r}, "
            f"date_from={self.date_from!r}, date_to={self.date_to!r}, "
            f"guest_count={self._guest_count!r}, prepaid={self._prepaid!r}, "
            f"room_id={self._room_id!r})"
        )
