from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class StayPeriod:
    """滞在期間(チェックイン日 + チェックアウト日)"""

    check_in: date
    check_out: date

    def __post_init__(self) -> None:
        if self.check_out <= self.check_in:
            raise ValueError("Check-out date must be after check-in date")

    def nights(self) -> int:
        """宿泊数を計算する"""
        return (self.check_out - self.check_in).days
