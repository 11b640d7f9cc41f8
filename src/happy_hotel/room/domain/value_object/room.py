from dataclasses import dataclass


@dataclass(frozen=True)
class Room:
    """客室（部屋ID + 定員）"""

    room_id: str
    capacity: int

    def __post_init__(self) -> None:
        if not self.room_id or len(self.room_id.strip()) == 0:
            raise ValueError("Room id cannot be empty")
        if self.capacity < 1:
            raise ValueError("Room capacity must be positive")

    def __str__(self) -> str:
        return self.room_id

    def can_accommodate(self, guest_count: int) -> bool:
        """指定人数を収容できるかどうか"""
        return guest_count <= self.capacity
