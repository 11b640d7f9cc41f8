from .service import RoomService
from .value_object import Room

__all__ = ["Room", "RoomService"]
