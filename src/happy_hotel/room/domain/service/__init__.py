from .room_service import RoomService

__all__ = ["RoomService"]
