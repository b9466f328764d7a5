from typing import Dict, List, Optional

from .session import RoomSession


class RoomStore:
    """In-memory registry of active rooms, keyed by room code.

    Owned by the application and handed to the event router; nothing else
    creates or destroys rooms.
    """

    def __init__(self):
        self._rooms: Dict[str, RoomSession] = {}

    def create(self, code: str, host_connection_id: str) -> RoomSession:
        if code in self._rooms:
            raise ValueError(f'room code {code} is already in use')
        room = RoomSession(code, host_connection_id)
        self._rooms[code] = room
        return room

    def get(self, code: Optional[str]) -> Optional[RoomSession]:
        if code is None:
            return None
        return self._rooms.get(code)

    def delete(self, code: str) -> None:
        self._rooms.pop(code, None)

    def codes(self) -> List[str]:
        return list(self._rooms)

    def clear(self) -> None:
        self._rooms.clear()

    def __contains__(self, code) -> bool:
        return code in self._rooms

    def __len__(self) -> int:
        return len(self._rooms)
