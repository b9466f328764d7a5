"""Room domain: codes, sessions and the in-memory store.

Nothing in this package knows about Socket.IO; the event router in
``quizroom.socketio_events`` translates results into emits.
"""

from .codes import generate_room_code
from .errors import (
    GameAlreadyStarted,
    NameTaken,
    NoPlayers,
    NotAuthorized,
    RoomError,
    RoomNotFound,
)
from .session import Phase, Player, RoomSession
from .store import RoomStore

__all__ = [
    'generate_room_code',
    'GameAlreadyStarted',
    'NameTaken',
    'NoPlayers',
    'NotAuthorized',
    'RoomError',
    'RoomNotFound',
    'Phase',
    'Player',
    'RoomSession',
    'RoomStore',
]
