import enum
import threading
from dataclasses import dataclass
from typing import Dict, Optional

from flask import current_app, request
from flask_socketio import close_room, emit, join_room, leave_room

from quizroom.rooms import (
    NotAuthorized,
    RoomError,
    RoomNotFound,
    RoomStore,
    generate_room_code,
)

GAME_STARTED_MESSAGE = 'The game has started!'
HOST_LEFT_MESSAGE = 'The host disconnected, so the game is over!'
HOST_JOIN_MESSAGE = 'The host cannot join their own room as a player!'


class Role(str, enum.Enum):
    HOST = 'host'
    PLAYER = 'player'


@dataclass
class Binding:
    """Which room a connection is in, and as what."""
    room_code: Optional[str] = None
    role: Optional[Role] = None
    display_name: Optional[str] = None


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _payload(data) -> dict:
    return data if isinstance(data, dict) else {}


class EventRouter:
    """Dispatch Socket.IO events to room sessions.

    The caller's room is always resolved from ``bindings`` (keyed by sid),
    never by searching rooms for the connection. All handlers run under
    one lock so each event completes before the next touches any room.
    """

    def __init__(self, store: RoomStore):
        self.store = store
        self.bindings: Dict[str, Binding] = {}
        self.lock = threading.RLock()

    def _binding(self, sid: str) -> Binding:
        return self.bindings.setdefault(sid, Binding())

    def _release(self, sid: str, binding: Binding) -> None:
        """Take ``sid`` out of its current room, as a disconnect would."""
        room = self.store.get(binding.room_code)
        if room is None:
            return
        if binding.role is Role.HOST and room.is_host(sid):
            emit('hostDisconnected', {'message': HOST_LEFT_MESSAGE}, to=room.code, include_self=False)
            for player in room.players:
                other = self.bindings.get(player.connection_id)
                if other is not None and other.room_code == room.code:
                    self.bindings[player.connection_id] = Binding()
            self.store.delete(room.code)
            close_room(room.code)
            current_app.logger.info(f"[disconnect] room={room.code} deleted, host left")
            return
        leave_room(room.code)
        player = room.remove_player(sid)
        if player is None:
            return
        emit('playerList', room.player_list(), to=room.code, include_self=False)
        current_app.logger.info(f"[disconnect] {binding.display_name or player.name} left room={room.code}")

    def handle_connect(self, auth=None):
        sid = _get_sid()
        with self.lock:
            self.bindings[sid] = Binding()
        current_app.logger.debug(f"[connect] sid={sid}")

    def handle_disconnect(self, reason=None):
        sid = _get_sid()
        with self.lock:
            binding = self.bindings.pop(sid, None)
            if binding is not None:
                self._release(sid, binding)
        current_app.logger.debug(f"[disconnect] sid={sid} reason={reason}")

    def handle_create_game(self, data=None):
        sid = _get_sid()
        with self.lock:
            self._release(sid, self._binding(sid))
            code = generate_room_code(self.store)
            self.store.create(code, sid)
            join_room(code)
            self.bindings[sid] = Binding(room_code=code, role=Role.HOST)
            emit('gameCreated', {'roomCode': code})
        current_app.logger.info(f"[createGame] room={code} host={sid}")

    def handle_join_game(self, data=None):
        data = _payload(data)
        code = data.get('roomCode')
        name = data.get('playerName')
        if code is None or str(code).strip() == '':
            emit('error', {'message': 'roomCode is required'})
            return
        if not isinstance(name, str) or not name:
            emit('error', {'message': 'playerName is required'})
            return
        code = str(code).strip()

        sid = _get_sid()
        with self.lock:
            binding = self._binding(sid)
            try:
                room = self.store.get(code)
                if room is None:
                    raise RoomNotFound(code)
                if binding.role is Role.HOST and binding.room_code == code:
                    raise NotAuthorized(HOST_JOIN_MESSAGE)
                room.check_can_join(name)
            except RoomError as exc:
                current_app.logger.info(f"[joinGame] rejected room={code} name={name!r}: {exc.message}")
                emit('error', {'message': exc.message})
                return
            # Only a join that will succeed moves the caller out of its old room
            self._release(sid, binding)
            room.join(sid, name)
            join_room(code)
            self.bindings[sid] = Binding(room_code=code, role=Role.PLAYER, display_name=name)
            emit('playerList', room.player_list(), to=code)
            emit('joinedGame', {'roomCode': code, 'playerName': name})
        current_app.logger.info(f"[joinGame] {name} joined room={code}")

    def handle_start_game(self, data=None):
        sid = _get_sid()
        with self.lock:
            room = self.store.get(self._binding(sid).room_code)
            try:
                if room is None:
                    raise NotAuthorized()
                room.start(sid)
            except RoomError as exc:
                emit('error', {'message': exc.message})
                return
            emit('gameStarted', {
                'message': GAME_STARTED_MESSAGE,
                'players': [p.to_dict() for p in room.players],
            }, to=room.code)
        current_app.logger.info(f"[startGame] room={room.code} players={len(room.players)}")

    def handle_submit_answer(self, data=None):
        data = _payload(data)
        sid = _get_sid()
        with self.lock:
            room = self.store.get(self._binding(sid).room_code)
            if room is None:
                return
            player = room.submit_answer(sid, data.get('points'))
            if player is None:
                current_app.logger.debug(
                    f"[submitAnswer] ignored sid={sid} room={room.code} question={data.get('questionIndex')}"
                )
                return
            emit('scoreUpdated', {
                'playerId': player.connection_id,
                'playerName': player.name,
                'score': player.score,
            }, to=room.code)

    def handle_end_game(self, data=None):
        sid = _get_sid()
        with self.lock:
            room = self.store.get(self._binding(sid).room_code)
            if room is None:
                return
            leaderboard = room.end(sid)
            if leaderboard is None:
                return
            emit('gameEnded', {'leaderboard': [p.to_dict() for p in leaderboard]}, to=room.code)
        current_app.logger.info(f"[endGame] room={room.code}")

    def register(self, socketio, namespace: str = '/') -> None:
        socketio.on_event('connect', self.handle_connect, namespace=namespace)
        socketio.on_event('disconnect', self.handle_disconnect, namespace=namespace)
        socketio.on_event('createGame', self.handle_create_game, namespace=namespace)
        socketio.on_event('joinGame', self.handle_join_game, namespace=namespace)
        socketio.on_event('startGame', self.handle_start_game, namespace=namespace)
        socketio.on_event('submitAnswer', self.handle_submit_answer, namespace=namespace)
        socketio.on_event('endGame', self.handle_end_game, namespace=namespace)


def register_socketio_handlers(socketio, store: RoomStore, namespace: str = '/') -> EventRouter:
    """Build the event router for ``store`` and bind it to ``namespace``."""
    router = EventRouter(store)
    router.register(socketio, namespace=namespace)
    return router
