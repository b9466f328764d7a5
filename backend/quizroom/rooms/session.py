import enum
import numbers
from dataclasses import dataclass
from typing import List, Optional

from .errors import GameAlreadyStarted, NameTaken, NoPlayers, NotAuthorized


class Phase(str, enum.Enum):
    LOBBY = 'lobby'
    ACTIVE = 'active'
    ENDED = 'ended'  # advisory; the room stays open until the host leaves


@dataclass
class Player:
    connection_id: str
    name: str
    score: int = 0

    def to_dict(self):
        return {
            'id': self.connection_id,
            'name': self.name,
            'score': self.score,
        }


class RoomSession:
    """State of one room: its host, its players and the game phase.

    Every transition either mutates the session and returns what the caller
    needs to broadcast, or raises a ``RoomError`` and leaves it untouched.
    """

    def __init__(self, code: str, host_connection_id: str):
        self.code = code
        self.host_connection_id = host_connection_id
        self.players: List[Player] = []
        self.phase = Phase.LOBBY

    def is_host(self, connection_id: str) -> bool:
        return connection_id == self.host_connection_id

    def find_player(self, connection_id: str) -> Optional[Player]:
        for player in self.players:
            if player.connection_id == connection_id:
                return player
        return None

    def check_can_join(self, name: str) -> None:
        """Raise the ``RoomError`` a join under ``name`` would fail with."""
        if self.phase != Phase.LOBBY:
            raise GameAlreadyStarted()
        if any(p.name == name for p in self.players):
            raise NameTaken(name)

    def join(self, connection_id: str, name: str) -> Player:
        self.check_can_join(name)
        player = Player(connection_id=connection_id, name=name)
        self.players.append(player)
        return player

    def start(self, connection_id: str) -> None:
        # Restarting an active or ended game is allowed; the client decides what it means.
        if not self.is_host(connection_id):
            raise NotAuthorized()
        if not self.players:
            raise NoPlayers()
        self.phase = Phase.ACTIVE

    def submit_answer(self, connection_id: str, points) -> Optional[Player]:
        """Add ``points`` to the caller's score.

        Points are trusted as sent, negative values included. Returns None
        when the caller is not a player here or the points are not a number.
        """
        player = self.find_player(connection_id)
        if player is None:
            return None
        if isinstance(points, bool) or not isinstance(points, numbers.Real):
            return None
        player.score += points
        return player

    def end(self, connection_id: str) -> Optional[List[Player]]:
        if not self.is_host(connection_id):
            return None
        # Ending from the lobby leaves the room open to joins
        if self.phase != Phase.LOBBY:
            self.phase = Phase.ENDED
        return self.leaderboard()

    def leaderboard(self) -> List[Player]:
        # sorted() is stable with reverse=True, so ties keep join order
        return sorted(self.players, key=lambda p: p.score, reverse=True)

    def remove_player(self, connection_id: str) -> Optional[Player]:
        player = self.find_player(connection_id)
        if player is not None:
            self.players.remove(player)
        return player

    def player_list(self):
        return {
            'players': [p.to_dict() for p in self.players],
            'count': len(self.players),
        }

    def to_dict(self):
        return {
            'roomCode': self.code,
            'phase': self.phase.value,
            'count': len(self.players),
            'players': [p.to_dict() for p in self.players],
        }
