class RoomError(Exception):
    """Base class for rejected room transitions.

    ``message`` is sent back to the originating connection as-is.
    """

    message = 'Room error'

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class RoomNotFound(RoomError):
    message = 'Room not found!'

    def __init__(self, code=None):
        self.code = code
        super().__init__()


class GameAlreadyStarted(RoomError):
    message = 'The game has already started!'


class NameTaken(RoomError):
    message = 'That name is already taken!'

    def __init__(self, name=None):
        self.name = name
        super().__init__()


class NotAuthorized(RoomError):
    message = 'Only the host can do that!'


class NoPlayers(RoomError):
    message = 'There are no players yet!'
