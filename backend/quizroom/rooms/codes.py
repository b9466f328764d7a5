import random

CODE_MIN = 100000
CODE_MAX = 999999


def generate_room_code(store) -> str:
    """Generate a 6-digit room code not used by any active room."""
    while True:
        code = str(random.randint(CODE_MIN, CODE_MAX))
        if code not in store:
            return code
