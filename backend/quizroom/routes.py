from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)


def _router():
    return current_app.extensions['quizroom']


@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the quiz room server!'})


@main.route('/health')
def health():
    router = _router()
    with router.lock:
        count = len(router.store)
    return jsonify({'status': 'ok', 'rooms': count})


@main.route('/api/rooms/<string:room_code>')
def get_room(room_code):
    """
    Returns the public state of a room so a client can check a code before joining.
    """
    router = _router()
    with router.lock:
        room = router.store.get(room_code.strip())
        if room is None:
            return jsonify({'error': 'Room not found'}), 404
        return jsonify(room.to_dict()), 200
