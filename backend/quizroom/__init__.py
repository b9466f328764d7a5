import logging

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO

from quizroom.config import Config, parse_origins
from quizroom.rooms import RoomStore

socketio = SocketIO(async_mode=None)


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(getattr(logging, str(flask_app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO))

    allowed_origins = parse_origins(flask_app.config.get('CORS_ALLOWED_ORIGINS', '*'))
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from quizroom.routes import main
    flask_app.register_blueprint(main)

    # The store lives as long as this app; handlers get it through the router
    from quizroom.socketio_events import register_socketio_handlers
    store = RoomStore()
    router = register_socketio_handlers(
        socketio,
        store,
        namespace=flask_app.config.get('SOCKETIO_NAMESPACE', '/'),
    )
    flask_app.extensions['quizroom'] = router
    flask_app.logger.info(f"[startup] socket handlers bound on namespace={flask_app.config.get('SOCKETIO_NAMESPACE', '/')}")

    return flask_app


def shutdown_app(flask_app) -> None:
    """Drop every room and binding held by ``flask_app``."""
    router = flask_app.extensions.get('quizroom')
    if router is None:
        return
    with router.lock:
        router.store.clear()
        router.bindings.clear()
    flask_app.logger.info('[shutdown] room store cleared')
