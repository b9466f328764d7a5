import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Listening address for run.py
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3000'))
    # Comma separated; '*' allows any origin
    CORS_ALLOWED_ORIGINS = os.environ.get('CORS_ALLOWED_ORIGINS', '*')
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


def parse_origins(value):
    """Turn the CORS_ALLOWED_ORIGINS setting into what Flask-Cors and Socket.IO expect."""
    if isinstance(value, (list, tuple)):
        return list(value)
    origins = [o.strip() for o in (value or '').split(',') if o.strip()]
    if not origins or '*' in origins:
        return '*'
    return origins
