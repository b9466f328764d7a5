import click

from quizroom import create_app, shutdown_app, socketio

app = create_app()


@click.command()
@click.option('--host', default=lambda: app.config['HOST'], show_default='HOST or 0.0.0.0', help='Interface to listen on.')
@click.option('--port', type=int, default=lambda: app.config['PORT'], show_default='PORT or 3000', help='Port to listen on.')
@click.option('--debug', is_flag=True, help='Run with the Flask debugger and reloader.')
def serve(host, port, debug):
    """Run the quiz room Socket.IO server."""
    click.echo(f'Server running on http://{host}:{port}')
    try:
        socketio.run(app, host=host, port=port, debug=debug, allow_unsafe_werkzeug=debug)
    finally:
        shutdown_app(app)


if __name__ == '__main__':
    serve()
