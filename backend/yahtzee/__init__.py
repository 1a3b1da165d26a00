from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import logging
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()
socketio = SocketIO(async_mode=None)


def create_app(config_class=Config, coordinator=None):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    logging.basicConfig(level=flask_app.config.get('LOG_LEVEL', 'INFO'))
    logging.getLogger('yahtzee').setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config.get('CORS_ORIGINS') or []
    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, supports_credentials=True, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # The coordinator is the only way game state changes; tests may inject one
    if coordinator is None:
        from yahtzee.services.games import GameCoordinator
        from yahtzee.services.games.broadcast import SocketIOBroadcaster
        from yahtzee.services.games.store import build_store
        coordinator = GameCoordinator(
            store=build_store(flask_app.config.get('SESSION_STORE', 'memory')),
            broadcaster=SocketIOBroadcaster(socketio),
            min_players=flask_app.config.get('MIN_PLAYERS', 2),
        )
    flask_app.extensions['yahtzee'] = coordinator

    from yahtzee.api.games import games
    flask_app.register_blueprint(games, url_prefix='/api/games')

    from yahtzee.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    @flask_app.route('/')
    def index():
        return jsonify({'message': 'Welcome to the Yahtzee game server!'})

    @click.command('db-reset')
    def db_reset_command():
        """Drops and recreates the game tables."""
        import yahtzee.models  # noqa: F401
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            print('Database has been reset!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
