import os
import random
import sys
import pytest

# Ensure the backend root (containing the `yahtzee` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from yahtzee import create_app, db, socketio
from yahtzee.models import Game
from yahtzee.services.games import GameCoordinator
from yahtzee.services.games.broadcast import RecordingBroadcaster
from yahtzee.services.games.store import MemorySessionStore


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SESSION_STORE = 'memory'
    MIN_PLAYERS = 2
    CORS_ORIGINS = ['http://localhost:3000']
    LOG_LEVEL = 'DEBUG'


class SqlTestConfig(TestConfig):
    SESSION_STORE = 'sql'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import yahtzee.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def sql_app():
    application = create_app(SqlTestConfig)
    with application.app_context():
        import yahtzee.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    if test_client.is_connected('/ws'):
        test_client.disconnect(namespace='/ws')


@pytest.fixture()
def store():
    return MemorySessionStore()


@pytest.fixture()
def recorder():
    return RecordingBroadcaster()


@pytest.fixture()
def coordinator(store, recorder):
    return GameCoordinator(store=store, broadcaster=recorder, rng=random.Random(1234))


@pytest.fixture()
def lobby(coordinator, recorder):
    """A two-player lobby hosted by alice, with notifications cleared."""
    game = coordinator.create('alice')
    coordinator.join(game['id'], 'bob')
    recorder.clear()
    return game['id']


@pytest.fixture()
def started(coordinator, lobby, recorder):
    coordinator.start(lobby, 'alice')
    recorder.clear()
    return lobby


def make_game(players=('alice', 'bob'), dice=None, started=True):
    """Build a game directly, bypassing the coordinator."""
    from yahtzee.services.games.engine import initialize_state
    game = Game(id='TEST', host=players[0], players=list(players), started=started)
    if started:
        game.yahtzee_state = initialize_state(game.players)
        if dice is not None:
            game.yahtzee_state.dice = list(dice)
    return game
