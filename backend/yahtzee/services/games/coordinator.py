"""Session coordinator: the single entry point for every game action.

Each action runs under a lock keyed by game id. The lock covers validation,
the mutation, the store write and the notification, so actions on one
session are applied one at a time in arrival order. Sessions never share a
lock.
"""
import logging
import random
import threading
from contextlib import contextmanager
from typing import Any, Dict, FrozenSet, Iterator, List, Optional

from yahtzee.models import Game, generate_game_code
from . import engine
from .actions import Action, HoldAction, JoinAction, RollAction, ScoreAction, StartAction
from .broadcast import Broadcaster, update_payload
from .errors import (
    AlreadyStarted,
    DuplicateMember,
    GameNotFound,
    InsufficientPlayers,
    InvalidAction,
    NotHost,
)
from .scoring import Category
from .store import SessionStore

logger = logging.getLogger(__name__)


def _require_username(username: Any) -> str:
    if not isinstance(username, str) or not username.strip():
        raise InvalidAction('username is required')
    return username


class GameCoordinator:
    def __init__(self, store: SessionStore, broadcaster: Broadcaster,
                 rng: Optional[random.Random] = None, min_players: int = 2):
        self.store = store
        self.broadcaster = broadcaster
        self.rng = rng or random.Random()
        self.min_players = max(2, int(min_players))
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _lock_for(self, game_id: str) -> threading.Lock:
        """The lock of an existing game; unknown ids never get one."""
        with self._locks_guard:
            lock = self._locks.get(game_id)
            if lock is None:
                # Games kept in a shared store may predate this process
                if self.store.get(game_id) is None:
                    raise GameNotFound()
                lock = self._locks[game_id] = threading.Lock()
            return lock

    @contextmanager
    def _session(self, game_id: str, *, announce: bool = False) -> Iterator[Game]:
        """Yield the game under its lock.

        When the body returns normally the game is stored and then broadcast
        to its room (and to everyone when ``announce`` is set). When it
        raises, nothing is stored or sent.
        """
        game_id = (game_id or '').upper()
        with self._lock_for(game_id):
            game = self.store.get(game_id)
            if game is None:
                raise GameNotFound()
            yield game
            self.store.put(game)
            self._notify(game, room=True, announce=announce)

    def _notify(self, game: Game, *, room: bool = True, announce: bool = False) -> None:
        payload = update_payload(game.to_dict())
        if room:
            try:
                self.broadcaster.to_room(game.id, payload)
            except Exception:
                logger.exception(f"[broadcast] room update failed game={game.id}")
        if announce:
            try:
                self.broadcaster.to_all(payload)
            except Exception:
                logger.exception(f"[broadcast] global update failed game={game.id}")

    # ---- Queries ----

    def get(self, game_id: str) -> Dict[str, Any]:
        game_id = (game_id or '').upper()
        with self._lock_for(game_id):
            game = self.store.get(game_id)
            if game is None:
                raise GameNotFound()
            return game.to_dict()

    def list_open(self) -> List[Dict[str, Any]]:
        games = sorted((g for g in self.store.all() if not g.started), key=lambda g: g.created_at)
        return [g.to_dict() for g in games]

    # ---- Lobby ----

    def create(self, username: str) -> Dict[str, Any]:
        username = _require_username(username)
        with self._locks_guard:
            code = generate_game_code(
                is_taken=lambda c: c in self._locks or self.store.get(c) is not None
            )
            game = Game(id=code, host=username, players=[username])
            lock = self._locks[game.id] = threading.Lock()
        with lock:
            self.store.put(game)
            logger.info(f"[create] game={game.id} host={username}")
            self._notify(game, room=False, announce=True)
            return game.to_dict()

    def join(self, game_id: str, username: str) -> Dict[str, Any]:
        username = _require_username(username)
        with self._session(game_id, announce=True) as game:
            if username in game.players:
                raise DuplicateMember()
            if game.started:
                raise AlreadyStarted('Cannot join a game that has already started')
            game.players.append(username)
            logger.info(f"{username} joined game {game.id} players={len(game.players)} ready={game.ready}")
            return game.to_dict()

    def start(self, game_id: str, username: str) -> Dict[str, Any]:
        with self._session(game_id) as game:
            if game.host != username:
                raise NotHost()
            if len(game.players) < self.min_players:
                raise InsufficientPlayers(f'At least {self.min_players} players are required to start the game')
            if game.started:
                raise AlreadyStarted()
            game.started = True
            game.yahtzee_state = engine.initialize_state(game.players)
            logger.info(f"[start] game={game.id} players={game.players}")
            return game.to_dict()

    # ---- Turns ----

    def roll(self, game_id: str, username: str) -> Dict[str, Any]:
        with self._session(game_id) as game:
            engine.roll(game, username, self.rng)
            return game.to_dict()

    def hold(self, game_id: str, username: str, indexes: FrozenSet[int]) -> Dict[str, Any]:
        with self._session(game_id) as game:
            engine.hold(game, username, indexes)
            return game.to_dict()

    def score(self, game_id: str, username: str, category: Category) -> Dict[str, Any]:
        with self._session(game_id) as game:
            engine.score(game, username, category)
            return game.to_dict()

    def dispatch(self, game_id: str, username: str, action: Action) -> Dict[str, Any]:
        if isinstance(action, JoinAction):
            return self.join(game_id, username)
        if isinstance(action, StartAction):
            return self.start(game_id, username)
        if isinstance(action, RollAction):
            return self.roll(game_id, username)
        if isinstance(action, HoldAction):
            return self.hold(game_id, username, action.indexes)
        if isinstance(action, ScoreAction):
            return self.score(game_id, username, action.category)
        raise InvalidAction(f'Unsupported action: {action!r}')
