"""Where game sessions live between actions.

The coordinator only needs ``get``, ``put`` and ``all``. ``SqlSessionStore``
keeps each session as a JSON document in the ``game_record`` table and needs
an application context.
"""
from typing import Dict, List, Optional, Protocol

from yahtzee import db
from yahtzee.models import Game, GameRecord


class SessionStore(Protocol):
    def get(self, game_id: str) -> Optional[Game]: ...

    def put(self, game: Game) -> None: ...

    def all(self) -> List[Game]: ...


class MemorySessionStore:
    def __init__(self) -> None:
        self._games: Dict[str, Game] = {}

    def get(self, game_id: str) -> Optional[Game]:
        return self._games.get(game_id)

    def put(self, game: Game) -> None:
        self._games[game.id] = game

    def all(self) -> List[Game]:
        return list(self._games.values())


class SqlSessionStore:
    def get(self, game_id: str) -> Optional[Game]:
        record = db.session.get(GameRecord, game_id)
        return record.to_game() if record else None

    def put(self, game: Game) -> None:
        record = db.session.get(GameRecord, game.id)
        if record is None:
            record = GameRecord(id=game.id)
        record.update_from(game)
        db.session.add(record)
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

    def all(self) -> List[Game]:
        records = GameRecord.query.order_by(GameRecord.created_at).all()
        return [r.to_game() for r in records]


def build_store(kind: str) -> SessionStore:
    if kind == 'memory':
        return MemorySessionStore()
    if kind == 'sql':
        return SqlSessionStore()
    raise ValueError(f"Unknown SESSION_STORE {kind!r}; expected 'memory' or 'sql'")
