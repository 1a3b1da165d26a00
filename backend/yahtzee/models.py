from yahtzee import db
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import copy
import json
import random
import string
import time

DICE_COUNT = 5
ROLLS_PER_TURN = 3


def generate_game_code(length=4, is_taken=lambda code: False):
    """Generate a short game code for which ``is_taken`` is false."""
    while True:
        code = ''.join(random.choices(string.ascii_uppercase + string.digits, k=length))
        if not is_taken(code):
            return code


@dataclass
class YahtzeeState:
    current_player: str
    dice: List[int] = field(default_factory=lambda: [0] * DICE_COUNT)
    held_dice: List[bool] = field(default_factory=lambda: [False] * DICE_COUNT)
    rolls_left: int = ROLLS_PER_TURN
    scores: Dict[str, Dict[str, int]] = field(default_factory=dict)
    game_over: bool = False

    def reset_turn(self) -> None:
        self.dice = [0] * DICE_COUNT
        self.held_dice = [False] * DICE_COUNT
        self.rolls_left = ROLLS_PER_TURN

    def to_dict(self) -> Dict[str, Any]:
        return {
            'current_player': self.current_player,
            'dice': list(self.dice),
            'held_dice': list(self.held_dice),
            'rolls_left': self.rolls_left,
            'scores': copy.deepcopy(self.scores),
            'game_over': self.game_over,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'YahtzeeState':
        return cls(
            current_player=data['current_player'],
            dice=list(data['dice']),
            held_dice=list(data['held_dice']),
            rolls_left=int(data['rolls_left']),
            scores=copy.deepcopy(data.get('scores') or {}),
            game_over=bool(data.get('game_over')),
        )


@dataclass
class Game:
    id: str
    host: str
    players: List[str] = field(default_factory=list)
    started: bool = False
    yahtzee_state: Optional[YahtzeeState] = None
    created_at: float = field(default_factory=time.time)

    @property
    def ready(self) -> bool:
        return len(self.players) >= 2

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'host': self.host,
            'players': list(self.players),
            'ready': self.ready,
            'started': self.started,
            'yahtzee_state': self.yahtzee_state.to_dict() if self.yahtzee_state else None,
            'created_at': self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Game':
        state = data.get('yahtzee_state')
        return cls(
            id=data['id'],
            host=data['host'],
            players=list(data.get('players') or []),
            started=bool(data.get('started')),
            yahtzee_state=YahtzeeState.from_dict(state) if state else None,
            created_at=float(data.get('created_at') or time.time()),
        )


class GameRecord(db.Model):
    """A game session stored as a JSON document, keyed by its code."""
    __tablename__ = 'game_record'
    id = db.Column(db.String(16), primary_key=True)
    started = db.Column(db.Boolean, default=False, nullable=False, index=True)
    payload = db.Column(db.Text, nullable=False)  # JSON-encoded Game.to_dict()
    created_at = db.Column(db.Float, nullable=False)

    def to_game(self) -> Game:
        return Game.from_dict(json.loads(self.payload))

    def update_from(self, game: Game) -> None:
        self.started = game.started
        self.payload = json.dumps(game.to_dict())
        self.created_at = game.created_at
