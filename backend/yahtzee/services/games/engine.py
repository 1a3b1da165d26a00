"""Turn and dice state machine for one Yahtzee round state.

Each operation checks all of its preconditions before the first write, so a
rejected action leaves the state exactly as it was.
"""
import logging
import random
from typing import AbstractSet, List, Optional, Sequence

from yahtzee.models import DICE_COUNT, Game, YahtzeeState
from .errors import AlreadyScored, GameOver, InvalidSelection, NoRollsLeft, NotStarted, OutOfTurn
from .scoring import ALL_CATEGORIES, Category, calculate_score

logger = logging.getLogger(__name__)


def initialize_state(players: Sequence[str]) -> YahtzeeState:
    return YahtzeeState(current_player=players[0])


def require_turn(game: Game, username: str) -> YahtzeeState:
    """Return the round state if ``username`` may act on it now."""
    state = game.yahtzee_state
    if not game.started or state is None:
        raise NotStarted()
    if state.game_over:
        raise GameOver()
    if state.current_player != username:
        raise OutOfTurn()
    return state


def roll(game: Game, username: str, rng: Optional[random.Random] = None) -> List[int]:
    state = require_turn(game, username)
    if state.rolls_left <= 0:
        raise NoRollsLeft()
    rng = rng or random
    state.dice = [
        die if state.held_dice[i] else rng.randint(1, 6)
        for i, die in enumerate(state.dice)
    ]
    state.rolls_left -= 1
    logger.info(f"[roll] game={game.id} player={username} dice={state.dice} rolls_left={state.rolls_left}")
    return state.dice


def hold(game: Game, username: str, indexes: AbstractSet[int]) -> List[bool]:
    state = require_turn(game, username)
    for index in sorted(indexes):
        if not 0 <= index < DICE_COUNT:
            raise InvalidSelection()
    for index in indexes:
        state.held_dice[index] = not state.held_dice[index]
    return state.held_dice


def has_scored_everything(state: YahtzeeState, players: Sequence[str]) -> bool:
    return all(
        all(c.value in state.scores.get(player, {}) for c in ALL_CATEGORIES)
        for player in players
    )


def score(game: Game, username: str, category: Category) -> int:
    """Record ``category`` for the acting player and pass the turn on.

    The score uses the face value of every die, held or not.
    """
    state = require_turn(game, username)
    category = Category(category)
    sheet = state.scores.get(username, {})
    if category.value in sheet:
        raise AlreadyScored()

    points = calculate_score(category, state.dice)
    sheet = state.scores.setdefault(username, {'total': 0})
    sheet[category.value] = points
    sheet['total'] = sum(v for k, v in sheet.items() if k != 'total')

    state.reset_turn()
    index = game.players.index(username)
    state.current_player = game.players[(index + 1) % len(game.players)]

    if has_scored_everything(state, game.players):
        state.game_over = True
        totals = {p: state.scores[p]['total'] for p in game.players}
        logger.info(f"[game_over] game={game.id} totals={totals}")
    logger.info(
        f"[score] game={game.id} player={username} category={category.value} points={points} next={state.current_player}"
    )
    return points
