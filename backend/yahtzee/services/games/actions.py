"""Typed player actions and the one place request payloads become them.

Anything that gets past ``parse_action`` is already valid: dice indexes are
integers in range and categories are ``Category`` members.
"""
from dataclasses import dataclass
from typing import Any, FrozenSet, Mapping, Union

from yahtzee.models import DICE_COUNT
from .errors import InvalidAction, InvalidCategory, InvalidSelection
from .scoring import CATEGORY_NAMES, Category


@dataclass(frozen=True)
class JoinAction:
    name = 'join'


@dataclass(frozen=True)
class StartAction:
    name = 'start'


@dataclass(frozen=True)
class RollAction:
    name = 'roll'


@dataclass(frozen=True)
class HoldAction:
    indexes: FrozenSet[int]
    name = 'hold'


@dataclass(frozen=True)
class ScoreAction:
    category: Category
    name = 'score'


Action = Union[JoinAction, StartAction, RollAction, HoldAction, ScoreAction]


def parse_dice_indexes(raw: Any) -> FrozenSet[int]:
    if not isinstance(raw, (list, tuple)):
        raise InvalidSelection()
    for index in raw:
        # bool is an int subclass but never a die position
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidSelection()
        if not 0 <= index < DICE_COUNT:
            raise InvalidSelection()
    return frozenset(raw)


def parse_category(raw: Any) -> Category:
    if not isinstance(raw, str) or not raw.strip():
        raise InvalidCategory('category is required and must be a non-empty string')
    if raw not in CATEGORY_NAMES:
        raise InvalidCategory()
    return Category(raw)


def parse_action(payload: Mapping[str, Any]) -> Action:
    name = payload.get('action') if isinstance(payload, Mapping) else None
    if name == 'join':
        return JoinAction()
    if name == 'start':
        return StartAction()
    if name == 'roll':
        return RollAction()
    if name == 'hold':
        return HoldAction(indexes=parse_dice_indexes(payload.get('dice_indexes')))
    if name == 'score':
        return ScoreAction(category=parse_category(payload.get('category')))
    raise InvalidAction(f'Unknown action: {name!r}')
