from collections import Counter
from enum import Enum
from typing import Dict, Iterable, Sequence


class Category(str, Enum):
    ONES = 'ones'
    TWOS = 'twos'
    THREES = 'threes'
    FOURS = 'fours'
    FIVES = 'fives'
    SIXES = 'sixes'
    THREE_OF_A_KIND = 'three of a kind'
    FOUR_OF_A_KIND = 'four of a kind'
    FULL_HOUSE = 'full house'
    SMALL_STRAIGHT = 'small straight'
    LARGE_STRAIGHT = 'large straight'
    CHANCE = 'chance'
    YAHTZEE = 'yahtzee'


ALL_CATEGORIES = tuple(Category)
UPPER_CATEGORIES = ALL_CATEGORIES[:6]
CATEGORY_NAMES = frozenset(c.value for c in ALL_CATEGORIES)

FULL_HOUSE_SCORE = 25
SMALL_STRAIGHT_SCORE = 30
LARGE_STRAIGHT_SCORE = 40
YAHTZEE_SCORE = 50

_FACE_VALUES = {category: face for face, category in enumerate(UPPER_CATEGORIES, start=1)}
_SMALL_STRAIGHTS = ({1, 2, 3, 4}, {2, 3, 4, 5}, {3, 4, 5, 6})
_LARGE_STRAIGHTS = ({1, 2, 3, 4, 5}, {2, 3, 4, 5, 6})


def calculate_score(category: Category, dice: Sequence[int]) -> int:
    """Points ``dice`` are worth in ``category``.

    Uses the face value of every die, held or not. Unrolled dice (0) count
    for nothing, so an unrolled hand is never a Yahtzee.
    """
    category = Category(category)
    counts = Counter(d for d in dice if 1 <= d <= 6)
    total = sum(dice)

    if category in _FACE_VALUES:
        face = _FACE_VALUES[category]
        return face * counts[face]

    most_common = max(counts.values(), default=0)
    faces = set(counts)

    if category == Category.THREE_OF_A_KIND:
        return total if most_common >= 3 else 0
    if category == Category.FOUR_OF_A_KIND:
        return total if most_common >= 4 else 0
    if category == Category.FULL_HOUSE:
        # A triple plus a pair of a different face; five alike does not count
        return FULL_HOUSE_SCORE if sorted(counts.values()) == [2, 3] else 0
    if category == Category.SMALL_STRAIGHT:
        return SMALL_STRAIGHT_SCORE if any(s <= faces for s in _SMALL_STRAIGHTS) else 0
    if category == Category.LARGE_STRAIGHT:
        return LARGE_STRAIGHT_SCORE if any(s == faces for s in _LARGE_STRAIGHTS) else 0
    if category == Category.CHANCE:
        return total
    if category == Category.YAHTZEE:
        return YAHTZEE_SCORE if most_common == len(dice) == 5 else 0
    raise ValueError(f'Unhandled category: {category!r}')


def score_options(dice: Sequence[int], scored: Iterable[str] = ()) -> Dict[str, int]:
    """Preview what every still-open category would award for ``dice``."""
    taken = set(scored)
    return {
        category.value: calculate_score(category, dice)
        for category in ALL_CATEGORIES
        if category.value not in taken
    }
