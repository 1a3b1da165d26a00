"""Classified errors raised by the game services.

Every error is recoverable by the caller: it is raised before any state is
written, carries a stable ``kind`` for clients and the HTTP status the API
layer answers with.
"""


class GameError(Exception):
    kind = 'GameError'
    status_code = 400
    default_message = 'Invalid game action'

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {'error': self.message, 'kind': self.kind}


class GameNotFound(GameError):
    kind = 'GameNotFound'
    status_code = 404
    default_message = 'Game not found'


class InvalidAction(GameError):
    kind = 'InvalidAction'
    default_message = 'Unknown or malformed action'


class DuplicateMember(GameError):
    kind = 'DuplicateMember'
    status_code = 409
    default_message = 'User already in the game'


class NotHost(GameError):
    kind = 'NotHost'
    status_code = 403
    default_message = 'Only the host can start the game'


class InsufficientPlayers(GameError):
    kind = 'InsufficientPlayers'
    default_message = 'At least 2 players are required to start the game'


class AlreadyStarted(GameError):
    kind = 'AlreadyStarted'
    status_code = 409
    default_message = 'Game has already started'


class NotStarted(GameError):
    kind = 'NotStarted'
    default_message = 'Game has not started yet'


class GameOver(GameError):
    kind = 'GameOver'
    status_code = 409
    default_message = 'Game is over'


class OutOfTurn(GameError):
    kind = 'OutOfTurn'
    status_code = 403
    default_message = 'Not your turn!'


class NoRollsLeft(GameError):
    kind = 'NoRollsLeft'
    default_message = 'No rolls left!'


class InvalidSelection(GameError):
    kind = 'InvalidSelection'
    default_message = 'dice_indexes must be a list of integers between 0 and 4'


class InvalidCategory(GameError):
    kind = 'InvalidCategory'
    default_message = 'Invalid category'


class AlreadyScored(GameError):
    kind = 'AlreadyScored'
    status_code = 409
    default_message = 'Category already scored!'
