from flask import Blueprint, jsonify, request, current_app
from yahtzee.services.games import GameCoordinator, GameError
from yahtzee.services.games.actions import parse_action
from yahtzee.services.games.errors import InvalidAction
from yahtzee.services.games.scoring import score_options


games = Blueprint('games', __name__)


def _coordinator() -> GameCoordinator:
    return current_app.extensions['yahtzee']


@games.errorhandler(GameError)
def handle_game_error(exc: GameError):
    current_app.logger.info(f"[rejected] path={request.path} kind={exc.kind} message={exc.message}")
    return jsonify(exc.to_dict()), exc.status_code


@games.route('', methods=['GET'])
def list_games():
    """Lobbies that have not started yet, oldest first."""
    return jsonify(_coordinator().list_open())


@games.route('/create', methods=['POST'])
def create_game():
    data = request.get_json(silent=True) or {}
    game = _coordinator().create(data.get('username'))
    return jsonify(game), 201


@games.route('/<string:game_id>', methods=['GET'])
def get_game(game_id):
    payload = _coordinator().get(game_id)
    state = payload.get('yahtzee_state')
    # Preview what each open category would score for the current player's dice
    if state and not state['game_over']:
        scored = state['scores'].get(state['current_player'], {})
        payload['score_options'] = score_options(state['dice'], scored)
    return jsonify(payload)


@games.route('/<string:game_id>', methods=['POST'])
def game_action(game_id):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidAction('Request body must be a JSON object')
    username = data.get('username')
    if not isinstance(username, str) or not username.strip():
        raise InvalidAction('username is required')
    action = parse_action(data)
    game = _coordinator().dispatch(game_id, username, action)
    current_app.logger.info(f"[action] game={game['id']} player={username} action={action.name}")
    return jsonify(game)
