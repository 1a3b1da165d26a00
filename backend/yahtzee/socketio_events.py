from flask_socketio import join_room, leave_room, emit
from flask import current_app
from yahtzee import socketio
from yahtzee.services.games import GameError
from yahtzee.services.games.broadcast import room_for, update_payload


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_join_game(data):
    """Subscribe this socket to a game's updates and send it the current state."""
    game_id = (data or {}).get('game_id')
    if not game_id or not isinstance(game_id, str):
        emit('error', {'message': 'game_id is required'})
        return
    room = room_for(game_id)
    join_room(room)
    emit('joined', {'room': room})
    try:
        snapshot = current_app.extensions['yahtzee'].get(game_id)
    except GameError as exc:
        emit('error', exc.to_dict())
        return
    emit('game_update', update_payload(snapshot))


def handle_leave_game(data):
    game_id = (data or {}).get('game_id')
    if not game_id or not isinstance(game_id, str):
        emit('error', {'message': 'game_id is required'})
        return
    room = room_for(game_id)
    leave_room(room)
    emit('left', {'room': room})


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    handlers = {
        'connect': handle_connect,
        'join_game': handle_join_game,
        'leave_game': handle_leave_game,
        'ping': handle_ping,
    }
    namespaces = ['/ws', '/'] if testing else ['/ws']
    for namespace in namespaces:
        for event, handler in handlers.items():
            socketio.on_event(event, handler, namespace=namespace)
