from typing import Any, Dict, List, Optional, Protocol, Tuple

GAME_UPDATE_EVENT = 'game_update'
NAMESPACE = '/ws'


def room_for(game_id: str) -> str:
    return f"game:{game_id.upper()}"


def update_payload(snapshot: Dict[str, Any]) -> Dict[str, Any]:
    return {'type': 'update', 'game': snapshot}


class Broadcaster(Protocol):
    def to_room(self, game_id: str, payload: Dict[str, Any]) -> None: ...

    def to_all(self, payload: Dict[str, Any]) -> None: ...


class SocketIOBroadcaster:
    """Emit game updates to Socket.IO rooms (``game:<ID>``) on ``/ws``."""

    def __init__(self, socketio, namespace: str = NAMESPACE):
        self.socketio = socketio
        self.namespace = namespace

    def to_room(self, game_id: str, payload: Dict[str, Any]) -> None:
        self.socketio.emit(GAME_UPDATE_EVENT, payload, to=room_for(game_id), namespace=self.namespace)

    def to_all(self, payload: Dict[str, Any]) -> None:
        self.socketio.emit(GAME_UPDATE_EVENT, payload, namespace=self.namespace)


class RecordingBroadcaster:
    """Keeps every notification in memory, in order. ``None`` marks global ones."""

    def __init__(self) -> None:
        self.sent: List[Tuple[Optional[str], Dict[str, Any]]] = []

    def to_room(self, game_id: str, payload: Dict[str, Any]) -> None:
        self.sent.append((game_id, payload))

    def to_all(self, payload: Dict[str, Any]) -> None:
        self.sent.append((None, payload))

    def clear(self) -> None:
        self.sent.clear()
