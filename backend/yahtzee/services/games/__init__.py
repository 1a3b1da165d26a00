"""Game domain services: scoring, the turn state machine and the coordinator.

This package contains the game rules and should be imported by HTTP routes
and socket handlers, keeping transport concerns separated from core game
mechanics.
"""
from .coordinator import GameCoordinator
from .errors import GameError

__all__ = ['GameCoordinator', 'GameError']
