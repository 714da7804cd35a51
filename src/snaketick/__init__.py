from .channel import StateChannel
from .direction import DirectionStore
from .game import Game
from .logic import game_tick
from .state import DIRECTIONS, DOWN, LEFT, RIGHT, UP, GameState, initial_state
from .steering import Steering

__all__ = [
    "DIRECTIONS",
    "DOWN",
    "LEFT",
    "RIGHT",
    "UP",
    "DirectionStore",
    "Game",
    "GameState",
    "StateChannel",
    "Steering",
    "game_tick",
    "initial_state",
]
