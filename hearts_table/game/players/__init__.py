from .base import BasePlayer
from .input_player import InputPlayer
from .random_player import RandomPlayer

__all__ = [
    'BasePlayer',
    'InputPlayer',
    'RandomPlayer',
]
