from .base_player import BasePlayer
