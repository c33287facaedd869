from .console import ConsoleObserver
from .events import GameObserver
from .hearts_game import HeartsGame
