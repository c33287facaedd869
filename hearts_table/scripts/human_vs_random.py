from hearts_table.game import HeartsGame, ConsoleObserver
from hearts_table.game.players import RandomPlayer, InputPlayer
from hearts_table.logging_utils import setup_logging
from hearts_table.settings import SEED

COMPUTER_NAMES = ['LeBron', 'Michael', 'Magic']


def input_name() -> str:
    while True:
        name = input('Please enter your name: ').strip()
        if name:
            return name
        print('You must enter a valid name.')


def play_again() -> bool:
    answer = input('Would you like to play again? (y/n) ').strip().lower()
    return answer.startswith('y')


def main():
    setup_logging()
    print('Welcome to Hearts!')

    names = [input_name()] + COMPUTER_NAMES
    players = [
        InputPlayer(),
        RandomPlayer(random_state=SEED),
        RandomPlayer(random_state=None if SEED is None else SEED + 1),
        RandomPlayer(random_state=None if SEED is None else SEED + 2),
    ]
    observer = ConsoleObserver(names)
    game = HeartsGame(players, names=names, observers=[observer], random_state=SEED)

    while True:
        game.play()
        if not play_again():
            break
        game.reset()
        observer.reset()

    print('Thanks for playing Hearts. Good Bye!')


if __name__ == '__main__':
    main()
