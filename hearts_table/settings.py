import os

# Environment switches:
#   LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
#   HEARTS_CHECK_INVARIANTS=1 to verify card conservation after every play
#   HEARTS_SEED=<int> to make the console game reproducible
LOG_LEVEL = os.getenv('LOG_LEVEL', 'WARNING').upper()
CHECK_INVARIANTS = os.getenv('HEARTS_CHECK_INVARIANTS', '0') == '1'


def _seed_from_env() -> int | None:
    raw = os.getenv('HEARTS_SEED')
    if raw is None or raw.strip() == '':
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f'HEARTS_SEED should be an integer, got {raw!r}') from None


SEED = _seed_from_env()
