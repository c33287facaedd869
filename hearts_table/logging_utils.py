import logging

from .settings import LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Call once at program start (see the console scripts)."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format='%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S',
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
