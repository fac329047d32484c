import logging
from contextlib import contextmanager

from rich.console import Console
from rich.logging import RichHandler

_logger = logging.getLogger(__name__)

# prompts and menus go to stdout, diagnostics to stderr
console = Console()
err_console = Console(stderr=True)


def _create_rich_handler():
    h = RichHandler(
        console=err_console,
        show_time=False,
        show_path=False,
        markup=True,
    )
    h.setFormatter(logging.Formatter("%(message)s"))
    return h


_handler = _create_rich_handler()
_logger.setLevel(logging.INFO)
_logger.propagate = False
_logger.addHandler(_handler)


def debug(msg):
    _logger.debug(msg)


def info(msg):
    _logger.info(msg)


def error(msg):
    _logger.error(msg)


def set_default_level(level):
    _logger.setLevel(level)


@contextmanager
def status(message: str, done: str = None):
    """Shows a spinner while the block runs and logs `done` if it completes."""
    with err_console.status(message):
        yield
    if done:
        info(done)
