"""
Logging Module

Colored console output for request outcomes. Messages below the current level are dropped; the level can be set
directly or through the ``log-level`` configuration key.
"""

DEBUG_COLOR = (150, 150, 150)
INFO_COLOR = (68, 170, 238)
SUCCESS_COLOR = (204, 255, 51)
WARNING_COLOR = (255, 204, 85)
ERROR_COLOR = (255, 51, 102)

LEVELS = {
    'debug': 10,
    'info': 20,
    'success': 20,
    'warn': 30,
    'error': 40,
    'silent': 100
}

_level = LEVELS['info']


def set_level(name: str):
    """Set the minimum level that gets printed, e.g. ``'warn'`` or ``'silent'``."""

    global _level

    if name not in LEVELS:
        raise ValueError(f'Unknown log level { name !r}! [levels={ ", ".join(LEVELS) }]')

    _level = LEVELS[name]


def colored(msg: str, color: tuple[int, int, int]):
    """
    Return a string with an ANSI escape code colored message.
    Will only work if the terminal supports TrueColor.
    """

    r, g, b = color

    return f'\x1b[38;2;{ r };{ g };{ b }m{ msg }\033[0m'


def _emit(name: str, color: tuple[int, int, int], msg: str):
    if LEVELS[name] < _level:
        return

    print(colored(f'[{ name.upper() }]', color) + ' ' + msg)


def debug(msg: str):
    _emit('debug', DEBUG_COLOR, msg)


def info(msg: str):
    _emit('info', INFO_COLOR, msg)


def success(msg: str):
    _emit('success', SUCCESS_COLOR, msg)


def warn(msg: str):
    _emit('warn', WARNING_COLOR, msg)


def error(msg: str):
    _emit('error', ERROR_COLOR, msg)
