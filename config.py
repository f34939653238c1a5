import logging
import os

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

LOG_LEVEL_VARIABLE = 'FPMODULES_LOG_LEVEL'
CACHE_VARIABLE = 'FPMODULES_CACHE'


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() not in ('0', 'false', 'no', 'off', '')


# Default of the ``cached`` flag taken by parent constructors.
DEFAULT_CACHED = _env_flag(CACHE_VARIABLE, True)


def configure_logging(level=None):
    '''
    Install a root handler for scripts and interactive sessions.

    :param level: a logging level name or number; when omitted, the value of
        FPMODULES_LOG_LEVEL is used, falling back to WARNING.
    '''
    if level is None:
        level = os.environ.get(LOG_LEVEL_VARIABLE, 'WARNING')
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    return logging.getLogger()
