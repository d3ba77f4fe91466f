from typing import NamedTuple

from py_vec3.exceptions import ConfigValueError
from py_vec3.logger import logger

__all__ = ('MakeConfig', 'LOG_LEVELS', 'basic_config', 'get_config', 'reset_config')

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


class MakeConfig(NamedTuple):
    # level of the record emitted when a zero-length vector is normalized
    degenerate_log_level: str = 'DEBUG'


_PYVEC3_CONFIG = MakeConfig()


def basic_config(config: MakeConfig):
    global _PYVEC3_CONFIG
    if config.degenerate_log_level not in LOG_LEVELS:
        raise ConfigValueError('degenerate_log_level', config.degenerate_log_level,
                               f"Expected one of {LOG_LEVELS}")
    logger.debug(f"py_vec3 config set to {config}")
    _PYVEC3_CONFIG = config


def get_config() -> MakeConfig:
    return _PYVEC3_CONFIG


def reset_config():
    basic_config(MakeConfig())
