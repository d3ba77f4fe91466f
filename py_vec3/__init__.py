"""Immutable single and double precision 3D vectors."""

import importlib.metadata

__version__ = importlib.metadata.version("py_vec3")

# Standard library imports
import os
import sys

# Third-party imports
from typing_extensions import Optional

# Local imports
from .config import MakeConfig, basic_config, get_config, reset_config
from .contract import Vec3Contract
from .exceptions import VectorIndexError, ConfigValueError
from .logger import logger as log, enable_file_logging, disable_file_logging
from .vec3d import Vec3d
from .vec3f import Vec3f
from .vector import Vector3

if sys.version_info[:2] < (3, 11):
    import tomli as tomllib
else:
    import tomllib


def _find_pyvec3_toml(start_dir: Optional[str] = None) -> Optional[str]:
    """Search for .pyvec3.toml or pyvec3.toml from `start_dir` up to the filesystem root.

    Args:
        start_dir: The directory to start searching from. Defaults to the current working directory.

    Returns:
        The absolute path to the config file if found, otherwise None.
    """
    current_dir = os.path.abspath(start_dir or os.getcwd())
    while True:
        for name in ('.pyvec3.toml', 'pyvec3.toml'):
            path = os.path.join(current_dir, name)
            if os.path.exists(path):
                return path

        parent_dir = os.path.dirname(current_dir)
        if parent_dir == current_dir:
            return None
        current_dir = parent_dir


def _load_config(filepath: Optional[str] = None, suppress_warnings: bool = False) -> None:
    """Load configuration from a .pyvec3.toml file.

    Args:
        filepath: Path to configuration file. If None, searches for .pyvec3.toml or pyvec3.toml
        suppress_warnings: If True, suppress warning messages
    """
    if filepath is None:
        filepath = _find_pyvec3_toml()

    if filepath is None:
        log.debug("No py_vec3 config file found, keeping current config")
        return

    log.debug(f"Found {os.path.basename(filepath)} at {os.path.dirname(filepath)}")

    with open(filepath, "rb") as fp:
        _config = tomllib.load(fp)

    if (_pyvec3 := _config.get('py_vec3')) is not None:
        unknown = set(_pyvec3) - set(MakeConfig._fields)
        if unknown and not suppress_warnings:
            log.warning(f"Config has unknown `py_vec3` keys: {', '.join(sorted(unknown))}")
        basic_config(MakeConfig(**{k: v for k, v in _pyvec3.items() if k in MakeConfig._fields}))
    elif not suppress_warnings:
        log.warning("Config has no `py_vec3` section")


def _basic_config(filename: Optional[str] = None,
                  degenerate_log_level: Optional[str] = None,
                  suppress_warnings: bool = False) -> None:
    """Configure the library from keyword settings or from a TOML file.

    Args:
        filename: Configuration file path
        degenerate_log_level: Log level used when a zero-length vector is normalized
        suppress_warnings: If True, suppress warning messages

    Raises:
        ValueError: If both filename and degenerate_log_level are provided
        ConfigValueError: If a setting has an unsupported value
    """
    if filename and degenerate_log_level:
        raise ValueError("Can't use degenerate_log_level and config file at same time")
    if degenerate_log_level:
        basic_config(get_config()._replace(degenerate_log_level=degenerate_log_level))
    else:
        _load_config(filename, suppress_warnings)


basicConfig = _basic_config

__all__ = [
    'Vec3Contract',
    'Vector3',
    'Vec3f',
    'Vec3d',
    'VectorIndexError',
    'ConfigValueError',
    'MakeConfig',
    'basicConfig',
    'basic_config',
    'get_config',
    'reset_config',
    'enable_file_logging',
    'disable_file_logging',
]

basicConfig()
