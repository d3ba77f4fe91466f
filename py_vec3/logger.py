"""The `py_vec3` logger.

Vector arithmetic is silent; the library only logs configuration loading and
normalization of zero-length vectors (see `MakeConfig.degenerate_log_level`).
Records go to stderr at INFO and above. `enable_file_logging` additionally
captures everything down to a chosen level in a file, which is the usual way
to see the DEBUG records emitted while vectors are normalized:

    ```python
    from py_vec3 import Vec3f, enable_file_logging, disable_file_logging

    enable_file_logging("vectors.log")
    Vec3f(0, 0, 0).unit()   # "Normalizing zero-length Vec3f(...)" lands in vectors.log
    disable_file_logging()
    ```
"""
import logging
from typing import Optional

__all__ = ('logger',
           'enable_file_logging',
           'disable_file_logging',
)

LOGGER_NAME = 'py_vec3'
CONSOLE_FORMAT = "%(levelname)s:%(name)s:%(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    # the logger level decides what reaches stderr
    handler.setLevel(logging.NOTSET)
    return handler


logger: logging.Logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(_console_handler())
logger.setLevel(logging.INFO)

file_handler: Optional[logging.FileHandler] = None


def enable_file_logging(filename: str = "py_vec3.log", level: int = logging.DEBUG) -> logging.FileHandler:
    """Copy `py_vec3` records at `level` and above into `filename`.

    Lowers the logger level to `level` when needed so the records are emitted
    at all. Calling it again switches to the new file.

    Returns:
        The attached handler.
    """
    global file_handler
    disable_file_logging()

    file_handler = logging.FileHandler(filename, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    logger.addHandler(file_handler)
    if logger.getEffectiveLevel() > level:
        logger.setLevel(level)
    return file_handler


def disable_file_logging() -> None:
    """Detach and close the file handler, if any."""
    global file_handler
    if file_handler is None:
        return
    logger.removeHandler(file_handler)
    file_handler.close()
    file_handler = None
