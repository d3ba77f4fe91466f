"""py_vec3 exception types.

Exception Hierarchy
-------------------

Exception (built-in Python)
├── IndexError
│   └── VectorIndexError
└── ValueError
    └── ConfigValueError

- VectorIndexError: Raised by `get_value`, `set_value` and `vector[index]` when
  the component index is outside {0, 1, 2}. Contains:
  - index: The rejected index

- ConfigValueError: Raised when a configuration value is not accepted, either
  passed to `basicConfig` directly or read from a `.pyvec3.toml` file. Contains:
  - key: Name of the configuration entry
  - value: The rejected value

Arithmetic never raises: degenerate inputs such as a zero-length vector passed
to `unit()` produce NaN/inf components, following IEEE-754 semantics.
"""
from __future__ import annotations

from typing import Any

__all__ = (
    'VectorIndexError',
    'ConfigValueError',
)


class VectorIndexError(IndexError):
    """Component index out of range."""

    def __init__(self, index: Any):
        self.index = index
        super().__init__(f"Vector component index must be 0, 1 or 2, got {index!r}")


class ConfigValueError(ValueError):
    """Invalid configuration value."""

    def __init__(self, key: str, value: Any, note: str = ""):
        self.key = key
        self.value = value
        message = f"Invalid value {value!r} for config key '{key}'"
        if note:
            message += f". {note}"
        super().__init__(message)
