"""Article Canvas: template layouts, content mapping and article workflow."""

from .exceptions import (
    ElementNotFoundError,
    EngineError,
    InvalidArgumentError,
    InvalidTransitionError,
)

__all__ = [
    "ElementNotFoundError",
    "EngineError",
    "InvalidArgumentError",
    "InvalidTransitionError",
]
