"""
Core primitives: type keys, registrations and the container.
"""

from .container import Container
from .errors import (
    ArityError,
    ContainerError,
    ContainerNotInitializedError,
    NotRegisteredError,
    SingletonArgumentsError,
)
from .keys import type_key
from .registration import MAX_ARITY, Factory, Registration, Singleton

__all__ = [
    "MAX_ARITY",
    "ArityError",
    "Container",
    "ContainerError",
    "ContainerNotInitializedError",
    "Factory",
    "NotRegisteredError",
    "Registration",
    "Singleton",
    "SingletonArgumentsError",
    "type_key",
]
