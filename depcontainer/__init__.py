"""
depcontainer package.

A small dependency injection registry:
- Transient factories and cached singletons keyed by type
- Builders taking the container plus up to four arguments
- An explicitly initialized process-wide default container
"""

__version__ = "0.1.0"

from depcontainer.config import ContainerSettings
from depcontainer.container import get_container, init_container, reset_container
from depcontainer.core import (
    ArityError,
    Container,
    ContainerError,
    ContainerNotInitializedError,
    NotRegisteredError,
    SingletonArgumentsError,
    type_key,
)

__all__ = [
    "ArityError",
    "Container",
    "ContainerError",
    "ContainerNotInitializedError",
    "ContainerSettings",
    "NotRegisteredError",
    "SingletonArgumentsError",
    "get_container",
    "init_container",
    "reset_container",
    "type_key",
]
