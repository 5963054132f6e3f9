"""
Exceptions raised by the dependency container.
"""

from __future__ import annotations

from typing import Any

from .keys import TypeKey, key_name


class ContainerError(Exception):
    """Base class for container errors."""


class NotRegisteredError(ContainerError, LookupError):
    """Raised when resolving a type that has no registration."""

    def __init__(self, key: TypeKey, message: str | None = None):
        self.key = key
        self.message = message or f"No registration found for {key_name(key)}"
        super().__init__(self.message)


class ArityError(ContainerError, TypeError):
    """Raised when a builder's argument count is unsupported or does not match."""

    def __init__(
        self,
        key: TypeKey,
        expected: int | None,
        received: int,
        message: str | None = None,
    ):
        self.key = key
        self.expected = expected
        self.received = received
        if message is None:
            message = (
                f"{key_name(key)} was registered with {expected} argument(s), "
                f"resolved with {received}"
            )
        self.message = message
        super().__init__(self.message)


class SingletonArgumentsError(ContainerError, ValueError):
    """Raised in strict mode when a cached singleton is resolved with new arguments."""

    def __init__(self, key: TypeKey, cached_args: tuple[Any, ...], received: tuple[Any, ...]):
        self.key = key
        self.cached_args = cached_args
        self.received = received
        self.message = (
            f"Singleton {key_name(key)} was built with {cached_args!r}, "
            f"cannot resolve it with {received!r}"
        )
        super().__init__(self.message)


class ContainerNotInitializedError(ContainerError, RuntimeError):
    """Raised when the default container is requested before init_container()."""

    def __init__(self) -> None:
        self.message = "Default container is not initialized; call init_container() first"
        super().__init__(self.message)
