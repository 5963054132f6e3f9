"""
Dependency injection container.

Maps a type key to a builder. Builders receive the container as their first
argument, followed by up to four positional arguments supplied at resolve time.

Example:
    container = Container()
    container.register_singleton(Settings, lambda di: Settings.from_env())
    container.register(Address, lambda di, city, state, country: Address(city, state, country))

    settings = container.resolve(Settings)
    home = container.resolve(Address, "Sydney", "NSW", "Australia")
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any, TypeVar, overload

from depcontainer.config import ContainerSettings
from depcontainer.logging_config import get_logger

from .errors import ArityError, NotRegisteredError, SingletonArgumentsError
from .keys import TypeKey, key_name, type_key
from .registration import Factory, Registration, Singleton, builder_arity

logger = get_logger(__name__)

T = TypeVar("T")


class Container:
    """Registry of transient and singleton builders keyed by type.

    One re-entrant lock guards the registration map and the first build of
    each singleton, so builders may resolve their own dependencies.
    """

    def __init__(self, settings: ContainerSettings | None = None) -> None:
        self.settings = settings or ContainerSettings()
        self._registrations: dict[TypeKey, Registration] = {}
        self._lock = threading.RLock()

    def register(
        self,
        target: type[T] | str,
        builder: Callable[..., T],
        *,
        arity: int | None = None,
    ) -> None:
        """Register a builder invoked on every resolve.

        Args:
            target: Type (or explicit key name) to register under
            builder: Callable taking the container then 0-4 arguments
            arity: Number of arguments after the container, inferred if omitted
        """
        key = type_key(target)
        self._store(Factory(key, builder_arity(key, builder, arity), builder))

    def register_singleton(
        self,
        target: type[T] | str,
        builder: Callable[..., T],
        *,
        arity: int | None = None,
    ) -> None:
        """Register a builder invoked once; later resolves return its result.

        Args:
            target: Type (or explicit key name) to register under
            builder: Callable taking the container then 0-4 arguments
            arity: Number of arguments after the container, inferred if omitted
        """
        key = type_key(target)
        self._store(Singleton(key, builder_arity(key, builder, arity), builder))

    def _store(self, entry: Registration) -> None:
        with self._lock:
            previous = self._registrations.get(entry.key)
            self._registrations[entry.key] = entry

        if previous is None:
            logger.debug(
                "registration_added", key=key_name(entry.key), kind=entry.kind, arity=entry.arity
            )
        else:
            logger.debug(
                "registration_replaced",
                key=key_name(entry.key),
                kind=entry.kind,
                arity=entry.arity,
                previous_kind=previous.kind,
                discarded_instance=isinstance(previous, Singleton) and previous.instantiated,
            )

    def contains(self, target: object) -> bool:
        """Return True if a registration exists, built or not.

        Values that cannot be keys are simply not contained.
        """
        if not isinstance(target, (type, str)) or target == "":
            return False
        with self._lock:
            return target in self._registrations

    __contains__ = contains

    @overload
    def resolve(self, target: type[T]) -> T: ...

    @overload
    def resolve(self, target: type[T], argument: Any, /) -> T: ...

    @overload
    def resolve(self, target: type[T], arg1: Any, arg2: Any, /) -> T: ...

    @overload
    def resolve(self, target: type[T], arg1: Any, arg2: Any, arg3: Any, /) -> T: ...

    @overload
    def resolve(
        self, target: type[T], arg1: Any, arg2: Any, arg3: Any, arg4: Any, /
    ) -> T: ...

    @overload
    def resolve(self, target: str, *args: Any) -> Any: ...

    def resolve(self, target: TypeKey, *args: Any) -> Any:
        """Build (or fetch the cached singleton for) a registered type.

        Args:
            target: Registered type or key name
            *args: Arguments forwarded to the builder; must match its arity

        Returns:
            The built or cached instance

        Raises:
            NotRegisteredError: If nothing is registered for the target
            ArityError: If the argument count differs from the registered arity
            SingletonArgumentsError: In strict mode, on a cached singleton
                resolved with arguments different from the first build
        """
        key = type_key(target)
        with self._lock:
            entry = self._registrations.get(key)

        if entry is None:
            logger.warning("resolve_unregistered", key=key_name(key))
            raise NotRegisteredError(key)

        if len(args) != entry.arity:
            logger.warning(
                "resolve_arity_mismatch", key=key_name(key), expected=entry.arity, received=len(args)
            )
            raise ArityError(key, entry.arity, len(args))

        if isinstance(entry, Singleton):
            return self._resolve_singleton(entry, args)
        return entry.create(self, args)

    def _resolve_singleton(self, entry: Singleton, args: tuple[Any, ...]) -> Any:
        if not entry.instantiated:
            with self._lock:
                if not entry.instantiated:
                    instance = entry.create(self, args)
                    entry.store(instance, args)
                    logger.debug("singleton_created", key=key_name(entry.key), arity=entry.arity)
                    return instance

        if self.settings.strict_singleton_args and args != entry.built_args:
            raise SingletonArgumentsError(entry.key, entry.built_args, args)
        return entry.cached
