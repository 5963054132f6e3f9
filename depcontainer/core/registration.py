"""
Registration entries stored by the container.

A registration is either a ``Factory`` (builder invoked on every resolve) or a
``Singleton`` (builder invoked once, result cached on the entry).
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .errors import ArityError
from .keys import TypeKey, key_name

MAX_ARITY = 4

Builder = Callable[..., Any]

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


class _Unset:
    def __repr__(self) -> str:
        return "<unset>"


UNSET: Any = _Unset()


def builder_arity(key: TypeKey, builder: Builder, arity: int | None = None) -> int:
    """Work out how many resolve arguments ``builder`` takes after the container.

    Args:
        key: Registration key (for error messages)
        builder: Callable receiving the container followed by the arguments
        arity: Declared arity, required when the builder uses ``*args``

    Returns:
        The arity, between 0 and MAX_ARITY

    Raises:
        ArityError: If the arity is out of range or the builder cannot accept it
    """
    if not callable(builder):
        raise TypeError(f"builder for {key_name(key)} must be callable")
    if arity is not None and not 0 <= arity <= MAX_ARITY:
        raise ArityError(
            key,
            None,
            arity,
            f"{key_name(key)}: builders take 0 to {MAX_ARITY} arguments, got arity={arity}",
        )

    try:
        params = list(inspect.signature(builder).parameters.values())
    except (TypeError, ValueError):
        # No introspectable signature (some builtins); trust a declared arity.
        if arity is None:
            raise ArityError(
                key, None, 0, f"{key_name(key)}: cannot inspect builder, pass arity= explicitly"
            ) from None
        return arity

    positional = [p for p in params if p.kind in _POSITIONAL]
    required = [p for p in positional if p.default is inspect.Parameter.empty]
    variadic = any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params)
    keyword_only = [
        p.name
        for p in params
        if p.kind is inspect.Parameter.KEYWORD_ONLY and p.default is inspect.Parameter.empty
    ]
    if keyword_only:
        raise ArityError(
            key,
            arity,
            max(len(positional) - 1, 0),
            f"{key_name(key)}: builder requires keyword-only argument(s) "
            f"{', '.join(keyword_only)}; resolve passes positionals only",
        )

    if arity is None:
        if variadic:
            raise ArityError(
                key, None, len(positional), f"{key_name(key)}: builder takes *args, pass arity= explicitly"
            )
        if not positional:
            raise ArityError(
                key, None, 0, f"{key_name(key)}: builder must accept the container as its first argument"
            )
        arity = len(positional) - 1
        if arity > MAX_ARITY:
            raise ArityError(
                key,
                None,
                arity,
                f"{key_name(key)}: builders take 0 to {MAX_ARITY} arguments, got {arity}",
            )
        return arity

    # Declared arity: the container plus `arity` positionals must bind.
    if len(required) > arity + 1 or (not variadic and len(positional) < arity + 1):
        raise ArityError(
            key,
            arity,
            max(len(positional) - 1, 0),
            f"{key_name(key)}: builder signature does not accept {arity} argument(s)",
        )
    return arity


@dataclass
class Registration:
    key: TypeKey
    arity: int
    build: Builder = field(repr=False)

    kind = "registration"

    def create(self, container: Any, args: tuple[Any, ...]) -> Any:
        return self.build(container, *args)


@dataclass
class Factory(Registration):
    """Transient registration: a fresh instance on every resolve."""

    kind = "factory"


@dataclass
class Singleton(Registration):
    """Registration whose first built instance is cached for the entry's lifetime."""

    cached: Any = field(default=UNSET, repr=False)
    built_args: tuple[Any, ...] = field(default=(), repr=False)

    kind = "singleton"

    @property
    def instantiated(self) -> bool:
        return self.cached is not UNSET

    def store(self, instance: Any, args: tuple[Any, ...]) -> None:
        self.cached = instance
        self.built_args = args
