"""
Type keys used to index container registrations.

A class is its own key, so two distinct classes never collide even when they
share a qualified name. Strings are accepted as explicit named keys.
"""

from __future__ import annotations

from typing import Any, Union

TypeKey = Union[type, str]


def type_key(target: Any) -> TypeKey:
    """Return the registration key for a class or an explicit string name."""
    if isinstance(target, str):
        if not target:
            raise ValueError("key name is required")
        return target
    if isinstance(target, type):
        return target
    raise TypeError(f"Cannot derive a type key from {target!r}")


def key_name(key: TypeKey) -> str:
    """Readable form of a key for messages and logs."""
    if isinstance(key, type):
        return f"{key.__module__}.{key.__qualname__}"
    return key
