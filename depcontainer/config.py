"""Container configuration.

Settings can be built directly or loaded from ``DEPCONTAINER_*`` environment
variables.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

ENV_PREFIX = "DEPCONTAINER_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().strip('"').strip("'").lower() in ("1", "true", "yes")


@dataclass
class ContainerSettings:
    """Runtime behaviour of a Container."""

    # Reject resolves of a cached singleton with different arguments
    strict_singleton_args: bool = False

    log_level: str = "WARNING"
    json_logs: bool = False

    def __post_init__(self):
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ContainerSettings:
        """Load settings from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            ContainerSettings instance
        """
        env = os.environ if environ is None else environ
        return cls(
            strict_singleton_args=_env_bool(
                env.get(f"{ENV_PREFIX}STRICT_SINGLETON_ARGS"), False
            ),
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", "WARNING").strip(),
            json_logs=_env_bool(env.get(f"{ENV_PREFIX}JSON_LOGS"), False),
        )
