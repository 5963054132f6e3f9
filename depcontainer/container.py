"""Process-wide default container.

Application start-up code owns the default: it must call ``init_container``
before anything asks for ``get_container``. Nothing is created implicitly.
"""

from __future__ import annotations

from depcontainer.config import ContainerSettings
from depcontainer.core.container import Container
from depcontainer.core.errors import ContainerNotInitializedError
from depcontainer.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

# Global container instance
_container: Container | None = None


def init_container(
    settings: ContainerSettings | None = None,
    *,
    configure_logs: bool = False,
) -> Container:
    """Create and install the default container.

    Any previously installed default, along with its cached singletons, is
    replaced.

    Args:
        settings: Container settings (loaded from the environment if omitted)
        configure_logs: Also configure structured logging from the settings

    Returns:
        The new default Container
    """
    global _container
    if settings is None:
        settings = ContainerSettings.from_env()
    if configure_logs:
        configure_logging(settings)
    replaced = _container is not None
    _container = Container(settings)
    logger.info("default_container_initialized", replaced=replaced)
    return _container


def get_container() -> Container:
    """Get the default container.

    Raises:
        ContainerNotInitializedError: If init_container() has not been called
    """
    if _container is None:
        raise ContainerNotInitializedError()
    return _container


def reset_container() -> None:
    """Drop the default container (for testing)."""
    global _container
    _container = None
