import logging

import pytest
import structlog

from depcontainer import (
    Container,
    ContainerNotInitializedError,
    ContainerSettings,
    get_container,
    init_container,
    reset_container,
)


@pytest.fixture(autouse=True)
def _clean_default_container():
    reset_container()
    yield
    reset_container()


def test_settings_defaults():
    settings = ContainerSettings()
    assert settings.strict_singleton_args is False
    assert settings.log_level == "WARNING"
    assert settings.json_logs is False


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("DEPCONTAINER_STRICT_SINGLETON_ARGS", "yes")
    monkeypatch.setenv("DEPCONTAINER_LOG_LEVEL", "debug")
    monkeypatch.setenv("DEPCONTAINER_JSON_LOGS", "1")
    settings = ContainerSettings.from_env()
    assert settings.strict_singleton_args is True
    assert settings.log_level == "DEBUG"
    assert settings.json_logs is True


def test_settings_from_mapping_falls_back_to_defaults():
    settings = ContainerSettings.from_env({"DEPCONTAINER_STRICT_SINGLETON_ARGS": "off"})
    assert settings == ContainerSettings()


def test_settings_rejects_unknown_log_level():
    with pytest.raises(ValueError):
        ContainerSettings(log_level="LOUD")


def test_container_uses_default_settings():
    assert Container().settings == ContainerSettings()


def test_get_container_requires_init():
    with pytest.raises(ContainerNotInitializedError):
        get_container()


def test_init_container_installs_default():
    settings = ContainerSettings(strict_singleton_args=True)
    container = init_container(settings)
    assert get_container() is container
    assert container.settings is settings


def test_init_container_reads_environment(monkeypatch):
    monkeypatch.setenv("DEPCONTAINER_STRICT_SINGLETON_ARGS", "true")
    assert init_container().settings.strict_singleton_args is True


def test_init_container_replaces_previous_default():
    first = init_container(ContainerSettings())
    first.register_singleton("value", lambda di: object())
    second = init_container(ContainerSettings())
    assert second is not first
    assert not second.contains("value")
    assert get_container() is second


def test_init_container_can_configure_logging():
    try:
        container = init_container(
            ContainerSettings(log_level="DEBUG", json_logs=True), configure_logs=True
        )
        assert logging.getLogger().level == logging.DEBUG
        container.register("value", lambda di: 1)
        assert container.resolve("value") == 1
    finally:
        structlog.reset_defaults()
        logging.basicConfig(force=True, level=logging.WARNING)


def test_reset_container():
    init_container(ContainerSettings())
    reset_container()
    with pytest.raises(ContainerNotInitializedError):
        get_container()
