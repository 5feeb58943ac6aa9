import logging

import pytest

from data_type_registry.config import RegistryConfig


@pytest.fixture
def package_logger():
    logger = logging.getLogger("data_type_registry")
    saved = (list(logger.handlers), logger.level)
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])


def test_defaults(monkeypatch):
    for name in ("LOG_LEVEL", "PRINT_LEVEL", "SCHEMA_CACHE_ENABLED", "DECLARATIONS_DIR"):
        monkeypatch.delenv(f"DATA_TYPE_REGISTRY_{name}", raising=False)

    config = RegistryConfig.from_env()

    assert config == RegistryConfig()


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("DATA_TYPE_REGISTRY_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DATA_TYPE_REGISTRY_PRINT_LEVEL", "WARNING")
    monkeypatch.setenv("DATA_TYPE_REGISTRY_SCHEMA_CACHE_ENABLED", "false")
    monkeypatch.setenv("DATA_TYPE_REGISTRY_DECLARATIONS_DIR", str(tmp_path))

    config = RegistryConfig.from_env()

    assert config.log_level == "DEBUG"
    assert config.print_level == "WARNING"
    assert config.schema_cache_enabled is False
    assert config.declarations_dir == str(tmp_path)


def test_set_logging_splits_streams(package_logger):
    logger = RegistryConfig(log_level="debug", print_level="warning").set_logging()

    assert logger is package_logger
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    stdout_handler, stderr_handler = logger.handlers
    assert stderr_handler.level == logging.WARNING

    info = logging.LogRecord("data_type_registry", logging.INFO, __file__, 1, "msg", None, None)
    warning = logging.LogRecord("data_type_registry", logging.WARNING, __file__, 1, "msg", None, None)
    assert stdout_handler.filter(info)
    assert not stdout_handler.filter(warning)


def test_set_logging_is_idempotent(package_logger):
    config = RegistryConfig()
    config.set_logging()
    config.set_logging()

    assert len(package_logger.handlers) == 2
