"""Tests for the runtime entrypoint."""

from __future__ import annotations

import logging
import sys

import pytest

import hello_service.logging_config as logging_config
import hello_service.main as main_module


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Isolate environment and keep process-wide logging untouched."""

    monkeypatch.chdir(tmp_path)
    for name in ("SERVER_HELLO", "PORT", "APPLICATION_HOST", "LOG_LEVEL", "SERVER_IDLE_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(main_module, "logging_configure", lambda log_level="INFO": None)


def test_main_exits_before_serving_when_configuration_is_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    """Terminate with status 1 and never start the server.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate fatal startup behavior.

    Raises:
        AssertionError: Raised when the server starts or exit code differs.
    """

    served: list[object] = []
    monkeypatch.setattr(main_module.uvicorn, "run", lambda *args, **kwargs: served.append(args))

    with pytest.raises(SystemExit) as exit_info:
        main_module.main()

    assert exit_info.value.code == 1
    assert served == []


def test_main_runs_server_with_configured_port(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pass host, port and idle timeout from settings to uvicorn.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate server launch arguments.

    Raises:
        AssertionError: Raised when launch arguments differ from settings.
    """

    captured: dict[str, object] = {}

    def _fake_run(application, **kwargs) -> None:
        captured["application"] = application
        captured.update(kwargs)

    monkeypatch.setenv("SERVER_HELLO", "Hi")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setattr(main_module.uvicorn, "run", _fake_run)

    main_module.main()

    assert captured["host"] == "0.0.0.0"
    assert captured["port"] == 9000
    assert captured["timeout_keep_alive"] == 60
    assert captured["access_log"] is False
    assert captured["application"] is not None


def test_logging_configure_installs_single_stdout_handler_on_package_logger(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Attach one stdout handler to the package logger and leave root alone.

    Args:
        monkeypatch: Pytest monkeypatch fixture restoring logger state.

    Returns:
        None: Assertions validate logging setup.

    Raises:
        AssertionError: Raised when handlers are duplicated or misplaced.
    """

    package_logger = logging.getLogger("hello_service")
    root_handlers = list(logging.getLogger().handlers)
    monkeypatch.setattr(package_logger, "handlers", [])
    monkeypatch.setattr(package_logger, "level", package_logger.level)
    monkeypatch.setattr(package_logger, "propagate", package_logger.propagate)

    logging_config.logging_configure("DEBUG")
    configured_logger = logging_config.logging_configure("DEBUG")

    assert configured_logger is package_logger
    assert len(package_logger.handlers) == 1
    assert package_logger.handlers[0].stream is sys.stdout
    assert package_logger.level == logging.DEBUG
    assert package_logger.propagate is False
    assert logging.getLogger().handlers == root_handlers
