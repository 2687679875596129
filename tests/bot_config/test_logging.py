from __future__ import annotations

import logging
from typing import Any

import pytest
import structlog

import bot_config.logging as bot_logging
from bot_config.settings import Settings


@pytest.fixture
def captured(monkeypatch: pytest.MonkeyPatch) -> dict[str, list[Any]]:
    calls: dict[str, list[Any]] = {"structlog": [], "dict_config": []}
    monkeypatch.setattr(bot_logging, "_LOGGING_INITIALISED", False)
    monkeypatch.setattr(
        bot_logging.structlog,
        "configure",
        lambda **kwargs: calls["structlog"].append(kwargs),
    )
    monkeypatch.setattr(
        bot_logging.logging.config,
        "dictConfig",
        lambda config: calls["dict_config"].append(config),
    )
    monkeypatch.setattr(
        bot_logging.structlog.contextvars, "bind_contextvars", lambda **kwargs: None
    )
    return calls


def test_configure_logging_runs_once(captured: dict[str, list[Any]]) -> None:
    settings = Settings(_env_file=None, log_level="warning")

    bot_logging.configure_logging(settings)
    bot_logging.configure_logging(settings)

    assert len(captured["structlog"]) == 1
    (config,) = captured["dict_config"]
    assert config["handlers"]["bot_config"]["level"] == logging.WARNING
    assert config["loggers"]["bot_config"]["propagate"] is False


@pytest.mark.parametrize(
    "level,expected",
    [("debug", logging.DEBUG), ("ERROR", logging.ERROR), ("verbose", logging.INFO)],
)
def test_resolve_level(level: str, expected: int) -> None:
    assert bot_logging._resolve_level(level) == expected


def test_renderer_follows_json_setting() -> None:
    json_settings = Settings(_env_file=None, log_json=True)
    console_settings = Settings(_env_file=None, log_json=False)

    assert isinstance(
        bot_logging._renderer(json_settings), structlog.processors.JSONRenderer
    )
    assert isinstance(
        bot_logging._renderer(console_settings), structlog.dev.ConsoleRenderer
    )


def test_config_panel_configures_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    import bot_config.panel as panel_module
    from bot_config.enums import BotMode

    received: list[Settings | None] = []
    monkeypatch.setattr(panel_module, "configure_logging", received.append)
    settings = Settings(_env_file=None)

    panel_module.ConfigPanel(BotMode.FARMING, lambda config: None, settings=settings)

    assert received == [settings]
