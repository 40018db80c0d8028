# -*- coding: utf-8 -*-
"""Unit tests for Settings loading."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from seed_exchange.config import Settings


def test_defaults() -> None:
    settings = Settings.from_env()

    assert settings.app.app_name == "seed-exchange"
    assert settings.events.enabled is True
    assert settings.events.name == "SeedExchange"
    assert settings.health.probe_plant_id == "health-check-plant"
    assert settings.logging.log_file_path == "logs/seed_exchange.log"


def test_nested_env_vars_override_sections(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EVENTS__ENABLED", "false")
    monkeypatch.setenv("HEALTH__PROBE_PLANT_ID", "probe-seed")
    monkeypatch.setenv("LOGGING__CONSOLE_LEVEL", "DEBUG")

    settings = Settings.from_env()

    assert settings.events.enabled is False
    assert settings.health.probe_plant_id == "probe-seed"
    assert settings.logging.console_level == "DEBUG"


def test_event_history_size_is_bounded() -> None:
    with pytest.raises(ValidationError):
        Settings.from_env(events={"max_history_size": 0})


def test_settings_are_frozen() -> None:
    settings = Settings.from_env()

    with pytest.raises(ValidationError):
        settings.events = settings.events  # type: ignore[misc]
