from __future__ import annotations

import pytest

from flyg_format.config import Settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FLYG_COMPRESSION_ENABLED", raising=False)
    monkeypatch.delenv("FLYG_LOG_LEVEL", raising=False)

    current = Settings(_env_file=None)

    assert current.compression_enabled is True
    assert current.log_level == "INFO"


def test_compression_can_be_disabled_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLYG_COMPRESSION_ENABLED", "false")

    assert Settings(_env_file=None).compression_enabled is False
