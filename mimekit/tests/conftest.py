"""Shared pytest fixtures for mimekit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

_ENV_KEYS = (
    "MIMEKIT_HOST",
    "MIMEKIT_PORT",
    "MIMEKIT_LOG_LEVEL",
    "MIMEKIT_STRICT_PARAMETERS",
)


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    data_dir = tmp_path / "data"
    monkeypatch.setenv("MIMEKIT_DATA_DIR", str(data_dir))
    return data_dir


@pytest.fixture(autouse=True)
def _reset_singletons(_isolate_env: Path):
    from mimekit.util.singletons import reset_all_singletons

    reset_all_singletons()
    yield
    reset_all_singletons()


@pytest.fixture()
def data_dir(_isolate_env: Path) -> Path:
    return _isolate_env
