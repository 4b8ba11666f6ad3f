"""Runtime settings read from ``MIMEKIT_*`` environment variables."""

from __future__ import annotations

import os
from pathlib import Path
from typing import ClassVar

from ..util.singletons import register_singleton

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


class Settings:
    """Configuration for the parser defaults, the HTTP server and the CLI."""

    _DATA_DIR_ENV: ClassVar[str] = "MIMEKIT_DATA_DIR"

    def __init__(self) -> None:
        self.reload()

    def reload(self) -> None:
        """Re-read the environment."""
        e = self._read

        self.host: str = e("MIMEKIT_HOST") or "0.0.0.0"
        self.port: int = int(e("MIMEKIT_PORT") or "8080")
        self.log_level: str = (e("MIMEKIT_LOG_LEVEL") or "INFO").upper()
        self.strict_parameters: bool = e("MIMEKIT_STRICT_PARAMETERS").lower() in _TRUE_VALUES

    @property
    def data_dir(self) -> Path:
        return Path(os.getenv(self._DATA_DIR_ENV, str(Path.home() / ".mimekit")))

    @property
    def cli_history_path(self) -> Path:
        return self.data_dir / ".cli_history"

    def ensure_dirs(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def _read(key: str) -> str:
        return os.getenv(key, "").strip()


# Module-level singleton
cfg = Settings()


def _reset_cfg() -> None:
    global cfg
    cfg = Settings()


register_singleton(_reset_cfg)
