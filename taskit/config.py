"""User preferences stored as JSON in the user's config directory."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from platformdirs import user_config_path

_APP_NAME = "taskit"
_APP_AUTHOR = "maskedsyntax"
_FILE_NAME = "config.json"


def default_config_path() -> Path:
    """Location of the configuration file for the current user."""
    return user_config_path(_APP_NAME, _APP_AUTHOR) / _FILE_NAME


@dataclass
class Config:
    """Theme and font preferences."""

    theme: str = "System"
    font: str | None = None

    @classmethod
    def load(cls, path: Path | str | None = None) -> "Config":
        """Read the configuration; fall back to defaults if it is missing or invalid."""
        config_path = Path(path) if path is not None else default_config_path()
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return cls()
        return cls._from_mapping(data) or cls()

    @classmethod
    def _from_mapping(cls, data: Any) -> "Config | None":
        if not isinstance(data, dict):
            return None
        theme = data.get("theme")
        font = data.get("font")
        if not isinstance(theme, str):
            return None
        if font is not None and not isinstance(font, str):
            return None
        return cls(theme=theme, font=font)

    def save(self, path: Path | str | None = None) -> None:
        """Write the configuration, creating its directory if needed."""
        config_path = Path(path) if path is not None else default_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(asdict(self), indent=2), encoding="utf-8")