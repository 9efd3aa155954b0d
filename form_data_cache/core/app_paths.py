"""Application path resolution backed by config/applications.yaml."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

import yaml

DEFAULT_APP_ID = "default"


def _default_config_path() -> Path:
    env_path = os.environ.get("FORM_DATA_CONFIG", "").strip()
    if env_path:
        return Path(env_path)
    project_root = Path(__file__).resolve().parents[2]
    return project_root / "config" / "applications.yaml"


class ApplicationPathResolver:
    """Maps application ids to the directory holding their form files."""

    def __init__(self, config_path: Optional[Path] = None) -> None:
        self.config_path = config_path
        self._applications: dict[str, Any] | None = None

    def _load_config(self) -> None:
        if self._applications is not None:
            return
        if self.config_path is None:
            self.config_path = _default_config_path()
        if not self.config_path.exists():
            self._applications = {}
            return
        with self.config_path.open("r", encoding="utf-8") as handle:
            config = yaml.safe_load(handle) or {}
        applications = config.get("applications", {}) if isinstance(config, dict) else {}
        self._applications = applications if isinstance(applications, dict) else {}

    @property
    def applications(self) -> dict[str, Any]:
        self._load_config()
        return self._applications or {}

    def resolve_path(self, app_id: str) -> Optional[str]:
        """Return the base directory for ``app_id``, or None if unknown.

        ``FORM_DATA_APP_DIR`` takes precedence over the config for the default
        application.
        """
        if app_id == DEFAULT_APP_ID:
            env_dir = os.environ.get("FORM_DATA_APP_DIR", "").strip()
            if env_dir:
                return env_dir

        entry = self.applications.get(app_id)
        if isinstance(entry, dict):
            entry = entry.get("path")
        if not entry:
            return None
        path = Path(str(entry)).expanduser()
        if not path.is_absolute():
            path = self.config_path.parent / path
        return str(path.resolve())


# Global instance
app_path_resolver = ApplicationPathResolver()


def resolve_path(app_id: str) -> Optional[str]:
    return app_path_resolver.resolve_path(app_id)
