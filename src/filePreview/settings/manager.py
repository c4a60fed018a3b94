"""Gallery settings stored as a schema-checked JSON document."""

from __future__ import annotations

import os
import sys
from copy import deepcopy
from pathlib import Path
from typing import Any

from jsonschema import ValidationError

from ..errors import SettingsLoadError, SettingsValidationError
from ..gui.viewmodels.signal import Signal
from ..utils.jsonio import read_json, write_json
from .schema import DEFAULT_SETTINGS, merge_with_defaults

_APP_DIR = "filePreview"
_FILE_NAME = "settings.json"


def default_settings_path() -> Path:
    """Return where settings live on this platform when no path is given."""

    home = Path.home()
    if os.name == "nt":
        root = os.environ.get("APPDATA") or home / "AppData" / "Roaming"
    elif sys.platform == "darwin":
        root = home / "Library" / "Application Support"
    else:
        root = os.environ.get("XDG_CONFIG_HOME") or home / ".config"
    return Path(root) / _APP_DIR / _FILE_NAME


def _validated(document: dict[str, Any] | None) -> dict[str, Any]:
    try:
        return merge_with_defaults(document)
    except ValidationError as exc:
        raise SettingsValidationError(exc.message) from exc


class SettingsManager:
    """Holds the effective settings and writes them back on change.

    A manager that has never been loaded serves :data:`DEFAULT_SETTINGS`, so
    a headless gallery can be composed without touching the disk.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path
        self._values: dict[str, Any] = deepcopy(DEFAULT_SETTINGS)
        self.settings_changed = Signal()  # emits (key: str, value: Any)

    @property
    def path(self) -> Path:
        if self._path is None:
            self._path = default_settings_path()
        return self._path

    def load(self) -> None:
        """Read the settings file, filling gaps with defaults, and save the result."""

        document = None
        if self.path.exists():
            try:
                document = read_json(self.path)
            except (OSError, ValueError) as exc:
                raise SettingsLoadError(f"{self.path}: {exc}") from exc
            if not isinstance(document, dict):
                raise SettingsValidationError("settings root must be an object")
        self._values = _validated(document)
        self._save()

    def get(self, key: str, default: Any | None = None) -> Any:
        """Look up a dotted key such as ``gallery.page_size``."""

        node: Any = self._values
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def set(self, key: str, value: Any, *, persist: bool = True) -> None:
        """Assign a dotted key; the whole document is revalidated before it sticks."""

        *parents, leaf = key.split(".")
        candidate = deepcopy(self._values)
        node = candidate
        for part in parents:
            if not isinstance(node.get(part), dict):
                node[part] = {}
            node = node[part]
        node[leaf] = value

        self._values = _validated(candidate)
        if persist:
            self._save()
        self.settings_changed.emit(key, value)

    def _save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        write_json(self.path, self._values)


__all__ = ["SettingsManager", "default_settings_path"]
