"""Persisted user preferences.

Stored as a small JSON object. Loading never fails: a missing, unreadable
or malformed file yields the defaults. Saving never raises.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from home_pruner.logging_config import APP_NAME, get_logger

logger = get_logger(__name__)

CONFIG_FILENAME = "config.json"
CONFIG_ENV_VAR = "HOME_PRUNER_CONFIG"


@dataclass(frozen=True)
class Preferences:
    """User preferences kept between sessions."""

    show_banner: bool = True


def default_config_path() -> Path:
    """Return the config path, honouring the ``HOME_PRUNER_CONFIG`` override."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path(typer.get_app_dir(APP_NAME)) / CONFIG_FILENAME


class PreferenceStore:
    """Load and save ``Preferences`` as JSON."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = path if path is not None else default_config_path()

    def load(self) -> Preferences:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as err:
            logger.debug("Using default preferences (%s)", err)
            return Preferences()
        if not isinstance(data, dict):
            return Preferences()
        show_banner = data.get("showBanner", True)
        if not isinstance(show_banner, bool):
            return Preferences()
        return Preferences(show_banner=show_banner)

    def save(self, preferences: Preferences) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({"showBanner": preferences.show_banner}, indent=2) + "\n", encoding="utf-8")
        except (OSError, TypeError, ValueError) as err:
            logger.debug("Could not save preferences to %s: %s", self.path, err)
