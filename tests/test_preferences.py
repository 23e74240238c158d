"""Tests for persisted preferences."""

import json
from pathlib import Path

from home_pruner.preferences import Preferences, PreferenceStore, default_config_path


def test_defaults_when_missing(tmp_path: Path) -> None:
    """Test that a missing file gives the banner on."""
    assert PreferenceStore(tmp_path / "missing.json").load() == Preferences(show_banner=True)


def test_defaults_when_corrupt(tmp_path: Path) -> None:
    """Test that malformed or unexpected content falls back to defaults."""
    path = tmp_path / "config.json"
    for content in ["{not json", "[1, 2]", '{"showBanner": "no"}']:
        path.write_text(content)
        assert PreferenceStore(path).load() == Preferences()


def test_save_then_load(tmp_path: Path) -> None:
    """Test that a saved preference is read back and stored as JSON."""
    path = tmp_path / "nested" / "config.json"
    store = PreferenceStore(path)
    store.save(Preferences(show_banner=False))

    assert store.load() == Preferences(show_banner=False)
    assert json.loads(path.read_text()) == {"showBanner": False}


def test_save_never_raises(tmp_path: Path) -> None:
    """Test that an unwritable location is ignored."""
    blocker = tmp_path / "file"
    blocker.write_text("")
    PreferenceStore(blocker / "config.json").save(Preferences(show_banner=False))


def test_env_override(isolated_config: Path) -> None:
    """Test that HOME_PRUNER_CONFIG picks the config path."""
    assert default_config_path() == isolated_config
    assert PreferenceStore().path == isolated_config
