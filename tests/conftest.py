import pytest

from semantic_placeholder.cli.defaults import defaults


def pytest_configure(config):
    config.addinivalue_line("markers", "fast: quick tests without I/O beyond tmp_path")


@pytest.fixture(autouse=True)
def isolated_preferences(tmp_path, monkeypatch):
    """Keep every test away from the real user config directory."""
    path = tmp_path / "config" / "preferences.json"
    monkeypatch.setattr(defaults, "PREFERENCES_FILE", path)
    return path
