import pytest

from timever import config
from timever.app import Application


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Pin the clock and use default settings for every test."""
    for var in ("TIMEVER_CONFIG", "TIMEVER_LOG_LEVEL", "TIMEVER_DEBUG"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("TIMEVER_NOW", "2020-01-01 12:00")
    monkeypatch.setattr(config, "CONFIG", config.Settings())
    yield


@pytest.fixture
def make_app(tmp_path):
    """Return a factory creating an application tree under ``tmp_path``."""

    def _make(version_text=None, config_text=None, name="demo_app"):
        root = tmp_path / name
        (root / "config").mkdir(parents=True)
        if version_text is not None:
            (root / "config" / "version.rb").write_text(version_text)
        if config_text is not None:
            (root / "config" / "application.yaml").write_text(config_text)
        return Application(root)

    return _make


def version_rb(version: str, namespace: str = "DemoApp") -> str:
    return f'module {namespace}\n  VERSION = "{version}"\nend\n'


@pytest.fixture
def version_file_text():
    return version_rb
