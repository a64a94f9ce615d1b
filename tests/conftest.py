import os

import pytest
import structlog

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def app():
    from PyQt6.QtWidgets import QApplication

    return QApplication.instance() or QApplication([])


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path, monkeypatch):
    """Keep user config overrides out of the tests."""
    monkeypatch.setenv("TIMELINE_CONFIG_DIR", str(tmp_path / "overrides"))


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any structlog configuration a test made."""
    yield
    structlog.reset_defaults()
