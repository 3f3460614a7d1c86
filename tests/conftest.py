import pytest


@pytest.fixture(autouse=True)
def _isolated_app_data(tmp_path, monkeypatch):
    # keep settings/log files out of the real user profile
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
