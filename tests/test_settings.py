from venuecal.settings import load_settings


def test_defaults_when_file_missing(tmp_path, monkeypatch):
    monkeypatch.delenv("VENUECAL_BASE_URL", raising=False)
    settings = load_settings(tmp_path / "absent.toml")
    assert settings["upstream"]["base_url"] == "https://goout.net"
    assert settings["upstream"]["timeout_seconds"] == 10.0
    assert settings["server"]["port"] == 3000
    assert settings["cli"]["default_language"] == "en"


def test_file_values_merge_over_defaults(tmp_path):
    path = tmp_path / "settings.toml"
    path.write_text('[server]\nport = 8000\n', encoding="utf-8")
    settings = load_settings(path)
    assert settings["server"]["port"] == 8000
    assert settings["server"]["host"] == "0.0.0.0"


def test_environment_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("VENUECAL_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("VENUECAL_PORT", "9000")
    settings = load_settings(tmp_path / "absent.toml")
    assert settings["upstream"]["timeout_seconds"] == 2.5
    assert settings["server"]["port"] == 9000
