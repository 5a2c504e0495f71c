import json

from app_settings import DEFAULT_SETTINGS, default_settings_path, load_settings, normalize_settings, save_settings


def test_normalize_settings_coerces_invalid_values():
    raw = {
        "fade_trigger": "Timeout",
        "fade_delay_ms": 5000,
        "window_width": True,
        "window_height": 600,
        "heading": "   ",
    }
    out = normalize_settings(raw)
    assert out["fade_trigger"] == "timeout"
    assert out["fade_delay_ms"] == DEFAULT_SETTINGS["fade_delay_ms"]
    assert out["window_width"] == DEFAULT_SETTINGS["window_width"]
    assert out["window_height"] == 600
    assert out["heading"] == DEFAULT_SETTINGS["heading"]


def test_unknown_fade_trigger_falls_back_to_frame():
    assert normalize_settings({"fade_trigger": "interval"})["fade_trigger"] == "frame"


def test_load_settings_invalid_file_returns_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("not-json", encoding="utf-8")
    assert load_settings(str(path)) == DEFAULT_SETTINGS


def test_load_settings_non_object_returns_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert load_settings(str(path)) == DEFAULT_SETTINGS


def test_save_then_load_roundtrip(tmp_path):
    path = tmp_path / "nested" / "settings.json"
    save_settings(str(path), {"fade_trigger": "timeout", "fade_delay_ms": 120, "heading": "Hello"})
    loaded = load_settings(str(path))
    assert loaded["fade_trigger"] == "timeout"
    assert loaded["fade_delay_ms"] == 120
    assert loaded["heading"] == "Hello"

    saved_json = json.loads(path.read_text(encoding="utf-8"))
    assert "settings_version" in saved_json
    assert not (tmp_path / "nested" / "settings.json.tmp").exists()


def test_default_settings_path_honours_xdg(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert default_settings_path() == str(tmp_path / "rainbow-arc" / "settings.json")
