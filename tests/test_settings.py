import json

from settings import load_settings, save_settings


def test_defaults_when_missing(settings_path):
    s = load_settings()
    assert s["date_format"] == "{month}/{day}/{year}"
    assert s["highlight_today"] is True
    assert s["fields"] == ["Start date", "End date"]


def test_round_trip(settings_path):
    s = load_settings()
    s["date_format"] = "{day}.{month}.{year}"
    s["fields"] = ["Check-in"]
    s["tray_icon"] = False
    save_settings(s)
    loaded = load_settings()
    assert loaded["date_format"] == "{day}.{month}.{year}"
    assert loaded["fields"] == ["Check-in"]
    assert loaded["tray_icon"] is False


def test_invalid_values_ignored(settings_path):
    settings_path.write_text(json.dumps({
        "highlight_today": "yes",
        "fields": ["A", 3, "B"],
        "log_level": 10,
    }), encoding="utf-8")
    s = load_settings()
    assert s["highlight_today"] is True
    assert s["fields"] == ["A", "B"]
    assert s["log_level"] == "WARNING"


def test_corrupt_file_falls_back_to_defaults(settings_path, caplog):
    settings_path.write_text("{not json", encoding="utf-8")
    s = load_settings()
    assert s["date_format"] == "{month}/{day}/{year}"
    assert "Ignoring unreadable settings file" in caplog.text


def test_defaults_not_shared(settings_path):
    load_settings()["fields"].append("X")
    assert load_settings()["fields"] == ["Start date", "End date"]
