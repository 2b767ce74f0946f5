"""Shared fixtures for the date picker tests."""

import tkinter as tk

import pytest

import settings


@pytest.fixture
def tk_root():
    """A withdrawn Tk root; skips the test when no display is available."""
    try:
        root = tk.Tk()
    except tk.TclError as exc:
        pytest.skip(f"no display available: {exc}")
    root.withdraw()
    yield root
    root.destroy()


@pytest.fixture
def settings_path(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    monkeypatch.setattr(settings, "_SETTINGS_PATH", str(path))
    return path
