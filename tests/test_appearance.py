import subprocess

import pytest

from screenres.display import appearance
from screenres.display.appearance import GnomeDarkMode, MacDarkMode
from screenres.display.errors import AppearanceError


def test_gnome_switches_light_to_dark(monkeypatch):
    calls = []

    def fake_run(cmd):
        calls.append(cmd)
        return "'default'\n" if cmd[1] == "get" else ""

    monkeypatch.setattr(appearance, "run_command", fake_run)
    assert GnomeDarkMode().toggle() == "true"
    assert calls[-1] == ["gsettings", "set", "org.gnome.desktop.interface", "color-scheme", "prefer-dark"]


def test_gnome_switches_dark_to_light(monkeypatch):
    calls = []

    def fake_run(cmd):
        calls.append(cmd)
        return "'prefer-dark'\n" if cmd[1] == "get" else ""

    monkeypatch.setattr(appearance, "run_command", fake_run)
    assert GnomeDarkMode().toggle() == "false"
    assert calls[-1][-1] == "default"


def test_mac_returns_script_result(monkeypatch):
    calls = []
    monkeypatch.setattr(appearance, "run_command", lambda cmd: calls.append(cmd) or "true\n")
    assert MacDarkMode().toggle() == "true"
    assert calls[0][:4] == ["osascript", "-l", "JavaScript", "-e"]


def test_command_failure_raises_appearance_error(monkeypatch):
    def failing(cmd):
        raise subprocess.CalledProcessError(1, cmd, stderr="No such schema")

    monkeypatch.setattr(appearance, "run_command", failing)
    with pytest.raises(AppearanceError, match="No such schema"):
        GnomeDarkMode().toggle()
