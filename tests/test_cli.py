import pytest
from rich.console import Console

from screenres.check_required_bins import BinaryChecker
from screenres.display import cli
from screenres.display.factory import Collaborators
from screenres.display.models import ModeCatalog

from conftest import FakeConfigurator, FakeEnumerator, mode


class FakeAppearance:
    def toggle(self):
        return "true"


@pytest.fixture
def collaborators(monkeypatch, catalog):
    fakes = Collaborators(
        enumerator=FakeEnumerator([
            catalog,
            ModeCatalog(display_id="DP-1", modes=(mode(2560, 1440),), current_index=None),
        ]),
        configurator=FakeConfigurator(),
        appearance=FakeAppearance(),
        display_bins=["xrandr"],
        appearance_bins=["gsettings"],
    )
    monkeypatch.setattr(cli.CollaboratorFactory, "get", classmethod(lambda cls, platform=None: fakes))
    monkeypatch.setattr(BinaryChecker, "check_exists", lambda self, binary: True)
    monkeypatch.setattr(cli, "make_console", lambda: Console(theme=cli.THEME, color_system=None, highlight=False, soft_wrap=True))
    return fakes


def test_no_arguments_prints_help(capsys):
    assert cli.main([]) == 0
    assert "usage: screenres" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [["-l"], ["--list"], ["list"]])
def test_list_displays(collaborators, capsys, argv):
    assert cli.main(argv) == 0
    out = capsys.readouterr().out
    assert "Display 0:  1440 x  900 @ 2x @ 60Hz" in out
    assert "Display 1: current mode unknown" in out


def test_list_modes_marks_current(collaborators, capsys):
    assert cli.main(["-m", "0"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Supported Modes for Display 0:"
    assert lines[1] == "  -->  1440 x  900 @ 2x @ 60Hz"
    assert lines[2] == "       1440 x  900 @ 1x @ 60Hz"


@pytest.mark.parametrize("argv", [["-m"], ["mode"], ["mode", "abc"]])
def test_list_modes_defaults_to_display_zero(collaborators, capsys, argv):
    assert cli.main(argv) == 0
    assert "Supported Modes for Display 0:" in capsys.readouterr().out


def test_list_modes_unknown_display(collaborators):
    assert cli.main(["-m", "5"]) == 1


@pytest.mark.parametrize("argv", [["-s", "1280"], ["set", "0", "1280", "2"], ["-r", "1280"], ["retina", "1280"]])
def test_set_mode(collaborators, capsys, argv):
    assert cli.main(argv) == 0
    assert ("commit",) in collaborators.configurator.events
    assert "Display mode set" in capsys.readouterr().out


def test_set_current_mode_is_noop(collaborators, capsys):
    assert cli.main(["-s", "0", "1440", "900", "2"]) == 0
    assert collaborators.configurator.events == []
    assert "Display mode set" not in capsys.readouterr().out


@pytest.mark.parametrize("argv", [["-s"], ["-s", "0"], ["-s", "1024"], ["-s", "1", "1024"], ["-s", "1920"]])
def test_set_mode_errors_exit_one(collaborators, argv):
    assert cli.main(argv) == 1
    assert collaborators.configurator.events == []


def test_toggle_dark_mode(collaborators, capsys):
    assert cli.main(["-d"]) == 0
    assert "Dark Mode: true" in capsys.readouterr().out


def test_missing_binaries_exit_three(collaborators, monkeypatch):
    monkeypatch.setattr(BinaryChecker, "check_exists", lambda self, binary: False)
    assert cli.main(["-l"]) == 3


def test_unsupported_platform_exit_one(monkeypatch):
    def unsupported(cls, platform=None):
        raise ValueError("Unsupported platform: win32")

    monkeypatch.setattr(cli.CollaboratorFactory, "get", classmethod(unsupported))
    assert cli.main(["-l"]) == 1


@pytest.mark.parametrize("argv", [["foo"], ["--bogus"], ["-l", "extra"]])
def test_unknown_command_prints_full_help(capsys, argv):
    assert cli.main(argv) == 2
    out = capsys.readouterr().out
    assert "usage: screenres" in out
    assert "Examples:" in out


@pytest.mark.parametrize("argv", [["-s"], ["-s", "abc"], ["-r", "0"]])
def test_degenerate_set_is_rejected_before_binary_check(monkeypatch, argv):
    checked = []
    monkeypatch.setattr(BinaryChecker, "check_all", lambda self: checked.append(self.bins_to_check) or False)
    assert cli.main(argv) == 1
    assert checked == []
