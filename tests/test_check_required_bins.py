from screenres.check_required_bins import BinaryChecker


def test_all_present(monkeypatch):
    monkeypatch.setattr("shutil.which", lambda b: f"/usr/bin/{b}")
    assert BinaryChecker(["xrandr"]).check_all()


def test_missing_binary(monkeypatch):
    monkeypatch.setattr("shutil.which", lambda b: None)
    assert not BinaryChecker(["xrandr", "gsettings"]).check_all()
