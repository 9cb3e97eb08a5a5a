import pytest

from usbmoded.tracker import ValueTracker


@pytest.fixture
def attr(tmp_path):
    path = tmp_path / "functions"
    path.write_text("")
    return path


def test_track_and_untrack():
    tracker = ValueTracker()
    tracker.track("/some/path", "value")
    assert tracker.get("/some/path") == "value"
    assert "/some/path" in tracker
    tracker.track("/some/path", None)
    assert "/some/path" not in tracker
    assert len(tracker) == 0


def test_track_ignores_missing_path():
    tracker = ValueTracker()
    tracker.track(None, "value")
    assert len(tracker) == 0


def test_write_tracks_stripped_value(attr):
    tracker = ValueTracker()
    tracker.write(str(attr), " rndis \n")
    assert tracker.get(str(attr)) == "rndis"
    assert attr.read_text() == " rndis \n"


def test_write_missing_file_raises_and_is_untracked(tmp_path):
    tracker = ValueTracker()
    path = str(tmp_path / "missing")
    with pytest.raises(FileNotFoundError):
        tracker.write(path, "1")
    assert path not in tracker


def test_write_requires_path_and_text(attr):
    tracker = ValueTracker()
    with pytest.raises(ValueError):
        tracker.write(None, "1")
    with pytest.raises(ValueError):
        tracker.write(str(attr), None)


@pytest.mark.parametrize("text", ["", "none"])
def test_write_clear_path_writes_none_and_tracks_empty(attr, text):
    tracker = ValueTracker(clear_paths=[str(attr)])
    tracker.write(str(attr), text)
    assert attr.read_text() == "none"
    assert tracker.get(str(attr)) == ""


def test_empty_write_on_ordinary_path_is_kept(attr):
    tracker = ValueTracker()
    tracker.write(str(attr), "")
    assert tracker.get(str(attr)) == ""
    assert attr.read_text() == ""


def test_verify_without_changes(attr):
    tracker = ValueTracker()
    tracker.write(str(attr), "mtp")
    assert tracker.verify() == {}
    assert tracker.get(str(attr)) == "mtp"


def test_verify_detects_and_adopts_change(attr):
    tracker = ValueTracker()
    tracker.write(str(attr), "mtp")
    attr.write_text("adb\n")
    assert tracker.verify() == {str(attr): ("mtp", "adb")}
    assert tracker.get(str(attr)) == "adb"
    assert tracker.verify() == {}


def test_verify_case_only_difference_is_adopted(attr):
    tracker = ValueTracker()
    tracker.write(str(attr), "0A02")
    attr.write_text("0a02")
    assert tracker.verify() == {str(attr): ("0A02", "0a02")}
    assert tracker.get(str(attr)) == "0a02"


def test_verify_drops_vanished_file(attr):
    tracker = ValueTracker()
    tracker.write(str(attr), "mtp")
    attr.unlink()
    assert tracker.verify() == {str(attr): ("mtp", None)}
    assert str(attr) not in tracker


def test_clear_forgets_everything(attr):
    tracker = ValueTracker()
    tracker.write(str(attr), "mtp")
    tracker.track("/other", "x")
    tracker.clear()
    assert len(tracker) == 0
    assert tracker.verify() == {}