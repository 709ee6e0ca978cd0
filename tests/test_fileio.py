import pytest

from snitch.console import set_console_printer
from snitch.errors import Terminated
from snitch.fileio import MAX_PATH_LENGTH, FileWriter


@pytest.fixture
def output():
    lines = []
    previous = set_console_printer(lines.append)
    yield lines
    set_console_printer(previous)


def test_write_round_trip(tmp_path):
    path = tmp_path / "out.txt"
    with FileWriter(path) as writer:
        writer.write("first\n")
        writer.write("second")
        assert path.read_text(encoding="utf-8") == "first\nsecond"
    assert path.read_text(encoding="utf-8") == "first\nsecond"


def test_file_is_truncated_on_open(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text("old content", encoding="utf-8")
    writer = FileWriter(str(path))
    writer.write("new")
    writer.close()
    assert path.read_text(encoding="utf-8") == "new"


def test_write_after_close_is_ignored(tmp_path):
    path = tmp_path / "out.txt"
    writer = FileWriter(path)
    writer.write("kept")
    writer.close()
    writer.write("dropped")
    writer.close()
    assert path.read_text(encoding="utf-8") == "kept"


def test_writer_without_path_discards(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    writer = FileWriter()
    assert writer.write("nothing") is None
    writer.close()
    assert list(tmp_path.iterdir()) == []


def test_path_too_long(output):
    with pytest.raises(Terminated) as info:
        FileWriter("a" * (MAX_PATH_LENGTH + 1))
    assert str(info.value) == "output file path is too long"


def test_unopenable_path(tmp_path, output):
    with pytest.raises(Terminated) as info:
        FileWriter(tmp_path / "missing" / "out.txt")
    assert str(info.value) == "output file could not be opened for writing"
    assert "output file could not be opened for writing" in output