import pytest

from dfengine.log_manager import LM, LOGFILE_DEFAULT, LogManager
from dfengine.manager import ManagerError


@pytest.fixture
def log(tmp_path):
    path = tmp_path / "test.log"
    manager = LogManager(str(path))
    manager.start_up()
    yield manager, path
    manager.shut_down()


def test_default_filename_and_singleton():
    manager = LogManager()
    assert manager.filename == "dragonfly.log"
    assert manager.type == "LogManager"
    assert LM.filename == LOGFILE_DEFAULT


def test_start_up_writes_banner(log):
    manager, path = log
    manager.set_flush(True)
    manager.write_log("")
    assert manager.is_started is True
    assert path.read_text(encoding="utf-8").startswith("LogManager started\n")


@pytest.mark.parametrize(
    "fmt, args, expected",
    [
        ("TEST: Hello World!\n", (), "TEST: Hello World!\n"),
        ("TEST: number: %d\n", (42,), "TEST: number: 42\n"),
        ("TEST: float: %.2f\n", (3.14,), "TEST: float: 3.14\n"),
        ("TEST: string: %s\n", ("test string",), "TEST: string: test string\n"),
        (
            "TEST: Multiple args: %d, %.2f, %s\n",
            (42, 3.14, "test string"),
            "TEST: Multiple args: 42, 3.14, test string\n",
        ),
    ],
)
def test_write_log_formats(log, fmt, args, expected):
    manager, path = log
    manager.set_flush(True)
    assert manager.write_log(fmt, *args) == len(expected)
    assert expected in path.read_text(encoding="utf-8")


def test_shut_down_closes_and_writes_footer(tmp_path):
    path = tmp_path / "x.log"
    manager = LogManager(str(path))
    manager.start_up()
    manager.write_log("middle\n")
    manager.shut_down()
    assert manager.is_started is False
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines == ["LogManager started", "middle", "LogManager shutting down"]


def test_write_when_not_open_writes_nothing(tmp_path):
    manager = LogManager(str(tmp_path / "never.log"))
    assert manager.write_log("hello %d", 1) == 0
    assert not (tmp_path / "never.log").exists()


def test_write_log_level_respects_level(log):
    manager, path = log
    manager.set_flush(True)
    manager.log_level = 1
    assert manager.write_log_level(2, "hidden\n") == 0
    assert manager.write_log_level(1, "shown %s\n", "now") == len("shown now\n")
    content = path.read_text(encoding="utf-8")
    assert "shown now\n" in content
    assert "hidden" not in content


def test_start_up_failure_raises(tmp_path):
    manager = LogManager(str(tmp_path))
    with pytest.raises(ManagerError):
        manager.start_up()
    assert manager.is_started is False