import pytest

from snitch.console import set_console_printer
from snitch.errors import (
    Terminated,
    assertion_failed,
    set_assertion_failed_handler,
    terminate_with,
)


@pytest.fixture
def output():
    lines = []
    previous = set_console_printer(lines.append)
    yield lines
    set_console_printer(previous)


class CustomError(Exception):
    pass


def _raise_custom(msg):
    raise CustomError(msg)


def test_terminate_with_prints_and_raises(output):
    with pytest.raises(Terminated) as info:
        terminate_with("boom")
    assert info.value.message == "boom"
    assert "".join(output) == "terminate called with message: boom\n"


def test_terminated_not_caught_as_exception(output):
    with pytest.raises(Terminated):
        try:
            terminate_with("fatal")
        except Exception:
            pass


def test_assertion_failed_default_terminates(output):
    with pytest.raises(Terminated) as info:
        assertion_failed("broken")
    assert str(info.value) == "broken"
    assert "broken" in output


def test_assertion_failed_custom_handler(output):
    previous = set_assertion_failed_handler(_raise_custom)
    try:
        with pytest.raises(CustomError) as info:
            assertion_failed("checked")
        assert str(info.value) == "checked"
        assert output == []
    finally:
        set_assertion_failed_handler(previous)


def test_assertion_failed_handler_that_returns_still_terminates(output):
    seen = []
    previous = set_assertion_failed_handler(seen.append)
    try:
        with pytest.raises(Terminated):
            assertion_failed("ignored")
        assert seen == ["ignored"]
    finally:
        set_assertion_failed_handler(previous)


def test_default_handler_is_terminate_with():
    previous = set_assertion_failed_handler(_raise_custom)
    try:
        assert previous is terminate_with
    finally:
        set_assertion_failed_handler(previous)