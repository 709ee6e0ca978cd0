import pytest

from snitch.matcher import (
    MAX_MESSAGE_LENGTH,
    ContainsSubstring,
    MatchStatus,
    WithWhatContains,
)


def test_contains_substring_comparisons():
    assert "info: hello" == ContainsSubstring("hello")
    assert "info: hello" != ContainsSubstring("warning")
    assert ContainsSubstring("hello") == "info: hello"
    assert ContainsSubstring("warning") != "info: hello"


def test_contains_substring_match():
    assert ContainsSubstring("hello").match("info: hello") is True
    assert ContainsSubstring("warning").match("info: hello") is False


def test_contains_substring_describe():
    assert (
        ContainsSubstring("hello").describe_match("info: hello", MatchStatus.MATCHED)
        == "found 'hello' in 'info: hello'"
    )
    assert (
        ContainsSubstring("warning").describe_match("info: hello", MatchStatus.FAILED)
        == "could not find 'warning' in 'info: hello'"
    )


def test_describe_truncates_long_message():
    text = ContainsSubstring("x").describe_match("y" * 2000, MatchStatus.FAILED)
    assert len(text) == MAX_MESSAGE_LENGTH
    assert text.endswith("...")


@pytest.mark.parametrize(
    "pattern, expected",
    [("good", True), ("not good", True), ("bad", False), ("is good", False)],
)
def test_with_what_contains_comparisons(pattern, expected):
    error = RuntimeError("not good")
    assert (error == WithWhatContains(pattern)) is expected
    assert (WithWhatContains(pattern) == error) is expected
    assert (WithWhatContains(pattern) != error) is (not expected)


def test_with_what_contains_describe():
    assert (
        WithWhatContains("good").describe_match(
            RuntimeError("not good"), MatchStatus.MATCHED
        )
        == "found 'good' in 'not good'"
    )
    assert (
        WithWhatContains("bad").describe_match(RuntimeError("not good"), MatchStatus.FAILED)
        == "could not find 'bad' in 'not good'"
    )


def test_matcher_not_equal_to_unrelated_type():
    assert (ContainsSubstring("1") == 1) is False
    assert (WithWhatContains("x") == "x") is False


def test_matchers_compare_by_pattern():
    assert ContainsSubstring("a") == ContainsSubstring("a")
    assert ContainsSubstring("a") != ContainsSubstring("b")