from dataclasses import dataclass

import pytest

import diffkit
from diffpack.diff import DiffAssertionError, assert_no_diff, assert_values


@dataclass
class Order:
    id: int
    status: str
    lines: list


def test_assertion_passes_for_equal_values() -> None:
    result = assert_values(Order(1, "open", [1]), Order(1, "open", [1]))

    assert result.passed is True
    assert result.report() == ""
    payload = result.to_dict()
    assert payload["status"] == "pass"
    assert payload["entry_count"] == 0


def test_assertion_fails_for_different_values() -> None:
    result = assert_values(Order(1, "open", [1]), Order(1, "closed", [1]))

    assert result.passed is False
    assert result.report() == "Child status:\n|\tReceived: closed\n|\tExpected: open\n\n"
    payload = result.to_dict()
    assert payload["status"] == "fail"
    assert payload["entries"] == result.entries


def test_assert_no_diff_raises_with_report() -> None:
    with pytest.raises(DiffAssertionError) as excinfo:
        assert_no_diff(Order(1, "open", [1, 2]), Order(1, "open", [1]))

    error = excinfo.value
    assert isinstance(error, AssertionError)
    assert len(error.entries) == 1
    message = str(error)
    assert message.startswith("values differ (1 difference(s))\n")
    assert "Different count:" in message


def test_assert_no_diff_uses_custom_headline() -> None:
    with pytest.raises(DiffAssertionError, match="order snapshot drifted"):
        diffkit.assert_no_diff({"a": 1}, {"a": 2}, message="order snapshot drifted")


def test_assert_no_diff_is_silent_when_equal() -> None:
    assert_no_diff({"a": [1, 2]}, {"a": [1, 2]})
