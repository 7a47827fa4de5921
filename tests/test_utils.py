from datetime import datetime, timezone

import pytest

from setcookie.utils import ensure_str, truthy
from setcookie.utils.time import (
    timestamp_from_cookie_format,
    timestamp_to_cookie_format,
)


def _timestamp(*args) -> int:
    return int(datetime(*args, tzinfo=timezone.utc).timestamp())


@pytest.mark.parametrize(
    "value,expected_result", [("hello", "hello"), (b"hello", "hello")]
)
def test_ensure_str(value, expected_result):
    assert ensure_str(value) == expected_result


def test_ensure_str_throws_for_invalid_value():
    with pytest.raises(ValueError):
        ensure_str(True)  # type: ignore


@pytest.mark.parametrize(
    "value,default,expected_result",
    [
        ("1", False, True),
        ("true", False, True),
        ("TRUE", False, True),
        ("0", True, False),
        ("yes", True, False),
        ("", True, True),
        ("", False, False),
    ],
)
def test_truthy(value, default, expected_result):
    assert truthy(value, default) is expected_result


@pytest.mark.parametrize(
    "value,expected_result",
    [
        (0, "Thu, 01-Jan-1970 00:00:00 GMT"),
        (1, "Thu, 01-Jan-1970 00:00:01 GMT"),
        (1700000000, "Tue, 14-Nov-2023 22:13:20 GMT"),
        (_timestamp(2019, 1, 27, 20, 40, 54), "Sun, 27-Jan-2019 20:40:54 GMT"),
        (_timestamp(2015, 10, 21, 7, 28, 0), "Wed, 21-Oct-2015 07:28:00 GMT"),
    ],
)
def test_timestamp_to_cookie_format(value, expected_result):
    assert timestamp_to_cookie_format(value) == expected_result


@pytest.mark.parametrize(
    "value,expected_result",
    [
        ("Sun, 27-Jan-2019 20:40:54 GMT", _timestamp(2019, 1, 27, 20, 40, 54)),
        ("Sun, 27 Jan 2019 20:40:54 GMT", _timestamp(2019, 1, 27, 20, 40, 54)),
        ("Wed, 21 Oct 2015 07:28:00 GMT", _timestamp(2015, 10, 21, 7, 28, 0)),
        ("Thu, 31-Dec-37 23:55:55 GMT", _timestamp(2037, 12, 31, 23, 55, 55)),
        ("Tuesday, 08-Feb-94 14:15:29 GMT", _timestamp(1994, 2, 8, 14, 15, 29)),
        ("09 Feb 1994 22:23:32 GMT", _timestamp(1994, 2, 9, 22, 23, 32)),
        ("08-Feb-1994 14:15:29 GMT", _timestamp(1994, 2, 8, 14, 15, 29)),
        ("2023-11-14T23:13:20Z", _timestamp(2023, 11, 14, 23, 13, 20)),
        ("2023-11-14 23:13:20", _timestamp(2023, 11, 14, 23, 13, 20)),
        ("  Thu, 01-Jan-1970 00:00:01 GMT  ", 1),
    ],
)
def test_timestamp_from_cookie_format(value, expected_result):
    assert timestamp_from_cookie_format(value) == expected_result


@pytest.mark.parametrize("value", ["", "   ", "garbage"])
def test_timestamp_from_cookie_format_returns_none(value):
    assert timestamp_from_cookie_format(value) is None
