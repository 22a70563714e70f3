"""Tests for configuration helpers."""

import pytest

from dishcovery.config import parse_bearer_token


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Bearer abc.def", "abc.def"),
        ("bearer   token ", "token"),
        ("Basic abc", None),
        ("Bearer ", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_bearer_token(raw: str | None, expected: str | None) -> None:
    assert parse_bearer_token(raw) == expected
