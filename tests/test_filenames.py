"""Tests for file-name sanitising."""

import pytest

from zcv.utils import safe_filename


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Jane Doe_Software Engineer_2024-05-01", "Jane Doe_Software Engineer_2024-05-01"),
        ("Jane_CI/CD Engineer", "Jane_CI-CD Engineer"),
        ("a\\b:c*d?e\"f<g>h|i", "a-b-c-d-e-f-g-h-i"),
        ("../etc/passwd", "-etc-passwd"),
        ("..", "untitled"),
        ("  ", "untitled"),
    ],
)
def test_safe_filename(name: str, expected: str) -> None:
    assert safe_filename(name) == expected


def test_custom_fallback() -> None:
    assert safe_filename("", fallback="resume") == "resume"
