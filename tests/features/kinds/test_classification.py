"""Tests for path kind and root kind classification."""

from __future__ import annotations

import pytest

from crosspath import InvalidRootError, PathKind, RootKind, detect_path_kind, detect_root_kind
from crosspath.features.kinds.domain.classification import drive_letter, unc_host


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("/foo", PathKind.ABSOLUTE),
        ("\\foo", PathKind.ABSOLUTE),
        ("C:\\x", PathKind.ABSOLUTE),
        ("d:", PathKind.ABSOLUTE),
        ("\\\\SERVER\\share", PathKind.ABSOLUTE),
        ("./a", PathKind.RELATIVE),
        ("..\\a", PathKind.RELATIVE),
        (".", PathKind.RELATIVE),
        ("foo/bar", PathKind.UNQUALIFIED),
        (".hidden/x", PathKind.UNQUALIFIED),
        ("", PathKind.UNQUALIFIED),
    ],
)
def test_detect_path_kind(raw: str, expected: PathKind) -> None:
    assert detect_path_kind(raw) is expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("C:\\x", RootKind.LETTER_DRIVE),
        ("z:/x", RootKind.LETTER_DRIVE),
        ("\\\\SERVER\\share", RootKind.UNC),
        ("/x", RootKind.LEADING_SLASH),
        ("\\x", RootKind.LEADING_SLASH),
    ],
)
def test_detect_root_kind(raw: str, expected: RootKind) -> None:
    assert detect_root_kind(raw) is expected


@pytest.mark.parametrize("raw", ["foo", "./foo", ""])
def test_detect_root_kind_rejects_non_absolute(raw: str) -> None:
    with pytest.raises(InvalidRootError):
        _ = detect_root_kind(raw)


def test_kind_values_are_strings() -> None:
    assert PathKind.ABSOLUTE == "absolute"
    assert RootKind.LETTER_DRIVE.value == "letter-drive"
    assert PathKind.RELATIVE.article == "a"
    assert PathKind.UNQUALIFIED.article == "an"


def test_drive_letter_and_unc_host() -> None:
    assert drive_letter("C:\\x") == "C:"
    assert drive_letter("/x") is None
    assert unc_host("\\\\SERVER\\share\\x") == "SERVER"
    assert unc_host("/x") is None
