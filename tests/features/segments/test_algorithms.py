"""Tests for the pure segment algorithms."""

from __future__ import annotations

import pytest

from crosspath.features.segments.domain.algorithms import (
    ends_with_segments,
    index_of_segments,
    is_root_marker,
    normalize_segments,
    relative_segments,
    shared_prefix_length,
    splice_segments,
    starts_with_segments,
)


@pytest.mark.parametrize(
    ("segments", "expected"),
    [
        (["", "foo", "bar", "baz", "..", "..", "qux"], ["", "foo", "qux"]),
        (["", "foo", ".", "bar"], ["", "foo", "bar"]),
        (["C:", "foo", ".."], ["C:"]),
        (["", ".."], [""]),
        (["C:", "..", "x"], ["C:", "x"]),
        (["..", "..", "foo"], ["..", "..", "foo"]),
        ([".", "foo"], [".", "foo"]),
        ([".", "..", "foo"], ["..", "foo"]),
        (["a", "b", "..", "..", ".."], [".."]),
        (["", "", "SERVER", "foo", ".."], ["", "", "SERVER"]),
        (["", "", "SERVER", "share", "..", "..", ".."], ["", "", "SERVER"]),
        ([], []),
    ],
)
def test_normalize_segments(segments: list[str], expected: list[str]) -> None:
    assert normalize_segments(segments) == expected


def test_normalize_segments_is_idempotent() -> None:
    once = normalize_segments(["..", "a", "..", "..", ".", "b"])
    assert normalize_segments(once) == once


def test_is_root_marker() -> None:
    assert is_root_marker(["", "a"], 0) is True
    assert is_root_marker(["C:", "a"], 0) is True
    assert is_root_marker(["a", "C:"], 1) is False
    assert is_root_marker(["C:foo"], 0) is False
    assert is_root_marker(["", "", "HOST", "share"], 2) is True
    assert is_root_marker(["", "a", "HOST"], 2) is False


def test_shared_prefix_length_is_positional() -> None:
    assert shared_prefix_length(["", "a", "b"], ["", "a", "c"]) == 2
    assert shared_prefix_length(["a", "b"], ["b", "a"]) == 0
    assert shared_prefix_length([], ["a"]) == 0


@pytest.mark.parametrize(
    ("own", "directory", "expected"),
    [
        (["", "foo", "bar"], ["", "foo"], [".", "bar"]),
        (["", "foo"], ["", "foo", "bar"], [".."]),
        (["", "foo", "qux"], ["", "foo", "bar", "baz"], ["..", "..", "qux"]),
        (["", "a", "b", "c"], ["", "d", "e", "f"], ["..", "..", "..", "a", "b", "c"]),
        (["", "foo"], ["", "foo"], ["."]),
    ],
)
def test_relative_segments(own: list[str], directory: list[str], expected: list[str]) -> None:
    assert relative_segments(own, directory) == expected


def test_relative_segments_without_leading_dot() -> None:
    assert relative_segments(["", "foo", "bar"], ["", "foo"], leading_dot=False) == ["bar"]


def test_index_of_segments_matches_whole_segments() -> None:
    haystack = ["", "a", "b", "a", "b"]

    assert index_of_segments(haystack, ["a", "b"]) == 1
    assert index_of_segments(haystack, ["a", "b"], 2) == 3
    assert index_of_segments(haystack, ["a", "b"], -2) == 3
    assert index_of_segments(haystack, ["b", "c"]) == -1
    assert index_of_segments(["ab"], ["a"]) == -1


def test_index_of_segments_empty_needle_matches_at_from_index() -> None:
    assert index_of_segments(["a", "b"], []) == 0
    assert index_of_segments(["a", "b"], [], 2) == 2
    assert index_of_segments(["a", "b"], [], -1) == 1
    assert index_of_segments(["a", "b"], [], 3) == -1


def test_splice_segments() -> None:
    assert splice_segments(["a", "b", "c"], 1, 1, ["x", "y"]) == ["a", "x", "y", "c"]
    assert splice_segments(["a", "b", "c"], 0, 2, []) == ["c"]


def test_starts_and_ends_with_segments() -> None:
    assert starts_with_segments(["", "a", "b"], ["", "a"]) is True
    assert starts_with_segments(["", "a"], ["", "a", "b"]) is False
    assert ends_with_segments(["", "a", "b"], ["a", "b"]) is True
    assert ends_with_segments(["b"], ["a", "b"]) is False
    assert ends_with_segments(["a"], []) is True
