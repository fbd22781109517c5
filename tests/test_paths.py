import logging
from types import MappingProxyType

import pytest

from nestkit.errors import InvalidInputError
from nestkit.paths.access import MISSING, _Missing, get_path, remove_path, set_path
from nestkit.paths.codec import PathCodec


def test_path_codec_split_join_and_child() -> None:
    codec = PathCodec()
    assert codec.split("a.b.c") == ("a", "b", "c")
    assert codec.split(["a.b", "c"]) == ("a.b", "c")
    assert codec.split("") == ()
    assert codec.join("a", "b") == "a.b"
    assert codec.child("", "key") == "key"
    assert codec.child("a.b", "key") == "a.b.key"


def test_path_codec_custom_separator() -> None:
    codec = PathCodec(sep="/")
    assert codec.split("a/b.c") == ("a", "b.c")
    assert codec.child("a", "b") == "a/b"


def test_path_codec_rejects_empty_separator() -> None:
    with pytest.raises(ValueError, match="sep must not be empty"):
        _ = PathCodec(sep="")


def test_missing_is_a_falsy_singleton() -> None:
    assert _Missing() is MISSING
    assert not MISSING
    assert repr(MISSING) == "MISSING"


def test_get_path_with_string_and_segments() -> None:
    root = {"a": {"b": {"c": 1}}}
    assert get_path(root, "a.b.c") == 1
    assert get_path(root, ["a", "b"]) == {"c": 1}
    assert get_path(root, "") is root


def test_get_path_missing_returns_sentinel_or_default() -> None:
    root = {"a": {"b": 1}, "n": None}
    assert get_path(root, "a.x") is MISSING
    assert get_path(root, "a.b.c") is MISSING
    assert get_path(root, ["x", "y"], default=0) == 0
    assert get_path(root, "n") is None
    assert get_path(root, "n.deeper") is MISSING


def test_get_path_never_raises_on_non_mapping_root() -> None:
    assert get_path(None, "a") is MISSING
    assert get_path([1, 2], "0") is MISSING
    assert get_path("text", ["a"]) is MISSING


def test_set_path_creates_intermediate_levels_and_returns_root() -> None:
    root: dict = {}
    result = set_path(root, "a.b.c", 1)
    assert result is root
    assert root == {"a": {"b": {"c": 1}}}


def test_set_path_keeps_siblings() -> None:
    root = {"a": {"x": 1}}
    _ = set_path(root, ["a", "y"], 2)
    assert root == {"a": {"x": 1, "y": 2}}


def test_set_path_overwrites_non_mapping_intermediate() -> None:
    root = {"a": 1, "b": [1, 2]}
    _ = set_path(root, "a.b", 2)
    _ = set_path(root, "b.c", 3)
    assert root == {"a": {"b": 2}, "b": {"c": 3}}


def test_set_path_empty_path_is_noop() -> None:
    root = {"a": 1}
    assert set_path(root, [], 2) is root
    assert root == {"a": 1}


def test_set_path_with_custom_separator() -> None:
    root: dict = {}
    _ = set_path(root, "a/b.c", 1, sep="/")
    assert root == {"a": {"b.c": 1}}
    assert get_path(root, "a/b.c", sep="/") == 1


def test_set_path_rejects_non_mapping_root() -> None:
    with pytest.raises(InvalidInputError, match="root must be a mutable mapping, got list"):
        _ = set_path([], "a", 1)  # type: ignore[arg-type]


def test_remove_path_deletes_leaf() -> None:
    root = {"a": {"b": 1, "c": 2}}
    assert remove_path(root, "a.b") is root
    assert root == {"a": {"c": 2}}
    assert get_path(root, "a.b") is MISSING


def test_remove_path_missing_links_are_noop() -> None:
    root = {"a": {"b": 1}, "s": 5}
    _ = remove_path(root, "x.y.z")
    _ = remove_path(root, "a.missing")
    _ = remove_path(root, "s.child")
    _ = remove_path(root, [])
    assert root == {"a": {"b": 1}, "s": 5}


def test_remove_path_does_not_mutate_path_argument() -> None:
    root = {"a": {"b": 1}}
    path = ["a", "b"]
    _ = remove_path(root, path)
    assert path == ["a", "b"]
    assert root == {"a": {}}


def test_remove_path_rejects_non_mapping_root() -> None:
    with pytest.raises(InvalidInputError, match="root must be a mutable mapping"):
        _ = remove_path("abc", "a")  # type: ignore[arg-type]


def test_get_path_with_empty_separator_returns_default() -> None:
    assert get_path({"a": 1}, "a", sep="") is MISSING
    assert get_path({"a": 1}, "a", default=None, sep="") is None


def test_set_path_copies_read_only_intermediate(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="nestkit.paths.access")
    frozen = MappingProxyType({"x": 1})
    root: dict = {"a": frozen}

    _ = set_path(root, "a.b", 2)

    assert root == {"a": {"x": 1, "b": 2}}
    assert dict(frozen) == {"x": 1}
    assert "Copying read-only mapping at 'a'" in caplog.text


def test_set_path_logs_overwritten_leaf(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="nestkit.paths.access")
    _ = set_path({"a": 1}, "a.b", 2)
    assert "Overwriting non-mapping value at 'a'" in caplog.text
