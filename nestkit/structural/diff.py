"""Asymmetric structural diff and common-key lookup."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from nestkit.errors import ensure_mapping
from nestkit.paths.codec import DEFAULT_SEP, PathCodec


def _leaves_differ(left: Any, right: Any) -> bool:
    if left is right:
        return False
    # True == 1 in Python but a flag and a count are different values
    if isinstance(left, bool) != isinstance(right, bool):
        return True
    return left != right


def _diff_into(
    result: dict[str, Any], left: Mapping[str, Any], right: Mapping[str, Any], prefix: str, codec: PathCodec
) -> None:
    for key, value in left.items():
        path = codec.child(prefix, key)
        if key not in right:
            result[path] = value
        elif isinstance(value, Mapping):
            other = right[key]
            _diff_into(result, value, other if isinstance(other, Mapping) else {}, path, codec)
        elif _leaves_differ(value, right[key]):
            result[path] = value


def diff(a: Mapping[str, Any], b: Mapping[str, Any], *, sep: str = DEFAULT_SEP) -> dict[str, Any]:
    """Return the leaves of *a* that are missing from or different in *b*.

    Only *a* is traversed, so keys that exist only in *b* never appear.
    Result keys are joined paths, the same as ``flatten`` produces. Lists
    are compared as whole values, not element by element.
    """
    ensure_mapping(a, "a")
    ensure_mapping(b, "b")
    result: dict[str, Any] = {}
    _diff_into(result, a, b, "", PathCodec(sep))
    return result


def common_keys(a: Mapping[str, Any], b: Mapping[str, Any]) -> list[str]:
    """Return the top-level keys of *a* that are also keys of *b*, in *a*'s order."""
    ensure_mapping(a, "a")
    ensure_mapping(b, "b")
    return [key for key in a if key in b]
