"""Key selection helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from nestkit.errors import ensure_mapping


if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


def pick(node: Mapping[str, Any], keys: Iterable[str]) -> dict[str, Any]:
    """Return a new dict holding only those *keys* present in *node*."""
    ensure_mapping(node)
    return {key: node[key] for key in keys if key in node}


def omit(node: Mapping[str, Any], keys: Iterable[str]) -> dict[str, Any]:
    """Return a new dict without *keys*."""
    ensure_mapping(node)
    excluded = set(keys)
    return {key: value for key, value in node.items() if key not in excluded}
