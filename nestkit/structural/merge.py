"""Shallow and deep merging of mappings."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from nestkit.errors import ensure_mapping


def _merge_into(target: dict[str, Any], source: Mapping[str, Any]) -> None:
    for key, value in source.items():
        if isinstance(value, Mapping):
            existing = target.get(key)
            # target levels are always owned by the result, never an input
            if not isinstance(existing, dict):
                existing = target[key] = {}
            _merge_into(existing, value)
        else:
            target[key] = copy.deepcopy(value)


def deep_merge(*nodes: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge *nodes* left to right into a new dict.

    Later values win at matching leaf paths. Lists are replaced whole,
    never concatenated. No input is mutated and the result shares no
    mutable structure with any input.

    Example:
        >>> deep_merge({"a": {"x": 1}}, {"a": {"y": 2}})
        {'a': {'x': 1, 'y': 2}}
    """
    merged: dict[str, Any] = {}
    for index, node in enumerate(nodes):
        ensure_mapping(node, f"nodes[{index}]")
        _merge_into(merged, node)
    return merged


def merge(*nodes: Mapping[str, Any]) -> dict[str, Any]:
    """Merge the top-level keys of *nodes* into a new dict, later wins."""
    merged: dict[str, Any] = {}
    for index, node in enumerate(nodes):
        ensure_mapping(node, f"nodes[{index}]")
        merged.update(node)
    return merged
