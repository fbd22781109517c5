"""Conversion between nested mappings and flat dot-keyed mappings."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from nestkit.errors import ensure_mapping
from nestkit.paths.codec import DEFAULT_SEP, PathCodec


logger = logging.getLogger(__name__)


def _flatten_into(result: dict[str, Any], node: Mapping[str, Any], prefix: str, codec: PathCodec) -> None:
    for key, value in node.items():
        path = codec.child(prefix, key)
        if isinstance(value, Mapping):
            _flatten_into(result, value, path, codec)
        else:
            result[path] = value


def flatten(node: Mapping[str, Any], prefix: str = "", *, sep: str = DEFAULT_SEP) -> dict[str, Any]:
    """Flatten *node* into a single-level dict keyed by joined paths.

    Only mappings are descended into. Lists, tuples and ``None`` are leaves,
    so ``{"a": [{"b": 1}]}`` flattens to ``{"a": [{"b": 1}]}``. An empty
    nested mapping contributes no keys.
    """
    ensure_mapping(node)
    codec = PathCodec(sep)
    result: dict[str, Any] = {}
    _flatten_into(result, node, prefix, codec)
    return result


def unflatten(flat: Mapping[str, Any], *, sep: str = DEFAULT_SEP) -> dict[str, Any]:
    """Rebuild a nested dict from a flat mapping of joined paths.

    Entries are applied in iteration order. When a key needs a mapping
    where an earlier entry stored a leaf, the leaf is replaced; a later
    leaf likewise replaces a subtree built by earlier entries. A mapping
    stored as a value is copied before deeper keys are added to it, so
    *flat* and its values are never modified.
    """
    ensure_mapping(flat, "flat")
    codec = PathCodec(sep)
    result: dict[str, Any] = {}
    # ids of levels created by this call; only these may be written into
    owned = {id(result)}
    for flat_key, value in flat.items():
        parts = codec.split(flat_key)
        if not parts:
            parts = ("",)
        current = result
        for part in parts[:-1]:
            child = current.get(part)
            if not (isinstance(child, dict) and id(child) in owned):
                if isinstance(child, Mapping):
                    child = dict(child)
                else:
                    if part in current:
                        logger.debug("Replacing leaf at %r while unflattening %r", part, flat_key)
                    child = {}
                current[part] = child
                owned.add(id(child))
            current = child
        current[parts[-1]] = value
    return result
