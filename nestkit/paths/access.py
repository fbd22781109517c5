"""Get, set and remove values at a path inside nested mappings."""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import TYPE_CHECKING, Any

from nestkit.errors import ensure_mapping

from .codec import DEFAULT_SEP, PathCodec


if TYPE_CHECKING:
    from .codec import PathLike


logger = logging.getLogger(__name__)


class _Missing:
    """Singleton returned when a path does not resolve."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


def get_path(root: Any, path: PathLike, default: Any = MISSING, *, sep: str = DEFAULT_SEP) -> Any:
    """Return the value at *path* under *root*, or *default*.

    Resolution stops at the first segment that is absent or whose parent is
    not a mapping. Never raises, not even for a malformed *root* or separator.
    """
    try:
        codec = PathCodec(sep)
    except ValueError:
        return default
    current = root
    for key in codec.split(path):
        if not isinstance(current, Mapping) or key not in current:
            return default
        current = current[key]
    return current


def set_path(
    root: MutableMapping[str, Any], path: PathLike, value: Any, *, sep: str = DEFAULT_SEP
) -> MutableMapping[str, Any]:
    """Assign *value* at *path*, creating intermediate mappings, and return *root*.

    An intermediate segment that holds a non-mapping value is overwritten
    with a new dict; a read-only mapping there is replaced by a dict copy
    of itself.
    """
    ensure_mapping(root, "root", mutable=True)
    parts = PathCodec(sep).split(path)
    if not parts:
        return root

    current = root
    for key in parts[:-1]:
        child = current.get(key)
        if isinstance(child, Mapping) and not isinstance(child, MutableMapping):
            logger.debug("Copying read-only mapping at %r while setting %r", key, parts)
            child = current[key] = dict(child)
        elif not isinstance(child, MutableMapping):
            if child is not None:
                logger.debug("Overwriting non-mapping value at %r while setting %r", key, parts)
            child = current[key] = {}
        current = child
    current[parts[-1]] = value
    return root


def remove_path(root: MutableMapping[str, Any], path: PathLike, *, sep: str = DEFAULT_SEP) -> MutableMapping[str, Any]:
    """Delete the key at *path* if it resolves, and return *root*."""
    ensure_mapping(root, "root", mutable=True)
    parts = PathCodec(sep).split(path)
    if not parts:
        return root

    parent = get_path(root, parts[:-1])
    if isinstance(parent, MutableMapping):
        _ = parent.pop(parts[-1], None)
    return root
