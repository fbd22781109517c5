"""Exception types raised by nestkit."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any


class InvalidInputError(ValueError):
    """Raised when a mapping was expected but some other value was given."""


def ensure_mapping(value: Any, name: str = "node", *, mutable: bool = False) -> None:
    """Raise ``InvalidInputError`` unless *value* is a (mutable) mapping."""
    expected = MutableMapping if mutable else Mapping
    if not isinstance(value, expected):
        kind = "mutable mapping" if mutable else "mapping"
        msg = f"{name} must be a {kind}, got {type(value).__name__}"
        raise InvalidInputError(msg)
