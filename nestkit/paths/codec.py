"""Conversion between dotted path strings and segment tuples."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias


if TYPE_CHECKING:
    from collections.abc import Sequence


DEFAULT_SEP = "."

PathLike: TypeAlias = "str | Sequence[str]"


class PathCodec:
    """Map between serialized paths and logical path segments.

    Segments are not escaped: a segment containing the separator is split
    apart again on the way back, so such keys do not survive a round trip.
    """

    def __init__(self, sep: str = DEFAULT_SEP) -> None:
        super().__init__()
        if not sep:
            msg = "sep must not be empty"
            raise ValueError(msg)
        self.sep = sep

    def split(self, path: PathLike) -> tuple[str, ...]:
        """Return the segments of *path*.

        A string is split on the separator; any other sequence is taken as
        already split. The empty string is the empty path.
        """
        if isinstance(path, str):
            if not path:
                return ()
            return tuple(path.split(self.sep))
        return tuple(path)

    def join(self, *parts: object) -> str:
        """Serialize path segments into a single key."""
        return self.sep.join(str(part) for part in parts)

    def child(self, prefix: str, key: object) -> str:
        """Extend a serialized *prefix* by one segment."""
        if not prefix:
            return str(key)
        return self.join(prefix, key)

