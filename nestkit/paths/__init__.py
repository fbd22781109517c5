"""Path codec and nested path access."""

from .access import MISSING, get_path, remove_path, set_path
from .codec import DEFAULT_SEP, PathCodec


__all__ = ["DEFAULT_SEP", "MISSING", "PathCodec", "get_path", "remove_path", "set_path"]
