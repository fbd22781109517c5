"""nestkit - helpers for nested mappings: paths, flatten, merge and diff"""

from ._version import version as __version__
from .errors import InvalidInputError
from .json_tools import (
    deep_clone,
    from_query_string,
    is_empty,
    json_to_csv,
    pretty_print_json,
    safe_parse_json,
    to_query_string,
)
from .paths import MISSING, PathCodec, get_path, remove_path, set_path
from .structural import common_keys, deep_merge, diff, flatten, merge, omit, pick, unflatten


__all__ = [
    "MISSING",
    "InvalidInputError",
    "PathCodec",
    "__version__",
    "common_keys",
    "deep_clone",
    "deep_merge",
    "diff",
    "flatten",
    "from_query_string",
    "get_path",
    "is_empty",
    "json_to_csv",
    "merge",
    "omit",
    "pick",
    "pretty_print_json",
    "remove_path",
    "safe_parse_json",
    "set_path",
    "to_query_string",
    "unflatten",
]
