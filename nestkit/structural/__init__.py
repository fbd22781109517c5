"""Structural transformations of nested mappings."""

from .diff import common_keys, diff
from .flatten import flatten, unflatten
from .merge import deep_merge, merge
from .select import omit, pick


__all__ = ["common_keys", "deep_merge", "diff", "flatten", "merge", "omit", "pick", "unflatten"]
