"""JSON-oriented helpers for mappings and record lists."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any
from urllib.parse import quote, unquote

from nestkit.errors import ensure_mapping


if TYPE_CHECKING:
    from collections.abc import Sequence


logger = logging.getLogger(__name__)

# punctuation left unescaped in query components, alongside letters and digits
_UNRESERVED = "-_.!~*'()"


def deep_clone(
    node: Any,
    *,
    json_encoder: Callable[[Any], str] = json.dumps,
    json_decoder: Callable[[str], Any] = json.loads,
) -> Any:
    """Return a copy of *node* made by a JSON round trip.

    Tuples come back as lists, and non-string keys as strings.
    """
    return json_decoder(json_encoder(node))


def is_empty(node: Mapping[str, Any]) -> bool:
    """Return True when *node* has no keys."""
    ensure_mapping(node)
    return len(node) == 0


def pretty_print_json(node: Any, indent: int = 2) -> str:
    """Render *node* as indented JSON."""
    return json.dumps(node, indent=indent)


def safe_parse_json(text: str | bytes, default: Any = None) -> Any:
    """Parse *text* as JSON, returning *default* when it is not valid JSON."""
    try:
        return json.loads(text)
    except (TypeError, ValueError) as error:
        logger.debug("Could not parse JSON: %s", error)
        return default


def _to_text(value: Any) -> str:
    """Render a value the way query strings historically stringify it."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list | tuple):
        return ",".join("" if item is None else _to_text(item) for item in value)
    return str(value)


def to_query_string(node: Mapping[str, Any]) -> str:
    """Encode the top-level entries of *node* as ``key=value&...``.

    Keys and values are percent-encoded; nested values are not expanded.
    """
    ensure_mapping(node)
    pairs = (
        f"{quote(str(key), safe=_UNRESERVED)}={quote(_to_text(value), safe=_UNRESERVED)}" for key, value in node.items()
    )
    return "&".join(pairs)


def from_query_string(text: str) -> dict[str, str]:
    """Decode a query string into a dict of strings.

    A leading ``?`` is ignored, a pair without ``=`` maps to an empty
    string, and a repeated key keeps its last value.
    """
    text = text.removeprefix("?")
    result: dict[str, str] = {}
    if not text:
        return result
    for pair in text.split("&"):
        key, _, value = pair.partition("=")
        result[unquote(key)] = unquote(value)
    return result


def _blank_nulls(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, Mapping):
        return {key: _blank_nulls(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [_blank_nulls(item) for item in value]
    return value


def _csv_cell(value: Any) -> str:
    if value is None:
        return ""
    return json.dumps(_blank_nulls(value), separators=(",", ":"))


def json_to_csv(records: Sequence[Mapping[str, Any]]) -> str:
    """Render *records* as CSV text.

    The header comes from the first record. Every cell holds the JSON
    encoding of its value without spaces, so strings keep their double
    quotes; ``None`` at any depth is written as an empty string and absent
    fields are empty cells. Cells are not escaped, so values
    containing commas make the row ambiguous.
    """
    if not records:
        return ""
    for index, record in enumerate(records):
        ensure_mapping(record, f"records[{index}]")

    headers = list(records[0])
    rows = [",".join(headers)]
    rows.extend(",".join(_csv_cell(record.get(header)) for header in headers) for record in records)
    return "\n".join(rows)
