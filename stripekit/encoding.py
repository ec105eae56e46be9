"""
Form encoding for nested request parameters.

The payments API accepts ``application/x-www-form-urlencoded`` bodies and query
strings where nested structures are flattened into bracket notation::

    {"address": {"line1": "A"}, "ids": ["x", "y"]}
    -> address[line1]=A&ids[]=x&ids[]=y

``None`` marks an absent value and is dropped at every depth, which is how
optional and update-style calls leave a field untouched.
"""

from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Literal, TypeAlias, Union
from urllib.parse import quote

ConfigValue: TypeAlias = Union[
    str,
    int,
    float,
    Decimal,
    bool,
    Enum,
    datetime,
    None,
    Sequence["ConfigValue"],
    Mapping[str, "ConfigValue"],
]

ArrayStyle = Literal["brackets", "indexed"]

_KEY_SAFE_CHARS = "[]"


def _compose_key(prefix: str, key: str) -> str:
    return f"{prefix}[{key}]" if prefix else key


def _scalar_to_str(value: object) -> str:
    # bool is an int subclass and must be checked first.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return str(int(value.timestamp()))
    if isinstance(value, (str, int, float, Decimal)):
        return str(value)
    raise TypeError(f"Unsupported parameter value of type {type(value).__name__!r}.")


def _flatten(
    prefix: str,
    value: ConfigValue,
    pairs: list[tuple[str, str]],
    array_style: ArrayStyle,
) -> None:
    if value is None:
        return
    if isinstance(value, Enum):
        _flatten(prefix, value.value, pairs, array_style)
        return
    if isinstance(value, Mapping):
        for key, item in value.items():
            _flatten(_compose_key(prefix, str(key)), item, pairs, array_style)
        return
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        for index, item in enumerate(value):
            suffix = str(index) if array_style == "indexed" else ""
            _flatten(f"{prefix}[{suffix}]", item, pairs, array_style)
        return
    pairs.append((prefix, _scalar_to_str(value)))


def flatten_parameters(
    params: Mapping[str, ConfigValue],
    *,
    array_style: ArrayStyle = "brackets",
) -> list[tuple[str, str]]:
    """
    Flatten a parameter mapping into ordered ``(key, value)`` pairs.

    Pairs follow traversal order: top-level keys in the order the caller
    supplied them, nested keys in mapping iteration order, sequence elements
    in sequence order. Keys and values are returned unescaped.
    """
    if not isinstance(params, Mapping):
        raise TypeError("Request parameters must be a mapping of names to values.")
    if array_style not in ("brackets", "indexed"):
        raise ValueError(f"Unknown array_style {array_style!r}.")

    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        _flatten(str(key), value, pairs, array_style)
    return pairs


def encode_parameters(
    params: Mapping[str, ConfigValue],
    *,
    array_style: ArrayStyle = "brackets",
) -> str:
    """Encode a parameter mapping as a percent-encoded query/body string."""
    return "&".join(
        f"{quote(key, safe=_KEY_SAFE_CHARS)}={quote(value, safe='')}"
        for key, value in flatten_parameters(params, array_style=array_style)
    )
