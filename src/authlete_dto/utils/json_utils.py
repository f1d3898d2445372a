# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_identity

"""
Helpers for turning stored JSON strings and optional DTO fields into plain mappings.
"""

import json
from collections.abc import Mapping, MutableMapping, Sequence
from enum import Enum
from typing import Any

from authlete_dto.exceptions import MalformedDataError
from authlete_dto.utils.logger import logger

__all__ = [
    "dumps_mapping",
    "join",
    "parse_json_array",
    "parse_json_object",
    "put",
    "put_json_array",
    "stringify_prompts",
    "stringify_properties",
    "stringify_scope_names",
    "to_json",
]


def to_json(obj: Any, pretty: bool = False) -> str:
    """Serializes a plain Python object. Compact unless `pretty` is set."""
    if pretty:
        return json.dumps(obj, indent=2, ensure_ascii=False)
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)


def _parse(text: str, what: str) -> Any:
    try:
        return json.loads(text)
    except ValueError as e:
        logger.debug(f"Failed to parse {what}: {e}")
        raise MalformedDataError(f"The value of '{what}' is not valid JSON.") from e


def parse_json_object(text: str | None, what: str = "value") -> dict[str, Any] | None:
    """
    Parses a stored JSON string that must hold a JSON object.

    Args:
        text: The JSON string. `None` yields `None`.
        what: A name for the value, used in the error message.

    Returns:
        The decoded mapping, or None.

    Raises:
        MalformedDataError: If the text is not JSON or not an object.
    """
    if text is None:
        return None
    value = _parse(text, what)
    if not isinstance(value, dict):
        raise MalformedDataError(f"The value of '{what}' is not a JSON object.")
    return value


def parse_json_array(text: str | None, what: str = "value") -> list[Any] | None:
    """
    Parses a stored JSON string that must hold a JSON array.

    Raises:
        MalformedDataError: If the text is not JSON or not an array.
    """
    if text is None:
        return None
    value = _parse(text, what)
    if not isinstance(value, list):
        raise MalformedDataError(f"The value of '{what}' is not a JSON array.")
    return value


def put(target: MutableMapping[str, Any], key: str, value: Any, include_null: bool = False) -> None:
    """
    Stores `value` under `key` unless it is empty.

    Booleans and numbers are stored as-is and dropped when False/0.
    Sequences become lists of strings, anything else its string form.
    `include_null` keeps the empty values.
    """
    if isinstance(value, bool | int | float) and not isinstance(value, Enum):
        if value or include_null:
            target[key] = value
        return

    if value is None:
        if include_null:
            target[key] = None
        return

    if isinstance(value, Sequence) and not isinstance(value, str):
        target[key] = [str(element) for element in value]
        return

    target[key] = str(value)


def put_json_array(
    target: MutableMapping[str, Any], key: str, text: str | None, include_null: bool = False
) -> None:
    """Parses `text` as a JSON array and stores the result."""
    value = parse_json_array(text, key)
    if value is not None or include_null:
        target[key] = value


def join(strings: Sequence[str | None] | None, delimiter: str | None = " ") -> str | None:
    """Joins strings, rendering missing entries as 'null'. `None` yields `None`."""
    if strings is None:
        return None
    return (delimiter or "").join("null" if s is None else str(s) for s in strings)


def stringify_properties(properties: Sequence[Any] | None) -> str | None:
    """Renders properties as `[key=value,key=value]`, skipping missing entries."""
    if properties is None:
        return None
    body = ",".join(f"{p.key}={p.value}" for p in properties if p is not None)
    return f"[{body}]"


def stringify_scope_names(scopes: Sequence[Any] | None) -> str | None:
    if scopes is None:
        return None
    return join([None if s is None else s.name for s in scopes], " ")


def stringify_prompts(prompts: Sequence[Enum | None] | None) -> str | None:
    if prompts is None:
        return None
    return join([None if p is None else p.name.lower() for p in prompts], " ")


def dumps_mapping(mapping: Mapping[str, Any] | None) -> str | None:
    """Serializes a non-empty mapping to compact JSON; empty or None yields None."""
    if not mapping:
        return None
    return to_json(dict(mapping))
