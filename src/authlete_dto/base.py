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
Base models shared by every Authlete request and response payload.
"""

from collections.abc import Mapping, Sequence
from enum import Enum
from functools import cache
from typing import Any, ClassVar, Protocol, Self, get_args, runtime_checkable
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from authlete_dto.exceptions import UnknownFieldError
from authlete_dto.utils.json_utils import dumps_mapping, to_json
from authlete_dto.utils.logger import logger

__all__ = [
    "ActionResponse",
    "ApiResponse",
    "AuthleteModel",
    "ClientIdentifierMixin",
    "form_encode",
    "mapping_to_json",
    "mappings_to_json",
]


class AuthleteModel(BaseModel):
    """
    Base for all payload models.

    Fields are declared in snake_case and travel on the wire under their camelCase alias.
    Assignment is validated, so `model.field = value` and `model.set(field=value)` apply
    the same coercion as construction.

    Attributes:
        schema_version (ClassVar[int]): Compatibility marker of the payload shape. Bumped
            whenever fields are added to a released model.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )

    schema_version: ClassVar[int] = 1

    @field_validator("*", mode="before")
    @classmethod
    def drop_unknown_enum_names(cls, value: Any, info: ValidationInfo) -> Any:
        """
        When reading JSON, an enum name this version does not know becomes None
        and is dropped from enum lists, so replies from a newer server still parse.
        Python input and assignment stay strict.
        """
        if info.mode != "json" or info.field_name is None or value is None:
            return value
        enums = _enum_types(cls.model_fields[info.field_name].annotation)
        if not enums:
            return value
        if isinstance(value, str):
            return value if _is_known(value, enums) else _unknown(value, enums)
        if isinstance(value, list):
            kept = []
            for element in value:
                if isinstance(element, str) and not _is_known(element, enums):
                    _unknown(element, enums)
                    continue
                kept.append(element)
            return kept
        return value

    def set(self, **values: Any) -> Self:
        """
        Assigns the given fields and returns this same instance, so calls can be chained.

        Raises:
            UnknownFieldError: If a name is not a field of this model.
            ValidationError: If a value does not fit the field type.
        """
        fields = type(self).model_fields
        for name, value in values.items():
            if name not in fields:
                raise UnknownFieldError(f"{type(self).__name__} has no field '{name}'")
            setattr(self, name, value)
        return self

    @classmethod
    def copy_of(cls, source: Self | None) -> Self:
        """
        Returns a field-wise equal but distinct clone of `source`.
        A `None` source yields an empty instance.
        """
        if source is None:
            return cls()
        return source.model_copy(deep=True)

    def to_dict(self) -> dict[str, Any]:
        """The wire-form mapping: aliased keys, unset fields dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, pretty: bool = False) -> str:
        return to_json(self.to_dict(), pretty)

    @classmethod
    def from_json(cls, json: str) -> Self:
        return cls.model_validate_json(json)


@cache
def _enum_types(annotation: Any) -> tuple[type[Enum], ...]:
    if isinstance(annotation, type) and issubclass(annotation, Enum):
        return (annotation,)
    found: list[type[Enum]] = []
    for arg in get_args(annotation):
        found.extend(_enum_types(arg))
    return tuple(found)


def _is_known(name: str, enums: tuple[type[Enum], ...]) -> bool:
    return any(name in {member.value for member in enum} for enum in enums)


def _unknown(name: str, enums: tuple[type[Enum], ...]) -> None:
    logger.debug(f"Unknown {enums[0].__qualname__} value: {name!r}")
    return None

class ApiResponse(AuthleteModel):
    """
    Common envelope of every Authlete API response.

    Attributes:
        result_code (str | None): Code of the result of the API call, e.g. `A004001`.
        result_message (str | None): Human-readable description of the result.
    """

    result_code: str | None = None
    result_message: str | None = None


@runtime_checkable
class ActionResponse(Protocol):
    """
    A response whose `action` tells the caller what to do next and whose
    `response_content` is the pre-rendered body to send back as-is.
    """

    action: Any
    response_content: str | None


class ClientIdentifierMixin:
    """
    Adds `client_identifier` to models carrying `client_id`, `client_id_alias`
    and `client_id_alias_used`.
    """

    @property
    def client_identifier(self) -> str | None:
        """The alias when the client presented its alias, otherwise the numeric ID as a string."""
        if getattr(self, "client_id_alias_used", False):
            alias: str | None = getattr(self, "client_id_alias", None)
            return alias
        return str(getattr(self, "client_id", None) or 0)


def mapping_to_json(value: Any) -> Any:
    """Before-validator: stores a mapping as a JSON string, an empty one as None."""
    if isinstance(value, Mapping):
        return dumps_mapping(value)
    return value


def mappings_to_json(value: Any) -> Any:
    """Before-validator: stores each mapping of a list as a JSON string."""
    if isinstance(value, Sequence) and not isinstance(value, str):
        return [to_json(dict(v)) if isinstance(v, Mapping) else v for v in value]
    return value


def form_encode(value: Any) -> Any:
    """Before-validator: turns a mapping of request parameters into a form-encoded string."""
    if isinstance(value, Mapping):
        return urlencode(value, doseq=True)
    return value
