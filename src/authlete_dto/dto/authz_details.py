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
Rich authorization requests (RFC 9396) and grants of Grant Management for OAuth 2.0.

Inside Authlete API payloads these models use their field-based form, e.g.
`{"elements": [...]}`. `to_json()` / `from_json()` use the protocol form instead:
`authorization_details` is a JSON array whose elements carry type-specific
fields next to the common ones.
"""

import json
from collections.abc import Mapping
from typing import Any, Self

from authlete_dto.base import AuthleteModel
from authlete_dto.exceptions import MalformedDataError
from authlete_dto.utils.json_utils import parse_json_object, to_json
from authlete_dto.utils.logger import logger

# Keys of an RFC 9396 element that map onto dedicated fields
_INDEPENDENT_FIELDS = ("type", "locations", "actions", "datatypes", "identifier", "privileges")


def _loads(text: str, what: str) -> Any:
    try:
        return json.loads(text)
    except ValueError as e:
        logger.debug(f"Failed to parse {what}: {e}")
        raise MalformedDataError(f"{what} is not valid JSON.") from e


def _string_list(obj: Mapping[str, Any], key: str) -> list[str | None] | None:
    value = obj.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise MalformedDataError(f"The value of '{key}' is not a JSON array.")
    return [None if v is None else str(v) for v in value]


class AuthzDetailsElement(AuthleteModel):
    """
    An element of `authorization_details`.

    Attributes:
        type (str | None): The type of the element. Required by RFC 9396.
        locations (list[str] | None): Resource locations.
        actions (list[str] | None): Kinds of actions to take at the resources.
        data_types (list[str] | None): Kinds of data being requested.
        identifier (str | None): A specific resource identifier.
        privileges (list[str] | None): Privilege types being requested.
        other_fields (str | None): Every other field of the element, as a JSON object string.
    """

    schema_version = 4

    type: str | None = None
    locations: list[str | None] | None = None
    actions: list[str | None] | None = None
    data_types: list[str | None] | None = None
    identifier: str | None = None
    privileges: list[str | None] | None = None
    other_fields: str | None = None

    def get_other_fields_as_map(self) -> dict[str, Any] | None:
        """
        Decodes `other_fields`.

        Raises:
            MalformedDataError: If `other_fields` is not a JSON object.
        """
        return parse_json_object(self.other_fields, "otherFields")

    def set_other_fields_from_map(self, other_fields: Mapping[str, Any] | None) -> Self:
        self.other_fields = None if other_fields is None else to_json(dict(other_fields))
        return self

    def to_rfc_dict(self) -> dict[str, Any]:
        """The element as it appears inside an RFC 9396 `authorization_details` array."""
        obj: dict[str, Any] = dict(self.get_other_fields_as_map() or {})
        independent = (
            ("type", self.type),
            ("locations", self.locations),
            ("actions", self.actions),
            ("datatypes", self.data_types),
            ("identifier", self.identifier),
            ("privileges", self.privileges),
        )
        for key, value in independent:
            if value is None:
                obj.pop(key, None)
            else:
                obj[key] = value
        return obj

    @classmethod
    def from_rfc_dict(cls, obj: Any) -> Self:
        if not isinstance(obj, Mapping):
            logger.debug(f"Unexpected authorization details element: {obj!r}")
            raise MalformedDataError("An element of authorization details is not a JSON object.")

        others = {k: v for k, v in obj.items() if k not in _INDEPENDENT_FIELDS}
        kind = obj.get("type")
        identifier = obj.get("identifier")
        return cls(
            type=None if kind is None else str(kind),
            locations=_string_list(obj, "locations"),
            actions=_string_list(obj, "actions"),
            data_types=_string_list(obj, "datatypes"),
            identifier=None if identifier is None else str(identifier),
            privileges=_string_list(obj, "privileges"),
            other_fields=to_json(others) if others else None,
        )

    def to_json(self, pretty: bool = False) -> str:
        return to_json(self.to_rfc_dict(), pretty)

    @classmethod
    def from_json(cls, json: str) -> Self | None:  # type: ignore[override]
        """Parses one element. `null` yields None."""
        obj = _loads(json, "Authorization details element")
        if obj is None:
            return None
        return cls.from_rfc_dict(obj)


class AuthzDetails(AuthleteModel):
    """The content of the `authorization_details` request parameter."""

    elements: list[AuthzDetailsElement | None] | None = None

    def to_rfc_list(self) -> list[dict[str, Any] | None] | None:
        if self.elements is None:
            return None
        return [None if e is None else e.to_rfc_dict() for e in self.elements]

    @classmethod
    def from_rfc_list(cls, array: Any) -> Self | None:
        if array is None:
            return None
        if not isinstance(array, list):
            raise MalformedDataError("Authorization details must be a JSON array.")
        return cls(elements=[None if e is None else AuthzDetailsElement.from_rfc_dict(e) for e in array])

    def to_json(self, pretty: bool = False) -> str:
        """The JSON array form. A missing element list serializes as `null`."""
        return to_json(self.to_rfc_list(), pretty)

    @classmethod
    def from_json(cls, json: str) -> Self | None:  # type: ignore[override]
        """
        Parses the JSON array form. `null` yields None.

        Raises:
            MalformedDataError: If the text is not JSON, not an array, or has non-object elements.
        """
        return cls.from_rfc_list(_loads(json, "Authorization details"))


class GrantScope(AuthleteModel):
    """A scope of a grant, optionally limited to resources (RFC 8707)."""

    scope: str | None = None
    resource: list[str | None] | None = None

    def __init__(self, scope: str | None = None, resource: list[str | None] | None = None, **data: Any) -> None:
        super().__init__(scope=scope, resource=resource, **data)


def _grant_scope(obj: Any) -> GrantScope | None:
    if obj is None:
        return None
    if not isinstance(obj, Mapping):
        logger.debug(f"Unexpected grant scope: {obj!r}")
        raise MalformedDataError("An element of 'scopes' is not a JSON object.")
    scope = obj.get("scope")
    return GrantScope(None if scope is None else str(scope), _string_list(obj, "resource"))


class Grant(AuthleteModel):
    """
    A grant of Grant Management for OAuth 2.0.

    Attributes:
        scopes (list[GrantScope | None] | None): Scopes granted, with their resources.
        claims (list[str | None] | None): Claims granted.
        authorization_details (AuthzDetails | None): Rich authorization details granted.
    """

    scopes: list[GrantScope | None] | None = None
    claims: list[str | None] | None = None
    authorization_details: AuthzDetails | None = None

    def to_grant_dict(self) -> dict[str, Any]:
        """The grant as returned from a grant management endpoint (`scopes`, `claims`, `authorization_details`)."""
        obj: dict[str, Any] = {}
        if self.scopes is not None:
            obj["scopes"] = [None if s is None else s.model_dump(mode="json", exclude_none=True) for s in self.scopes]
        if self.claims is not None:
            obj["claims"] = list(self.claims)
        details = None if self.authorization_details is None else self.authorization_details.to_rfc_list()
        if details is not None:
            obj["authorization_details"] = details
        return obj

    def to_json(self, pretty: bool = False) -> str:
        return to_json(self.to_grant_dict(), pretty)

    @classmethod
    def from_json(cls, json: str) -> Self | None:  # type: ignore[override]
        """
        Parses the grant management form. `null` yields None.

        Raises:
            MalformedDataError: If the text is not a JSON object of the expected shape.
        """
        obj = _loads(json, "Grant")
        if obj is None:
            return None
        if not isinstance(obj, Mapping):
            logger.debug(f"Unexpected grant: {obj!r}")
            raise MalformedDataError("A grant must be a JSON object.")

        scopes = obj.get("scopes")
        if scopes is not None and not isinstance(scopes, list):
            raise MalformedDataError("The value of 'scopes' is not a JSON array.")

        return cls(
            scopes=None if scopes is None else [_grant_scope(s) for s in scopes],
            claims=_string_list(obj, "claims"),
            authorization_details=AuthzDetails.from_rfc_list(obj.get("authorization_details")),
        )
