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
Small value types embedded in the larger request and response models.
"""

from collections.abc import Sequence
from functools import total_ordering
from typing import Any

from pydantic import Field

from authlete_dto.base import AuthleteModel
from authlete_dto.types import Sns


class Pair(AuthleteModel):
    """A key-value pair. Accepts positional construction: `Pair("k", "v")`."""

    key: str | None = None
    value: str | None = None

    def __init__(self, key: str | None = None, value: str | None = None, **data: Any) -> None:
        super().__init__(key=key, value=value, **data)


class TaggedValue(AuthleteModel):
    """
    A value with a tag, typically a BCP 47 language tag, as in `client_name#ja`.
    """

    tag: str | None = None
    value: str | None = None

    def __init__(self, tag: str | None = None, value: str | None = None, **data: Any) -> None:
        super().__init__(tag=tag, value=value, **data)


class Property(AuthleteModel):
    """
    An extra property associated with an access token or authorization code.

    Hidden properties are stored by Authlete but never included in responses
    from the introspection endpoint.
    """

    schema_version = 2

    key: str | None = None
    value: str | None = None
    hidden: bool = False

    def __init__(self, key: str | None = None, value: str | None = None, hidden: bool = False, **data: Any) -> None:
        super().__init__(key=key, value=value, hidden=hidden, **data)

    def __str__(self) -> str:
        return f"{self.key}={self.value}{' (hidden)' if self.hidden else ''}"


class Scope(AuthleteModel):
    """
    A scope supported by a service.

    Attributes:
        name (str | None): The scope name, e.g. `openid`.
        default_entry (bool): Whether the scope is used when a request omits `scope`.
        description (str | None): Description of the scope.
        descriptions (list[TaggedValue] | None): Localized descriptions.
    """

    schema_version = 2

    name: str | None = None
    default_entry: bool = False
    description: str | None = None
    descriptions: list[TaggedValue] | None = None

    @staticmethod
    def extract_names(scopes: Sequence["Scope | None"] | None) -> list[str | None] | None:
        """Names of the given scopes. Missing entries stay None in the result."""
        if scopes is None:
            return None
        return [None if scope is None else scope.name for scope in scopes]


def _compare(a: str | None, b: str | None) -> int:
    # None sorts before any string
    if a is None:
        return 0 if b is None else -1
    if b is None:
        return 1
    return (a > b) - (a < b)


@total_ordering
class DynamicScope(AuthleteModel):
    """
    A scope with a runtime value, such as `payment:123` for the registered scope `payment`.

    Instances order by name, then by value, with missing components first.
    Equality and hashing use the same pair, so equal instances compare as zero.
    """

    name: str | None = None
    value: str | None = None

    def __init__(self, name: str | None = None, value: str | None = None, **data: Any) -> None:
        super().__init__(name=name, value=value, **data)

    def compare_to(self, other: "DynamicScope") -> int:
        result = _compare(self.name, other.name)
        if result == 0:
            result = _compare(self.value, other.value)
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicScope):
            return NotImplemented
        return self.compare_to(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DynamicScope):
            return NotImplemented
        return self.compare_to(other) < 0

    def __hash__(self) -> int:
        return hash((self.name, self.value))


class StringArray(AuthleteModel):
    """Wrapper of a string array, for JSON arrays of arrays."""

    array: list[str] | None = None

    def __init__(self, array: list[str] | None = None, **data: Any) -> None:
        super().__init__(array=array, **data)


class Address(AuthleteModel):
    """The `address` claim of OpenID Connect Core 1.0, Section 5.1.1."""

    formatted: str | None = None
    street_address: str | None = Field(default=None, alias="street_address")
    locality: str | None = None
    region: str | None = None
    postal_code: str | None = Field(default=None, alias="postal_code")
    country: str | None = None


class Hsk(AuthleteModel):
    """
    A key stored in a hardware security module.

    Attributes:
        kty (str | None): Key type, `EC` or `RSA`.
        use (str | None): `sig` or `enc`.
        alg (str | None): JWS or JWE algorithm the key is for.
        kid (str | None): Key ID.
        hsm_name (str | None): Name of the HSM holding the key.
        handle (str | None): Handle assigned by Authlete to the key.
        public_key (str | None): The public key, PEM encoded.
    """

    kty: str | None = None
    use: str | None = None
    alg: str | None = None
    kid: str | None = None
    hsm_name: str | None = None
    handle: str | None = None
    public_key: str | None = None


class TrustAnchor(AuthleteModel):
    """A trust anchor of OpenID Federation, with the JWK Set it is trusted through."""

    entity_id: str | None = None
    jwks: str | None = None


class SnsCredentials(AuthleteModel):
    sns: Sns | None = None
    api_key: str | None = None
    api_secret: str | None = None


class CimdOptions(AuthleteModel):
    """Options for resolving clients through Client ID Metadata Documents."""

    always_retrieved: bool = False
    http_permitted: bool = False
    query_permitted: bool = False
