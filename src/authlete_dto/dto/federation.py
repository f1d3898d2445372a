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
OpenID Federation 1.0: the entity configuration and explicit client registration.
"""

from enum import StrEnum

from authlete_dto.base import ApiResponse, AuthleteModel
from authlete_dto.dto.client import Client
from authlete_dto.types import EntityType


class FederationConfigurationRequest(AuthleteModel):
    """
    Request to `/federation/configuration`.

    `entity_types` selects the metadata to include. When it is omitted or empty
    the server answers as an OpenID provider.
    """

    schema_version = 2

    entity_types: list[EntityType] | None = None


class FederationConfigurationResponse(ApiResponse):
    """`response_content` is the entity configuration, a signed JWT."""

    class Action(StrEnum):
        OK = "OK"
        NOT_FOUND = "NOT_FOUND"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    action: Action | None = None
    response_content: str | None = None


class FederationRegistrationRequest(AuthleteModel):
    """
    Request to `/federation/registration`.

    Exactly one of `entity_configuration` (a JWT) and `trust_chain` (a JSON array of JWTs)
    is expected.
    """

    entity_configuration: str | None = None
    trust_chain: str | None = None


class FederationRegistrationResponse(ApiResponse):
    class Action(StrEnum):
        OK = "OK"
        BAD_REQUEST = "BAD_REQUEST"
        NOT_FOUND = "NOT_FOUND"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    action: Action | None = None
    response_content: str | None = None
    client: Client | None = None
