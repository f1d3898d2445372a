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
Token introspection: Authlete's own `/auth/introspection` API used by resource
servers, and the RFC 7662 endpoint `/auth/introspection/standard`.
"""

from enum import StrEnum

from authlete_dto.base import ApiResponse, AuthleteModel, ClientIdentifierMixin
from authlete_dto.dto.authz_details import AuthzDetails, Grant
from authlete_dto.dto.common import Pair, Property, Scope
from authlete_dto.types import GrantType
from authlete_dto.utils.json_utils import join, stringify_properties


class IntrospectionRequest(AuthleteModel):
    """
    Request to `/auth/introspection`.

    Attributes:
        token (str | None): The access token presented to the resource server.
        scopes (list[str] | None): Scopes the token must cover.
        subject (str | None): Subject the token must belong to.
        client_certificate (str | None): Client certificate, for certificate-bound tokens.
        dpop (str | None): DPoP proof presented with the token.
        htm (str | None): HTTP method of the resource request.
        htu (str | None): URL of the resource request.
        resources (list[str] | None): Resources the token must be valid for.
    """

    schema_version = 4

    token: str | None = None
    scopes: list[str] | None = None
    subject: str | None = None
    client_certificate: str | None = None
    dpop: str | None = None
    htm: str | None = None
    htu: str | None = None
    resources: list[str] | None = None


class IntrospectionResponse(ClientIdentifierMixin, ApiResponse):
    """
    Response from `/auth/introspection`.

    `existent`, `usable`, `sufficient` and `refreshable` describe the token; on
    anything other than OK, return `response_content` as the value of the
    `WWW-Authenticate` header.
    """

    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        UNAUTHORIZED = "UNAUTHORIZED"
        FORBIDDEN = "FORBIDDEN"
        OK = "OK"

    schema_version = 19

    action: Action | None = None
    client_id: int | None = None
    subject: str | None = None
    scopes: list[str] | None = None
    scope_details: list[Scope] | None = None
    existent: bool = False
    usable: bool = False
    sufficient: bool = False
    refreshable: bool = False
    response_content: str | None = None
    expires_at: int | None = None
    properties: list[Property] | None = None
    client_id_alias: str | None = None
    client_id_alias_used: bool = False
    client_entity_id: str | None = None
    client_entity_id_used: bool = False
    certificate_thumbprint: str | None = None
    resources: list[str] | None = None
    access_token_resources: list[str] | None = None
    authorization_details: AuthzDetails | None = None
    grant_id: str | None = None
    grant: Grant | None = None
    consented_claims: list[str] | None = None
    service_attributes: list[Pair] | None = None
    client_attributes: list[Pair] | None = None
    for_external_attachment: bool = False
    acr: str | None = None
    auth_time: int | None = None
    grant_type: GrantType | None = None
    for_credential_issuance: bool = False
    credentials: str | None = None
    c_nonce: str | None = None
    c_nonce_expires_at: int | None = None

    def summarize(self) -> str:
        return (
            f"action={self.action}, clientId={self.client_id or 0}, subject={self.subject}, "
            f"existent={self.existent}, usable={self.usable}, sufficient={self.sufficient}, "
            f"refreshable={self.refreshable}, expiresAt={self.expires_at or 0}, "
            f"scopes={join(self.scopes)}, properties={stringify_properties(self.properties)}, "
            f"clientIdAlias={self.client_id_alias}, clientIdAliasUsed={self.client_id_alias_used}, "
            f"confirmation={self.certificate_thumbprint}"
        )


class StandardIntrospectionRequest(AuthleteModel):
    """Request to `/auth/introspection/standard`. `parameters` is the RFC 7662 request body."""

    parameters: str | None = None


class StandardIntrospectionResponse(ApiResponse):
    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        OK = "OK"
        JWT = "JWT"

    schema_version = 2

    action: Action | None = None
    response_content: str | None = None

    def summarize(self) -> str:
        return f"action={self.action}, responseContent={self.response_content}"
