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
Models of Authlete's `/auth/token` API family.

The token endpoint passes the request parameters to `/auth/token`. For most grant
types Authlete answers with a ready-made `response_content`. The PASSWORD,
TOKEN_EXCHANGE and JWT_BEARER actions leave validation of the user or of the
presented tokens to the caller, who then calls `/auth/token/issue` or
`/auth/token/fail`.
"""

from enum import StrEnum

from pydantic import field_validator

from authlete_dto.base import ApiResponse, AuthleteModel, ClientIdentifierMixin, form_encode
from authlete_dto.dto.authz_details import AuthzDetails
from authlete_dto.dto.common import Pair, Property, Scope
from authlete_dto.types import ClientAuthMethod, GrantType, TokenType
from authlete_dto.utils.json_utils import join, stringify_properties


class TokenRequest(AuthleteModel):
    """
    Request to `/auth/token`.

    Attributes:
        parameters (str | None): The token request parameters, form-encoded. A mapping is encoded on assignment.
        client_id (str | None): Client ID from the Authorization header, for client_secret_basic.
        client_secret (str | None): Client secret from the Authorization header.
        client_certificate (str | None): Client certificate of the mutual TLS connection.
        client_certificate_path (list[str] | None): Certificate chain of the client certificate.
        properties (list[Property] | None): Extra properties to attach to the access token.
        dpop (str | None): The DPoP proof JWT.
        htm (str | None): HTTP method of the token request, for DPoP.
        htu (str | None): URL of the token endpoint, for DPoP.
        jwt_at_claims (str | None): Extra claims for a JWT access token, as a JSON object string.
        access_token (str | None): Representation of the access token to issue, when generated by the caller.
        access_token_duration (int | None): Duration of the access token in seconds.
        dpop_nonce_required (bool): Whether the DPoP proof must carry a server nonce.
    """

    schema_version = 10

    parameters: str | None = None
    client_id: str | None = None
    client_secret: str | None = None
    client_certificate: str | None = None
    client_certificate_path: list[str] | None = None
    properties: list[Property] | None = None
    dpop: str | None = None
    htm: str | None = None
    htu: str | None = None
    jwt_at_claims: str | None = None
    access_token: str | None = None
    access_token_duration: int | None = None
    dpop_nonce_required: bool = False

    encode_parameters = field_validator("parameters", mode="before")(form_encode)


class TokenInfo(ClientIdentifierMixin, AuthleteModel):
    """Details of a token presented in a token exchange request (RFC 8693)."""

    schema_version = 2

    client_id: int | None = None
    subject: str | None = None
    scopes: list[Scope] | None = None
    expires_at: int | None = None
    properties: list[Property] | None = None
    client_id_alias: str | None = None
    client_id_alias_used: bool = False
    client_entity_id: str | None = None
    client_entity_id_used: bool = False
    resources: list[str] | None = None
    authorization_details: AuthzDetails | None = None


class TokenResponse(ClientIdentifierMixin, ApiResponse):
    """
    Response from `/auth/token`.

    Attributes:
        action (Action | None): What the token endpoint should do next.
        response_content (str | None): JSON body to return to the client.
        username (str | None): Resource owner username, for PASSWORD.
        password (str | None): Resource owner password, for PASSWORD.
        ticket (str | None): Ticket for `/auth/token/issue` and `/auth/token/fail`.
        grant_type (GrantType | None): Grant type of the token request.
        client_auth_method (ClientAuthMethod | None): How the client authenticated.
        subject_token_info (TokenInfo | None): Details of the subject token, for TOKEN_EXCHANGE.
        actor_token_info (TokenInfo | None): Details of the actor token, for TOKEN_EXCHANGE.
        assertion (str | None): The presented JWT, for JWT_BEARER.
    """

    class Action(StrEnum):
        INVALID_CLIENT = "INVALID_CLIENT"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        PASSWORD = "PASSWORD"
        OK = "OK"
        TOKEN_EXCHANGE = "TOKEN_EXCHANGE"
        JWT_BEARER = "JWT_BEARER"

    schema_version = 13

    action: Action | None = None
    response_content: str | None = None
    username: str | None = None
    password: str | None = None
    ticket: str | None = None
    access_token: str | None = None
    access_token_expires_at: int | None = None
    access_token_duration: int | None = None
    refresh_token: str | None = None
    refresh_token_expires_at: int | None = None
    refresh_token_duration: int | None = None
    id_token: str | None = None
    grant_type: GrantType | None = None
    client_id: int | None = None
    client_id_alias: str | None = None
    client_id_alias_used: bool = False
    subject: str | None = None
    scopes: list[str] | None = None
    properties: list[Property] | None = None
    jwt_access_token: str | None = None
    client_auth_method: ClientAuthMethod | None = None
    resources: list[str] | None = None
    access_token_resources: list[str] | None = None
    authorization_details: AuthzDetails | None = None
    grant_id: str | None = None
    service_attributes: list[Pair] | None = None
    client_attributes: list[Pair] | None = None
    audiences: list[str] | None = None
    requested_token_type: TokenType | None = None
    subject_token: str | None = None
    subject_token_type: TokenType | None = None
    subject_token_info: TokenInfo | None = None
    actor_token: str | None = None
    actor_token_type: TokenType | None = None
    actor_token_info: TokenInfo | None = None
    assertion: str | None = None

    def summarize(self) -> str:
        return (
            f"action={self.action}, username={self.username}, password={self.password}, "
            f"ticket={self.ticket}, responseContent={self.response_content}, "
            f"accessToken={self.access_token}, accessTokenExpiresAt={self.access_token_expires_at or 0}, "
            f"accessTokenDuration={self.access_token_duration or 0}, refreshToken={self.refresh_token}, "
            f"refreshTokenExpiresAt={self.refresh_token_expires_at or 0}, "
            f"refreshTokenDuration={self.refresh_token_duration or 0}, idToken={self.id_token}, "
            f"grantType={self.grant_type}, clientId={self.client_id or 0}, "
            f"clientIdAlias={self.client_id_alias}, clientIdAliasUsed={self.client_id_alias_used}, "
            f"subject={self.subject}, scopes={join(self.scopes)}, "
            f"properties={stringify_properties(self.properties)}, jwtAccessToken={self.jwt_access_token}, "
            f"clientAuthMethod={self.client_auth_method}"
        )


class TokenFailRequest(AuthleteModel):
    """Request to `/auth/token/fail`."""

    class Reason(StrEnum):
        UNKNOWN = "UNKNOWN"
        INVALID_RESOURCE_OWNER_CREDENTIALS = "INVALID_RESOURCE_OWNER_CREDENTIALS"
        INVALID_TARGET = "INVALID_TARGET"

    schema_version = 2

    ticket: str | None = None
    reason: Reason | None = None


class TokenFailResponse(ApiResponse):
    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"

    action: Action | None = None
    response_content: str | None = None

    def summarize(self) -> str:
        return f"action={self.action}, responseContent={self.response_content}"


class TokenIssueRequest(AuthleteModel):
    """Request to `/auth/token/issue`, after the caller has validated the resource owner."""

    schema_version = 5

    ticket: str | None = None
    subject: str | None = None
    properties: list[Property] | None = None
    jwt_at_claims: str | None = None


class TokenIssueResponse(ClientIdentifierMixin, ApiResponse):
    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        OK = "OK"

    schema_version = 8

    action: Action | None = None
    response_content: str | None = None
    access_token: str | None = None
    access_token_expires_at: int | None = None
    access_token_duration: int | None = None
    refresh_token: str | None = None
    refresh_token_expires_at: int | None = None
    refresh_token_duration: int | None = None
    client_id: int | None = None
    client_id_alias: str | None = None
    client_id_alias_used: bool = False
    subject: str | None = None
    scopes: list[str] | None = None
    properties: list[Property] | None = None
    jwt_access_token: str | None = None
    access_token_resources: list[str] | None = None
    authorization_details: AuthzDetails | None = None
    service_attributes: list[Pair] | None = None
    client_attributes: list[Pair] | None = None

    def summarize(self) -> str:
        return (
            f"action={self.action}, responseContent={self.response_content}, "
            f"accessToken={self.access_token}, accessTokenExpiresAt={self.access_token_expires_at or 0}, "
            f"accessTokenDuration={self.access_token_duration or 0}, refreshToken={self.refresh_token}, "
            f"refreshTokenExpiresAt={self.refresh_token_expires_at or 0}, "
            f"refreshTokenDuration={self.refresh_token_duration or 0}, clientId={self.client_id or 0}, "
            f"clientIdAlias={self.client_id_alias}, clientIdAliasUsed={self.client_id_alias_used}, "
            f"subject={self.subject}, scopes={join(self.scopes)}, "
            f"properties={stringify_properties(self.properties)}, jwtAccessToken={self.jwt_access_token}"
        )


class IDTokenReissueRequest(AuthleteModel):
    """
    Request to `/idtoken/reissue`, which issues a fresh ID token on a refresh token grant.
    """

    access_token: str | None = None
    refresh_token: str | None = None
    sub: str | None = None
    claims: str | None = None
    idt_header_params: str | None = None
    id_token_aud_type: str | None = None


class IDTokenReissueResponse(ApiResponse):
    class Action(StrEnum):
        OK = "OK"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        CALLER_ERROR = "CALLER_ERROR"

    action: Action | None = None
    response_content: str | None = None
    id_token: str | None = None
