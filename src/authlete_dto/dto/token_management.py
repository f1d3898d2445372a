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
Token operations API: creating, updating, listing and revoking access tokens
outside of the token endpoint.
"""

from enum import StrEnum

from authlete_dto.base import ApiResponse, AuthleteModel
from authlete_dto.dto.authz_details import AuthzDetails
from authlete_dto.dto.client import Client
from authlete_dto.dto.common import Property
from authlete_dto.types import GrantType
from authlete_dto.utils.json_utils import join


class AccessToken(AuthleteModel):
    """
    An issued access token as listed by `/auth/token/get/list`.

    Only hashes of the token values are available.
    """

    schema_version = 2

    access_token_hash: str | None = None
    refresh_token_hash: str | None = None
    client_id: int | None = None
    subject: str | None = None
    grant_type: GrantType | None = None
    scopes: list[str] | None = None
    access_token_expires_at: int | None = None
    refresh_token_expires_at: int | None = None
    created_at: int | None = None
    last_refreshed_at: int | None = None
    properties: list[Property] | None = None
    refresh_token_scopes: list[str] | None = None


class TokenListResponse(AuthleteModel):
    start: int | None = None
    end: int | None = None
    client: Client | None = None
    subject: str | None = None
    total_count: int | None = None
    access_tokens: list[AccessToken] | None = None


class TokenCreateRequest(AuthleteModel):
    """
    Request to `/auth/token/create`.

    Attributes:
        grant_type (GrantType | None): Grant type the token is created as if issued by.
        client_id (int | None): The client the token is issued to.
        subject (str | None): Resource owner. Required unless `grant_type` is CLIENT_CREDENTIALS.
        scopes (list[str] | None): Scopes of the token.
        access_token_duration (int | None): Seconds, overriding the service setting.
        refresh_token_duration (int | None): Seconds, overriding the service setting.
        access_token_persistent (bool): Whether the token never expires.
        certificate_thumbprint (str | None): Binds the token to a client certificate (RFC 8705).
        dpop_key_thumbprint (str | None): Binds the token to a DPoP key.
        resources (list[str] | None): Target resources (RFC 8707).
    """

    schema_version = 9

    grant_type: GrantType | None = None
    client_id: int | None = None
    subject: str | None = None
    scopes: list[str] | None = None
    access_token_duration: int | None = None
    refresh_token_duration: int | None = None
    properties: list[Property] | None = None
    client_id_alias_used: bool = False
    access_token: str | None = None
    refresh_token: str | None = None
    access_token_persistent: bool = False
    certificate_thumbprint: str | None = None
    dpop_key_thumbprint: str | None = None
    authorization_details: AuthzDetails | None = None
    resources: list[str] | None = None


class TokenCreateResponse(ApiResponse):
    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        FORBIDDEN = "FORBIDDEN"
        OK = "OK"

    schema_version = 3

    action: Action | None = None
    grant_type: GrantType | None = None
    client_id: int | None = None
    subject: str | None = None
    scopes: list[str] | None = None
    access_token: str | None = None
    token_type: str | None = None
    expires_in: int | None = None
    expires_at: int | None = None
    refresh_token: str | None = None
    properties: list[Property] | None = None
    authorization_details: AuthzDetails | None = None

    def summarize(self) -> str:
        return (
            f"action={self.action}, grantType={self.grant_type}, clientId={self.client_id or 0}, "
            f"subject={self.subject}, scopes={join(self.scopes)}, accessToken={self.access_token}, "
            f"tokenType={self.token_type}, expiresIn={self.expires_in or 0}, "
            f"expiresAt={self.expires_at or 0}, refreshToken={self.refresh_token}"
        )


class TokenUpdateRequest(AuthleteModel):
    """Request to `/auth/token/update`. Unset fields leave the token unchanged."""

    schema_version = 2

    access_token: str | None = None
    access_token_expires_at: int | None = None
    scopes: list[str] | None = None
    properties: list[Property] | None = None
    update_access_token_expires_at_on_scope_update: bool = False


class TokenUpdateResponse(ApiResponse):
    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        FORBIDDEN = "FORBIDDEN"
        NOT_FOUND = "NOT_FOUND"
        OK = "OK"

    schema_version = 3

    action: Action | None = None
    access_token: str | None = None
    token_type: str | None = None
    access_token_expires_at: int | None = None
    scopes: list[str] | None = None
    properties: list[Property] | None = None
    authorization_details: AuthzDetails | None = None

    def summarize(self) -> str:
        return (
            f"action={self.action}, accessToken={self.access_token}, "
            f"accessTokenExpiresAt={self.access_token_expires_at or 0}, scopes={join(self.scopes)}, "
            f"tokenType={self.token_type}"
        )


class TokenRevokeRequest(AuthleteModel):
    """
    Request to `/auth/token/revoke`.

    Either a single token is named by `access_token_identifier` or
    `refresh_token_identifier`, or every token matching `client_identifier`
    and/or `subject` is revoked.
    """

    access_token_identifier: str | None = None
    refresh_token_identifier: str | None = None
    client_identifier: str | None = None
    subject: str | None = None


class TokenRevokeResponse(ApiResponse):
    count: int | None = None


class TokenBatchStatus(AuthleteModel):
    """Progress of a batch token operation."""

    class BatchKind(StrEnum):
        CREATE = "CREATE"

    class Result(StrEnum):
        SUCCEEDED = "SUCCEEDED"
        FAILED = "FAILED"

    batch_kind: BatchKind | None = None
    request_id: str | None = None
    result: Result | None = None
    token_count: int | None = None
    error_code: str | None = None
    error_description: str | None = None
    created_at: int | None = None
    modified_at: int | None = None


class TokenCreateBatchResponse(ApiResponse):
    """Response from `/auth/token/create/batch`. Poll the status with `request_id`."""

    request_id: str | None = None


class TokenCreateBatchStatusResponse(ApiResponse):
    status: TokenBatchStatus | None = None
