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
Models of the `/auth/userinfo` API family.

The userinfo endpoint validates the access token through `/auth/userinfo`,
collects the claims named in the response, and gets the final body from
`/auth/userinfo/issue`.
"""

from enum import StrEnum

from pydantic import field_validator

from authlete_dto.base import ApiResponse, AuthleteModel, ClientIdentifierMixin, mapping_to_json, mappings_to_json
from authlete_dto.dto.common import Property
from authlete_dto.utils.json_utils import join, stringify_properties


class UserInfoRequest(AuthleteModel):
    schema_version = 2

    token: str | None = None
    client_certificate: str | None = None
    dpop: str | None = None
    htm: str | None = None
    htu: str | None = None


class UserInfoResponse(ClientIdentifierMixin, ApiResponse):
    """
    Response from `/auth/userinfo`.

    On OK, collect the values of `claims` for `subject` and call `/auth/userinfo/issue`.
    Otherwise `response_content` is the value of the `WWW-Authenticate` header.
    """

    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        UNAUTHORIZED = "UNAUTHORIZED"
        FORBIDDEN = "FORBIDDEN"
        OK = "OK"

    schema_version = 2

    action: Action | None = None
    client_id: int | None = None
    subject: str | None = None
    scopes: list[str] | None = None
    claims: list[str] | None = None
    token: str | None = None
    response_content: str | None = None
    properties: list[Property] | None = None
    client_id_alias: str | None = None
    client_id_alias_used: bool = False
    user_info_claims: str | None = None

    def summarize(self) -> str:
        return (
            f"action={self.action}, clientId={self.client_id or 0}, subject={self.subject}, "
            f"scopes={join(self.scopes)}, claims={join(self.claims)}, accessToken={self.token}, "
            f"properties={stringify_properties(self.properties)}, clientIdAlias={self.client_id_alias}, "
            f"clientIdAliasUsed={self.client_id_alias_used}"
        )


class UserInfoIssueRequest(AuthleteModel):
    """
    Request to `/auth/userinfo/issue`.

    `claims` and `claims_for_tx` accept a mapping as well as a JSON string.
    `verified_claims_for_tx` accepts a list of mappings.
    """

    schema_version = 6

    token: str | None = None
    claims: str | None = None
    sub: str | None = None
    claims_for_tx: str | None = None
    verified_claims_for_tx: list[str] | None = None

    claims_as_json = field_validator("claims", "claims_for_tx", mode="before")(mapping_to_json)
    verified_claims_as_json = field_validator("verified_claims_for_tx", mode="before")(mappings_to_json)


class UserInfoIssueResponse(ApiResponse):
    """
    Response from `/auth/userinfo/issue`.

    `signature`, `signature_input` and `content_digest` are set when the response
    is signed with HTTP Message Signatures.
    """

    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        UNAUTHORIZED = "UNAUTHORIZED"
        FORBIDDEN = "FORBIDDEN"
        JSON = "JSON"
        JWT = "JWT"

    action: Action | None = None
    response_content: str | None = None
    signature: str | None = None
    signature_input: str | None = None
    content_digest: str | None = None

    def summarize(self) -> str:
        return f"action={self.action}, responseContent={self.response_content}"
