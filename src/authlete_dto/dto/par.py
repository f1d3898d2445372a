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
Pushed Authorization Requests (RFC 9126) and registration of request objects.
"""

from enum import StrEnum

from pydantic import field_validator

from authlete_dto.base import ApiResponse, AuthleteModel, form_encode
from authlete_dto.types import ClientAuthMethod


class PushedAuthReqRequest(AuthleteModel):
    """Request to `/pushed_auth_req`."""

    parameters: str | None = None
    client_id: str | None = None
    client_secret: str | None = None
    client_certificate: str | None = None
    client_certificate_path: list[str] | None = None
    dpop: str | None = None
    htm: str | None = None
    htu: str | None = None

    encode_parameters = field_validator("parameters", mode="before")(form_encode)


class PushedAuthReqResponse(ApiResponse):
    """
    Response from `/pushed_auth_req`.

    On CREATED, `request_uri` is the value the client uses as the `request_uri`
    parameter of the authorization request.
    """

    class Action(StrEnum):
        CREATED = "CREATED"
        BAD_REQUEST = "BAD_REQUEST"
        UNAUTHORIZED = "UNAUTHORIZED"
        FORBIDDEN = "FORBIDDEN"
        PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    schema_version = 2

    action: Action | None = None
    response_content: str | None = None
    client_auth_method: ClientAuthMethod | None = None
    request_uri: str | None = None
    dpop_nonce: str | None = None

    def summarize(self) -> str:
        return (
            f"action={self.action}, responseContent={self.response_content}, "
            f"clientAuthMethod={self.client_auth_method}, requestUri={self.request_uri}"
        )


class RequestObjectRequest(AuthleteModel):
    """Registers a request object (`body`) and gets a `request_uri` for it."""

    body: str | None = None
    client_id: str | None = None
    client_secret: str | None = None
    client_certificate: str | None = None
    client_certificate_path: list[str] | None = None


class RequestObjectResponse(ApiResponse):
    class Action(StrEnum):
        CREATED = "CREATED"
        BAD_REQUEST = "BAD_REQUEST"
        UNAUTHORIZED = "UNAUTHORIZED"
        FORBIDDEN = "FORBIDDEN"
        PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    action: Action | None = None
    response_content: str | None = None
    client_auth_method: ClientAuthMethod | None = None
    request_uri: str | None = None

    def summarize(self) -> str:
        return (
            f"action={self.action}, responseContent={self.response_content}, "
            f"clientAuthMethod={self.client_auth_method}, requestUri={self.request_uri}"
        )
