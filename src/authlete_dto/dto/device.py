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
OAuth 2.0 Device Authorization Grant (RFC 8628).
"""

from enum import StrEnum

from pydantic import field_validator

from authlete_dto.base import ApiResponse, AuthleteModel, ClientIdentifierMixin, form_encode
from authlete_dto.dto.common import CimdOptions, Property, Scope


class DeviceAuthorizationRequest(AuthleteModel):
    """Request to `/device/authorization`."""

    schema_version = 3

    parameters: str | None = None
    client_id: str | None = None
    client_secret: str | None = None
    client_certificate: str | None = None
    client_certificate_path: list[str] | None = None
    oauth_client_attestation: str | None = None
    oauth_client_attestation_pop: str | None = None
    cimd_options: CimdOptions | None = None

    encode_parameters = field_validator("parameters", mode="before")(form_encode)


class DeviceAuthorizationResponse(ClientIdentifierMixin, ApiResponse):
    """
    Response from `/device/authorization`.

    Attributes:
        device_code (str | None): Code the device polls the token endpoint with.
        user_code (str | None): Code the user enters at `verification_uri`.
        verification_uri (str | None): Where the user enters the user code.
        verification_uri_complete (str | None): `verification_uri` with the user code included.
        expires_in (int | None): Lifetime of the codes in seconds.
        interval (int | None): Minimum polling interval in seconds.
    """

    class Action(StrEnum):
        OK = "OK"
        BAD_REQUEST = "BAD_REQUEST"
        UNAUTHORIZED = "UNAUTHORIZED"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    action: Action | None = None
    response_content: str | None = None
    client_id: int | None = None
    client_id_alias: str | None = None
    client_id_alias_used: bool = False
    client_name: str | None = None
    scopes: list[Scope] | None = None
    device_code: str | None = None
    user_code: str | None = None
    verification_uri: str | None = None
    verification_uri_complete: str | None = None
    expires_in: int | None = None
    interval: int | None = None
    warnings: list[str] | None = None


class DeviceVerificationRequest(AuthleteModel):
    user_code: str | None = None


class DeviceVerificationResponse(ClientIdentifierMixin, ApiResponse):
    class Action(StrEnum):
        VALID = "VALID"
        EXPIRED = "EXPIRED"
        NOT_EXIST = "NOT_EXIST"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    action: Action | None = None
    client_id: int | None = None
    client_id_alias: str | None = None
    client_id_alias_used: bool = False
    client_name: str | None = None
    scopes: list[Scope] | None = None


class DeviceCompleteRequest(AuthleteModel):
    """Request to `/device/complete`, reporting the user's decision for `user_code`."""

    class Result(StrEnum):
        AUTHORIZED = "AUTHORIZED"
        ACCESS_DENIED = "ACCESS_DENIED"
        TRANSACTION_FAILED = "TRANSACTION_FAILED"

    user_code: str | None = None
    result: Result | None = None
    subject: str | None = None
    properties: list[Property] | None = None
    scopes: list[str] | None = None
    error_description: str | None = None
    error_uri: str | None = None


class DeviceCompleteResponse(ApiResponse):
    class Action(StrEnum):
        SUCCESS = "SUCCESS"
        INVALID_REQUEST = "INVALID_REQUEST"
        USER_CODE_EXPIRED = "USER_CODE_EXPIRED"
        USER_CODE_NOT_EXIST = "USER_CODE_NOT_EXIST"
        SERVER_ERROR = "SERVER_ERROR"

    action: Action | None = None
