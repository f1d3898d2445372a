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
Client Initiated Backchannel Authentication (CIBA).

The backchannel authentication endpoint calls `/backchannel/authentication`,
identifies the user from the hint, then either `/backchannel/authentication/issue`
or `/backchannel/authentication/fail`. Once the user has decided, the result goes
to `/backchannel/authentication/complete`.
"""

from enum import StrEnum

from pydantic import field_validator

from authlete_dto.base import ApiResponse, AuthleteModel, ClientIdentifierMixin, form_encode, mapping_to_json
from authlete_dto.dto.common import Property, Scope
from authlete_dto.types import DeliveryMode, UserIdentificationHintType


class BackchannelAuthenticationRequest(AuthleteModel):
    parameters: str | None = None
    client_id: str | None = None
    client_secret: str | None = None
    client_certificate: str | None = None
    client_certificate_path: list[str] | None = None

    encode_parameters = field_validator("parameters", mode="before")(form_encode)


class BackchannelAuthenticationResponse(ClientIdentifierMixin, ApiResponse):
    """
    Response from `/backchannel/authentication`.

    On USER_IDENTIFICATION, identify the user with `hint` (of kind `hint_type`),
    check `user_code` and `binding_message` if needed, and keep `ticket`.

    Attributes:
        delivery_mode (DeliveryMode | None): POLL, PING or PUSH.
        client_notification_token (str | None): Bearer token for the client notification endpoint.
        hint_type (UserIdentificationHintType | None): Which hint the client sent.
        hint (str | None): Value of the hint.
        sub (str | None): Subject of the ID token hint, when one was sent.
        warnings (list[str] | None): Problems that did not stop the request.
        ticket (str | None): Ticket for the issue, fail and complete calls.
    """

    class Action(StrEnum):
        BAD_REQUEST = "BAD_REQUEST"
        UNAUTHORIZED = "UNAUTHORIZED"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        USER_IDENTIFICATION = "USER_IDENTIFICATION"

    action: Action | None = None
    response_content: str | None = None
    client_id: int | None = None
    client_id_alias: str | None = None
    client_id_alias_used: bool = False
    client_name: str | None = None
    delivery_mode: DeliveryMode | None = None
    scopes: list[Scope] | None = None
    claim_names: list[str] | None = None
    client_notification_token: str | None = None
    acrs: list[str] | None = None
    hint_type: UserIdentificationHintType | None = None
    hint: str | None = None
    sub: str | None = None
    binding_message: str | None = None
    warnings: list[str] | None = None
    ticket: str | None = None


class BackchannelAuthenticationIssueRequest(AuthleteModel):
    ticket: str | None = None


class BackchannelAuthenticationIssueResponse(ApiResponse):
    class Action(StrEnum):
        OK = "OK"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        INVALID_TICKET = "INVALID_TICKET"

    action: Action | None = None
    response_content: str | None = None
    auth_req_id: str | None = None
    expires_in: int | None = None
    interval: int | None = None


class BackchannelAuthenticationFailRequest(AuthleteModel):
    class Reason(StrEnum):
        EXPIRED_LOGIN_HINT_TOKEN = "EXPIRED_LOGIN_HINT_TOKEN"
        UNKNOWN_USER_ID = "UNKNOWN_USER_ID"
        INVALID_USER_CODE = "INVALID_USER_CODE"
        ACCESS_DENIED = "ACCESS_DENIED"
        SERVER_ERROR = "SERVER_ERROR"

    ticket: str | None = None
    reason: Reason | None = None
    description: str | None = None
    uri: str | None = None


class BackchannelAuthenticationFailResponse(ApiResponse):
    class Action(StrEnum):
        BAD_REQUEST = "BAD_REQUEST"
        FORBIDDEN = "FORBIDDEN"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        INVALID_TICKET = "INVALID_TICKET"

    action: Action | None = None
    response_content: str | None = None


class BackchannelAuthenticationCompleteRequest(AuthleteModel):
    """
    Request to `/backchannel/authentication/complete`.

    `claims` accepts a mapping as well as a JSON string. `error_description` and
    `error_uri` are used when `result` is not AUTHORIZED.
    """

    class Result(StrEnum):
        AUTHORIZED = "AUTHORIZED"
        ACCESS_DENIED = "ACCESS_DENIED"
        TRANSACTION_FAILED = "TRANSACTION_FAILED"

    schema_version = 2

    ticket: str | None = None
    result: Result | None = None
    subject: str | None = None
    sub: str | None = None
    auth_time: int | None = None
    acr: str | None = None
    claims: str | None = None
    properties: list[Property] | None = None
    scopes: list[str] | None = None
    error_description: str | None = None
    error_uri: str | None = None

    claims_as_json = field_validator("claims", mode="before")(mapping_to_json)


class BackchannelAuthenticationCompleteResponse(ApiResponse):
    """Response from `/backchannel/authentication/complete`. NOTIFICATION applies to the ping and push modes."""

    class Action(StrEnum):
        NOTIFICATION = "NOTIFICATION"
        NO_ACTION = "NO_ACTION"

    action: Action | None = None
    response_content: str | None = None
    client_notification_endpoint: str | None = None
    client_notification_token: str | None = None
