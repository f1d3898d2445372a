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
OpenID Connect Native SSO for Mobile Apps 1.0.
"""

from enum import StrEnum

from authlete_dto.base import ApiResponse, AuthleteModel


class NativeSsoRequest(AuthleteModel):
    """
    Request to `/nativesso`, made while handling a token request that should
    also yield a device secret.

    Attributes:
        access_token (str | None): The access token being issued.
        refresh_token (str | None): The refresh token being issued, if any.
        sub (str | None): Value of the `sub` claim of the ID token.
        claims (str | None): Extra claims of the ID token, as a JSON object string.
        idt_header_params (str | None): Extra JWS header parameters of the ID token.
        id_token_aud_type (str | None): Format of the `aud` claim, `array` or `string`.
        device_secret (str | None): The device secret to embed the hash of.
        device_secret_hash (str | None): The hash to put in the `ds_hash` claim.
    """

    access_token: str | None = None
    refresh_token: str | None = None
    sub: str | None = None
    claims: str | None = None
    idt_header_params: str | None = None
    id_token_aud_type: str | None = None
    device_secret: str | None = None
    device_secret_hash: str | None = None


class NativeSsoResponse(ApiResponse):
    class Action(StrEnum):
        OK = "OK"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        CALLER_ERROR = "CALLER_ERROR"

    action: Action | None = None
    response_content: str | None = None
    id_token: str | None = None


class NativeSsoLogoutRequest(AuthleteModel):
    """Request to `/nativesso/logout`: deletes the tokens bound to `session_id`."""

    session_id: str | None = None


class NativeSsoLogoutResponse(ApiResponse):
    class Action(StrEnum):
        OK = "OK"
        SERVER_ERROR = "SERVER_ERROR"
        CALLER_ERROR = "CALLER_ERROR"

    action: Action | None = None
    count: int | None = None
