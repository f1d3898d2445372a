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
Grant Management for OAuth 2.0: querying and revoking grants through `/gm`.
"""

from enum import StrEnum

from authlete_dto.base import ApiResponse, AuthleteModel
from authlete_dto.types import GMAction


class GMRequest(AuthleteModel):
    """
    Request to `/gm`.

    `gm_action` is QUERY or REVOKE. `access_token` is the token presented to the
    grant management endpoint, with the DPoP and certificate fields needed to
    validate it.
    """

    schema_version = 2

    gm_action: GMAction | None = None
    grant_id: str | None = None
    access_token: str | None = None
    client_certificate: str | None = None
    dpop: str | None = None
    htm: str | None = None
    htu: str | None = None
    dpop_nonce_required: bool = False


class GMResponse(ApiResponse):
    class Action(StrEnum):
        OK = "OK"
        NO_CONTENT = "NO_CONTENT"
        UNAUTHORIZED = "UNAUTHORIZED"
        FORBIDDEN = "FORBIDDEN"
        NOT_FOUND = "NOT_FOUND"
        CALLER_ERROR = "CALLER_ERROR"
        AUTHLETE_ERROR = "AUTHLETE_ERROR"

    schema_version = 2

    action: Action | None = None
    response_content: str | None = None
    dpop_nonce: str | None = None
