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
Management of keys held in hardware security modules (`/hsk/*`).
"""

from enum import StrEnum

from authlete_dto.base import ApiResponse, AuthleteModel
from authlete_dto.dto.common import Hsk


class HskCreateRequest(AuthleteModel):
    """Request to `/hsk/create`. `hsm_name` picks the HSM; the handle is assigned by Authlete."""

    kty: str | None = None
    use: str | None = None
    alg: str | None = None
    kid: str | None = None
    hsm_name: str | None = None


class HskResponse(ApiResponse):
    class Action(StrEnum):
        SUCCESS = "SUCCESS"
        INVALID_REQUEST = "INVALID_REQUEST"
        NOT_FOUND = "NOT_FOUND"
        SERVER_ERROR = "SERVER_ERROR"

    action: Action | None = None
    hsk: Hsk | None = None


class HskListResponse(ApiResponse):
    class Action(StrEnum):
        SUCCESS = "SUCCESS"
        INVALID_REQUEST = "INVALID_REQUEST"
        SERVER_ERROR = "SERVER_ERROR"

    action: Action | None = None
    hsks: list[Hsk] | None = None
