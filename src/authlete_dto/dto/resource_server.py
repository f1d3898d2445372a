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
HTTP Message Signatures on resource server responses (`/rs/sign`).
"""

from enum import StrEnum

from authlete_dto.base import ApiResponse, AuthleteModel
from authlete_dto.dto.common import Pair


class ResourceServerSignatureRequest(AuthleteModel):
    """
    Request to `/rs/sign`.

    `request_signature` is the `Signature` header of the request being answered;
    `headers` and `message` describe the response to sign.
    """

    request_signature: str | None = None
    headers: list[Pair] | None = None
    message: str | None = None
    status: int | None = None


class ResourceServerSignatureResponse(ApiResponse):
    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        OK = "OK"

    action: Action | None = None
    signature: str | None = None
    signature_input: str | None = None
    content_digest: str | None = None

    def summarize(self) -> str:
        return f"action={self.action}, signatureInput={self.signature_input}"
