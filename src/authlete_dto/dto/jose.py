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
JOSE verification through `/jose/verify`.
"""

from authlete_dto.base import ApiResponse, AuthleteModel


class JoseVerifyRequest(AuthleteModel):
    """
    Request to `/jose/verify`.

    Attributes:
        jose (str | None): The JWS or JWE to verify.
        mandatory_claims (list[str] | None): Claims that must be present in the payload.
        clock_skew (int | None): Allowed clock skew in seconds for `exp`, `iat` and `nbf`.
        client_identifier (str | None): Client ID or alias whose keys verify the signature.
        signed_by_client (bool): Whether the JOSE is signed with a key of that client.
    """

    jose: str | None = None
    mandatory_claims: list[str] | None = None
    clock_skew: int | None = None
    client_identifier: str | None = None
    signed_by_client: bool = False


class JoseVerifyResponse(ApiResponse):
    valid: bool = False
    signature_valid: bool = False
    missing_claims: list[str] | None = None
    invalid_claims: list[str] | None = None
    error_descriptions: list[str] | None = None
