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
Token revocation (RFC 7009) through `/auth/revocation`.
"""

from pydantic import field_validator

from authlete_dto.base import AuthleteModel, form_encode


class RevocationRequest(AuthleteModel):
    """
    Request to `/auth/revocation`.

    Attributes:
        parameters (str | None): The revocation request body, form-encoded. A mapping is encoded on assignment.
        client_id (str | None): Client ID from the Authorization header.
        client_secret (str | None): Client secret from the Authorization header.
        client_certificate (str | None): Client certificate of the mutual TLS connection.
        client_certificate_path (list[str] | None): Certificate chain of the client certificate.
        oauth_client_attestation (str | None): Value of the `OAuth-Client-Attestation` header.
        oauth_client_attestation_pop (str | None): Value of the `OAuth-Client-Attestation-PoP` header.
    """

    schema_version = 4

    parameters: str | None = None
    client_id: str | None = None
    client_secret: str | None = None
    client_certificate: str | None = None
    client_certificate_path: list[str] | None = None
    oauth_client_attestation: str | None = None
    oauth_client_attestation_pop: str | None = None

    encode_parameters = field_validator("parameters", mode="before")(form_encode)
