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
OpenID for Verifiable Credential Issuance: issuer metadata, credential offers
and the credential, batch credential and deferred credential endpoints.
"""

from enum import StrEnum
from typing import Any

from authlete_dto.base import ApiResponse, AuthleteModel
from authlete_dto.dto.common import Property
from authlete_dto.exceptions import MalformedDataError
from authlete_dto.utils.json_utils import put, put_json_array


class CredentialIssuerMetadata(AuthleteModel):
    """
    Credential issuer metadata, as configured on a service.

    Attributes:
        credential_issuer (str | None): Identifier of the credential issuer.
        authorization_server (str | None): Authorization server trusted by the issuer.
        credential_endpoint (str | None): URL of the credential endpoint.
        batch_credential_endpoint (str | None): URL of the batch credential endpoint.
        deferred_credential_endpoint (str | None): URL of the deferred credential endpoint.
        credentials_supported (str | None): Supported credentials, as a JSON array string.
    """

    schema_version = 2

    credential_issuer: str | None = None
    authorization_server: str | None = None
    credential_endpoint: str | None = None
    batch_credential_endpoint: str | None = None
    deferred_credential_endpoint: str | None = None
    credentials_supported: str | None = None

    def is_empty(self) -> bool:
        """True when none of the endpoints nor `credentials_supported` is set."""
        return (
            self.credential_issuer is None
            and self.authorization_server is None
            and self.credential_endpoint is None
            and self.batch_credential_endpoint is None
            and self.deferred_credential_endpoint is None
            and self.credentials_supported is None
        )

    def to_map(self) -> dict[str, Any]:
        """
        The metadata as published at `/.well-known/openid-credential-issuer`.

        Raises:
            MalformedDataError: If `credentials_supported` is not a JSON array.
        """
        metadata: dict[str, Any] = {}
        put(metadata, "credential_issuer", self.credential_issuer)
        put(metadata, "authorization_server", self.authorization_server)
        put(metadata, "credential_endpoint", self.credential_endpoint)
        put(metadata, "batch_credential_endpoint", self.batch_credential_endpoint)
        put(metadata, "deferred_credential_endpoint", self.deferred_credential_endpoint)

        try:
            put_json_array(metadata, "credentials_supported", self.credentials_supported)
        except MalformedDataError as e:
            raise MalformedDataError(
                "The value of the 'credentialsSupported' property failed to be parsed as a JSON array."
            ) from e

        return metadata


class CredentialIssuerMetadataRequest(AuthleteModel):
    schema_version = 2

    pretty: bool = False


class CredentialIssuerMetadataResponse(ApiResponse):
    class Action(StrEnum):
        OK = "OK"
        NOT_FOUND = "NOT_FOUND"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    action: Action | None = None
    response_content: str | None = None


class CredentialJwtIssuerMetadataRequest(AuthleteModel):
    pretty: bool = False


class CredentialJwtIssuerMetadataResponse(ApiResponse):
    """Signed credential issuer metadata, as a JWT in `response_content`."""

    class Action(StrEnum):
        OK = "OK"
        NOT_FOUND = "NOT_FOUND"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    action: Action | None = None
    response_content: str | None = None


class CredentialIssuerJwksRequest(AuthleteModel):
    pretty: bool = False


class CredentialIssuerJwksResponse(ApiResponse):
    class Action(StrEnum):
        OK = "OK"
        NOT_FOUND = "NOT_FOUND"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    action: Action | None = None
    response_content: str | None = None


class CredentialNonceRequest(AuthleteModel):
    pretty: bool = False


class CredentialOfferCreateRequest(AuthleteModel):
    """
    Request to `/vci/offer/create`.

    At least one of the two grants must be included. `tx_code`, `tx_code_input_mode`
    and `tx_code_description` describe the transaction code bound to the
    pre-authorized code.
    """

    schema_version = 4

    credential_configurations: list[str] | None = None
    authorization_code_grant_included: bool = False
    issuer_state_included: bool = False
    pre_authorized_code_grant_included: bool = False
    subject: str | None = None
    duration: int | None = None
    context: str | None = None
    properties: list[Property] | None = None
    jwt_at_claims: str | None = None
    auth_time: int | None = None
    acr: str | None = None
    tx_code: str | None = None
    tx_code_input_mode: str | None = None
    tx_code_description: str | None = None


class CredentialOfferInfo(AuthleteModel):
    """A credential offer stored on the server."""

    schema_version = 4

    identifier: str | None = None
    credential_offer: str | None = None
    credential_issuer: str | None = None
    credential_configurations: list[str] | None = None
    authorization_code_grant_included: bool = False
    issuer_state_included: bool = False
    issuer_state: str | None = None
    pre_authorized_code_grant_included: bool = False
    pre_authorized_code: str | None = None
    subject: str | None = None
    expires_at: int | None = None
    context: str | None = None
    properties: list[Property] | None = None
    jwt_at_claims: str | None = None
    auth_time: int | None = None
    acr: str | None = None
    tx_code: str | None = None
    tx_code_input_mode: str | None = None
    tx_code_description: str | None = None


class CredentialOfferCreateResponse(ApiResponse):
    class Action(StrEnum):
        CREATED = "CREATED"
        FORBIDDEN = "FORBIDDEN"
        CALLER_ERROR = "CALLER_ERROR"
        AUTHLETE_ERROR = "AUTHLETE_ERROR"

    action: Action | None = None
    info: CredentialOfferInfo | None = None


class CredentialOfferInfoRequest(AuthleteModel):
    identifier: str | None = None


class CredentialOfferInfoResponse(ApiResponse):
    class Action(StrEnum):
        OK = "OK"
        FORBIDDEN = "FORBIDDEN"
        NOT_FOUND = "NOT_FOUND"
        CALLER_ERROR = "CALLER_ERROR"
        AUTHLETE_ERROR = "AUTHLETE_ERROR"

    action: Action | None = None
    info: CredentialOfferInfo | None = None


class CredentialRequestInfo(AuthleteModel):
    """
    A parsed credential request.

    `details` holds the request parameters other than `format` and the proof,
    as a JSON object string.
    """

    identifier: str | None = None
    format: str | None = None
    binding_key: str | None = None
    details: str | None = None


class CredentialIssuanceOrder(AuthleteModel):
    """
    Instructions for issuing one credential.

    Set `issuance_deferred` to answer with a transaction ID instead of the
    credential; `credential_payload` then stays unset.
    """

    request_identifier: str | None = None
    credential_payload: str | None = None
    issuance_deferred: bool = False
    credential_duration: int | None = None
    signing_key_id: str | None = None


class CredentialSingleParseRequest(AuthleteModel):
    access_token: str | None = None
    request_content: str | None = None


class CredentialSingleParseResponse(ApiResponse):
    class Action(StrEnum):
        OK = "OK"
        BAD_REQUEST = "BAD_REQUEST"
        UNAUTHORIZED = "UNAUTHORIZED"
        FORBIDDEN = "FORBIDDEN"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    action: Action | None = None
    response_content: str | None = None
    info: CredentialRequestInfo | None = None


class CredentialSingleIssueRequest(AuthleteModel):
    access_token: str | None = None
    order: CredentialIssuanceOrder | None = None


class CredentialSingleIssueResponse(ApiResponse):
    """
    Response from `/vci/single/issue`.

    The `*_JWT` actions mean `response_content` is an encrypted JWT. ACCEPTED
    means issuance was deferred and `transaction_id` identifies it.
    """

    class Action(StrEnum):
        OK = "OK"
        OK_JWT = "OK_JWT"
        ACCEPTED = "ACCEPTED"
        ACCEPTED_JWT = "ACCEPTED_JWT"
        BAD_REQUEST = "BAD_REQUEST"
        UNAUTHORIZED = "UNAUTHORIZED"
        FORBIDDEN = "FORBIDDEN"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        CALLER_ERROR = "CALLER_ERROR"

    schema_version = 2

    action: Action | None = None
    response_content: str | None = None
    transaction_id: str | None = None


class CredentialBatchParseRequest(AuthleteModel):
    access_token: str | None = None
    request_content: str | None = None


class CredentialBatchParseResponse(ApiResponse):
    class Action(StrEnum):
        OK = "OK"
        BAD_REQUEST = "BAD_REQUEST"
        UNAUTHORIZED = "UNAUTHORIZED"
        FORBIDDEN = "FORBIDDEN"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    action: Action | None = None
    response_content: str | None = None
    info: list[CredentialRequestInfo] | None = None


class CredentialBatchIssueRequest(AuthleteModel):
    access_token: str | None = None
    orders: list[CredentialIssuanceOrder] | None = None


class CredentialBatchIssueResponse(ApiResponse):
    class Action(StrEnum):
        OK = "OK"
        OK_JWT = "OK_JWT"
        ACCEPTED = "ACCEPTED"
        ACCEPTED_JWT = "ACCEPTED_JWT"
        BAD_REQUEST = "BAD_REQUEST"
        UNAUTHORIZED = "UNAUTHORIZED"
        FORBIDDEN = "FORBIDDEN"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        CALLER_ERROR = "CALLER_ERROR"

    schema_version = 3

    action: Action | None = None
    response_content: str | None = None


class CredentialDeferredParseRequest(AuthleteModel):
    access_token: str | None = None
    request_content: str | None = None


class CredentialDeferredIssueRequest(AuthleteModel):
    order: CredentialIssuanceOrder | None = None


class CredentialDeferredIssueResponse(ApiResponse):
    class Action(StrEnum):
        OK = "OK"
        FORBIDDEN = "FORBIDDEN"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        CALLER_ERROR = "CALLER_ERROR"

    action: Action | None = None
    response_content: str | None = None
