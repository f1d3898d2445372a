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
Client metadata and the client management API.
"""

from collections.abc import Iterable
from enum import StrEnum
from typing import Any, ClassVar, Self

from authlete_dto.base import ApiResponse, AuthleteModel, ClientIdentifierMixin
from authlete_dto.dto.common import Pair, TaggedValue
from authlete_dto.types import (
    ApplicationType,
    ClientAuthMethod,
    ClientRegistrationType,
    ClientType,
    DeliveryMode,
    GrantType,
    JWEAlg,
    JWEEnc,
    JWSAlg,
    ResponseType,
    SubjectType,
)


class ClientExtension(AuthleteModel):
    """Client settings that are not part of any standard metadata."""

    requestable_scopes_enabled: bool = False
    requestable_scopes: list[str] | None = None


class Client(ClientIdentifierMixin, AuthleteModel):
    """
    Information about a client application.

    Most fields mirror the client metadata of OpenID Connect Dynamic Client
    Registration 1.0, RFC 7591 and the extensions built on top of them. Fields
    named `*_uris` with `TaggedValue` entries hold localized variants, e.g.
    `client_name#ja`.

    Attributes:
        number (int | None): Sequential number assigned by Authlete.
        service_number (int | None): Number of the service the client belongs to.
        developer (str | None): Unique ID of the developer of the client.
        client_id (int | None): The client ID.
        client_id_alias (str | None): Alias of the client ID.
        client_id_alias_enabled (bool): Whether the alias is accepted as a client ID.
        client_secret (str | None): The client secret.
        client_type (ClientType | None): PUBLIC or CONFIDENTIAL.
        extension (ClientExtension | None): Authlete-specific settings.
        attributes (list[Pair] | None): Arbitrary key-value attributes.
        custom_metadata (str | None): Non-standard metadata as a JSON object string.
    """

    schema_version = 30

    number: int | None = None
    service_number: int | None = None
    developer: str | None = None
    client_id: int | None = None
    client_id_alias: str | None = None
    client_id_alias_enabled: bool = False
    client_secret: str | None = None
    client_type: ClientType | None = None
    redirect_uris: list[str] | None = None
    response_types: list[ResponseType] | None = None
    grant_types: list[GrantType] | None = None
    application_type: ApplicationType | None = None
    contacts: list[str] | None = None
    client_name: str | None = None
    client_names: list[TaggedValue] | None = None
    logo_uri: str | None = None
    logo_uris: list[TaggedValue] | None = None
    client_uri: str | None = None
    client_uris: list[TaggedValue] | None = None
    policy_uri: str | None = None
    policy_uris: list[TaggedValue] | None = None
    tos_uri: str | None = None
    tos_uris: list[TaggedValue] | None = None
    jwks_uri: str | None = None
    jwks: str | None = None
    derived_sector_identifier: str | None = None
    sector_identifier_uri: str | None = None
    subject_type: SubjectType | None = None
    id_token_sign_alg: JWSAlg | None = None
    id_token_encryption_alg: JWEAlg | None = None
    id_token_encryption_enc: JWEEnc | None = None
    user_info_sign_alg: JWSAlg | None = None
    user_info_encryption_alg: JWEAlg | None = None
    user_info_encryption_enc: JWEEnc | None = None
    request_sign_alg: JWSAlg | None = None
    request_encryption_alg: JWEAlg | None = None
    request_encryption_enc: JWEEnc | None = None
    token_auth_method: ClientAuthMethod | None = None
    token_auth_sign_alg: JWSAlg | None = None
    default_max_age: int | None = None
    default_acrs: list[str] | None = None
    auth_time_required: bool = False
    login_uri: str | None = None
    request_uris: list[str] | None = None
    description: str | None = None
    descriptions: list[TaggedValue] | None = None
    created_at: int | None = None
    modified_at: int | None = None
    extension: ClientExtension | None = None
    # RFC 8705 mutual TLS
    tls_client_auth_subject_dn: str | None = None
    tls_client_auth_san_dns: str | None = None
    tls_client_auth_san_uri: str | None = None
    tls_client_auth_san_ip: str | None = None
    tls_client_auth_san_email: str | None = None
    tls_client_certificate_bound_access_tokens: bool = False
    self_signed_certificate_key_id: str | None = None
    software_id: str | None = None
    software_version: str | None = None
    # JARM
    authorization_sign_alg: JWSAlg | None = None
    authorization_encryption_alg: JWEAlg | None = None
    authorization_encryption_enc: JWEEnc | None = None
    # CIBA
    bc_delivery_mode: DeliveryMode | None = None
    bc_notification_endpoint: str | None = None
    bc_request_sign_alg: JWSAlg | None = None
    bc_user_code_required: bool = False
    dynamically_registered: bool = False
    registration_access_token_hash: str | None = None
    authorization_details_types: list[str] | None = None
    par_required: bool = False
    request_object_required: bool = False
    attributes: list[Pair] | None = None
    custom_metadata: str | None = None
    front_channel_request_object_encryption_required: bool = False
    request_object_encryption_alg_match_required: bool = False
    request_object_encryption_enc_match_required: bool = False
    digest_algorithm: str | None = None
    single_access_token_per_subject: bool = False
    pkce_required: bool = False
    pkce_s256_required: bool = False
    rs_signed_request_key_id: str | None = None
    rs_request_signed: bool = False
    # OpenID Federation
    entity_id: str | None = None
    trust_anchor_id: str | None = None
    trust_chain: list[str] | None = None
    trust_chain_expires_at: int | None = None
    trust_chain_updated_at: int | None = None
    organization_name: str | None = None
    signed_jwks_uri: str | None = None
    client_registration_types: list[ClientRegistrationType] | None = None

    def load_attributes(self, attributes: Iterable[Pair | None] | None) -> Self:
        """
        Replaces the attributes with those of `attributes` that have a key.
        Nothing left (or None) clears the attributes.
        """
        kept = [pair for pair in attributes or () if pair is not None and pair.key is not None]
        self.attributes = kept or None
        return self


class ClientListResponse(AuthleteModel):
    """A page of clients from `/client/get/list`."""

    start: int | None = None
    end: int | None = None
    developer: str | None = None
    total_count: int | None = None
    clients: list[Client] | None = None


class AuthorizedClientListResponse(ClientListResponse):
    """Clients the user identified by `subject` has authorized."""

    subject: str | None = None


class ClientAuthorizationDeleteRequest(AuthleteModel):
    subject: str | None = None

    def __init__(self, subject: str | None = None, **data: Any) -> None:
        super().__init__(subject=subject, **data)


class ClientAuthorizationGetListRequest(AuthleteModel):
    """
    Request to `/client/authorization/get/list`.

    Accepts `(subject, developer, start, end)` positionally; omitted values
    take the defaults below.
    """

    DEFAULT_START: ClassVar[int] = 0
    DEFAULT_END: ClassVar[int] = 5
    DEFAULT_DEVELOPER: ClassVar[str | None] = None

    subject: str | None = None
    developer: str | None = DEFAULT_DEVELOPER
    start: int = DEFAULT_START
    end: int = DEFAULT_END

    def __init__(
        self,
        subject: str | None = None,
        developer: str | None = DEFAULT_DEVELOPER,
        start: int = DEFAULT_START,
        end: int = DEFAULT_END,
        **data: Any,
    ) -> None:
        super().__init__(subject=subject, developer=developer, start=start, end=end, **data)


class ClientAuthorizationUpdateRequest(AuthleteModel):
    """Request to `/client/authorization/update`: replaces the scopes granted by `subject`."""

    subject: str | None = None
    scopes: list[str] | None = None

    def __init__(self, subject: str | None = None, scopes: list[str] | None = None, **data: Any) -> None:
        super().__init__(subject=subject, scopes=scopes, **data)


class ClientLockFlagUpdateRequest(AuthleteModel):
    client_locked: bool = False


class ClientRegistrationRequest(AuthleteModel):
    """Request to the dynamic client registration APIs. `metadata` is the JSON body received."""

    metadata: str | None = None


class ClientRegistrationResponse(ApiResponse):
    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        CREATED = "CREATED"

    action: Action | None = None
    response_content: str | None = None
    client_id: int | None = None
    client_secret: str | None = None
    client_id_issued_at: int | None = None


class ClientSecretUpdateRequest(AuthleteModel):
    client_secret: str | None = None


class ClientSecretUpdateResponse(ApiResponse):
    new_client_secret: str | None = None
    old_client_secret: str | None = None


class GrantedScopesGetResponse(ApiResponse):
    """Scopes granted to a client by a user, as of the latest and across all authorizations."""

    service_api_key: int | None = None
    client_id: int | None = None
    subject: str | None = None
    latest_granted_scopes: list[str] | None = None
    merged_granted_scopes: list[str] | None = None
    modified_at: int | None = None
