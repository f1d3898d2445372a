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
Service (authorization server instance) metadata, the service management API
and the authentication callbacks Authlete makes to the service.
"""

from pydantic import Field

from authlete_dto.base import ApiResponse, AuthleteModel
from authlete_dto.dto.common import Pair, Scope, SnsCredentials
from authlete_dto.types import ClaimType, ClientAuthMethod, Display, GrantType, Plan, ResponseType, Sns


class Service(AuthleteModel):
    """
    Settings of a service, i.e. one authorization server hosted on Authlete.

    Attributes:
        number (int | None): Sequential number assigned by Authlete.
        service_owner_number (int | None): Number of the owning service owner.
        api_key (int | None): API key of the service.
        api_secret (str | None): API secret of the service.
        issuer (str | None): Issuer identifier, the `iss` of issued ID tokens.
        supported_scopes (list[Scope] | None): Scopes clients may request.
        properties (list[list[str]] | None): Extra key-value rows kept with the service.
        metadata (list[Pair] | None): Read-only metadata, such as the cluster serving the service.
    """

    schema_version = 12

    number: int | None = None
    service_owner_number: int | None = None
    service_name: str | None = None
    api_key: int | None = None
    api_secret: str | None = None
    issuer: str | None = None
    authorization_endpoint: str | None = None
    token_endpoint: str | None = None
    revocation_endpoint: str | None = None
    user_info_endpoint: str | None = None
    jwks_uri: str | None = None
    jwks: str | None = None
    registration_endpoint: str | None = None
    supported_scopes: list[Scope] | None = None
    supported_response_types: list[ResponseType] | None = None
    supported_grant_types: list[GrantType] | None = None
    supported_acrs: list[str] | None = None
    supported_token_auth_methods: list[ClientAuthMethod] | None = None
    supported_displays: list[Display] | None = None
    supported_claim_types: list[ClaimType] | None = None
    supported_claims: list[str] | None = None
    service_documentation: str | None = None
    supported_claim_locales: list[str] | None = None
    supported_ui_locales: list[str] | None = None
    policy_uri: str | None = None
    tos_uri: str | None = None
    authentication_callback_endpoint: str | None = None
    authentication_callback_api_key: str | None = None
    authentication_callback_api_secret: str | None = None
    supported_snses: list[Sns] | None = None
    sns_credentials: list[SnsCredentials] | None = None
    created_at: int | None = None
    modified_at: int | None = None
    developer_authentication_callback_endpoint: str | None = None
    developer_authentication_callback_api_key: str | None = None
    developer_authentication_callback_api_secret: str | None = None
    supported_developer_snses: list[Sns] | None = None
    developer_sns_credentials: list[SnsCredentials] | None = None
    clients_per_developer: int | None = None
    direct_authorization_endpoint_enabled: bool = False
    direct_token_endpoint_enabled: bool = False
    direct_revocation_endpoint_enabled: bool = False
    direct_user_info_endpoint_enabled: bool = False
    direct_jwks_endpoint_enabled: bool = False
    single_access_token_per_subject: bool = False
    pkce_required: bool = False
    refresh_token_kept: bool = False
    description: str | None = None
    access_token_type: str | None = None
    access_token_duration: int | None = None
    refresh_token_duration: int | None = None
    id_token_duration: int | None = None
    properties: list[list[str]] | None = None
    metadata: list[Pair] | None = None


class ServiceOwner(AuthleteModel):
    schema_version = 2

    number: int | None = None
    name: str | None = None
    email: str | None = None
    login_id: str | None = None
    api_key: int | None = None
    api_secret: str | None = None
    plan: Plan | None = None


class ServiceListResponse(AuthleteModel):
    """A page of services from `/service/get/list`."""

    start: int | None = None
    end: int | None = None
    total_count: int | None = None
    services: list[Service] | None = None


class ServiceCreatableResponse(AuthleteModel):
    """Whether the service owner may create one more service under the current plan."""

    creatable: bool = False
    count: int | None = None
    limit: int | None = None
    plan: Plan | None = None


class ServiceConfigurationRequest(AuthleteModel):
    """
    Request to `/service/configuration`.

    `patch` is a JSON Patch (RFC 6902) applied to the discovery document before it is returned.
    """

    pretty: bool = False
    patch: str | None = None


class InfoResponse(ApiResponse):
    """Server information from `/api/info`."""

    version: str | None = None
    features: list[str] | None = Field(default=None, description="Features enabled on the server.")


class AuthenticationCallbackRequest(AuthleteModel):
    """
    Request Authlete sends to the service's authentication callback endpoint when its
    built-in authorization UI needs to authenticate an end-user.
    """

    schema_version = 2

    service_api_key: int | None = None
    client_id: int | None = None
    id: str | None = None
    password: str | None = None
    claims: list[str] | None = None
    claims_locales: list[str] | None = None


class AuthenticationCallbackResponse(AuthleteModel):
    """
    Response from the authentication callback endpoint.

    `claims` is a JSON object string of the requested claims of the authenticated user.
    """

    schema_version = 3

    authenticated: bool = False
    subject: str | None = None
    claims: str | None = None


class DeveloperAuthenticationCallbackRequest(AuthleteModel):
    service_api_key: int | None = None
    id: str | None = None
    password: str | None = None
    sns: Sns | None = None
    access_token: str | None = None
    refresh_token: str | None = None
    expires_in: int | None = None
    raw_token_response: str | None = None


class DeveloperAuthenticationCallbackResponse(AuthleteModel):
    authenticated: bool = False
    subject: str | None = None
    display_name: str | None = None
