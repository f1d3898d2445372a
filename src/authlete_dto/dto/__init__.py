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
Request and response models of the Authlete API, grouped by endpoint family.
"""

from .assertion import AssertionProcessor, ClaimMatcher, ClaimRule
from .authorization import (
    AuthorizationAuthenticateRequest,
    AuthorizationAuthenticateResponse,
    AuthorizationFailRequest,
    AuthorizationFailResponse,
    AuthorizationIssueRequest,
    AuthorizationIssueResponse,
    AuthorizationRequest,
    AuthorizationResponse,
    AuthorizationTicketInfo,
    AuthorizationTicketInfoRequest,
    AuthorizationTicketUpdateRequest,
    AuthorizationTicketUpdateResponse,
)
from .authz_details import AuthzDetails, AuthzDetailsElement, Grant, GrantScope
from .backchannel import (
    BackchannelAuthenticationCompleteRequest,
    BackchannelAuthenticationCompleteResponse,
    BackchannelAuthenticationFailRequest,
    BackchannelAuthenticationFailResponse,
    BackchannelAuthenticationIssueRequest,
    BackchannelAuthenticationIssueResponse,
    BackchannelAuthenticationRequest,
    BackchannelAuthenticationResponse,
)
from .client import (
    AuthorizedClientListResponse,
    Client,
    ClientAuthorizationDeleteRequest,
    ClientAuthorizationGetListRequest,
    ClientAuthorizationUpdateRequest,
    ClientExtension,
    ClientListResponse,
    ClientLockFlagUpdateRequest,
    ClientRegistrationRequest,
    ClientRegistrationResponse,
    ClientSecretUpdateRequest,
    ClientSecretUpdateResponse,
    GrantedScopesGetResponse,
)
from .common import (
    Address,
    CimdOptions,
    DynamicScope,
    Hsk,
    Pair,
    Property,
    Scope,
    SnsCredentials,
    StringArray,
    TaggedValue,
    TrustAnchor,
)
from .credential import (
    CredentialBatchIssueRequest,
    CredentialBatchIssueResponse,
    CredentialBatchParseRequest,
    CredentialBatchParseResponse,
    CredentialDeferredIssueRequest,
    CredentialDeferredIssueResponse,
    CredentialDeferredParseRequest,
    CredentialIssuanceOrder,
    CredentialIssuerJwksRequest,
    CredentialIssuerJwksResponse,
    CredentialIssuerMetadata,
    CredentialIssuerMetadataRequest,
    CredentialIssuerMetadataResponse,
    CredentialJwtIssuerMetadataRequest,
    CredentialJwtIssuerMetadataResponse,
    CredentialNonceRequest,
    CredentialOfferCreateRequest,
    CredentialOfferCreateResponse,
    CredentialOfferInfo,
    CredentialOfferInfoRequest,
    CredentialOfferInfoResponse,
    CredentialRequestInfo,
    CredentialSingleIssueRequest,
    CredentialSingleIssueResponse,
    CredentialSingleParseRequest,
    CredentialSingleParseResponse,
)
from .device import (
    DeviceAuthorizationRequest,
    DeviceAuthorizationResponse,
    DeviceCompleteRequest,
    DeviceCompleteResponse,
    DeviceVerificationRequest,
    DeviceVerificationResponse,
)
from .federation import (
    FederationConfigurationRequest,
    FederationConfigurationResponse,
    FederationRegistrationRequest,
    FederationRegistrationResponse,
)
from .grant_management import GMRequest, GMResponse
from .hsk import HskCreateRequest, HskListResponse, HskResponse
from .introspection import (
    IntrospectionRequest,
    IntrospectionResponse,
    StandardIntrospectionRequest,
    StandardIntrospectionResponse,
)
from .jose import JoseVerifyRequest, JoseVerifyResponse
from .native_sso import NativeSsoLogoutRequest, NativeSsoLogoutResponse, NativeSsoRequest, NativeSsoResponse
from .par import PushedAuthReqRequest, PushedAuthReqResponse, RequestObjectRequest, RequestObjectResponse
from .resource_server import ResourceServerSignatureRequest, ResourceServerSignatureResponse
from .revocation import RevocationRequest
from .service import (
    AuthenticationCallbackRequest,
    AuthenticationCallbackResponse,
    DeveloperAuthenticationCallbackRequest,
    DeveloperAuthenticationCallbackResponse,
    InfoResponse,
    Service,
    ServiceConfigurationRequest,
    ServiceCreatableResponse,
    ServiceListResponse,
    ServiceOwner,
)
from .token import (
    IDTokenReissueRequest,
    IDTokenReissueResponse,
    TokenFailRequest,
    TokenFailResponse,
    TokenInfo,
    TokenIssueRequest,
    TokenIssueResponse,
    TokenRequest,
    TokenResponse,
)
from .token_management import (
    AccessToken,
    TokenBatchStatus,
    TokenCreateBatchResponse,
    TokenCreateBatchStatusResponse,
    TokenCreateRequest,
    TokenCreateResponse,
    TokenListResponse,
    TokenRevokeRequest,
    TokenRevokeResponse,
    TokenUpdateRequest,
    TokenUpdateResponse,
)
from .tsl import (
    GetPublishedTslRequest,
    GetPublishedTslResponse,
    GetTslEntriesResponse,
    TslConfigData,
    TslEntriesResponse,
    TslEntry,
    TslGetRequest,
    TslGetResponse,
    TslPopulateUnusedIndexesRequest,
    TslPublishConfig,
    TslPublishConfigInfo,
    TslPublishConfigsListResponse,
    TslPublishConfigsResponse,
    TslPublishRequest,
    TslPublishResponse,
    TslRequest,
    TslResponse,
    TslTokenStatusUpdateRequest,
    TslTokenStatusUpdateResponse,
    TslUnusedIndexesRequest,
    TslUnusedIndexesResponse,
)
from .userinfo import UserInfoIssueRequest, UserInfoIssueResponse, UserInfoRequest, UserInfoResponse

__all__ = [
    "AccessToken",
    "Address",
    "AssertionProcessor",
    "AuthenticationCallbackRequest",
    "AuthenticationCallbackResponse",
    "AuthorizationAuthenticateRequest",
    "AuthorizationAuthenticateResponse",
    "AuthorizationFailRequest",
    "AuthorizationFailResponse",
    "AuthorizationIssueRequest",
    "AuthorizationIssueResponse",
    "AuthorizationRequest",
    "AuthorizationResponse",
    "AuthorizationTicketInfo",
    "AuthorizationTicketInfoRequest",
    "AuthorizationTicketUpdateRequest",
    "AuthorizationTicketUpdateResponse",
    "AuthorizedClientListResponse",
    "AuthzDetails",
    "AuthzDetailsElement",
    "BackchannelAuthenticationCompleteRequest",
    "BackchannelAuthenticationCompleteResponse",
    "BackchannelAuthenticationFailRequest",
    "BackchannelAuthenticationFailResponse",
    "BackchannelAuthenticationIssueRequest",
    "BackchannelAuthenticationIssueResponse",
    "BackchannelAuthenticationRequest",
    "BackchannelAuthenticationResponse",
    "CimdOptions",
    "ClaimMatcher",
    "ClaimRule",
    "Client",
    "ClientAuthorizationDeleteRequest",
    "ClientAuthorizationGetListRequest",
    "ClientAuthorizationUpdateRequest",
    "ClientExtension",
    "ClientListResponse",
    "ClientLockFlagUpdateRequest",
    "ClientRegistrationRequest",
    "ClientRegistrationResponse",
    "ClientSecretUpdateRequest",
    "ClientSecretUpdateResponse",
    "CredentialBatchIssueRequest",
    "CredentialBatchIssueResponse",
    "CredentialBatchParseRequest",
    "CredentialBatchParseResponse",
    "CredentialDeferredIssueRequest",
    "CredentialDeferredIssueResponse",
    "CredentialDeferredParseRequest",
    "CredentialIssuanceOrder",
    "CredentialIssuerJwksRequest",
    "CredentialIssuerJwksResponse",
    "CredentialIssuerMetadata",
    "CredentialIssuerMetadataRequest",
    "CredentialIssuerMetadataResponse",
    "CredentialJwtIssuerMetadataRequest",
    "CredentialJwtIssuerMetadataResponse",
    "CredentialNonceRequest",
    "CredentialOfferCreateRequest",
    "CredentialOfferCreateResponse",
    "CredentialOfferInfo",
    "CredentialOfferInfoRequest",
    "CredentialOfferInfoResponse",
    "CredentialRequestInfo",
    "CredentialSingleIssueRequest",
    "CredentialSingleIssueResponse",
    "CredentialSingleParseRequest",
    "CredentialSingleParseResponse",
    "DeveloperAuthenticationCallbackRequest",
    "DeveloperAuthenticationCallbackResponse",
    "DeviceAuthorizationRequest",
    "DeviceAuthorizationResponse",
    "DeviceCompleteRequest",
    "DeviceCompleteResponse",
    "DeviceVerificationRequest",
    "DeviceVerificationResponse",
    "DynamicScope",
    "FederationConfigurationRequest",
    "FederationConfigurationResponse",
    "FederationRegistrationRequest",
    "FederationRegistrationResponse",
    "GMRequest",
    "GMResponse",
    "GetPublishedTslRequest",
    "GetPublishedTslResponse",
    "GetTslEntriesResponse",
    "Grant",
    "GrantScope",
    "GrantedScopesGetResponse",
    "Hsk",
    "HskCreateRequest",
    "HskListResponse",
    "HskResponse",
    "IDTokenReissueRequest",
    "IDTokenReissueResponse",
    "InfoResponse",
    "IntrospectionRequest",
    "IntrospectionResponse",
    "JoseVerifyRequest",
    "JoseVerifyResponse",
    "NativeSsoLogoutRequest",
    "NativeSsoLogoutResponse",
    "NativeSsoRequest",
    "NativeSsoResponse",
    "Pair",
    "Property",
    "PushedAuthReqRequest",
    "PushedAuthReqResponse",
    "RequestObjectRequest",
    "RequestObjectResponse",
    "ResourceServerSignatureRequest",
    "ResourceServerSignatureResponse",
    "RevocationRequest",
    "Scope",
    "Service",
    "ServiceConfigurationRequest",
    "ServiceCreatableResponse",
    "ServiceListResponse",
    "ServiceOwner",
    "SnsCredentials",
    "StandardIntrospectionRequest",
    "StandardIntrospectionResponse",
    "StringArray",
    "TaggedValue",
    "TokenBatchStatus",
    "TokenCreateBatchResponse",
    "TokenCreateBatchStatusResponse",
    "TokenCreateRequest",
    "TokenCreateResponse",
    "TokenFailRequest",
    "TokenFailResponse",
    "TokenInfo",
    "TokenIssueRequest",
    "TokenIssueResponse",
    "TokenListResponse",
    "TokenRequest",
    "TokenResponse",
    "TokenRevokeRequest",
    "TokenRevokeResponse",
    "TokenUpdateRequest",
    "TokenUpdateResponse",
    "TrustAnchor",
    "TslConfigData",
    "TslEntriesResponse",
    "TslEntry",
    "TslGetRequest",
    "TslGetResponse",
    "TslPopulateUnusedIndexesRequest",
    "TslPublishConfig",
    "TslPublishConfigInfo",
    "TslPublishConfigsListResponse",
    "TslPublishConfigsResponse",
    "TslPublishRequest",
    "TslPublishResponse",
    "TslRequest",
    "TslResponse",
    "TslTokenStatusUpdateRequest",
    "TslTokenStatusUpdateResponse",
    "TslUnusedIndexesRequest",
    "TslUnusedIndexesResponse",
    "UserInfoIssueRequest",
    "UserInfoIssueResponse",
    "UserInfoRequest",
    "UserInfoResponse",
]
