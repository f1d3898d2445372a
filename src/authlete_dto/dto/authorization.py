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
Models of Authlete's `/auth/authorization` API family.

The flow: the authorization endpoint passes the request parameters to
`/auth/authorization`, authenticates the user and obtains consent, then
calls `/auth/authorization/issue` or `/auth/authorization/fail` with the
ticket it received.
"""

from enum import StrEnum

from pydantic import Field, field_validator

from authlete_dto.base import ApiResponse, AuthleteModel, form_encode, mapping_to_json, mappings_to_json
from authlete_dto.dto.authz_details import AuthzDetails, Grant
from authlete_dto.dto.client import Client
from authlete_dto.dto.common import DynamicScope, Property, Scope
from authlete_dto.dto.service import Service
from authlete_dto.types import Display, GMAction, Prompt
from authlete_dto.utils.json_utils import join, stringify_prompts, stringify_scope_names


class AuthorizationRequest(AuthleteModel):
    """
    Request to `/auth/authorization`.

    `parameters` also accepts a mapping of request parameters, which is
    stored form-encoded.
    """

    schema_version = 3

    parameters: str | None = Field(
        default=None, description="Authorization request parameters in application/x-www-form-urlencoded format."
    )
    context: str | None = Field(default=None, description="Arbitrary text to keep with the ticket.")

    encode_parameters = field_validator("parameters", mode="before")(form_encode)


class AuthorizationResponse(ApiResponse):
    """
    Response from `/auth/authorization`.

    On NO_INTERACTION or INTERACTION, keep `ticket` and call `/auth/authorization/issue`
    or `/auth/authorization/fail` later. Otherwise return `response_content` as-is.
    """

    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        LOCATION = "LOCATION"
        FORM = "FORM"
        NO_INTERACTION = "NO_INTERACTION"
        INTERACTION = "INTERACTION"

    schema_version = 16

    action: Action | None = None
    service: Service | None = None
    client: Client | None = None
    display: Display | None = None
    max_age: int | None = None
    scopes: list[Scope] | None = None
    dynamic_scopes: list[DynamicScope] | None = None
    ui_locales: list[str] | None = None
    claims_locales: list[str] | None = None
    claims: list[str] | None = None
    acr_essential: bool = False
    client_id_alias_used: bool = False
    acrs: list[str] | None = None
    subject: str | None = None
    login_hint: str | None = None
    lowest_prompt: Prompt | None = None
    prompts: list[Prompt] | None = None
    request_object_payload: str | None = None
    id_token_claims: str | None = None
    user_info_claims: str | None = None
    resources: list[str] | None = None
    authorization_details: AuthzDetails | None = None
    purpose: str | None = None
    gm_action: GMAction | None = None
    grant_id: str | None = None
    grant_subject: str | None = None
    grant: Grant | None = None
    response_content: str | None = None
    ticket: str | None = None

    def summarize(self) -> str:
        client = self.client
        return (
            f"ticket={self.ticket}, action={self.action}, "
            f"serviceNumber={(client.service_number if client else None) or 0}, "
            f"clientNumber={(client.number if client else None) or 0}, "
            f"clientId={(client.client_id if client else None) or 0}, "
            f"clientSecret={client.client_secret if client else None}, "
            f"clientType={client.client_type if client else None}, "
            f"developer={client.developer if client else None}, "
            f"display={self.display}, maxAge={self.max_age or 0}, "
            f"scopes={stringify_scope_names(self.scopes)}, "
            f"uiLocales={join(self.ui_locales)}, claimsLocales={join(self.claims_locales)}, "
            f"claims={join(self.claims)}, acrEssential={self.acr_essential}, "
            f"clientIdAliasUsed={self.client_id_alias_used}, "
            f"acrs={join(self.acrs)}, subject={self.subject}, loginHint={self.login_hint}, "
            f"lowestPrompt={self.lowest_prompt}, prompts={stringify_prompts(self.prompts)}"
        )


class AuthorizationFailRequest(AuthleteModel):
    """Request to `/auth/authorization/fail`."""

    class Reason(StrEnum):
        UNKNOWN = "UNKNOWN"
        NOT_LOGGED_IN = "NOT_LOGGED_IN"
        MAX_AGE_NOT_SUPPORTED = "MAX_AGE_NOT_SUPPORTED"
        EXCEEDS_MAX_AGE = "EXCEEDS_MAX_AGE"
        DIFFERENT_SUBJECT = "DIFFERENT_SUBJECT"
        ACR_NOT_SATISFIED = "ACR_NOT_SATISFIED"
        DENIED = "DENIED"
        SERVER_ERROR = "SERVER_ERROR"
        NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
        ACCOUNT_SELECTION_REQUIRED = "ACCOUNT_SELECTION_REQUIRED"
        CONSENT_REQUIRED = "CONSENT_REQUIRED"
        INTERACTION_REQUIRED = "INTERACTION_REQUIRED"
        INVALID_TARGET = "INVALID_TARGET"

    schema_version = 3

    ticket: str | None = None
    reason: Reason | None = None
    description: str | None = None


class AuthorizationFailResponse(ApiResponse):
    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        LOCATION = "LOCATION"
        FORM = "FORM"

    action: Action | None = None
    response_content: str | None = None

    def summarize(self) -> str:
        return f"action={self.action}, responseContent={self.response_content}"


class AuthorizationIssueRequest(AuthleteModel):
    """
    Request to `/auth/authorization/issue`.

    `claims` and `claims_for_tx` accept a mapping as well as a JSON string; a mapping
    is stored as JSON and an empty one as None. `verified_claims_for_tx` accepts a
    list of mappings, each stored as JSON.

    Attributes:
        ticket (str | None): The ticket issued by `/auth/authorization`.
        subject (str | None): Subject (unique user ID) of the authenticated user.
        sub (str | None): Value of the `sub` claim to put in the ID token, if different.
        auth_time (int | None): Time of user authentication in seconds since the epoch.
        acr (str | None): Authentication context class reference satisfied.
        claims (str | None): Claims of the user, as a JSON object string.
        properties (list[Property] | None): Extra properties to attach to the tokens.
        scopes (list[str] | None): Scopes to replace the requested ones with.
        idt_header_params (str | None): Extra JWS header parameters of the ID token.
        authorization_details (AuthzDetails | None): Replacement authorization details.
        consented_claims (list[str] | None): Claims the user consented to.
        claims_for_tx (str | None): Claims computed by a transformed claim.
        verified_claims_for_tx (list[str] | None): Verified claims for transformed claims.
    """

    schema_version = 12

    ticket: str | None = None
    subject: str | None = None
    sub: str | None = None
    auth_time: int | None = None
    acr: str | None = None
    claims: str | None = None
    properties: list[Property] | None = None
    scopes: list[str] | None = None
    idt_header_params: str | None = None
    authorization_details: AuthzDetails | None = None
    consented_claims: list[str] | None = None
    claims_for_tx: str | None = None
    verified_claims_for_tx: list[str] | None = None

    claims_as_json = field_validator("claims", "claims_for_tx", mode="before")(mapping_to_json)
    verified_claims_as_json = field_validator("verified_claims_for_tx", mode="before")(mappings_to_json)


class AuthorizationIssueResponse(ApiResponse):
    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        LOCATION = "LOCATION"
        FORM = "FORM"

    schema_version = 3

    action: Action | None = None
    response_content: str | None = None
    access_token: str | None = None
    access_token_expires_at: int | None = None
    access_token_duration: int | None = None
    id_token: str | None = None
    authorization_code: str | None = None
    jwt_access_token: str | None = None

    def summarize(self) -> str:
        return (
            f"action={self.action}, responseContent={self.response_content}, "
            f"accessToken={self.access_token}, accessTokenExpiresAt={self.access_token_expires_at or 0}, "
            f"accessTokenDuration={self.access_token_duration or 0}, idToken={self.id_token}, "
            f"authorizationCode={self.authorization_code}, jwtAccessToken={self.jwt_access_token}"
        )


class AuthorizationAuthenticateRequest(AuthleteModel):
    """Request to an authentication callback used by Authlete's built-in authorization UI."""

    schema_version = 2

    ticket: str | None = None
    login_id: str | None = None
    password: str | None = None
    claims: str | None = None
    claims_locales: str | None = None


class AuthorizationAuthenticateResponse(ApiResponse):
    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        OK = "OK"

    schema_version = 2

    action: Action | None = None
    authenticated: bool = False
    response_content: str | None = None

    def summarize(self) -> str:
        return f"action={self.action}, authenticated={self.authenticated}, responseContent={self.response_content}"


class AuthorizationTicketInfo(AuthleteModel):
    """Information kept with an authorization ticket."""

    context: str | None = None


class AuthorizationTicketInfoRequest(AuthleteModel):
    ticket: str | None = None


class AuthorizationTicketUpdateRequest(AuthleteModel):
    ticket: str | None = None
    info: AuthorizationTicketInfo | None = None


class AuthorizationTicketUpdateResponse(ApiResponse):
    class Action(StrEnum):
        OK = "OK"
        NOT_FOUND = "NOT_FOUND"
        CALLER_ERROR = "CALLER_ERROR"
        AUTHLETE_ERROR = "AUTHLETE_ERROR"

    action: Action | None = None
    info: AuthorizationTicketInfo | None = None
