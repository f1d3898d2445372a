# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_identity

from authlete_dto.dto import (
    AuthorizedClientListResponse,
    Client,
    ClientAuthorizationDeleteRequest,
    ClientAuthorizationGetListRequest,
    ClientAuthorizationUpdateRequest,
    ClientExtension,
    ClientRegistrationResponse,
    Pair,
    TaggedValue,
)
from authlete_dto.types import ClientAuthMethod, ClientType, JWSAlg


def test_pagination_defaults() -> None:
    """Test the documented defaults of the authorization list request."""
    request = ClientAuthorizationGetListRequest()
    assert request.subject is None
    assert request.developer is None
    assert request.start == 0
    assert request.end == 5
    assert ClientAuthorizationGetListRequest.DEFAULT_START == 0
    assert ClientAuthorizationGetListRequest.DEFAULT_END == 5
    assert ClientAuthorizationGetListRequest.DEFAULT_DEVELOPER is None


def test_pagination_positional() -> None:
    """Test the positional forms of the authorization list request."""
    assert ClientAuthorizationGetListRequest("user-1").subject == "user-1"

    with_developer = ClientAuthorizationGetListRequest("user-1", "dev-1")
    assert (with_developer.developer, with_developer.start, with_developer.end) == ("dev-1", 0, 5)

    full = ClientAuthorizationGetListRequest("user-1", "dev-1", 10, 20)
    assert (full.subject, full.developer, full.start, full.end) == ("user-1", "dev-1", 10, 20)

    paged = ClientAuthorizationGetListRequest("user-1", start=5, end=10)
    assert (paged.developer, paged.start, paged.end) == (None, 5, 10)


def test_pagination_wire_form() -> None:
    """Test that the defaults are sent on the wire."""
    assert ClientAuthorizationGetListRequest("user-1").to_dict() == {"subject": "user-1", "start": 0, "end": 5}


def test_authorization_requests_positional() -> None:
    """Test positional construction of the authorization update and delete requests."""
    update = ClientAuthorizationUpdateRequest("user-1", ["openid", "email"])
    assert update.scopes == ["openid", "email"]
    assert ClientAuthorizationDeleteRequest("user-1").subject == "user-1"


def test_load_attributes() -> None:
    """Test that load_attributes() keeps only pairs that have a key."""
    client = Client()
    result = client.load_attributes([Pair("tier", "gold"), None, Pair(None, "orphan"), Pair("region", None)])
    assert result is client
    assert client.attributes == [Pair("tier", "gold"), Pair("region", None)]

    client.load_attributes([None, Pair(None, "x")])
    assert client.attributes is None

    client.load_attributes([Pair("a", "b")]).load_attributes(None)
    assert client.attributes is None


def test_client_identifier() -> None:
    """Test that a client without a presented alias is identified by its numeric ID."""
    client = Client(client_id=57297408867, client_id_alias="my-app")
    assert client.client_identifier == "57297408867"


def test_client_from_wire() -> None:
    """Test parsing client metadata."""
    client = Client.model_validate(
        {
            "clientId": 57297408867,
            "clientName": "My App",
            "clientNames": [{"tag": "ja", "value": "マイアプリ"}],
            "clientType": "CONFIDENTIAL",
            "tokenAuthMethod": "PRIVATE_KEY_JWT",
            "idTokenSignAlg": "ES256",
            "tlsClientCertificateBoundAccessTokens": True,
            "extension": {"requestableScopesEnabled": True, "requestableScopes": ["openid"]},
            "attributes": [{"key": "tier", "value": "gold"}],
        }
    )
    assert client.client_type is ClientType.CONFIDENTIAL
    assert client.token_auth_method is ClientAuthMethod.PRIVATE_KEY_JWT
    assert client.id_token_sign_alg is JWSAlg.ES256
    assert client.client_names == [TaggedValue("ja", "マイアプリ")]
    assert client.tls_client_certificate_bound_access_tokens is True
    assert client.extension == ClientExtension(requestable_scopes_enabled=True, requestable_scopes=["openid"])
    assert client.to_dict()["tokenAuthMethod"] == "PRIVATE_KEY_JWT"


def test_authorized_client_list() -> None:
    """Test that the authorized client list extends the plain client list."""
    response = AuthorizedClientListResponse.model_validate(
        {"start": 0, "end": 5, "totalCount": 1, "subject": "user-1", "clients": [{"clientId": 1}]}
    )
    assert response.subject == "user-1"
    assert response.total_count == 1
    assert response.clients is not None and response.clients[0].client_id == 1


def test_client_registration_response() -> None:
    """Test the actions of the dynamic client registration response."""
    response = ClientRegistrationResponse.from_json('{"action":"CREATED","responseContent":"{}","clientId":5}')
    assert response.action is ClientRegistrationResponse.Action.CREATED
    assert response.client_id == 5
