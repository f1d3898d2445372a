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
    AuthorizationResponse,
    Client,
    IntrospectionResponse,
    ResourceServerSignatureResponse,
    Scope,
    TokenResponse,
)
from authlete_dto.types import ClientType, Display, Prompt


def test_token_response_summary(token_response_json: str) -> None:
    """Test the one-line summary of a token response."""
    summary = TokenResponse.from_json(token_response_json).summarize()
    assert summary.startswith("action=OK, username=None, password=None, ticket=None, ")
    assert "accessToken=at, accessTokenExpiresAt=1700000000000, accessTokenDuration=3600, " in summary
    assert "refreshToken=None, refreshTokenExpiresAt=0, refreshTokenDuration=0, " in summary
    assert "grantType=AUTHORIZATION_CODE, clientId=1234, clientIdAlias=my-client, clientIdAliasUsed=True" in summary
    assert "scopes=openid profile, properties=[region=eu]" in summary
    assert summary.endswith("clientAuthMethod=None")


def test_token_response_client_identifier(token_response_json: str) -> None:
    """Test that the alias identifies the client when the client presented it."""
    response = TokenResponse.from_json(token_response_json)
    assert response.client_identifier == "my-client"

    response.client_id_alias_used = False
    assert response.client_identifier == "1234"


def test_empty_token_response_summary() -> None:
    """Test that missing numbers render as zero and missing lists as None."""
    summary = TokenResponse().summarize()
    assert "accessTokenExpiresAt=0" in summary
    assert "clientId=0" in summary
    assert "scopes=None, properties=None" in summary


def test_authorization_response_summary() -> None:
    """Test the summary of an authorization response, including its client."""
    response = AuthorizationResponse(
        ticket="t-1",
        action=AuthorizationResponse.Action.INTERACTION,
        client=Client(number=7, service_number=3, client_id=99, client_type=ClientType.PUBLIC),
        display=Display.PAGE,
        scopes=[Scope(name="openid"), Scope(name="email")],
        ui_locales=["ja", "en"],
        prompts=[Prompt.LOGIN, Prompt.CONSENT],
    )
    summary = response.summarize()
    assert summary.startswith("ticket=t-1, action=INTERACTION, serviceNumber=3, clientNumber=7, clientId=99, ")
    assert "clientType=PUBLIC, developer=None, display=PAGE, maxAge=0, " in summary
    assert "scopes=openid email, uiLocales=ja en, claimsLocales=None" in summary
    assert summary.endswith("prompts=login consent")


def test_authorization_response_summary_without_client() -> None:
    """Test that the summary tolerates a missing client."""
    summary = AuthorizationResponse().summarize()
    assert "serviceNumber=0, clientNumber=0, clientId=0, clientSecret=None" in summary


def test_introspection_response_summary() -> None:
    """Test the summary of an introspection response."""
    response = IntrospectionResponse.model_validate(
        {
            "action": "OK",
            "clientId": 5,
            "subject": "user-1",
            "existent": True,
            "usable": True,
            "scopes": ["openid"],
            "certificateThumbprint": "thumb",
        }
    )
    summary = response.summarize()
    assert summary.startswith("action=OK, clientId=5, subject=user-1, existent=True, usable=True, sufficient=False")
    assert summary.endswith("clientIdAliasUsed=False, confirmation=thumb")


def test_signature_response_summary() -> None:
    """Test the summary of a resource server signature response."""
    response = ResourceServerSignatureResponse(
        action=ResourceServerSignatureResponse.Action.OK, signature_input="sig=()"
    )
    assert response.summarize() == "action=OK, signatureInput=sig=()"
