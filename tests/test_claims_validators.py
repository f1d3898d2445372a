# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_identity

import json

import pytest

from authlete_dto.dto import (
    AuthorizationIssueRequest,
    BackchannelAuthenticationCompleteRequest,
    RevocationRequest,
    TokenRequest,
    UserInfoIssueRequest,
)


@pytest.mark.parametrize("model", [AuthorizationIssueRequest, UserInfoIssueRequest])
def test_claims_from_mapping(model: type[AuthorizationIssueRequest | UserInfoIssueRequest]) -> None:
    """Test that claims given as a mapping are stored as compact JSON."""
    request = model(claims={"name": "Alice", "age": 30}, claims_for_tx={"nationality": "JP"})
    assert request.claims == '{"name":"Alice","age":30}'
    assert request.claims_for_tx == '{"nationality":"JP"}'


def test_claims_from_string() -> None:
    """Test that a JSON string is kept as given."""
    request = UserInfoIssueRequest(claims='{"name": "Alice"}')
    assert request.claims == '{"name": "Alice"}'


def test_empty_claims_mapping() -> None:
    """Test that an empty mapping clears the claims."""
    request = AuthorizationIssueRequest(claims='{"name":"Alice"}')
    request.claims = {}  # type: ignore[assignment]
    assert request.claims is None


def test_claims_non_ascii() -> None:
    """Test that non-ASCII claim values are stored unescaped."""
    request = BackchannelAuthenticationCompleteRequest(claims={"name": "山田太郎"})
    assert request.claims == '{"name":"山田太郎"}'


def test_claims_set_chained() -> None:
    """Test that set() applies the same conversion as construction."""
    request = BackchannelAuthenticationCompleteRequest().set(ticket="t-1", claims={"email": "a@example.com"})
    assert request.ticket == "t-1"
    assert json.loads(request.claims or "") == {"email": "a@example.com"}


def test_verified_claims_from_mappings() -> None:
    """Test that each verified claims mapping is stored as JSON."""
    request = AuthorizationIssueRequest(
        verified_claims_for_tx=[{"verification": {"trust_framework": "eidas"}}, '{"claims":{}}']
    )
    assert request.verified_claims_for_tx == ['{"verification":{"trust_framework":"eidas"}}', '{"claims":{}}']


def test_verified_claims_on_wire() -> None:
    """Test that converted claims travel as strings in the wire form."""
    wire = UserInfoIssueRequest(token="at", verified_claims_for_tx=[{"a": 1}]).to_dict()
    assert wire == {"token": "at", "verifiedClaimsForTx": ['{"a":1}']}


def test_parameters_from_mapping() -> None:
    """Test that request parameters given as a mapping are form-encoded."""
    request = TokenRequest(
        parameters={"grant_type": "authorization_code", "code": "abc", "redirect_uri": "https://a/b"}
    )
    assert request.parameters == "grant_type=authorization_code&code=abc&redirect_uri=https%3A%2F%2Fa%2Fb"


def test_parameters_multi_valued() -> None:
    """Test that a list value yields one parameter per element."""
    request = RevocationRequest(parameters={"response_type": "code", "scope": ["openid", "email"]})
    assert request.parameters == "response_type=code&scope=openid&scope=email"


def test_parameters_from_string() -> None:
    """Test that pre-encoded parameters are kept as given."""
    request = TokenRequest(parameters="grant_type=client_credentials")
    assert request.parameters == "grant_type=client_credentials"
