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

from authlete_dto import MalformedDataError
from authlete_dto.dto import AuthorizationResponse, AuthzDetails, AuthzDetailsElement, Grant, GrantScope

PAYMENT = {
    "type": "payment_initiation",
    "locations": ["https://example.com/payments"],
    "actions": ["initiate", "status"],
    "datatypes": ["amount"],
    "instructedAmount": {"currency": "EUR", "amount": "123.50"},
    "creditorName": "Merchant A",
}


def test_element_from_rfc_form() -> None:
    """Test that type-specific keys are folded into other_fields."""
    element = AuthzDetailsElement.from_json(json.dumps(PAYMENT))
    assert element is not None
    assert element.type == "payment_initiation"
    assert element.locations == ["https://example.com/payments"]
    assert element.actions == ["initiate", "status"]
    assert element.data_types == ["amount"]
    assert element.identifier is None
    assert element.get_other_fields_as_map() == {
        "instructedAmount": {"currency": "EUR", "amount": "123.50"},
        "creditorName": "Merchant A",
    }


def test_element_to_rfc_form() -> None:
    """Test that other_fields are unfolded next to the common keys."""
    element = AuthzDetailsElement.from_json(json.dumps(PAYMENT))
    assert element is not None
    assert json.loads(element.to_json()) == PAYMENT


def test_element_without_other_fields() -> None:
    """Test that an element with only common keys has no other_fields."""
    element = AuthzDetailsElement.from_json('{"type":"account_information","identifier":"acc-1"}')
    assert element.other_fields is None
    assert element.get_other_fields_as_map() is None
    assert element.to_rfc_dict() == {"type": "account_information", "identifier": "acc-1"}


def test_set_other_fields_from_map() -> None:
    """Test storing other fields from a mapping."""
    element = AuthzDetailsElement(type="t")
    assert element.set_other_fields_from_map({"limit": 5}) is element
    assert element.other_fields == '{"limit":5}'
    assert element.to_rfc_dict() == {"limit": 5, "type": "t"}

    element.set_other_fields_from_map(None)
    assert element.other_fields is None


def test_other_fields_not_an_object() -> None:
    """Test that other_fields holding something other than an object is rejected."""
    element = AuthzDetailsElement(type="t", other_fields="[1, 2]")
    with pytest.raises(MalformedDataError):
        element.get_other_fields_as_map()

    element.other_fields = "{broken"
    with pytest.raises(MalformedDataError) as excinfo:
        element.to_rfc_dict()
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_details_round_trip() -> None:
    """Test the JSON array form of authorization details."""
    text = json.dumps([PAYMENT, {"type": "openid_credential", "format": "jwt_vc_json"}])
    details = AuthzDetails.from_json(text)
    assert details is not None
    assert details.elements is not None
    assert len(details.elements) == 2
    assert json.loads(details.to_json()) == json.loads(text)


def test_details_null() -> None:
    """Test the null forms of authorization details."""
    assert AuthzDetails().to_json() == "null"
    assert AuthzDetails.from_json("null") is None
    assert AuthzDetails(elements=[None]).to_json() == "[null]"


def test_details_malformed() -> None:
    """Test that non-array input and non-object elements are rejected."""
    with pytest.raises(MalformedDataError):
        AuthzDetails.from_json('{"type": "x"}')
    with pytest.raises(MalformedDataError):
        AuthzDetails.from_json("[1]")
    with pytest.raises(MalformedDataError):
        AuthzDetails.from_json("[{")
    with pytest.raises(MalformedDataError):
        AuthzDetails.from_json('[{"type": "x", "actions": "read"}]')


def test_details_inside_api_payload() -> None:
    """Test that API payloads carry authorization details in field form."""
    response = AuthorizationResponse.from_json(
        '{"action":"INTERACTION","authorizationDetails":{"elements":[{"type":"x","dataTypes":["a"],'
        '"otherFields":"{\\"limit\\":1}"}]}}'
    )
    details = response.authorization_details
    assert details is not None and details.elements is not None
    element = details.elements[0]
    assert element is not None
    assert element.data_types == ["a"]
    assert details.to_rfc_list() == [{"limit": 1, "type": "x", "datatypes": ["a"]}]


def test_grant_round_trip() -> None:
    """Test the grant management form of a grant."""
    text = json.dumps(
        {
            "scopes": [{"scope": "read write", "resource": ["https://rs.example.com"]}, {"scope": "openid"}],
            "claims": ["given_name", "email"],
            "authorization_details": [{"type": "account_information", "actions": ["list_accounts"]}],
        }
    )
    grant = Grant.from_json(text)
    assert grant is not None
    assert grant.scopes == [GrantScope("read write", ["https://rs.example.com"]), GrantScope("openid")]
    assert grant.claims == ["given_name", "email"]
    assert json.loads(grant.to_json()) == json.loads(text)


def test_grant_empty_and_null() -> None:
    """Test the edge forms of grants."""
    assert Grant.from_json("null") is None
    assert Grant().to_grant_dict() == {}
    assert Grant(claims=[]).to_json() == '{"claims":[]}'


def test_grant_malformed() -> None:
    """Test that grants of the wrong shape are rejected."""
    with pytest.raises(MalformedDataError):
        Grant.from_json("[]")
    with pytest.raises(MalformedDataError):
        Grant.from_json('{"scopes": "read"}')
    with pytest.raises(MalformedDataError):
        Grant.from_json('{"authorization_details": [42]}')
    with pytest.raises(MalformedDataError, match="An element of 'scopes' is not a JSON object"):
        Grant.from_json('{"scopes": ["openid"]}')
    with pytest.raises(MalformedDataError):
        Grant.from_json('{"scopes": [{"scope": "openid", "resource": "https://rs.example.com"}]}')


def test_grant_null_scope_entry() -> None:
    """Test that a null scope entry is kept as None."""
    grant = Grant.from_json('{"scopes": [null, {"scope": "openid"}]}')
    assert grant is not None
    assert grant.scopes == [None, GrantScope("openid")]
    assert grant.to_json() == '{"scopes":[null,{"scope":"openid"}]}'


def test_element_null() -> None:
    """Test that a null element parses to None."""
    assert AuthzDetailsElement.from_json("null") is None
    with pytest.raises(MalformedDataError):
        AuthzDetailsElement.from_json("[]")
