# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_identity

import pytest

from authlete_dto import AuthleteDtoError, MalformedDataError, UnknownFieldError
from authlete_dto.dto import AuthzDetails, Client
from authlete_dto.utils.json_utils import parse_json_array


def test_exception_hierarchy() -> None:
    """Test that all errors share the package base exception."""
    assert issubclass(MalformedDataError, AuthleteDtoError)
    assert issubclass(UnknownFieldError, AuthleteDtoError)
    assert issubclass(UnknownFieldError, ValueError)
    assert not issubclass(MalformedDataError, ValueError)


def test_unknown_field_error() -> None:
    """Test that set() rejects names that are not fields."""
    with pytest.raises(UnknownFieldError, match="Client has no field 'nickname'"):
        Client().set(nickname="x")


def test_malformed_data_error() -> None:
    """Test that malformed stored JSON is reported with the package error."""
    with pytest.raises(AuthleteDtoError, match="'scopes' is not a JSON array"):
        parse_json_array('{"a":1}', "scopes")


def test_malformed_authorization_details() -> None:
    """Test that a non-array authorization details document is rejected."""
    with pytest.raises(MalformedDataError):
        AuthzDetails.from_json('{"type":"payment"}')
