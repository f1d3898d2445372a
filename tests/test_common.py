# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_identity

from authlete_dto.dto import DynamicScope, Pair, Property, Scope, StringArray, TaggedValue


def test_positional_construction() -> None:
    """Test that the small value types accept positional arguments."""
    assert Pair("k", "v").key == "k"
    assert TaggedValue("ja", "クライアント").tag == "ja"
    assert Property("k", "v", True).hidden is True
    assert StringArray(["a", "b"]).array == ["a", "b"]
    assert DynamicScope("payment", "123").value == "123"


def test_property_str() -> None:
    """Test the string form of properties."""
    assert str(Property("region", "eu")) == "region=eu"
    assert str(Property("secret", "x", hidden=True)) == "secret=x (hidden)"


def test_scope_extract_names() -> None:
    """Test that scope names are extracted with missing entries kept."""
    scopes = [Scope(name="openid"), None, Scope(name="email")]
    assert Scope.extract_names(scopes) == ["openid", None, "email"]
    assert Scope.extract_names(None) is None
    assert Scope.extract_names([]) == []


def test_scope_wire_names() -> None:
    """Test the wire form of a scope."""
    scope = Scope.model_validate(
        {"name": "profile", "defaultEntry": True, "descriptions": [{"tag": "fr", "value": "x"}]}
    )
    assert scope.default_entry is True
    assert scope.descriptions == [TaggedValue("fr", "x")]


def test_dynamic_scope_ordering() -> None:
    """Test that dynamic scopes sort by name, then value, with missing parts first."""
    scopes = [
        DynamicScope("payment", "2"),
        DynamicScope("account", None),
        DynamicScope("payment", "1"),
        DynamicScope(None, "x"),
        DynamicScope("payment", None),
    ]
    assert sorted(scopes) == [
        DynamicScope(None, "x"),
        DynamicScope("account", None),
        DynamicScope("payment", None),
        DynamicScope("payment", "1"),
        DynamicScope("payment", "2"),
    ]


def test_dynamic_scope_compare_to() -> None:
    """Test the three-way comparison of dynamic scopes."""
    a = DynamicScope("a", "1")
    b = DynamicScope("b", "0")
    assert a.compare_to(b) < 0
    assert b.compare_to(a) > 0
    assert a.compare_to(DynamicScope("a", "1")) == 0
    assert DynamicScope(None, None).compare_to(DynamicScope(None, None)) == 0


def test_dynamic_scope_equality_and_hash() -> None:
    """Test that equality, hashing and ordering agree."""
    a1 = DynamicScope("payment", "1")
    a2 = DynamicScope("payment", "1")
    b = DynamicScope("payment", "2")

    assert a1 == a2 and a2 == a1
    assert hash(a1) == hash(a2)
    assert a1 != b
    assert not a1 < a2 and not a2 < a1
    assert a1 <= a2 and a1 >= a2
    assert len({a1, a2, b}) == 2
    assert a1 != "payment:1"
