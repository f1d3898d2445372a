# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_identity

import types
from enum import Enum
from typing import Any, Union, get_args, get_origin

import pytest
from pydantic import BaseModel

import authlete_dto.dto as dto
from authlete_dto import AuthleteModel


def _sample(annotation: Any) -> Any:
    """A valid non-None value for a field annotation."""
    origin = get_origin(annotation)
    if origin in (Union, types.UnionType):
        return _sample(next(arg for arg in get_args(annotation) if arg is not type(None)))
    if origin is list:
        return [_sample(get_args(annotation)[0])]
    if isinstance(annotation, type):
        if issubclass(annotation, Enum):
            return next(iter(annotation))
        if issubclass(annotation, BaseModel):
            return annotation()
        if annotation is bool:
            return True
        if annotation is int:
            return 7
        if annotation is float:
            return 1.5
    return "value"


def _model_fields() -> list[tuple[type[AuthleteModel], str]]:
    models: list[type[AuthleteModel]] = []
    for name in dto.__all__:
        obj = getattr(dto, name)
        if isinstance(obj, type) and issubclass(obj, AuthleteModel) and obj not in models:
            models.append(obj)
    return [(model, field) for model in models for field in model.model_fields]


MODEL_FIELDS = _model_fields()


def test_field_list_reaches_nested_and_response_models() -> None:
    """Test that the field list includes request, response and value models."""
    covered = {model for model, _ in MODEL_FIELDS}
    assert {dto.TokenResponse, dto.Client, dto.DynamicScope, dto.CredentialIssuerMetadata} <= covered


@pytest.mark.parametrize(
    ("model", "field"), MODEL_FIELDS, ids=[f"{model.__name__}.{field}" for model, field in MODEL_FIELDS]
)
def test_set_then_get(model: type[AuthleteModel], field: str) -> None:
    """Test that a value stored through set() is read back unchanged and set() returns the instance."""
    annotation = model.model_fields[field].annotation
    instance = model()
    value = _sample(annotation)

    assert instance.set(**{field: value}) is instance
    assert getattr(instance, field) == value

    if type(None) in get_args(annotation):
        assert instance.set(**{field: None}) is instance
        assert getattr(instance, field) is None
