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
Custom exceptions for the authlete-dto package.
"""


class AuthleteDtoError(Exception):
    """Base exception for all authlete-dto errors."""


class MalformedDataError(AuthleteDtoError):
    """
    Raised when a stored JSON blob cannot be parsed into the structure its owner declares.
    For example, `credentialsSupported` holding something other than a JSON array.
    """


class UnknownFieldError(AuthleteDtoError, ValueError):
    """Raised when `set()` is given a name that is not a field of the model."""
