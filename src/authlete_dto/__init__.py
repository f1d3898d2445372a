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
Typed data-transfer objects for the Authlete OAuth 2.0, OpenID Connect and
OpenID4VCI APIs.
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .base import ActionResponse, ApiResponse, AuthleteModel
from .config import AuthleteApiVersion, AuthleteConfiguration
from .exceptions import AuthleteDtoError, MalformedDataError, UnknownFieldError

__all__ = [
    "ActionResponse",
    "ApiResponse",
    "AuthleteApiVersion",
    "AuthleteConfiguration",
    "AuthleteDtoError",
    "AuthleteModel",
    "MalformedDataError",
    "UnknownFieldError",
]
