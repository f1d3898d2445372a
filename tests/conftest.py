# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_identity

from collections.abc import Generator

import pytest

from authlete_dto.utils.logger import configure_logging


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """
    Restores the environment-driven logging configuration after each test,
    so sinks added by logging tests do not leak into the next one.
    """
    yield
    configure_logging()


@pytest.fixture
def token_response_json() -> str:
    """A trimmed `/auth/token` response as sent over the wire."""
    return (
        '{"resultCode":"A050001","resultMessage":"[A050001] The token request was processed successfully.",'
        '"action":"OK","responseContent":"{\\"access_token\\":\\"at\\",\\"token_type\\":\\"Bearer\\"}",'
        '"accessToken":"at","accessTokenExpiresAt":1700000000000,"accessTokenDuration":3600,'
        '"grantType":"AUTHORIZATION_CODE","clientId":1234,"clientIdAlias":"my-client","clientIdAliasUsed":true,'
        '"subject":"user-1","scopes":["openid","profile"],'
        '"properties":[{"key":"region","value":"eu","hidden":false}],"unknownField":"ignored"}'
    )
