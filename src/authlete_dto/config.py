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
Configuration for code that talks to an Authlete server using these models.
"""

from enum import StrEnum
from typing import Self

from pydantic import AliasChoices, Field, SecretStr, ValidationInfo, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthleteApiVersion(StrEnum):
    V2 = "V2"
    V3 = "V3"

    @classmethod
    def parse(cls, version: str | None) -> "AuthleteApiVersion | None":
        """Returns the matching version, or None for None or an unknown name."""
        if version is None:
            return None
        try:
            return cls[version]
        except KeyError:
            return None


class AuthleteConfiguration(BaseSettings):
    """
    Connection settings for an Authlete server, read from `AUTHLETE_*` environment variables.

    Attributes:
        base_url (str): The Authlete API base URL.
        api_version (AuthleteApiVersion): V2 authenticates with API key/secret pairs,
            V3 with access tokens.
        service_owner_api_key (str | None): API key of the service owner (V2).
        service_owner_api_secret (SecretStr | None): API secret of the service owner (V2).
        service_owner_access_token (SecretStr | None): Access token of the service owner (V3).
        service_api_key (str | None): API key of the service (V2).
        service_api_secret (SecretStr | None): API secret of the service (V2).
        service_access_token (SecretStr | None): Access token of the service (V3).
        dpop_key (SecretStr | None): JWK used to sign DPoP proofs for API calls.
        client_certificate (str | None): PEM certificate for mutual TLS with the API.
        unsafe_local_dev (bool): Allow a plain HTTP base URL for local testing.
    """

    model_config = SettingsConfigDict(
        env_prefix="AUTHLETE_",
        case_sensitive=False,
        populate_by_name=True,
    )

    unsafe_local_dev: bool = False
    base_url: str = Field(default="https://api.authlete.com", description="The Authlete API base URL.")
    api_version: AuthleteApiVersion = AuthleteApiVersion.V2
    service_owner_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("AUTHLETE_SERVICEOWNER_APIKEY", "service_owner_api_key"),
    )
    service_owner_api_secret: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("AUTHLETE_SERVICEOWNER_APISECRET", "service_owner_api_secret"),
    )
    service_owner_access_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("AUTHLETE_SERVICEOWNER_ACCESSTOKEN", "service_owner_access_token"),
    )
    service_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("AUTHLETE_SERVICE_APIKEY", "service_api_key"),
    )
    service_api_secret: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("AUTHLETE_SERVICE_APISECRET", "service_api_secret"),
    )
    service_access_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("AUTHLETE_SERVICE_ACCESSTOKEN", "service_access_token"),
    )
    dpop_key: SecretStr | None = None
    client_certificate: str | None = None

    @field_validator("base_url", mode="after")
    @classmethod
    def validate_https(cls, v: str, info: ValidationInfo) -> str:
        """
        Ensures that the base URL uses HTTPS, unless strictly opted out for local dev.
        Trailing slashes are removed.
        """
        if v.startswith("http://") and not info.data.get("unsafe_local_dev", False):
            raise ValueError("HTTPS is required for production. Set 'unsafe_local_dev=True' only for local testing.")
        return v.rstrip("/")

    @field_validator("api_version", mode="before")
    @classmethod
    def normalize_api_version(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @model_validator(mode="after")
    def check_v3_credentials(self) -> Self:
        """V3 authenticates with access tokens, so at least one must be configured."""
        if self.api_version is AuthleteApiVersion.V3 and not (
            self.service_access_token or self.service_owner_access_token
        ):
            raise ValueError("API version V3 requires a service or service owner access token.")
        return self
