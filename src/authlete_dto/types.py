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
Protocol enumerations (grant types, JOSE algorithms, client metadata values, ...).

Every member travels on the Authlete wire as its constant name. The protocol string
(what appears in OAuth / OIDC messages, e.g. `authorization_code`) and the compact
numeric code are exposed as `.protocol` and `.code`.
"""

from collections.abc import Iterable
from enum import StrEnum
from typing import Self

from authlete_dto.utils.logger import logger


class CodedEnum(StrEnum):
    """
    A StrEnum whose members carry a numeric code and a protocol string.

    Members are declared as `NAME = ("NAME", code, "protocol-string")`; the first
    element pins the wire value so renaming a Python constant cannot change it.
    """

    code: int
    protocol: str | None

    def __new__(cls, wire: str, code: int, protocol: str | None = None) -> Self:
        member = str.__new__(cls, wire)
        member._value_ = wire
        member.code = code
        member.protocol = protocol
        return member

    @classmethod
    def get_by_code(cls, code: int | None) -> Self | None:
        for member in cls:
            if member.code == code:
                return member
        return None

    @classmethod
    def parse(cls, value: str | None) -> Self | None:
        """Finds the member whose protocol string equals `value`. Unknown strings yield None."""
        if value is None:
            return None
        for member in cls:
            if member.protocol == value:
                return member
        logger.debug(f"Unknown {cls.__name__} value: {value!r}")
        return None

    @classmethod
    def to_bits(cls, members: Iterable[Self | None] | None) -> int:
        """Packs members into an int where bit `1 << code` marks presence."""
        if members is None:
            return 0
        bits = 0
        for member in members:
            if member is not None:
                bits |= 1 << member.code
        return bits

    @classmethod
    def from_bits(cls, bits: int) -> list[Self]:
        return [member for member in cls if bits & (1 << member.code)]


class ApplicationType(CodedEnum):
    WEB = ("WEB", 1, "web")
    NATIVE = ("NATIVE", 2, "native")


class AssertionTarget(CodedEnum):
    CLIENT_REGISTRATION_SOFTWARE_STATEMENT = ("CLIENT_REGISTRATION_SOFTWARE_STATEMENT", 1, "software_statement")


class AttachmentType(CodedEnum):
    EMBEDDED = ("EMBEDDED", 1, "embedded")
    EXTERNAL = ("EXTERNAL", 2, "external")


class ClaimMatchOperation(CodedEnum):
    PROHIBITED = ("PROHIBITED", 1, "prohibited")
    PRESENT = ("PRESENT", 2, "present")
    EQUALS = ("EQUALS", 3, "equals")


class ClaimRuleOperation(CodedEnum):
    PROHIBITED = ("PROHIBITED", 1, "prohibited")
    PRESENT = ("PRESENT", 2, "present")
    EQUALS = ("EQUALS", 3, "equals")


class ClaimType(CodedEnum):
    NORMAL = ("NORMAL", 1, "normal")
    AGGREGATED = ("AGGREGATED", 2, "aggregated")
    DISTRIBUTED = ("DISTRIBUTED", 3, "distributed")


class ClientAssertionType(CodedEnum):
    JWT_BEARER = ("JWT_BEARER", 1, "urn:ietf:params:oauth:client-assertion-type:jwt-bearer")
    JWT_CLIENT_ATTESTATION = (
        "JWT_CLIENT_ATTESTATION",
        2,
        "urn:ietf:params:oauth:client-assertion-type:jwt-client-attestation",
    )


class ClientAuthMethod(CodedEnum):
    NONE = ("NONE", 0, "none")
    CLIENT_SECRET_BASIC = ("CLIENT_SECRET_BASIC", 1, "client_secret_basic")
    CLIENT_SECRET_POST = ("CLIENT_SECRET_POST", 2, "client_secret_post")
    CLIENT_SECRET_JWT = ("CLIENT_SECRET_JWT", 3, "client_secret_jwt")
    PRIVATE_KEY_JWT = ("PRIVATE_KEY_JWT", 4, "private_key_jwt")
    TLS_CLIENT_AUTH = ("TLS_CLIENT_AUTH", 5, "tls_client_auth")
    SELF_SIGNED_TLS_CLIENT_AUTH = ("SELF_SIGNED_TLS_CLIENT_AUTH", 6, "self_signed_tls_client_auth")


class ClientRegistrationType(CodedEnum):
    AUTOMATIC = ("AUTOMATIC", 1, "automatic")
    EXPLICIT = ("EXPLICIT", 2, "explicit")


class ClientType(CodedEnum):
    PUBLIC = ("PUBLIC", 1, "public")
    CONFIDENTIAL = ("CONFIDENTIAL", 2, "confidential")


class CodeChallengeMethod(CodedEnum):
    PLAIN = ("PLAIN", 1, "plain")
    S256 = ("S256", 2, "S256")


class DeliveryMode(CodedEnum):
    """Token delivery mode of CIBA."""

    POLL = ("POLL", 1, "poll")
    PING = ("PING", 2, "ping")
    PUSH = ("PUSH", 3, "push")


class Display(CodedEnum):
    PAGE = ("PAGE", 1, "page")
    POPUP = ("POPUP", 2, "popup")
    TOUCH = ("TOUCH", 3, "touch")
    WAP = ("WAP", 4, "wap")


class EntityType(CodedEnum):
    """Entity types of OpenID Federation."""

    OPENID_RELYING_PARTY = ("OPENID_RELYING_PARTY", 1, "openid_relying_party")
    OPENID_PROVIDER = ("OPENID_PROVIDER", 2, "openid_provider")
    OAUTH_AUTHORIZATION_SERVER = ("OAUTH_AUTHORIZATION_SERVER", 3, "oauth_authorization_server")
    OAUTH_CLIENT = ("OAUTH_CLIENT", 4, "oauth_client")
    OAUTH_RESOURCE = ("OAUTH_RESOURCE", 5, "oauth_resource")
    FEDERATION_ENTITY = ("FEDERATION_ENTITY", 6, "federation_entity")
    OPENID_CREDENTIAL_ISSUER = ("OPENID_CREDENTIAL_ISSUER", 7, "openid_credential_issuer")


class FapiMode(CodedEnum):
    FAPI1_BASELINE = ("FAPI1_BASELINE", 1, "fapi1_baseline")
    FAPI1_ADVANCED = ("FAPI1_ADVANCED", 2, "fapi1_advanced")
    FAPI2_SECURITY = ("FAPI2_SECURITY", 3, "fapi2_security")
    FAPI2_MESSAGE_SIGNING_AUTH_REQ = ("FAPI2_MESSAGE_SIGNING_AUTH_REQ", 4, "fapi2_message_signing_auth_req")
    FAPI2_MESSAGE_SIGNING_AUTH_RES = ("FAPI2_MESSAGE_SIGNING_AUTH_RES", 5, "fapi2_message_signing_auth_res")
    FAPI2_MESSAGE_SIGNING_INTROSPECTION_RES = (
        "FAPI2_MESSAGE_SIGNING_INTROSPECTION_RES",
        6,
        "fapi2_message_signing_introspection_res",
    )
    FAPI2_MESSAGE_SIGNING_RESOURCE_REQ = ("FAPI2_MESSAGE_SIGNING_RESOURCE_REQ", 7, "fapi2_message_signing_resource_req")
    FAPI2_MESSAGE_SIGNING_RESOURCE_RES = ("FAPI2_MESSAGE_SIGNING_RESOURCE_RES", 8, "fapi2_message_signing_resource_res")


class GMAction(CodedEnum):
    """Grant management actions (`grant_management_action`)."""

    CREATE = ("CREATE", 1, "create")
    QUERY = ("QUERY", 2, "query")
    REPLACE = ("REPLACE", 3, "replace")
    REVOKE = ("REVOKE", 4, "revoke")
    UPDATE = ("UPDATE", 5, "update")


class GrantType(CodedEnum):
    AUTHORIZATION_CODE = ("AUTHORIZATION_CODE", 1, "authorization_code")
    IMPLICIT = ("IMPLICIT", 2, "implicit")
    PASSWORD = ("PASSWORD", 3, "password")
    CLIENT_CREDENTIALS = ("CLIENT_CREDENTIALS", 4, "client_credentials")
    REFRESH_TOKEN = ("REFRESH_TOKEN", 5, "refresh_token")
    CIBA = ("CIBA", 6, "urn:openid:params:grant-type:ciba")
    DEVICE_CODE = ("DEVICE_CODE", 7, "urn:ietf:params:oauth:grant-type:device_code")


class JWEAlg(CodedEnum):
    RSA1_5 = ("RSA1_5", 1, "RSA1_5")
    RSA_OAEP = ("RSA_OAEP", 2, "RSA-OAEP")
    RSA_OAEP_256 = ("RSA_OAEP_256", 3, "RSA-OAEP-256")
    A128KW = ("A128KW", 4, "A128KW")
    A192KW = ("A192KW", 5, "A192KW")
    A256KW = ("A256KW", 6, "A256KW")
    DIR = ("DIR", 7, "dir")
    ECDH_ES = ("ECDH_ES", 8, "ECDH-ES")
    ECDH_ES_A128KW = ("ECDH_ES_A128KW", 9, "ECDH-ES+A128KW")
    ECDH_ES_A192KW = ("ECDH_ES_A192KW", 10, "ECDH-ES+A192KW")
    ECDH_ES_A256KW = ("ECDH_ES_A256KW", 11, "ECDH-ES+A256KW")
    A128GCMKW = ("A128GCMKW", 12, "A128GCMKW")
    A192GCMKW = ("A192GCMKW", 13, "A192GCMKW")
    A256GCMKW = ("A256GCMKW", 14, "A256GCMKW")
    PBES2_HS256_A128KW = ("PBES2_HS256_A128KW", 15, "PBES2-HS256+A128KW")
    PBES2_HS384_A192KW = ("PBES2_HS384_A192KW", 16, "PBES2-HS384+A192KW")
    PBES2_HS512_A256KW = ("PBES2_HS512_A256KW", 17, "PBES2-HS512+A256KW")


class JWEEnc(CodedEnum):
    A128CBC_HS256 = ("A128CBC_HS256", 1, "A128CBC-HS256")
    A192CBC_HS384 = ("A192CBC_HS384", 2, "A192CBC-HS384")
    A256CBC_HS512 = ("A256CBC_HS512", 3, "A256CBC-HS512")
    A128GCM = ("A128GCM", 4, "A128GCM")
    A192GCM = ("A192GCM", 5, "A192GCM")
    A256GCM = ("A256GCM", 6, "A256GCM")


class JWEZip(CodedEnum):
    DEF = ("DEF", 1, "DEF")


class JWSAlg(CodedEnum):
    NONE = ("NONE", 0, "none")
    HS256 = ("HS256", 1, "HS256")
    HS384 = ("HS384", 2, "HS384")
    HS512 = ("HS512", 3, "HS512")
    RS256 = ("RS256", 4, "RS256")
    RS384 = ("RS384", 5, "RS384")
    RS512 = ("RS512", 6, "RS512")
    ES256 = ("ES256", 7, "ES256")
    ES384 = ("ES384", 8, "ES384")
    ES512 = ("ES512", 9, "ES512")
    PS256 = ("PS256", 10, "PS256")
    PS384 = ("PS384", 11, "PS384")
    PS512 = ("PS512", 12, "PS512")

    @property
    def hash_alg(self) -> str | None:
        """The hashlib name of the digest used by this algorithm, e.g. `sha256`. NONE has none."""
        if self is JWSAlg.NONE:
            return None
        return f"sha{self.name[2:]}"

    @property
    def is_symmetric(self) -> bool:
        return self.name.startswith("HS")


class Plan(CodedEnum):
    FREE = ("FREE", 0)
    LITE = ("LITE", 1)
    PREMIUM = ("PREMIUM", 2)
    ENTERPRISE = ("ENTERPRISE", 3)


class Prompt(CodedEnum):
    NONE = ("NONE", 0, "none")
    LOGIN = ("LOGIN", 1, "login")
    CONSENT = ("CONSENT", 2, "consent")
    SELECT_ACCOUNT = ("SELECT_ACCOUNT", 3, "select_account")
    CREATE = ("CREATE", 4, "create")


class ResponseMode(CodedEnum):
    QUERY = ("QUERY", 1, "query")
    FRAGMENT = ("FRAGMENT", 2, "fragment")
    FORM_POST = ("FORM_POST", 3, "form_post")


_FLAG_CODE = 0x1
_FLAG_TOKEN = 0x2
_FLAG_ID_TOKEN = 0x4
_RESPONSE_TYPE_FLAGS = {"code": _FLAG_CODE, "token": _FLAG_TOKEN, "id_token": _FLAG_ID_TOKEN}


class ResponseType(CodedEnum):
    """
    Values of `response_type`. `parse` ignores element order and repetition,
    so `"id_token code"` resolves to CODE_ID_TOKEN.
    """

    NONE = ("NONE", 0, "none")
    CODE = ("CODE", 1, "code")
    TOKEN = ("TOKEN", 2, "token")
    ID_TOKEN = ("ID_TOKEN", 3, "id_token")
    CODE_TOKEN = ("CODE_TOKEN", 4, "code token")
    CODE_ID_TOKEN = ("CODE_ID_TOKEN", 5, "code id_token")
    ID_TOKEN_TOKEN = ("ID_TOKEN_TOKEN", 6, "id_token token")
    CODE_ID_TOKEN_TOKEN = ("CODE_ID_TOKEN_TOKEN", 7, "code id_token token")

    @property
    def flags(self) -> int:
        if self is ResponseType.NONE:
            return 0
        return sum(_RESPONSE_TYPE_FLAGS[element] for element in (self.protocol or "").split())

    def contains_code(self) -> bool:
        return bool(self.flags & _FLAG_CODE)

    def contains_token(self) -> bool:
        return bool(self.flags & _FLAG_TOKEN)

    def contains_id_token(self) -> bool:
        return bool(self.flags & _FLAG_ID_TOKEN)

    def requires_implicit_flow(self) -> bool:
        # Any of token / id_token needs the implicit grant type
        return bool(self.flags & (_FLAG_TOKEN | _FLAG_ID_TOKEN))

    @classmethod
    def parse(cls, value: str | None) -> Self | None:
        if value is None:
            return None
        if value == "none":
            return cls.NONE

        flags = 0
        for element in value.split():
            if element not in _RESPONSE_TYPE_FLAGS:
                logger.debug(f"Unknown response_type element: {element!r}")
                return None
            flags |= _RESPONSE_TYPE_FLAGS[element]

        for member in cls:
            if member is not cls.NONE and member.flags == flags:
                return member
        return None


class ServiceProfile(CodedEnum):
    FAPI = ("FAPI", 1, "fapi")


class Sns(CodedEnum):
    FACEBOOK = ("FACEBOOK", 1, "facebook")


class StandardScope(CodedEnum):
    ADDRESS = ("ADDRESS", 1, "address")
    EMAIL = ("EMAIL", 2, "email")
    OPENID = ("OPENID", 3, "openid")
    OFFLINE_ACCESS = ("OFFLINE_ACCESS", 4, "offline_access")
    PHONE = ("PHONE", 5, "phone")
    PROFILE = ("PROFILE", 6, "profile")


class SubjectType(CodedEnum):
    PUBLIC = ("PUBLIC", 1, "public")
    PAIRWISE = ("PAIRWISE", 2, "pairwise")


class TokenType(CodedEnum):
    """Token type identifiers of RFC 8693 Token Exchange."""

    JWT = ("JWT", 1, "urn:ietf:params:oauth:token-type:jwt")
    ACCESS_TOKEN = ("ACCESS_TOKEN", 2, "urn:ietf:params:oauth:token-type:access_token")
    REFRESH_TOKEN = ("REFRESH_TOKEN", 3, "urn:ietf:params:oauth:token-type:refresh_token")
    ID_TOKEN = ("ID_TOKEN", 4, "urn:ietf:params:oauth:token-type:id_token")
    SAML1 = ("SAML1", 5, "urn:ietf:params:oauth:token-type:saml1")
    SAML2 = ("SAML2", 6, "urn:ietf:params:oauth:token-type:saml2")
    DEVICE_SECRET = ("DEVICE_SECRET", 7, "urn:openid:params:token-type:device-secret")


class TslFormat(CodedEnum):
    JWT = ("JWT", 1, "jwt")


TslPublishFormat = TslFormat


class TslTokenStatus(CodedEnum):
    VALID = ("VALID", 0, "valid")
    INVALID = ("INVALID", 1, "invalid")
    SUSPENDED = ("SUSPENDED", 2, "suspended")


class UserCodeCharset(CodedEnum):
    """Character sets for device flow user codes. `.protocol` holds the characters."""

    BASE20 = ("BASE20", 1, "BCDFGHJKLMNPQRSTVWXZ")
    NUMERIC = ("NUMERIC", 2, "0123456789")

    @property
    def characters(self) -> str:
        return self.protocol or ""


class UserIdentificationHintType(CodedEnum):
    ID_TOKEN_HINT = ("ID_TOKEN_HINT", 1, "id_token_hint")
    LOGIN_HINT = ("LOGIN_HINT", 2, "login_hint")
    LOGIN_HINT_TOKEN = ("LOGIN_HINT_TOKEN", 3, "login_hint_token")


class TokenStatus(StrEnum):
    """Filter for token listings."""

    VALID = "VALID"
    INVALID = "INVALID"
    ALL = "ALL"


class HokMethod(StrEnum):
    """Holder-of-key binding methods."""

    MTLS = "MTLS"
    OAUTB = "OAUTB"


class ClientSource(StrEnum):
    """How a client came to be known to the service."""

    STATIC_REGISTRATION = "STATIC_REGISTRATION"
    DYNAMIC_REGISTRATION = "DYNAMIC_REGISTRATION"
    AUTOMATIC_REGISTRATION = "AUTOMATIC_REGISTRATION"
    EXPLICIT_REGISTRATION = "EXPLICIT_REGISTRATION"
    METADATA_DOCUMENT = "METADATA_DOCUMENT"
