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

from authlete_dto.dto import CredentialIssuerMetadata, CredentialSingleIssueResponse
from authlete_dto.exceptions import MalformedDataError


def test_issuer_metadata_is_empty() -> None:
    """Test that metadata without endpoints is empty."""
    assert CredentialIssuerMetadata().is_empty()
    assert not CredentialIssuerMetadata(credential_issuer="https://issuer.example.com").is_empty()
    assert not CredentialIssuerMetadata(credentials_supported="[]").is_empty()


def test_issuer_metadata_to_map() -> None:
    """Test the published form of the metadata."""
    metadata = CredentialIssuerMetadata(
        credential_issuer="https://issuer.example.com",
        credential_endpoint="https://issuer.example.com/credential",
        credentials_supported='[{"format":"jwt_vc_json","id":"IdentityCredential"}]',
    )
    assert metadata.to_map() == {
        "credential_issuer": "https://issuer.example.com",
        "credential_endpoint": "https://issuer.example.com/credential",
        "credentials_supported": [{"format": "jwt_vc_json", "id": "IdentityCredential"}],
    }


def test_issuer_metadata_to_map_empty() -> None:
    """Test that empty metadata publishes an empty mapping."""
    assert CredentialIssuerMetadata().to_map() == {}


def test_issuer_metadata_wire_form_has_only_metadata_fields() -> None:
    """Test that the wire form carries exactly the six metadata properties."""
    metadata = CredentialIssuerMetadata(
        credential_issuer="https://issuer.example.com",
        authorization_server="https://as.example.com",
        credential_endpoint="https://issuer.example.com/credential",
        batch_credential_endpoint="https://issuer.example.com/batch_credential",
        deferred_credential_endpoint="https://issuer.example.com/deferred_credential",
        credentials_supported="[]",
    )
    assert set(metadata.to_dict()) == {
        "credentialIssuer",
        "authorizationServer",
        "credentialEndpoint",
        "batchCredentialEndpoint",
        "deferredCredentialEndpoint",
        "credentialsSupported",
    }
    assert "credential_response_encryption" not in metadata.to_map()


@pytest.mark.parametrize("value", ['{"format":"jwt_vc_json"}', "not json"])
def test_issuer_metadata_malformed_credentials(value: str) -> None:
    """Test that credentials_supported must hold a JSON array."""
    metadata = CredentialIssuerMetadata(credentials_supported=value)
    with pytest.raises(MalformedDataError, match="'credentialsSupported' property failed to be parsed"):
        metadata.to_map()


def test_issuer_metadata_wire_names() -> None:
    """Test the camelCase form of the metadata."""
    metadata = CredentialIssuerMetadata.model_validate(
        {
            "credentialIssuer": "https://issuer.example.com",
            "deferredCredentialEndpoint": "https://issuer.example.com/deferred",
        }
    )
    assert metadata.deferred_credential_endpoint == "https://issuer.example.com/deferred"
    assert CredentialIssuerMetadata.schema_version == 2


def test_issuer_metadata_copy_of() -> None:
    """Test that copy_of() yields an equal, independent instance."""
    original = CredentialIssuerMetadata(
        credential_issuer="https://issuer.example.com",
        credentials_supported="[]",
    )
    copy = CredentialIssuerMetadata.copy_of(original)
    assert copy == original
    assert copy is not original

    copy.set(credential_issuer="https://other.example.com")
    assert original.credential_issuer == "https://issuer.example.com"


def test_single_issue_actions() -> None:
    """Test the deferred issuance actions of the credential response."""
    response = CredentialSingleIssueResponse.from_json('{"action":"ACCEPTED","transactionId":"tx-1"}')
    assert response.action is CredentialSingleIssueResponse.Action.ACCEPTED
    assert response.transaction_id == "tx-1"
