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

from authlete_dto import ActionResponse
from authlete_dto.dto import (
    BackchannelAuthenticationCompleteResponse,
    DeviceVerificationResponse,
    GMRequest,
    GMResponse,
    GetPublishedTslResponse,
    GetTslEntriesResponse,
    HskListResponse,
    InfoResponse,
    NativeSsoResponse,
    PushedAuthReqResponse,
    TokenBatchStatus,
    TokenCreateBatchStatusResponse,
    TokenRevokeRequest,
    TslConfigData,
    TslEntriesResponse,
    TslGetResponse,
)
from authlete_dto.types import GMAction, TslFormat, TslTokenStatus


@pytest.mark.parametrize(
    ("model", "action"),
    [
        (GMResponse, "NO_CONTENT"),
        (PushedAuthReqResponse, "PAYLOAD_TOO_LARGE"),
        (NativeSsoResponse, "CALLER_ERROR"),
        (BackchannelAuthenticationCompleteResponse, "NOTIFICATION"),
    ],
)
def test_action_response_round_trip(model: type[GMResponse], action: str) -> None:
    """Test that endpoint responses carry their action and body through JSON."""
    response = model.from_json(f'{{"action":"{action}","responseContent":"{{}}"}}')
    assert response.action == action
    assert response.response_content == "{}"
    assert isinstance(response, ActionResponse)
    assert model.from_json(response.to_json()) == response


def test_device_verification_client_identifier() -> None:
    """Test the client identifier of a device verification response."""
    response = DeviceVerificationResponse.model_validate(
        {"action": "VALID", "clientId": 42, "clientIdAlias": "tv-app", "clientIdAliasUsed": True}
    )
    assert response.action is DeviceVerificationResponse.Action.VALID
    assert response.client_identifier == "tv-app"


def test_grant_management_request() -> None:
    """Test that the grant management action travels by name."""
    request = GMRequest(gm_action=GMAction.QUERY, grant_id="g-1", dpop_nonce_required=True)
    assert request.to_dict() == {"gmAction": "QUERY", "grantId": "g-1", "dpopNonceRequired": True}
    assert request.gm_action is not None and request.gm_action.protocol == "query"


def test_token_revoke_request() -> None:
    """Test the wire names of the token revocation request."""
    request = TokenRevokeRequest(client_identifier="my-client", subject="user-1")
    assert request.to_dict() == {"clientIdentifier": "my-client", "subject": "user-1"}


def test_token_batch_status() -> None:
    """Test parsing the status of a token creation batch."""
    response = TokenCreateBatchStatusResponse.model_validate(
        {"status": {"batchKind": "CREATE", "requestId": "r-1", "result": "SUCCEEDED", "tokenCount": 100}}
    )
    assert response.status is not None
    assert response.status.batch_kind is TokenBatchStatus.BatchKind.CREATE
    assert response.status.result is TokenBatchStatus.Result.SUCCEEDED
    assert response.status.token_count == 100


def test_info_response() -> None:
    """Test the server information response."""
    info = InfoResponse.from_json('{"version":"3.0.0","features":["VCI","FEDERATION"]}')
    assert info.version == "3.0.0"
    assert info.features == ["VCI", "FEDERATION"]


def test_hsk_list_response() -> None:
    """Test parsing a list of HSM keys."""
    response = HskListResponse.model_validate({"action": "SUCCESS", "hsks": [{"kty": "EC", "kid": "k1"}]})
    assert response.hsks is not None and response.hsks[0].kid == "k1"


def test_tsl_aliases() -> None:
    """Test that the older status list names refer to the same models."""
    assert TslEntriesResponse is GetTslEntriesResponse
    assert TslGetResponse is GetPublishedTslResponse


def test_tsl_entries() -> None:
    """Test parsing a page of status list entries."""
    page = GetTslEntriesResponse.model_validate(
        {"totalCount": 1, "tslEntries": [{"tokenIndex": 3, "tokenStatus": "INVALID", "used": True}]}
    )
    assert page.tsl_entries is not None
    assert page.tsl_entries[0].token_status is TslTokenStatus.INVALID


def test_tsl_config_copy() -> None:
    """Test copy construction of status list settings."""
    original = TslConfigData(format=TslFormat.JWT, validity=86400)
    copy = TslConfigData.copy_of(original)
    assert copy == original
    assert copy is not original
