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
Token Status Lists: status entries of issued tokens and the lists published from them.

`TslEntriesResponse`, `TslGetRequest` and `TslGetResponse` are older names kept
as aliases of the models they duplicate.
"""

from enum import StrEnum

from authlete_dto.base import ApiResponse, AuthleteModel
from authlete_dto.types import TslFormat, TslTokenStatus


class TslEntry(AuthleteModel):
    """The status of one token, at `token_index` in the status list."""

    token_index: int | None = None
    token_id: str | None = None
    token_status: TslTokenStatus | None = None
    used: bool = False


class GetTslEntriesResponse(AuthleteModel):
    """A page of status list entries."""

    start: int | None = None
    end: int | None = None
    total_count: int | None = None
    tsl_entries: list[TslEntry] | None = None


TslEntriesResponse = GetTslEntriesResponse


class TslConfigData(AuthleteModel):
    """
    Status list settings of a service.

    Attributes:
        format (TslFormat | None): Format of the published list.
        validity (int | None): Lifetime of a published list in seconds.
        publish_frequency (int | None): Seconds between publications.
        time_to_live (int | None): Value of the `ttl` claim in seconds.
        publish_endpoint (str | None): Where published lists are served.
    """

    format: TslFormat | None = None
    validity: int | None = None
    publish_frequency: int | None = None
    time_to_live: int | None = None
    publish_endpoint: str | None = None


class TslPublishConfig(AuthleteModel):
    service_number: int | None = None
    next_tsl_publish_time: int | None = None


class TslPublishConfigInfo(AuthleteModel):
    service_id: int | None = None
    next_tsl_publish_time: int | None = None
    format: TslFormat | None = None


class TslPublishConfigsResponse(ApiResponse):
    tsl_publish_configs: list[TslPublishConfig] | None = None


class TslPublishConfigsListResponse(ApiResponse):
    class Action(StrEnum):
        OK = "OK"

    action: Action | None = None
    info: list[TslPublishConfigInfo] | None = None


class GetPublishedTslRequest(AuthleteModel):
    service_number: int | None = None


class GetPublishedTslResponse(AuthleteModel):
    """The latest published status list. `format` names the encoding of `tsl`."""

    format: str | None = None
    tsl: str | None = None


TslGetRequest = GetPublishedTslRequest
TslGetResponse = GetPublishedTslResponse


class TslPublishRequest(AuthleteModel):
    format: TslFormat | None = None


class TslPublishResponse(ApiResponse):
    class Action(StrEnum):
        OK = "OK"
        FORBIDDEN = "FORBIDDEN"
        INVALID_TSL_FORMAT = "INVALID_TSL_FORMAT"

    action: Action | None = None
    tsl: str | None = None


class TslRequest(AuthleteModel):
    format: TslFormat | None = None


class TslResponse(ApiResponse):
    class Action(StrEnum):
        OK = "OK"
        FORBIDDEN = "FORBIDDEN"
        INVALID_TSL_FORMAT = "INVALID_TSL_FORMAT"
        NO_TSL_FOUND = "NO_TSL_FOUND"

    action: Action | None = None
    response_content: str | None = None


class TslTokenStatusUpdateRequest(AuthleteModel):
    """Changes the status of the token identified by `token_id` or `token_index`."""

    token_id: str | None = None
    token_status: TslTokenStatus | None = None
    token_index: int | None = None


class TslTokenStatusUpdateResponse(ApiResponse):
    class Action(StrEnum):
        OK = "OK"
        FORBIDDEN = "FORBIDDEN"

    action: Action | None = None


class TslUnusedIndexesRequest(AuthleteModel):
    """
    Tops up the pool of unused status list indexes: when fewer than
    `unused_token_indexes_left` remain, `unused_token_indexes_add` are added.
    """

    unused_token_indexes_left: int | None = None
    unused_token_indexes_add: int | None = None


class TslUnusedIndexesResponse(ApiResponse):
    class Action(StrEnum):
        OK = "OK"
        FORBIDDEN = "FORBIDDEN"

    action: Action | None = None


class TslPopulateUnusedIndexesRequest(AuthleteModel):
    service_number: int | None = None
