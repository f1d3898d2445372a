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
Assertion processors: rules a service applies to the claims of incoming
assertions such as software statements.
"""

from authlete_dto.base import AuthleteModel
from authlete_dto.types import AssertionTarget, ClaimMatchOperation, ClaimRuleOperation


class ClaimRule(AuthleteModel):
    """
    A rule on one claim: it must be absent (PROHIBITED), present (PRESENT), or
    equal to `comparison_value` (EQUALS).
    """

    operation: ClaimRuleOperation | None = None
    claim_name: str | None = None
    comparison_value: str | None = None


class ClaimMatcher(AuthleteModel):
    operation: ClaimMatchOperation | None = None
    claim_name: str | None = None
    comparison_value: str | None = None


class AssertionProcessor(AuthleteModel):
    """
    Processing settings for one kind of assertion.

    Attributes:
        number (int | None): Sequential number assigned by Authlete.
        jwks (str | None): JWK Set verifying the assertion signatures, as a JSON string.
        target (AssertionTarget | None): Which assertions the processor applies to.
        claim_rules (list[ClaimRule] | None): Rules the assertion claims must satisfy.
        service_number (int | None): Number of the owning service.
    """

    number: int | None = None
    jwks: str | None = None
    target: AssertionTarget | None = None
    claim_rules: list[ClaimRule] | None = None
    service_number: int | None = None
