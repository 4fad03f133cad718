"""
Custom exceptions for the SWOT scenario scorer.

This module provides a hierarchy of exceptions for consistent error handling
across the application. All exceptions inherit from SwotScorerError.

Example:
    try:
        await orchestrator.score_all(scenario, set_score)
    except EndpointRejectedError as e:
        logger.error(f"Scoring rejected: {e}")
"""

from typing import Optional


class SwotScorerError(Exception):
    """
    Base exception class for all scorer errors.

    Attributes:
        message: Human-readable description of the error.
        details: Optional additional context for debugging.
    """

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation with optional details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# SCORING ENDPOINT ERRORS
# =============================================================================


class ScoringEndpointError(SwotScorerError):
    """
    Base class for failures of a single scoring attempt.

    Every subclass is terminal for the attempt: nothing is retried and no
    criterion score is written.

    Attributes:
        endpoint: URL of the scoring endpoint that was called.
    """

    def __init__(self, message: str, endpoint: Optional[str] = None, details: Optional[str] = None) -> None:
        self.endpoint = endpoint
        enhanced_message = f"[Scoring] {message}"
        if endpoint:
            enhanced_message = f"{enhanced_message} (endpoint: {endpoint})"
        super().__init__(enhanced_message, details)


class EndpointUnreachableError(ScoringEndpointError):
    """
    Raised when the scoring endpoint cannot be reached at the transport level.

    Attributes:
        original_error: The underlying transport exception.
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        original_error: Optional[Exception] = None,
        details: Optional[str] = None,
    ) -> None:
        self.original_error = original_error
        message = "Scoring endpoint unreachable"
        if original_error:
            message = f"{message} | Caused by: {type(original_error).__name__}: {str(original_error)[:200]}"
        super().__init__(message, endpoint=endpoint, details=details)


class EndpointRejectedError(ScoringEndpointError):
    """
    Raised when the scoring endpoint answers with a non-2xx status.

    Attributes:
        status_code: HTTP status code of the response.
        reason_phrase: HTTP status text of the response.
        body: Response body, verbatim.
    """

    def __init__(
        self,
        status_code: int,
        reason_phrase: str = "",
        body: str = "",
        endpoint: Optional[str] = None,
        body_max_chars: int = 2000,
    ) -> None:
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        self.body = body

        message = f"Scoring endpoint rejected the request: HTTP {status_code} {reason_phrase}".rstrip()
        excerpt = body[:body_max_chars] if body else None
        super().__init__(message, endpoint=endpoint, details=excerpt)


class MalformedResponseError(ScoringEndpointError):
    """
    Raised when a successful response does not match the expected shape.

    Attributes:
        reason: What was wrong with the body.
    """

    def __init__(
        self,
        reason: str,
        endpoint: Optional[str] = None,
        details: Optional[str] = None,
    ) -> None:
        self.reason = reason
        super().__init__(f"Malformed scoring response: {reason}", endpoint=endpoint, details=details)


# =============================================================================
# STORE ERRORS
# =============================================================================


class ScenarioNotFoundError(SwotScorerError):
    """Raised when a scenario id is not present in the store."""

    def __init__(self, scenario_id: str) -> None:
        self.scenario_id = scenario_id
        super().__init__(f"Scenario '{scenario_id}' not found")


class CriterionNotFoundError(SwotScorerError):
    """Raised when a criterion id is not present in the given area."""

    def __init__(self, scenario_id: str, area: str, criterion_id: str) -> None:
        self.scenario_id = scenario_id
        self.area = area
        self.criterion_id = criterion_id
        super().__init__(f"Criterion '{criterion_id}' not found in area {area} of scenario '{scenario_id}'")


class LastScenarioError(SwotScorerError):
    """Raised when deleting the only remaining scenario."""

    def __init__(self, scenario_id: str) -> None:
        self.scenario_id = scenario_id
        super().__init__(
            f"Scenario '{scenario_id}' is the last remaining scenario and cannot be deleted"
        )


class InvalidScoreError(SwotScorerError):
    """Raised when an explicit score is not 0 or a scale member."""

    def __init__(self, score: int) -> None:
        self.score = score
        super().__init__(f"Score {score} is not an allowed scale value")
