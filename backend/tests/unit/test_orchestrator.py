"""
Unit tests for ExternalScoringOrchestrator.

The scoring endpoint is an ``httpx.MockTransport``; score writes go to a
recording callback, so every test can assert exactly what was applied.
"""

import json
from unittest.mock import MagicMock

import httpx
import pytest

from swot_scorer.core.exceptions import (
    EndpointRejectedError,
    EndpointUnreachableError,
    MalformedResponseError,
)
from swot_scorer.schemas import Area
from swot_scorer.scoring.orchestrator import ExternalScoringOrchestrator, build_scoring_request

ENDPOINT = "http://scoring.test/api/ai-score"


@pytest.fixture
def scenario(make_scenario):
    return make_scenario(
        name="Open second office",
        description="Expand to Munich",
        S=[("c1", "Strong brand", None), ("c2", "Experienced team", 5)],
        W=[("c3", "Thin margins", 8)],
        T=[("c4", "Local competitor", None)],
    )


@pytest.fixture
def writes():
    """Recording score setter: list of (area, criterion_id, score)."""
    recorded = []

    def _set_score(area, criterion_id, score):
        recorded.append((area, criterion_id, score))

    _set_score.recorded = recorded
    return _set_score


def _orchestrator(client) -> ExternalScoringOrchestrator:
    return ExternalScoringOrchestrator(client=client, endpoint=ENDPOINT, body_max_chars=50)


class TestRequestContract:

    def test_build_request_sends_only_id_and_text(self, scenario):
        body = build_scoring_request(scenario).model_dump(mode="json")

        assert body["scenario"] == {"name": "Open second office", "description": "Expand to Munich"}
        assert body["criteria"]["S"] == [
            {"id": "c1", "text": "Strong brand"},
            {"id": "c2", "text": "Experienced team"},
        ]
        assert body["criteria"]["O"] == []
        assert body["scale"] == [1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144, 233, 377, 610, 987, 1597]
        assert body["mode"] == "deep_research"

    @pytest.mark.asyncio
    async def test_posts_json_to_endpoint(self, scenario, writes, endpoint_client):
        client = endpoint_client(lambda request: httpx.Response(200, json={}))

        await _orchestrator(client).score_all(scenario, writes)

        (request,) = client.requests_seen
        assert request.method == "POST"
        assert str(request.url) == ENDPOINT
        sent = json.loads(request.content)
        assert set(sent["criteria"]) == {"S", "W", "O", "T"}
        assert "score" not in sent["criteria"]["W"][0]


class TestSuccessfulScoring:

    @pytest.mark.asyncio
    async def test_only_returned_criterion_is_written(self, scenario, writes, endpoint_client):
        """A score only for c1 sets c1 to snap(value) and touches nothing else."""
        client = endpoint_client(lambda request: httpx.Response(200, json={"S": {"c1": 7}}))

        applied = await _orchestrator(client).score_all(scenario, writes)

        assert writes.recorded == [(Area.STRENGTH, "c1", 8)]
        assert applied[Area.STRENGTH] == {"c1": 8}
        assert applied[Area.WEAKNESS] == {}

    @pytest.mark.asyncio
    async def test_all_values_are_snapped(self, scenario, writes, endpoint_client):
        payload = {"S": {"c1": 0, "c2": 4}, "W": {"c3": 2000}, "T": {"c4": 13.0}}
        client = endpoint_client(lambda request: httpx.Response(200, json=payload))

        await _orchestrator(client).score_all(scenario, writes)

        assert writes.recorded == [
            (Area.STRENGTH, "c1", 1),
            (Area.STRENGTH, "c2", 3),
            (Area.WEAKNESS, "c3", 1597),
            (Area.THREAT, "c4", 13),
        ]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bad_value", ["NaN", "Infinity", '"8"', "null", "true", "[3]", '{"v": 3}'])
    async def test_non_numeric_values_leave_criterion_unchanged(
        self, scenario, writes, endpoint_client, bad_value
    ):
        body = '{"S": {"c1": %s, "c2": 21}}' % bad_value
        client = endpoint_client(
            lambda request: httpx.Response(200, content=body, headers={"content-type": "application/json"})
        )

        await _orchestrator(client).score_all(scenario, writes)

        assert writes.recorded == [(Area.STRENGTH, "c2", 21)]

    @pytest.mark.asyncio
    async def test_integer_beyond_float_range_snaps_to_top(self, scenario, writes, endpoint_client):
        body = '{"S": {"c1": 5, "c2": 1%s}}' % ("0" * 400)
        client = endpoint_client(
            lambda request: httpx.Response(200, content=body, headers={"content-type": "application/json"})
        )

        applied = await _orchestrator(client).score_all(scenario, writes)

        assert writes.recorded == [(Area.STRENGTH, "c1", 5), (Area.STRENGTH, "c2", 1597)]
        assert applied[Area.STRENGTH] == {"c1": 5, "c2": 1597}

    @pytest.mark.asyncio
    async def test_ids_in_wrong_area_or_unknown_are_ignored(self, scenario, writes, endpoint_client):
        payload = {"O": {"c1": 5}, "S": {"ghost": 5}, "X": {"c1": 3}}
        client = endpoint_client(lambda request: httpx.Response(200, json=payload))

        applied = await _orchestrator(client).score_all(scenario, writes)

        assert writes.recorded == []
        assert all(not scores for scores in applied.values())


class TestFailedScoring:

    @pytest.mark.asyncio
    async def test_rejection_writes_nothing_and_keeps_status(self, scenario, writes, endpoint_client):
        client = endpoint_client(lambda request: httpx.Response(503, text="model overloaded"))

        with pytest.raises(EndpointRejectedError) as exc_info:
            await _orchestrator(client).score_all(scenario, writes)

        assert writes.recorded == []
        assert exc_info.value.status_code == 503
        assert exc_info.value.reason_phrase == "Service Unavailable"
        assert exc_info.value.body == "model overloaded"
        assert "503" in str(exc_info.value)
        assert "model overloaded" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_rejection_body_excerpt_is_truncated(self, scenario, writes, endpoint_client):
        client = endpoint_client(lambda request: httpx.Response(500, text="x" * 500))

        with pytest.raises(EndpointRejectedError) as exc_info:
            await _orchestrator(client).score_all(scenario, writes)

        assert exc_info.value.body == "x" * 500
        assert exc_info.value.details == "x" * 50

    @pytest.mark.asyncio
    async def test_transport_failure_is_unreachable(self, scenario, writes, endpoint_client):
        def _refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = endpoint_client(_refuse)

        with pytest.raises(EndpointUnreachableError) as exc_info:
            await _orchestrator(client).score_all(scenario, writes)

        assert writes.recorded == []
        assert isinstance(exc_info.value.original_error, httpx.ConnectError)
        assert "connection refused" in str(exc_info.value)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "content",
        [b"not json", b"", b"[1, 2]", b'"text"', b'{"S": [1, 2]}', b'{"W": null}'],
    )
    async def test_malformed_body_writes_nothing(self, scenario, writes, endpoint_client, content):
        client = endpoint_client(lambda request: httpx.Response(200, content=content))

        with pytest.raises(MalformedResponseError):
            await _orchestrator(client).score_all(scenario, writes)

        assert writes.recorded == []

    @pytest.mark.asyncio
    async def test_no_retry_after_failure(self, scenario, writes, endpoint_client):
        client = endpoint_client(lambda request: httpx.Response(502))

        with pytest.raises(EndpointRejectedError):
            await _orchestrator(client).score_all(scenario, writes)

        assert len(client.requests_seen) == 1

    @pytest.mark.asyncio
    async def test_failures_are_logged_as_errors(self, scenario, writes, endpoint_client):
        logger = MagicMock()
        client = endpoint_client(lambda request: httpx.Response(500, text="boom"))
        orchestrator = ExternalScoringOrchestrator(client=client, endpoint=ENDPOINT, logger=logger)

        with pytest.raises(EndpointRejectedError) as exc_info:
            await orchestrator.score_all(scenario, writes)

        logger.error.assert_called_once_with("Rejected", exc_info.value)
