"""
Unit tests for CriterionJudge (service side of /api/ai-score).
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from swot_scorer.schemas import Area, ScoringRequest
from swot_scorer.services.judge import CriterionJudge, JudgmentParseError, parse_json_response


def _request(**areas) -> ScoringRequest:
    criteria = {key: [] for key in "SWOT"}
    for key, items in areas.items():
        criteria[key] = [{"id": cid, "text": text} for cid, text in items]
    return ScoringRequest.model_validate({
        "scenario": {"name": "Open second office"},
        "criteria": criteria,
        "mode": "deep_research",
    })


class TestParseJsonResponse:

    def test_plain_json(self):
        assert parse_json_response('{"score": 8}') == {"score": 8}

    def test_fenced_json(self):
        assert parse_json_response('```json\n{"score": 3}\n```') == {"score": 3}

    def test_invalid_or_non_object(self):
        assert parse_json_response("eight") is None
        assert parse_json_response("[8]") is None


class TestJudge:

    @pytest.mark.asyncio
    async def test_numeric_score_is_snapped(self, mock_llm, mock_llm_response):
        mock_llm.ainvoke.return_value = mock_llm_response('{"score": 40, "rationale": "big"}')

        assert await CriterionJudge(llm=mock_llm).judge("Strong brand") == 34

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ['{"score": "high"}', '{"rationale": "none"}', '{"score": null}', '{"score": 0}'])
    async def test_missing_or_non_numeric_score_counts_as_zero(self, mock_llm, mock_llm_response, content):
        mock_llm.ainvoke.return_value = mock_llm_response(content)

        assert await CriterionJudge(llm=mock_llm).judge("Unclear") == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ['{"score": Infinity}', '{"score": NaN}', '{"score": 1e400}'])
    async def test_non_finite_score_counts_as_zero(self, mock_llm, mock_llm_response, content):
        mock_llm.ainvoke.return_value = mock_llm_response(content)

        assert await CriterionJudge(llm=mock_llm).judge("Unbounded upside") == 1

    @pytest.mark.asyncio
    async def test_unparseable_reply_raises(self, mock_llm, mock_llm_response):
        mock_llm.ainvoke.return_value = mock_llm_response("I would say eight")

        with pytest.raises(JudgmentParseError):
            await CriterionJudge(llm=mock_llm).judge("Unclear")

    @pytest.mark.asyncio
    async def test_prompt_contains_criterion_text(self, mock_llm):
        await CriterionJudge(llm=mock_llm, max_text_chars=10).judge("Experienced team abroad")

        messages = mock_llm.ainvoke.call_args[0][0]
        assert "Fibonacci" in messages[0].content
        assert messages[-1].content == 'Criterion: "Experience"'


class TestScoreRequest:

    @pytest.mark.asyncio
    async def test_every_criterion_is_judged(self, mock_llm):
        request = _request(S=[("c1", "a"), ("c2", "b")], T=[("c3", "c")])

        scores = await CriterionJudge(llm=mock_llm).score_request(request)

        assert scores == {
            Area.STRENGTH: {"c1": 5, "c2": 5},
            Area.WEAKNESS: {},
            Area.OPPORTUNITY: {},
            Area.THREAT: {"c3": 5},
        }
        assert mock_llm.ainvoke.call_count == 3

    @pytest.mark.asyncio
    async def test_failed_judgment_is_omitted(self, mock_llm_response):
        async def _ainvoke(messages):
            if "broken" in messages[-1].content:
                raise RuntimeError("rate limited")
            if "garbled" in messages[-1].content:
                return mock_llm_response("not json")
            return mock_llm_response('{"score": 9}')

        llm = AsyncMock()
        llm.ainvoke.side_effect = _ainvoke
        request = _request(W=[("c1", "fine"), ("c2", "broken"), ("c3", "garbled")])

        scores = await CriterionJudge(llm=llm).score_request(request)

        assert scores[Area.WEAKNESS] == {"c1": 8}

    @pytest.mark.asyncio
    async def test_empty_request_returns_all_areas(self, mock_llm):
        scores = await CriterionJudge(llm=mock_llm).score_request(_request())

        assert set(scores) == {Area.STRENGTH, Area.WEAKNESS, Area.OPPORTUNITY, Area.THREAT}
        mock_llm.ainvoke.assert_not_called()

    @pytest.mark.asyncio
    async def test_batch_is_logged_with_area_label(self, mock_llm):
        logger = MagicMock()

        await CriterionJudge(llm=mock_llm, logger=logger).score_area(
            Area.OPPORTUNITY, _request(O=[("c1", "Grants")]).criteria.O
        )

        logger.batch.assert_called_once_with("Opportunities", 1, 1)
