"""Prompts del juez por criterio."""

from swot_scorer.scoring.scale import FIBONACCI_SCALE

_SCALE_TEXT = ",".join(str(v) for v in FIBONACCI_SCALE)

CRITERION_JUDGE_PROMPT = f"""Score ONE single SWOT criterion numerically on a Fibonacci scale.
Allowed values: 0 (irrelevant / cannot be judged) OR {_SCALE_TEXT}.
Higher means the criterion weighs more heavily in the decision.
Answer ONLY with compact JSON:
{{"score": <number>, "rationale": "<max 60 words>"}}"""

CRITERION_USER_TEMPLATE = 'Criterion: "{text}"'
