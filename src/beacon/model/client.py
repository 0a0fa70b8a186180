"""Uniform JSON-returning adapter over a generative text model."""

import json
import logging
import math
from typing import Any

from beacon.data import (
    BiasAnalysis,
    FactCheckVerdict,
    InitialAnalysis,
    ModelVerdict,
    PhishingAnalysis,
    Usage,
)
from beacon.errors import ModelParseError
from beacon.model.base import TextGenerator
from beacon.prompts import content_analysis_prompt, fact_check_prompt, phishing_prompt
from beacon.sanitize import extract_json_span

logger = logging.getLogger(__name__)


def _as_number(raw: object) -> float | None:
    """Interpret a model-provided number, or None when absent/unusable."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return float(raw)
    if isinstance(raw, str):
        try:
            return float(raw.strip())
        except ValueError:
            return None
    return None


def _clamped_number(raw: object, low: int, high: int) -> float | None:
    value = _as_number(raw)
    if value is None or not math.isfinite(value):
        return None
    return max(float(low), min(float(high), value))


def _clamped_int(raw: object, low: int, high: int) -> int | None:
    value = _clamped_number(raw, low, high)
    return None if value is None else round(value)


def _string_list(raw: object, limit: int) -> tuple[str, ...]:
    """Coerce a JSON array into at most ``limit`` non-blank strings."""
    if not isinstance(raw, list):
        return ()
    items: list[str] = []
    for item in raw:
        if isinstance(item, (dict, list)) or item is None:
            continue
        text = str(item).strip()
        if text:
            items.append(text)
    return tuple(items[:limit])


def _optional_str(raw: object) -> str | None:
    if raw is None:
        return None
    text = str(raw).strip()
    return text or None


def _require_object(payload: Any, what: str) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise ModelParseError(f"Expected a JSON object for {what}, got {type(payload).__name__}")
    return payload


def parse_initial_analysis(
    payload: Any, *, max_claims: int = 2, max_signals: int = 3
) -> InitialAnalysis:
    """Build an InitialAnalysis from the decoded model payload.

    A missing ``biasAnalysis.score`` stays ``None`` so the caller can apply
    its default; a present score of 0 is kept as 0.
    """
    data = _require_object(payload, "content analysis")
    raw_bias = data.get("biasAnalysis")
    if not isinstance(raw_bias, dict):
        raw_bias = {}

    bias = BiasAnalysis(
        score=_clamped_int(raw_bias.get("score"), 0, 100),
        explanation=_optional_str(raw_bias.get("explanation")),
        signals=_string_list(raw_bias.get("signals"), max_signals),
    )
    return InitialAnalysis(claims=_string_list(data.get("claims"), max_claims), bias=bias)


def parse_fact_check_verdict(payload: Any) -> FactCheckVerdict:
    """Decode a fact-check reply.

    A missing or blank ``verdict`` yields ``None``; any other unrecognised
    value is read as Unproven.
    """
    data = _require_object(payload, "fact-check verdict")
    raw_verdict = (_optional_str(data.get("verdict")) or "").lower()
    if not raw_verdict:
        return FactCheckVerdict(
            verdict=None, explanation=_optional_str(data.get("explanation")) or ""
        )
    verdict = next(
        (v for v in ModelVerdict if v.value.lower() == raw_verdict),
        ModelVerdict.UNPROVEN,
    )
    return FactCheckVerdict(
        verdict=verdict,
        explanation=_optional_str(data.get("explanation")) or "",
    )


def parse_phishing_analysis(payload: Any) -> PhishingAnalysis:
    data = _require_object(payload, "phishing analysis")
    risk_score = _clamped_number(data.get("riskScore"), 0, 10)
    if risk_score is None:
        raise ModelParseError("Phishing analysis is missing a numeric riskScore")
    # Whole numbers stay ints so the flag reads "7/10" rather than "7.0/10".
    return PhishingAnalysis(
        risk_score=int(risk_score) if risk_score.is_integer() else risk_score,
        explanation=_optional_str(data.get("explanation")) or "",
    )


class ModelClient:
    """Send prompts to a TextGenerator and decode the JSON they produce.

    Every call is independent: one outbound request, no retries, no session.

    Args:
        generator: The generative text model.
        max_claims: Maximum claims kept from the content analysis.
        max_signals: Maximum bias signals kept from the content analysis.
    """

    def __init__(
        self,
        generator: TextGenerator,
        *,
        max_claims: int = 2,
        max_signals: int = 3,
    ) -> None:
        self._generator = generator
        self._max_claims = max_claims
        self._max_signals = max_signals

    async def analyze(self, prompt: str) -> tuple[Any, Usage]:
        """Run a prompt and decode the first JSON value in the reply.

        Raises:
            ModelParseError: If the reply holds no JSON span, or the span
                does not decode.
            UpstreamTransportError: If the model call failed.
        """
        raw, usage = await self._generator.generate(prompt)

        span = extract_json_span(raw)
        if span is None:
            logger.warning("No JSON payload in model output: %.200r", raw)
            raise ModelParseError("Model output contained no JSON payload")
        try:
            payload = json.loads(span)
        except json.JSONDecodeError as e:
            logger.warning("Model output is not valid JSON: %s", e)
            raise ModelParseError(f"Model output is not valid JSON: {e}") from e
        return (payload, usage)

    async def analyze_content(self, text: str) -> tuple[InitialAnalysis, Usage]:
        """Extract verifiable claims and bias signals from ``text``."""
        prompt = content_analysis_prompt(
            text, max_claims=self._max_claims, max_signals=self._max_signals
        )
        payload, usage = await self.analyze(prompt)
        analysis = parse_initial_analysis(
            payload, max_claims=self._max_claims, max_signals=self._max_signals
        )
        return (analysis, usage)

    async def fact_check(self, claim: str) -> tuple[FactCheckVerdict, Usage]:
        """Ask the model to rate a single claim."""
        payload, usage = await self.analyze(fact_check_prompt(claim))
        return (parse_fact_check_verdict(payload), usage)

    async def detect_phishing(self, text: str) -> tuple[PhishingAnalysis, Usage]:
        payload, usage = await self.analyze(phishing_prompt(text))
        return (parse_phishing_analysis(payload), usage)
