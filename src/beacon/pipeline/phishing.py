"""Phishing detection pipeline."""

import asyncio
import logging
import time

from beacon.data import Credibility, CredibilityResult, Flag, Overall, Usage
from beacon.errors import BeaconError
from beacon.model.client import ModelClient
from beacon.pipeline.base import error_result
from beacon.run_logger import RunLogger
from beacon.scoring import classify

logger = logging.getLogger(__name__)

CONTEXT = "Phishing Detection"
PHISHING_RISK_THRESHOLD = 40


class PhishingPipeline:
    """Rate a piece of text for phishing signals with a single model call.

    The model's 0-10 risk score maps to a credibility score of
    ``100 - risk * 10``; anything below 40 is a risk.

    Args:
        model_client: Adapter for the phishing analysis.
        max_text_length: Texts are truncated to this many characters.
        request_timeout: Overall deadline in seconds (None for no deadline).
        run_logger: Optional RunLogger for intermediate result logging.
    """

    def __init__(
        self,
        model_client: ModelClient,
        *,
        max_text_length: int = 4000,
        request_timeout: float | None = None,
        run_logger: RunLogger | None = None,
    ) -> None:
        self._model_client = model_client
        self._max_length = max_text_length
        self._request_timeout = request_timeout
        self._run_logger = run_logger

    async def run(self, text: str) -> tuple[CredibilityResult, Usage]:
        """Scan ``text`` for phishing signals.

        Raises:
            ValueError: If ``text`` is empty.
        """
        if not text:
            raise ValueError("Text is required for phishing analysis.")

        record = self._run_logger.start_run("phishing", text) if self._run_logger else None
        usage = Usage()

        try:
            t0 = time.monotonic()
            async with asyncio.timeout(self._request_timeout):
                analysis, usage = await self._model_client.detect_phishing(
                    text[: self._max_length]
                )
            if self._run_logger:
                self._run_logger.log_stage(
                    record,
                    stage="phishing_analysis",
                    component=type(self._model_client).__name__,
                    input_data={"text_length": len(text)},
                    output_data=analysis,
                    usage=usage,
                    duration_seconds=time.monotonic() - t0,
                )

            score = round(100 - analysis.risk_score * 10)
            result = CredibilityResult(
                overall=Overall.RISK if score < PHISHING_RISK_THRESHOLD else Overall.CLEAN,
                flags=(
                    Flag(
                        title=f"AI Phishing Scan (Risk: {analysis.risk_score}/10)",
                        reasons=(analysis.explanation,),
                    ),
                ),
                credibility=Credibility(score=score, label=classify(score)),
            )
        except (BeaconError, TimeoutError) as e:
            logger.error("Error in %s: %s", CONTEXT, e, exc_info=e)
            result = error_result(e, CONTEXT)

        if self._run_logger:
            self._run_logger.finish_run(record, result, usage)
        return (result, usage)
