"""Content credibility pipeline."""

import asyncio
import logging
import time

from beacon.data import ClaimVerdict, CredibilityResult, Usage
from beacon.errors import BeaconError
from beacon.model.client import ModelClient
from beacon.pipeline.base import SHORT_TEXT_RESULT, error_result
from beacon.run_logger import RunLogger, RunRecord
from beacon.scoring import DEFAULT_SCORE, ScoreState, aggregate
from beacon.verifier import ClaimVerifier

logger = logging.getLogger(__name__)

CONTEXT = "Content Analysis"


class ContentAnalysisPipeline:
    """Score the credibility of a piece of text.

    Flow:
    1. Texts shorter than ``min_text_length`` get a fixed neutral result
    2. One model call extracts claims and a bias analysis
    3. Each claim is verified (registry first, model fallback)
    4. Bias signals and verdicts are folded into a score and flags
    5. The score is labelled and the overall outcome decided

    Any failure in steps 2-3 aborts the request with the error result;
    flags gathered before the failure are dropped.

    Args:
        model_client: Adapter for the initial analysis.
        verifier: Per-claim verifier.
        min_text_length: Shorter texts bypass the analysis.
        max_text_length: Texts are truncated to this many characters.
        default_score: Starting score when the model gives no bias score.
        request_timeout: Overall deadline in seconds (None for no deadline).
        verify_claims_concurrently: Dispatch claim verifications together.
            Flags keep claim order either way.
        run_logger: Optional RunLogger for intermediate result logging.
    """

    def __init__(
        self,
        model_client: ModelClient,
        verifier: ClaimVerifier,
        *,
        min_text_length: int = 50,
        max_text_length: int = 4000,
        default_score: int = DEFAULT_SCORE,
        request_timeout: float | None = None,
        verify_claims_concurrently: bool = False,
        run_logger: RunLogger | None = None,
    ) -> None:
        self._model_client = model_client
        self._verifier = verifier
        self._min_length = min_text_length
        self._max_length = max_text_length
        self._default_score = default_score
        self._request_timeout = request_timeout
        self._concurrent = verify_claims_concurrently
        self._run_logger = run_logger

    async def run(self, text: str) -> tuple[CredibilityResult, Usage]:
        if len(text) < self._min_length:
            return (SHORT_TEXT_RESULT, Usage())

        record = self._run_logger.start_run("content", text) if self._run_logger else None
        usage = Usage()

        try:
            async with asyncio.timeout(self._request_timeout):
                state = await self._analyze(text[: self._max_length], usage, record)
            result = state.to_result()
        except (BeaconError, TimeoutError) as e:
            logger.error("Error in %s: %s", CONTEXT, e, exc_info=e)
            result = error_result(e, CONTEXT)

        if self._run_logger:
            self._run_logger.finish_run(record, result, usage)
        return (result, usage)

    async def _analyze(self, text: str, usage: Usage, record: RunRecord | None) -> ScoreState:
        t0 = time.monotonic()
        analysis, analysis_usage = await self._model_client.analyze_content(text)
        usage += analysis_usage
        if self._run_logger:
            self._run_logger.log_stage(
                record,
                stage="initial_analysis",
                component=type(self._model_client).__name__,
                input_data={"text_length": len(text)},
                output_data=analysis,
                usage=analysis_usage,
                duration_seconds=time.monotonic() - t0,
            )

        verdicts = await self._verify_all(list(analysis.claims), usage, record)
        findings = list(zip(analysis.claims, verdicts, strict=True))

        t0 = time.monotonic()
        state = aggregate(analysis.bias, findings, default_score=self._default_score)
        if self._run_logger:
            self._run_logger.log_stage(
                record,
                stage="aggregation",
                component="score_fold",
                input_data=findings,
                output_data=state,
                usage=None,
                duration_seconds=time.monotonic() - t0,
            )
        return state

    async def _verify_all(
        self, claims: list[str], usage: Usage, record: RunRecord | None
    ) -> list[ClaimVerdict]:
        """Verify claims, returning verdicts in claim order."""
        if not self._concurrent:
            verdicts: list[ClaimVerdict] = []
            for claim in claims:
                verdict, claim_usage = await self._verify(claim, record)
                usage += claim_usage
                verdicts.append(verdict)
            return verdicts

        tasks = [asyncio.create_task(self._verify(claim, record)) for claim in claims]
        try:
            results = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            raise
        for _, claim_usage in results:
            usage += claim_usage
        return [verdict for verdict, _ in results]

    async def _verify(
        self, claim: str, record: RunRecord | None
    ) -> tuple[ClaimVerdict, Usage]:
        t0 = time.monotonic()
        verdict, claim_usage = await self._verifier.verify(claim)
        if self._run_logger:
            self._run_logger.log_stage(
                record,
                stage="claim_verification",
                component=type(self._verifier).__name__,
                input_data=claim,
                output_data=verdict,
                usage=claim_usage,
                duration_seconds=time.monotonic() - t0,
            )
        return (verdict, claim_usage)
