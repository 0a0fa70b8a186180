"""Resolve a verdict for a single claim: registry first, model second."""

import logging

from beacon.data import ClaimVerdict, ModelRated, RegistryRated, Unresolved, Usage
from beacon.model.client import ModelClient
from beacon.registry.base import ClaimRegistry

logger = logging.getLogger(__name__)

# Checked in order; the first matching keyword decides.
RATING_CEILINGS: tuple[tuple[tuple[str, ...], int], ...] = (
    (("false", "distorted"), 5),
    (("misleading",), 20),
)
DEFAULT_RATING_CEILING = 30


def rating_ceiling(textual_rating: str) -> int:
    """Map a registry's textual rating to a score ceiling.

    Case-insensitive substring match: "false"/"distorted" caps at 5,
    "misleading" at 20, and any other rating at 30.
    """
    rating = textual_rating.lower()
    for keywords, ceiling in RATING_CEILINGS:
        if any(keyword in rating for keyword in keywords):
            return ceiling
    return DEFAULT_RATING_CEILING


class ClaimVerifier:
    """Verify claims against a claim registry, falling back to the model.

    The model is only consulted when the registry has no entry; it never
    overrides or corroborates a registry hit.

    Args:
        registry: Prior fact-check lookup service.
        model_client: Adapter used for the model fallback.
    """

    def __init__(self, registry: ClaimRegistry, model_client: ModelClient) -> None:
        self._registry = registry
        self._model_client = model_client

    async def verify(self, claim: str) -> tuple[ClaimVerdict, Usage]:
        """Resolve a verdict for one claim.

        Raises:
            ModelParseError: If the model fallback returned unusable output.
            UpstreamTransportError: If the registry or the model failed.
        """
        ratings, usage = await self._registry.search(claim)
        if ratings:
            prior = ratings[0]
            ceiling = rating_ceiling(prior.textual_rating)
            logger.info(
                "Registry rated claim %r as %r (%s), ceiling %d",
                claim,
                prior.textual_rating,
                prior.publisher,
                ceiling,
            )
            verdict = RegistryRated(
                rating=prior.textual_rating, publisher=prior.publisher, ceiling=ceiling
            )
            return (verdict, usage)

        fact_check, model_usage = await self._model_client.fact_check(claim)
        usage += model_usage
        if fact_check.verdict is None:
            logger.info("Model gave no verdict for claim %r", claim)
            return (Unresolved(), usage)
        logger.info("Model rated claim %r as %s", claim, fact_check.verdict)
        return (ModelRated(verdict=fact_check.verdict, explanation=fact_check.explanation), usage)
