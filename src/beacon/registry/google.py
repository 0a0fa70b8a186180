import logging
import os
from typing import Any

import httpx

from beacon.data import PriorRating, Usage
from beacon.errors import ErrorCategory, UpstreamTransportError

logger = logging.getLogger(__name__)

FACT_CHECK_API_URL = "https://factchecktools.googleapis.com/v1alpha1/claims:search"


def _publisher_name(review: dict[str, Any]) -> str:
    publisher = review.get("publisher")
    if isinstance(publisher, dict):
        name = publisher.get("name")
    else:
        name = publisher
    if isinstance(name, str) and name.strip():
        return name.strip()
    return "Unknown"


def _parse_claims(data: Any) -> list[PriorRating]:
    """Take the first review of each claim.

    Claims without a usable review are skipped, as are entries that are not
    JSON objects.

    Raises:
        UpstreamTransportError: If the body is not a JSON object or ``claims``
            is not a list.
    """
    if not isinstance(data, dict):
        raise UpstreamTransportError("factcheck", "unexpected response shape")
    claims = data.get("claims") or []
    if not isinstance(claims, list):
        raise UpstreamTransportError("factcheck", "unexpected response shape")

    ratings: list[PriorRating] = []
    for claim in claims:
        if not isinstance(claim, dict):
            logger.warning("Skipping malformed claim entry: %r", claim)
            continue
        reviews = claim.get("claimReview")
        if not isinstance(reviews, list) or not reviews:
            continue
        review = reviews[0]
        if not isinstance(review, dict):
            continue
        rating = review.get("textualRating")
        if not isinstance(rating, str) or not rating.strip():
            continue
        claim_text = claim.get("text")
        url = review.get("url")
        ratings.append(
            PriorRating(
                textual_rating=rating,
                publisher=_publisher_name(review),
                claim_text=claim_text if isinstance(claim_text, str) else None,
                url=url if isinstance(url, str) else None,
            )
        )
    return ratings


class GoogleFactCheckRegistry:
    """Look up claims with the Google Fact Check Tools API.

    Args:
        api_key: API key (defaults to FACT_CHECK_API_KEY env var).
        language_code: Optional BCP-47 language filter.
        page_size: Maximum claims requested per lookup.
        timeout: Per-request timeout in seconds.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        language_code: str | None = None,
        page_size: int = 5,
        timeout: float = 30.0,
    ) -> None:
        self._api_key = api_key or os.environ.get("FACT_CHECK_API_KEY")
        if not self._api_key:
            raise ValueError(
                "Fact Check API key required. Pass api_key or set FACT_CHECK_API_KEY env var."
            )
        self._language_code = language_code
        self._page_size = page_size
        self._timeout = timeout

    async def search(self, query: str) -> tuple[list[PriorRating], Usage]:
        params: dict[str, str | int] = {
            "query": query,
            "pageSize": self._page_size,
            "key": self._api_key,  # type: ignore[dict-item]
        }
        if self._language_code:
            params["languageCode"] = self._language_code

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(FACT_CHECK_API_URL, params=params)
                response.raise_for_status()
                data = response.json()
        except httpx.TimeoutException as e:
            raise UpstreamTransportError(
                "factcheck", "request timed out", category=ErrorCategory.TIMEOUT
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamTransportError("factcheck", str(e)) from e
        except ValueError as e:
            raise UpstreamTransportError("factcheck", "response body is not JSON") from e

        ratings = _parse_claims(data)
        logger.debug("Registry returned %d rating(s) for %r", len(ratings), query)
        return (ratings, Usage(registry_requests=1))
