from typing import Protocol

from beacon.data import PriorRating, Usage


class ClaimRegistry(Protocol):
    """Interface for looking up prior fact-check ratings of a claim."""

    async def search(self, query: str) -> tuple[list[PriorRating], Usage]:
        """Find prior ratings for a claim.

        Args:
            query: The claim text.

        Returns:
            Tuple of (ratings in registry order, usage). An empty list means
            the registry has no entry for the claim.

        Raises:
            UpstreamTransportError: If the registry could not be reached.
        """
        ...
