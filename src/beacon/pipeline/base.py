"""Pipeline protocol and the fixed result shapes shared by pipelines."""

from typing import Protocol

from beacon.data import Credibility, CredibilityLabel, CredibilityResult, Flag, Overall, Usage
from beacon.errors import BeaconError, ErrorCategory

USER_MESSAGES: dict[ErrorCategory, str] = {
    ErrorCategory.TIMEOUT: "The analysis service timed out. Please try again later.",
    ErrorCategory.TRANSPORT: (
        "Could not connect to the analysis service. Please check your connection."
    ),
    ErrorCategory.UNEXPECTED: (
        "An unexpected error occurred during the analysis. Please try again later."
    ),
}

SHORT_TEXT_RESULT = CredibilityResult(
    overall=Overall.CLEAN,
    flags=(
        Flag(
            title="Content Too Short",
            reasons=("The provided text is too short for a meaningful analysis.",),
        ),
    ),
    credibility=Credibility(score=75, label=CredibilityLabel.MEDIUM),
)


def error_result(error: BaseException, context: str) -> CredibilityResult:
    """Build the uniform error contract.

    Only a generic message for the error's coarse category and the context
    tag are exposed; the exception detail is not.
    """
    if isinstance(error, BeaconError):
        category = error.category
    elif isinstance(error, TimeoutError):
        category = ErrorCategory.TIMEOUT
    else:
        category = ErrorCategory.UNEXPECTED
    return CredibilityResult(
        overall=Overall.ERROR,
        flags=(
            Flag(
                title="Analysis Failed",
                reasons=(USER_MESSAGES[category], f"Context: {context}"),
            ),
        ),
    )


class Pipeline(Protocol):
    """Interface for text analysis pipelines."""

    async def run(self, text: str) -> tuple[CredibilityResult, Usage]:
        """Analyze a piece of text.

        Args:
            text: The text to analyze.

        Returns:
            Tuple of (result contract, usage). Request-level failures are
            reported as an ``overall="error"`` result, not raised.
        """
        ...
