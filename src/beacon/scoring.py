"""Fold analysis signals into a credibility score, flags, and label.

The score is a running minimum: it starts at the bias score and every piece
of negative evidence can only lower it. Each step returns a new
``ScoreState``; nothing is mutated.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from functools import reduce

from beacon.data import (
    BiasAnalysis,
    ClaimVerdict,
    Credibility,
    CredibilityLabel,
    CredibilityResult,
    Flag,
    ModelRated,
    Overall,
    RegistryRated,
)

DEFAULT_SCORE = 75
BIAS_SIGNAL_CEILING = 40
RISK_THRESHOLD = 50

NEUTRAL_EXPLANATION = "The text appears neutral in tone."

# (minimum score, label), highest band first
LABEL_THRESHOLDS: tuple[tuple[int, CredibilityLabel], ...] = (
    (90, CredibilityLabel.EXCELLENT),
    (70, CredibilityLabel.HIGH),
    (40, CredibilityLabel.MEDIUM),
    (20, CredibilityLabel.LOW),
)


def classify(score: int) -> CredibilityLabel:
    """Map a 0-100 score to its credibility label."""
    for minimum, label in LABEL_THRESHOLDS:
        if score >= minimum:
            return label
    return CredibilityLabel.VERY_LOW


def overall_for(risk_detected: bool, score: int) -> Overall:
    if risk_detected or score < RISK_THRESHOLD:
        return Overall.RISK
    return Overall.CLEAN


@dataclass(frozen=True)
class ScoreState:
    """Accumulated score, flags in discovery order, and the risk marker."""

    score: int
    flags: tuple[Flag, ...] = ()
    risk_detected: bool = False

    def note(self, flag: Flag) -> "ScoreState":
        """Append an informational flag without touching score or risk."""
        return ScoreState(self.score, self.flags + (flag,), self.risk_detected)

    def cap(self, ceiling: int, flag: Flag) -> "ScoreState":
        """Record negative evidence: lower the score to ``ceiling`` at most."""
        return ScoreState(min(self.score, ceiling), self.flags + (flag,), True)

    def to_result(self) -> CredibilityResult:
        return CredibilityResult(
            overall=overall_for(self.risk_detected, self.score),
            flags=self.flags,
            credibility=Credibility(score=self.score, label=classify(self.score)),
        )


def initial_state(bias: BiasAnalysis, *, default_score: int = DEFAULT_SCORE) -> ScoreState:
    """Start from the bias score; only a missing score falls back to the default."""
    return ScoreState(score=default_score if bias.score is None else bias.score)


def apply_bias(state: ScoreState, bias: BiasAnalysis) -> ScoreState:
    if bias.signals:
        return state.cap(
            BIAS_SIGNAL_CEILING,
            Flag(title="Propaganda & Bias Signals", reasons=bias.signals),
        )
    return state.note(
        Flag(
            title="AI Credibility Analysis",
            reasons=(bias.explanation or NEUTRAL_EXPLANATION,),
        )
    )


def apply_verdict(state: ScoreState, claim: str, verdict: ClaimVerdict) -> ScoreState:
    """Fold one claim's verdict into the state.

    Registry ratings always cap the score; model verdicts only when the
    model judged the claim false. Anything else leaves the state unchanged.
    """
    if isinstance(verdict, RegistryRated):
        return state.cap(
            verdict.ceiling,
            Flag(
                title=f'Fact-Check: Rated "{verdict.rating}"',
                reasons=(f'Claim: "{claim}"', f"Publisher: {verdict.publisher}"),
            ),
        )
    if isinstance(verdict, ModelRated) and verdict.ceiling is not None:
        return state.cap(
            verdict.ceiling,
            Flag(
                title="AI Fact-Check: Likely False",
                reasons=(f'Claim: "{claim}"', f"Reasoning: {verdict.explanation}"),
            ),
        )
    return state


def aggregate(
    bias: BiasAnalysis,
    findings: Sequence[tuple[str, ClaimVerdict]],
    *,
    default_score: int = DEFAULT_SCORE,
) -> ScoreState:
    """Fold bias signals, then claim verdicts in claim order.

    Args:
        bias: Bias analysis from the initial model pass.
        findings: ``(claim, verdict)`` pairs in extraction order.
        default_score: Starting score when the bias score is missing.

    Returns:
        The final state after every signal has been applied.
    """
    state = apply_bias(initial_state(bias, default_score=default_score), bias)
    return reduce(lambda acc, finding: apply_verdict(acc, *finding), findings, state)
