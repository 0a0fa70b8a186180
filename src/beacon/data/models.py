"""Core data models for Beacon."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class Overall(StrEnum):
    """Top-level outcome of an analysis."""

    CLEAN = "clean"
    RISK = "risk"
    ERROR = "error"


class CredibilityLabel(StrEnum):
    """Qualitative credibility bands, from best to worst."""

    EXCELLENT = "Excellent"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    VERY_LOW = "Very Low"


class ModelVerdict(StrEnum):
    """Verdict returned by the model when asked to fact-check a claim."""

    TRUE = "True"
    FALSE = "False"
    UNPROVEN = "Unproven"


@dataclass(frozen=True)
class BiasAnalysis:
    """Language and tone assessment from the initial model pass.

    ``score`` is ``None`` when the model did not provide one, so that a
    genuine score of 0 is not mistaken for a missing value.
    """

    score: int | None = None
    explanation: str | None = None
    signals: tuple[str, ...] = ()


@dataclass(frozen=True)
class InitialAnalysis:
    """Claims and bias analysis extracted from the text in one model call."""

    claims: tuple[str, ...] = ()
    bias: BiasAnalysis = field(default_factory=BiasAnalysis)


@dataclass(frozen=True)
class PriorRating:
    """A prior fact-check rating found in the claim registry."""

    textual_rating: str
    publisher: str
    claim_text: str | None = None
    url: str | None = None


@dataclass(frozen=True)
class FactCheckVerdict:
    """The model's own judgment of a single claim; ``verdict`` is None when it gave none."""

    verdict: ModelVerdict | None
    explanation: str = ""


@dataclass(frozen=True)
class PhishingAnalysis:
    """Phishing risk assessment: 0 (none) to 10 (blatant phishing), possibly fractional."""

    risk_score: int | float
    explanation: str = ""


# ============================================================
# Claim verdicts
# ============================================================


@dataclass(frozen=True)
class RegistryRated:
    """The claim registry holds a prior rating for the claim."""

    rating: str
    publisher: str
    ceiling: int


@dataclass(frozen=True)
class ModelRated:
    """No registry entry; the model adjudicated the claim."""

    verdict: ModelVerdict
    explanation: str = ""

    @property
    def ceiling(self) -> int | None:
        """Score ceiling implied by the verdict, if any."""
        if self.verdict is ModelVerdict.FALSE:
            return 15
        return None


@dataclass(frozen=True)
class Unresolved:
    """The registry had no entry and the model reply carried no verdict."""

    ceiling: None = None


ClaimVerdict = RegistryRated | ModelRated | Unresolved


# ============================================================
# Result contract
# ============================================================


@dataclass(frozen=True)
class Flag:
    """A user-facing finding with supporting reasons."""

    title: str
    reasons: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "reasons": list(self.reasons)}


@dataclass(frozen=True)
class Credibility:
    """Numeric score paired with its qualitative label."""

    score: int
    label: CredibilityLabel

    def to_dict(self) -> dict[str, Any]:
        return {"score": self.score, "label": str(self.label)}


@dataclass(frozen=True)
class CredibilityResult:
    """The externally observable outcome of a pipeline run.

    Error results carry no ``credibility``; ``to_dict`` omits the key.
    """

    overall: Overall
    flags: tuple[Flag, ...] = ()
    credibility: Credibility | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "overall": str(self.overall),
            "flags": [f.to_dict() for f in self.flags],
        }
        if self.credibility is not None:
            payload["credibility"] = self.credibility.to_dict()
        return payload


# ============================================================
# Usage accounting
# ============================================================


@dataclass(frozen=True)
class APICallUsage:
    """Usage from a single model call."""

    model: str
    input_tokens: int = 0
    output_tokens: int = 0


@dataclass
class Usage:
    """Accumulated external-call usage across pipeline components."""

    api_calls: list[APICallUsage] = field(default_factory=list)
    registry_requests: int = 0

    @property
    def input_tokens(self) -> int:
        return sum(c.input_tokens for c in self.api_calls)

    @property
    def output_tokens(self) -> int:
        return sum(c.output_tokens for c in self.api_calls)

    def __add__(self, other: "Usage") -> "Usage":
        return Usage(
            api_calls=self.api_calls + other.api_calls,
            registry_requests=self.registry_requests + other.registry_requests,
        )

    def __iadd__(self, other: "Usage") -> "Usage":
        self.api_calls.extend(other.api_calls)
        self.registry_requests += other.registry_requests
        return self
