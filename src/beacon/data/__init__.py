"""Data models for Beacon."""

from beacon.data.models import (
    APICallUsage,
    BiasAnalysis,
    ClaimVerdict,
    Credibility,
    CredibilityLabel,
    CredibilityResult,
    FactCheckVerdict,
    Flag,
    InitialAnalysis,
    ModelRated,
    ModelVerdict,
    Overall,
    PhishingAnalysis,
    PriorRating,
    RegistryRated,
    Unresolved,
    Usage,
)

__all__ = [
    "APICallUsage",
    "BiasAnalysis",
    "ClaimVerdict",
    "Credibility",
    "CredibilityLabel",
    "CredibilityResult",
    "FactCheckVerdict",
    "Flag",
    "InitialAnalysis",
    "ModelRated",
    "ModelVerdict",
    "Overall",
    "PhishingAnalysis",
    "PriorRating",
    "RegistryRated",
    "Unresolved",
    "Usage",
]
