"""Beacon: credibility scoring for arbitrary text."""

from beacon.config import (
    BeaconConfig,
    create_content_pipeline,
    create_phishing_pipeline,
    load_config,
)
from beacon.data import (
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
from beacon.errors import BeaconError, ErrorCategory, ModelParseError, UpstreamTransportError
from beacon.model.base import TextGenerator
from beacon.model.claude import ClaudeGenerator
from beacon.model.client import ModelClient
from beacon.pipeline.base import Pipeline
from beacon.pipeline.content import ContentAnalysisPipeline
from beacon.pipeline.phishing import PhishingPipeline
from beacon.registry.base import ClaimRegistry
from beacon.registry.google import GoogleFactCheckRegistry
from beacon.run_logger import RunLogger
from beacon.sanitize import extract_json_span
from beacon.scoring import ScoreState, aggregate, classify, overall_for
from beacon.verifier import ClaimVerifier, rating_ceiling

__all__ = [
    # Models
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
    # Errors
    "BeaconError",
    "ErrorCategory",
    "ModelParseError",
    "UpstreamTransportError",
    # Functions
    "aggregate",
    "classify",
    "extract_json_span",
    "overall_for",
    "rating_ceiling",
    # Protocols
    "ClaimRegistry",
    "Pipeline",
    "TextGenerator",
    # Components
    "ClaimVerifier",
    "ClaudeGenerator",
    "GoogleFactCheckRegistry",
    "ModelClient",
    "ScoreState",
    # Pipelines
    "ContentAnalysisPipeline",
    "PhishingPipeline",
    # Logging
    "RunLogger",
    # Config
    "BeaconConfig",
    "create_content_pipeline",
    "create_phishing_pipeline",
    "load_config",
]
