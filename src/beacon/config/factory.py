"""Factory functions to create components from configuration."""

from pathlib import Path
from typing import Literal

from beacon.config.models import (
    AnalysisConfig,
    BeaconConfig,
    ClaudeModelConfig,
    GoogleFactCheckRegistryConfig,
)
from beacon.model.base import TextGenerator
from beacon.model.claude import ClaudeGenerator
from beacon.model.client import ModelClient
from beacon.pipeline.base import Pipeline
from beacon.pipeline.content import ContentAnalysisPipeline
from beacon.pipeline.phishing import PhishingPipeline
from beacon.registry.base import ClaimRegistry
from beacon.registry.google import GoogleFactCheckRegistry
from beacon.run_logger import RunLogger
from beacon.verifier import ClaimVerifier


def create_generator(config: ClaudeModelConfig) -> TextGenerator:
    """Create a text generator from config.

    Uses explicit type matching rather than getattr.
    """
    if isinstance(config, ClaudeModelConfig):
        return ClaudeGenerator(
            model=config.model,
            max_tokens=config.max_tokens,
            temperature=config.temperature,
        )
    msg = f"Unknown model config type: {type(config)}"
    raise ValueError(msg)


def create_registry(config: GoogleFactCheckRegistryConfig) -> ClaimRegistry:
    """Create a claim registry from config."""
    if isinstance(config, GoogleFactCheckRegistryConfig):
        return GoogleFactCheckRegistry(
            language_code=config.language_code,
            page_size=config.page_size,
            timeout=config.timeout_seconds,
        )
    msg = f"Unknown registry config type: {type(config)}"
    raise ValueError(msg)


def create_model_client(generator: TextGenerator, analysis: AnalysisConfig) -> ModelClient:
    return ModelClient(
        generator,
        max_claims=analysis.max_claims,
        max_signals=analysis.max_signals,
    )


def create_content_pipeline(
    config: BeaconConfig,
    *,
    model_client: ModelClient | None = None,
    registry: ClaimRegistry | None = None,
    run_logger: RunLogger | None = None,
) -> ContentAnalysisPipeline:
    """Create the content credibility pipeline.

    Args:
        config: Root configuration.
        model_client: Pre-built adapter (built from config if omitted).
        registry: Pre-built claim registry (built from config if omitted).
        run_logger: Optional RunLogger.
    """
    analysis = config.analysis
    if model_client is None:
        model_client = create_model_client(create_generator(config.model), analysis)
    if registry is None:
        registry = create_registry(config.registry)

    return ContentAnalysisPipeline(
        model_client,
        ClaimVerifier(registry, model_client),
        min_text_length=analysis.min_text_length,
        max_text_length=analysis.max_text_length,
        default_score=analysis.default_score,
        request_timeout=analysis.request_timeout_seconds,
        verify_claims_concurrently=analysis.verify_claims_concurrently,
        run_logger=run_logger,
    )


def create_phishing_pipeline(
    config: BeaconConfig,
    *,
    model_client: ModelClient | None = None,
    run_logger: RunLogger | None = None,
) -> PhishingPipeline:
    """Create the phishing detection pipeline."""
    analysis = config.analysis
    if model_client is None:
        model_client = create_model_client(create_generator(config.model), analysis)

    return PhishingPipeline(
        model_client,
        max_text_length=analysis.max_text_length,
        request_timeout=analysis.request_timeout_seconds,
        run_logger=run_logger,
    )


def create_run_logger(
    config: BeaconConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> RunLogger | None:
    """Create a RunLogger, or None if logging is disabled.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    if not log_enabled:
        return None
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)
    return RunLogger(log_dir=log_dir, enabled=True)


def create_from_config(
    config: BeaconConfig,
    *,
    pipeline_type: Literal["content", "phishing"] = "content",
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> tuple[Pipeline, RunLogger | None]:
    """Create a complete pipeline and its run logger from root config.

    Args:
        config: Root configuration.
        pipeline_type: "content" for credibility analysis, "phishing" for the phishing scan.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.

    Returns:
        Tuple of (pipeline, run_logger). run_logger is None if logging is disabled.
    """
    run_logger = create_run_logger(
        config, log_override=log_override, log_dir_override=log_dir_override
    )
    pipeline: Pipeline
    if pipeline_type == "content":
        pipeline = create_content_pipeline(config, run_logger=run_logger)
    elif pipeline_type == "phishing":
        pipeline = create_phishing_pipeline(config, run_logger=run_logger)
    else:
        msg = f"Unknown pipeline type: {pipeline_type}"
        raise ValueError(msg)
    return (pipeline, run_logger)
