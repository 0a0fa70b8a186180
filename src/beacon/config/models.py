"""Pydantic configuration models for Beacon components."""

from typing import Literal

from pydantic import BaseModel, Field

# ============================================================
# Model Configs
# ============================================================


class ClaudeModelConfig(BaseModel):
    """Configuration for ClaudeGenerator."""

    type: Literal["claude"] = "claude"
    model: str = "claude-haiku-4-5-20251001"
    max_tokens: int = Field(default=1024, gt=0)
    temperature: float = Field(default=0.0, ge=0.0, le=1.0)

    model_config = {"frozen": True}


# ============================================================
# Registry Configs
# ============================================================


class GoogleFactCheckRegistryConfig(BaseModel):
    """Configuration for GoogleFactCheckRegistry."""

    type: Literal["google_factcheck"] = "google_factcheck"
    language_code: str | None = None
    page_size: int = Field(default=5, gt=0)
    timeout_seconds: float = Field(default=30.0, gt=0)

    model_config = {"frozen": True}


# ============================================================
# Analysis Config
# ============================================================


class AnalysisConfig(BaseModel):
    """Limits and defaults shared by the analysis pipelines."""

    min_text_length: int = Field(default=50, ge=0)
    max_text_length: int = Field(default=4000, gt=0)
    max_claims: int = Field(default=2, ge=0)
    max_signals: int = Field(default=3, ge=0)
    default_score: int = Field(default=75, ge=0, le=100)
    request_timeout_seconds: float | None = Field(default=None, gt=0)
    verify_claims_concurrently: bool = False

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for intermediate pipeline logging."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class BeaconConfig(BaseModel):
    """Root configuration for Beacon."""

    model: ClaudeModelConfig = Field(default_factory=ClaudeModelConfig)
    registry: GoogleFactCheckRegistryConfig = Field(
        default_factory=GoogleFactCheckRegistryConfig
    )
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
