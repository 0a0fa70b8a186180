"""Configuration module for Beacon."""

from beacon.config.factory import (
    create_content_pipeline,
    create_from_config,
    create_phishing_pipeline,
    create_run_logger,
)
from beacon.config.loader import get_default_config_path, load_config
from beacon.config.models import (
    AnalysisConfig,
    BeaconConfig,
    ClaudeModelConfig,
    GoogleFactCheckRegistryConfig,
    LoggingConfig,
)

__all__ = [
    "AnalysisConfig",
    "BeaconConfig",
    "ClaudeModelConfig",
    "GoogleFactCheckRegistryConfig",
    "LoggingConfig",
    "create_content_pipeline",
    "create_from_config",
    "create_phishing_pipeline",
    "create_run_logger",
    "get_default_config_path",
    "load_config",
]
