"""Analysis pipelines."""

from beacon.pipeline.base import SHORT_TEXT_RESULT, Pipeline, error_result
from beacon.pipeline.content import ContentAnalysisPipeline
from beacon.pipeline.phishing import PhishingPipeline

__all__ = [
    "ContentAnalysisPipeline",
    "PhishingPipeline",
    "Pipeline",
    "SHORT_TEXT_RESULT",
    "error_result",
]
