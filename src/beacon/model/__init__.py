"""Generative model access."""

from beacon.model.base import TextGenerator
from beacon.model.claude import ClaudeGenerator
from beacon.model.client import ModelClient

__all__ = ["ClaudeGenerator", "ModelClient", "TextGenerator"]
