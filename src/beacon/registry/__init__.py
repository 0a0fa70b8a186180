"""Claim registry lookups."""

from beacon.registry.base import ClaimRegistry
from beacon.registry.google import GoogleFactCheckRegistry

__all__ = ["ClaimRegistry", "GoogleFactCheckRegistry"]
