"""Read a Beacon YAML config into a validated BeaconConfig."""

from pathlib import Path

import yaml

from beacon.config.models import BeaconConfig


def load_config(path: Path | str) -> BeaconConfig:
    """Load a Beacon config file.

    Sections left out of the file (or an entirely empty file) take their
    defaults, so a file only needs the settings it changes.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If the top level of the file is not a mapping of sections.
        pydantic.ValidationError: If a section holds invalid settings.
    """
    path = Path(path)
    with path.open() as f:
        raw = yaml.safe_load(f)

    if raw is None:
        return BeaconConfig()
    if not isinstance(raw, dict):
        msg = (
            f"Beacon config {path} must map section names "
            f"(model, registry, analysis, logging) to settings, got {type(raw).__name__}"
        )
        raise ValueError(msg)
    return BeaconConfig.model_validate(raw)


def get_default_config_path() -> Path:
    """Path to configs/default.yaml at the repository root."""
    return Path(__file__).resolve().parents[3] / "configs" / "default.yaml"
