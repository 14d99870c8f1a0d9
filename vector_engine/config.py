"""Default configuration values for vector_engine."""

from __future__ import annotations

from pathlib import Path

DEFAULT_TOLERANCE = 1e-9
DEFAULT_DECIMALS = 4
DEFAULT_RANDOM_LOW = 0.0
DEFAULT_RANDOM_HIGH = 1.0
DEFAULT_SEED = None

DEFAULT_SETTINGS_PATH = Path.home() / ".vector_engine_settings.json"
