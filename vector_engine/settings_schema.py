"""Persisted defaults for tolerance checks, rounding and random vectors.

A ``VectorSettings`` instance bundles the knobs that callers otherwise pass to
every call (``tolerance=``, ``decimals=``, bounds and seed) and applies them:

    settings = load_last_used()
    settings.is_parallel(a, b)
    settings.rounded(v)
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from . import config
from .errors import InvalidParameterProvided
from .math import operations
from .math.factories import random_vector
from .math.vector import ArrayVector, Vector

logger = logging.getLogger(__name__)


def _optional_int(value: Any) -> int | None:
    return None if value is None else int(value)


_CONVERTERS = {
    "tolerance": float,
    "decimals": int,
    "random_low": float,
    "random_high": float,
    "seed": _optional_int,
}


@dataclass
class VectorSettings:
    tolerance: float = config.DEFAULT_TOLERANCE
    decimals: int = config.DEFAULT_DECIMALS
    random_low: float = config.DEFAULT_RANDOM_LOW
    random_high: float = config.DEFAULT_RANDOM_HIGH
    seed: int | None = config.DEFAULT_SEED

    def __post_init__(self) -> None:
        if not self.tolerance >= 0.0:
            raise InvalidParameterProvided(f"The tolerance must be non-negative, got {self.tolerance}")
        if self.decimals < 0:
            raise InvalidParameterProvided(f"Decimal places must be non-negative, got {self.decimals}")
        if not self.random_low < self.random_high:
            raise InvalidParameterProvided(
                f"The lower bound {self.random_low} must be below the upper bound {self.random_high}"
            )

    def to_json(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_json(cls, payload: dict[str, Any]) -> "VectorSettings":
        """Build settings from a decoded JSON object.

        Missing keys keep their defaults and unknown keys are ignored. Values
        that cannot be converted raise ``ValueError`` (or ``TypeError``).
        """
        unknown = sorted(set(payload) - {f.name for f in fields(cls)})
        if unknown:
            logger.debug("Ignoring unknown settings keys: %s", ", ".join(unknown))
        values = {name: convert(payload[name]) for name, convert in _CONVERTERS.items() if name in payload}
        return cls(**values)

    def is_parallel(self, v1: Vector, v2: Vector) -> bool:
        return operations.is_parallel(v1, v2, tolerance=self.tolerance)

    def is_orthogonal(self, v1: Vector, v2: Vector) -> bool:
        return operations.is_orthogonal(v1, v2, tolerance=self.tolerance)

    def rounded(self, v: Vector) -> Vector:
        return v.rounded(self.decimals)

    def format(self, v: Vector) -> str:
        return v.format(self.decimals)

    def random_vector(self, dimension: int) -> ArrayVector:
        """Draw a vector with these bounds, seed and rounding."""
        return random_vector(
            dimension,
            self.random_low,
            self.random_high,
            seed=self.seed,
            decimals=self.decimals,
        )


def load_last_used(path: Path | None = None) -> VectorSettings:
    """Read saved settings, falling back to defaults when the file is absent or unusable."""
    settings_path = path or config.DEFAULT_SETTINGS_PATH
    try:
        data = json.loads(settings_path.read_text())
    except FileNotFoundError:
        return VectorSettings()
    except json.JSONDecodeError as exc:
        logger.warning("Ignoring malformed settings file %s: %s", settings_path, exc)
        return VectorSettings()

    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: expected an object, got %s", settings_path, type(data).__name__)
        return VectorSettings()
    try:
        return VectorSettings.from_json(data)
    except (TypeError, ValueError) as exc:
        logger.warning("Ignoring invalid settings in %s: %s", settings_path, exc)
        return VectorSettings()


def save_last_used(settings: VectorSettings, path: Path | None = None) -> Path:
    settings_path = path or config.DEFAULT_SETTINGS_PATH
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    settings_path.write_text(json.dumps(settings.to_json(), indent=2, sort_keys=True))
    logger.debug("Saved settings to %s", settings_path)
    return settings_path
