# data classes for snake tuning and server configuration
from dataclasses import dataclass, fields
import json
import os
from pathlib import Path
import typing

import yaml


# Fixed priority order for every tie between directions.
DIRECTIONS = ("up", "down", "left", "right")

DIRECTION_DELTAS = {
    "up": (0, 1),
    "down": (0, -1),
    "left": (-1, 0),
    "right": (1, 0),
}


@dataclass(frozen=True)
class Weights:
    """
    Every tuning constant of the influence grid.

    Terrain tiers (walls, bullseye, center, ring, corners) seed the grid,
    the remaining weights are bloom powers and spreads added on top of it.
    """

    walls: int = -2000
    bullseye: int = 20
    center: int = 10
    ring: int = 5
    corners: int = -5
    steer: int = 10
    steer_spread: int = 1
    pursue_head: int = 100
    pursue_spread: int = 2
    occupied: int = -1000
    avoid: int = -60
    avoid_spread: int = 2
    food: int = 80
    food_spread: int = 3
    hungry_health: int = 50

    def __post_init__(self):
        for field in fields(self):
            value = getattr(self, field.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{field.name} must be an integer, got {value!r}")
        for name in ("steer_spread", "pursue_spread", "avoid_spread", "food_spread"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")
        if self.occupied > 0:
            raise ValueError("occupied must be <= 0")
        if self.avoid > 0:
            raise ValueError("avoid must be <= 0")
        if not 0 <= self.hungry_health <= 100:
            raise ValueError("hungry_health must be in [0, 100]")
        strongest = max(self.pursue_head, self.food, self.bullseye, self.center, self.ring)
        if self.walls > -2 * strongest:
            raise ValueError(
                f"walls must be <= {-2 * strongest} to dominate the positive weights"
            )

    @classmethod
    def from_mapping(cls, values: typing.Mapping) -> "Weights":
        """Build weights from a partial mapping, keeping defaults for missing keys."""
        known = {field.name for field in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f"Unknown weight(s): {', '.join(unknown)}")
        return cls(**dict(values))


def load_weights(path) -> Weights:
    """Load weight overrides from a YAML (or JSON) file."""
    config_path = Path(path)
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ValueError(f"File not found: {config_path}")
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}")

    if data is None:
        return Weights()
    if isinstance(data, dict) and "weights" in data:
        data = data["weights"]
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping of weights in {config_path}")
    try:
        return Weights.from_mapping(data)
    except ValueError as e:
        raise ValueError(f"Error loading {config_path}: {e}")


def _env_flag(raw: str) -> bool:
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000
    weights_path: typing.Optional[str] = None
    debug_dump: bool = False

    def __post_init__(self):
        if not 0 < self.port < 65536:
            raise ValueError(f"port must be in [1, 65535], got {self.port}")

    @classmethod
    def from_env(cls, environ: typing.Optional[typing.Mapping] = None) -> "ServerConfig":
        """Read HOST, PORT, BLOOMSNAKE_WEIGHTS and BLOOMSNAKE_DEBUG_DUMP."""
        env = os.environ if environ is None else environ
        raw_port = env.get("PORT", "8000")
        try:
            port = int(raw_port)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {raw_port!r}")
        return cls(
            host=env.get("HOST", "0.0.0.0"),
            port=port,
            weights_path=env.get("BLOOMSNAKE_WEIGHTS") or None,
            debug_dump=_env_flag(env.get("BLOOMSNAKE_DEBUG_DUMP", "")),
        )

    def load_weights(self) -> Weights:
        if self.weights_path is None:
            return Weights()
        return load_weights(self.weights_path)


def dump_weights(weights: Weights) -> str:
    """Serialize weights as JSON, the inverse of load_weights for JSON files."""
    return json.dumps({field.name: getattr(weights, field.name) for field in fields(weights)}, indent=2)
