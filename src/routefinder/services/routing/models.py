"""Routing domain models."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from ...config import settings
from ...exceptions import InvalidConfigError
from ...models.domain import AlgorithmKind, Direction


def _coerce_kind(value: AlgorithmKind | str) -> AlgorithmKind:
    if isinstance(value, AlgorithmKind):
        return value
    try:
        return AlgorithmKind(str(value).strip().lower().replace("-", "_"))
    except ValueError as exc:
        raise InvalidConfigError(f"Unknown routing algorithm '{value}'.") from exc


def _coerce_direction(value: Direction | str) -> Direction:
    if isinstance(value, Direction):
        return value
    try:
        return Direction(str(value).strip().lower())
    except ValueError as exc:
        raise InvalidConfigError(f"Unknown direction '{value}'.") from exc


# Override not given. ``None`` is a real value for ``seed``.
UNSET: Any = object()


def _require_int(name: str, value: Any, minimum: int = 1) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigError(f"{name} must be an integer, got {value!r}.")
    if value < minimum:
        raise InvalidConfigError(f"{name} must be >= {minimum}, got {value}.")


def _require_number(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise InvalidConfigError(f"{name} must be a finite number, got {value!r}.")


@dataclass(slots=True, frozen=True)
class AlgorithmConfig:
    kind: AlgorithmKind = AlgorithmKind(settings.default_algorithm)
    annealing_steps: int = settings.annealing_steps
    direction: Direction = Direction(settings.default_direction)
    closed: bool = settings.closed_tour
    cooling_factor: float = settings.annealing_cooling_factor
    trials_per_point: int = settings.annealing_trials_per_point
    successes_per_point: int = settings.annealing_successes_per_point
    initial_temperature_scale: float = settings.annealing_initial_temperature_scale
    seed: Optional[int] = settings.random_seed

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", _coerce_kind(self.kind))
        object.__setattr__(self, "direction", _coerce_direction(self.direction))
        if not isinstance(self.closed, bool):
            raise InvalidConfigError(f"closed must be a boolean, got {self.closed!r}.")
        _require_int("annealing_steps", self.annealing_steps)
        _require_int("trials_per_point", self.trials_per_point)
        _require_int("successes_per_point", self.successes_per_point)
        _require_number("cooling_factor", self.cooling_factor)
        if not 0.0 < self.cooling_factor < 1.0:
            raise InvalidConfigError(f"cooling_factor must lie in (0, 1), got {self.cooling_factor}.")
        _require_number("initial_temperature_scale", self.initial_temperature_scale)
        if self.initial_temperature_scale <= 0:
            raise InvalidConfigError(
                f"initial_temperature_scale must be positive, got {self.initial_temperature_scale}."
            )
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise InvalidConfigError(f"seed must be an integer or None, got {self.seed!r}.")

    def with_overrides(self, **overrides: Any) -> "AlgorithmConfig":
        """Copy of this config with every given override applied.

        Keys left at ``UNSET`` are ignored. Anything else, ``None`` included,
        replaces the current value.
        """
        values = {key: value for key, value in overrides.items() if value is not UNSET}
        return replace(self, **values) if values else self


@dataclass(slots=True, frozen=True)
class RouteResult:
    """Outcome of a solve.

    ``path_length`` is meaningless while ``done`` is False. Results are frozen:
    ``order`` is stored as a tuple and ``metadata`` as a read-only mapping.
    """

    order: Tuple[int, ...] = ()
    path_length: float = 0.0
    done: bool = False
    algorithm: Optional[AlgorithmKind] = None
    closed: bool = False
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "order", tuple(self.order))
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def with_metadata(self, **extra: Any) -> "RouteResult":
        """Copy of this result with ``extra`` merged into its metadata."""
        return replace(self, metadata={**self.metadata, **extra})
