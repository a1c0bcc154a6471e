"""Helpers for loading and validating layout configuration."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional
import math
import threading

import yaml  # type: ignore[import-untyped]

from tagcloud.core.exceptions import ConfigurationError
from tagcloud.core.geometry import Point
from tagcloud.utils.consts import LayoutDefaults


@dataclass(frozen=True)
class SpiralConfig:
    angle_step: float = LayoutDefaults.ANGLE_STEP
    radius_step: float = LayoutDefaults.RADIUS_STEP


@dataclass(frozen=True)
class CompactionConfig:
    enabled: bool = True
    step: float = LayoutDefaults.COMPACTION_STEP


@dataclass(frozen=True)
class SearchConfig:
    max_candidates: int = LayoutDefaults.MAX_CANDIDATES


@dataclass(frozen=True)
class LayoutConfig:
    center: Point
    spiral: SpiralConfig = field(default_factory=SpiralConfig)
    compaction: CompactionConfig = field(default_factory=CompactionConfig)
    search: SearchConfig = field(default_factory=SearchConfig)


# Configuration cache with thread safety
_LOADER_CACHE: dict[str, LayoutConfig] = {}
_CACHE_LOCK = threading.RLock()


def _get_config_path(path: Optional[str] = None) -> str:
    if path is None:
        # Bundled default lives next to the package: tagcloud/config.yaml
        base = Path(__file__).parent.parent / "config.yaml"
        path = str(base)

    return path


def _load_yaml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except Exception as exc:
        raise ConfigurationError(f"Failed to parse config: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError("top-level config must be a mapping")
    return raw


def _parse_point(value: Any) -> Point:
    if isinstance(value, dict):
        return Point(value["x"], value["y"])
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return Point(value[0], value[1])
    raise ConfigurationError("center", f"expected [x, y] or {{x, y}}, got {value!r}")


def _build_spiral_cfg(spiral_raw: dict[str, Any]) -> SpiralConfig:
    return SpiralConfig(
        angle_step=float(spiral_raw.get("angle_step", LayoutDefaults.ANGLE_STEP)),
        radius_step=float(spiral_raw.get("radius_step", LayoutDefaults.RADIUS_STEP)),
    )


def _build_compaction_cfg(compaction_raw: dict[str, Any]) -> CompactionConfig:
    return CompactionConfig(
        enabled=compaction_raw.get("enabled", True),
        step=compaction_raw.get("step", LayoutDefaults.COMPACTION_STEP),
    )


def _parse_layout_cfg_from_dict(raw: dict[str, Any]) -> LayoutConfig:
    try:
        cfg = LayoutConfig(
            center=_parse_point(raw["center"]),
            spiral=_build_spiral_cfg(raw.get("spiral") or {}),
            compaction=_build_compaction_cfg(raw.get("compaction") or {}),
            search=SearchConfig(
                max_candidates=int(
                    (raw.get("search") or {}).get(
                        "max_candidates", LayoutDefaults.MAX_CANDIDATES
                    )
                )
            ),
        )
    except KeyError as exc:
        raise ConfigurationError(f"Missing required config key: {exc}") from exc
    except (TypeError, ValueError, AttributeError) as exc:
        raise ConfigurationError(f"Invalid config schema: {exc}") from exc

    _validate_layout_config(cfg)
    return cfg


def _validate_layout_config(cfg: LayoutConfig) -> None:
    """Fail fast on values the layouter would reject later."""
    for name, value in (("x", cfg.center.x), ("y", cfg.center.y)):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigurationError(f"center.{name}", f"must be a number, got {value!r}")

    if not _is_positive_finite(cfg.spiral.angle_step):
        raise ConfigurationError("spiral.angle_step", "must be positive and finite")
    if not _is_positive_finite(cfg.spiral.radius_step):
        raise ConfigurationError("spiral.radius_step", "must be positive and finite")

    if not isinstance(cfg.compaction.enabled, bool):
        raise ConfigurationError(
            "compaction.enabled", f"must be true or false, got {cfg.compaction.enabled!r}"
        )

    step = cfg.compaction.step
    if (
        isinstance(step, bool)
        or not isinstance(step, (int, float))
        or not _is_positive_finite(step)
    ):
        raise ConfigurationError("compaction.step", "must be a positive finite number")

    if not cfg.search.max_candidates > 0:
        raise ConfigurationError("search.max_candidates", "must be positive")


def _is_positive_finite(value: float) -> bool:
    # NaN fails "value > 0"
    return value > 0 and math.isfinite(value)


def load_config(path: Optional[str] = None) -> LayoutConfig:
    """Load and validate layout configuration from a YAML file.

    Args:
        path: Optional path to YAML config. If None, load the bundled
            tagcloud/config.yaml.

    Returns:
        LayoutConfig instance

    Raises:
        ConfigurationError: on parse or validation errors
    """

    p = Path(_get_config_path(path=path))
    raw = _load_yaml_file(p)

    return _parse_layout_cfg_from_dict(raw=raw)


def get_config(path: Optional[str] = None) -> LayoutConfig:
    """Return the loaded config for path, loading and caching if necessary.

    THREAD SAFETY: This function is thread-safe. Multiple threads can
    safely call this concurrently.
    """
    key = _get_config_path(path=path)
    with _CACHE_LOCK:
        if key not in _LOADER_CACHE:
            _LOADER_CACHE[key] = load_config(path=key)
        return _LOADER_CACHE[key]


def clear_config_cache() -> None:
    """Clear all cached configurations.

    All subsequent calls to get_config() will reload from disk.
    """
    with _CACHE_LOCK:
        _LOADER_CACHE.clear()
