"""Render configuration loader and data model."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from tagcloud.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class RenderConfig:
    width: int = 800
    height: int = 800
    margin: int = 20
    background: str = "#1f1f1f"
    fill: str = "#4c9be8"
    outline: str = "#f0f0f0"
    outline_width: float = 1.0
    # Scale the cloud to fill the canvas; otherwise draw at 1:1, centered.
    fit: bool = True


def _parse_render_config(raw: dict[str, Any]) -> RenderConfig:
    defaults = RenderConfig()
    try:
        cfg = RenderConfig(
            width=int(raw.get("width", defaults.width)),
            height=int(raw.get("height", defaults.height)),
            margin=int(raw.get("margin", defaults.margin)),
            background=str(raw.get("background", defaults.background)),
            fill=str(raw.get("fill", defaults.fill)),
            outline=str(raw.get("outline", defaults.outline)),
            outline_width=float(raw.get("outline_width", defaults.outline_width)),
            fit=bool(raw.get("fit", defaults.fit)),
        )
    except (TypeError, ValueError, AttributeError) as exc:
        raise ConfigurationError("render", f"Invalid render config: {exc}") from exc

    if cfg.width <= 0 or cfg.height <= 0:
        raise ConfigurationError("render", "image width and height must be positive")
    if cfg.margin < 0 or 2 * cfg.margin >= min(cfg.width, cfg.height):
        raise ConfigurationError("render.margin", "margin must leave room to draw")
    return cfg


def load_render_config(path: str | Path) -> RenderConfig:
    path = Path(path)
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError("render", f"Failed to read {path}: {exc}") from exc

    # Allow the render settings either at top level or under a "render" key.
    raw = raw or {}
    if isinstance(raw, dict) and "render" in raw:
        raw = raw["render"] or {}
    return _parse_render_config(raw)
