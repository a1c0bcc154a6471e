"""Rendering of laid-out tag clouds into images (PySide6)."""

from tagcloud_render.config import RenderConfig, load_render_config
from tagcloud_render.renderer import render_rectangles, render_to_file, save_image

__all__ = [
    "RenderConfig",
    "load_render_config",
    "render_rectangles",
    "render_to_file",
    "save_image",
]
