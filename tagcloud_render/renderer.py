"""Rasterize placed rectangles into an image and save it."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from PySide6 import QtCore, QtGui

from tagcloud.core.exceptions import RenderError
from tagcloud.core.geometry import Rectangle
from tagcloud.core.overlap import bounding_box
from tagcloud_render.config import RenderConfig

logger = logging.getLogger(__name__)


def _cloud_transform(box: Rectangle, config: RenderConfig) -> QtGui.QTransform:
    """Map cloud coordinates so the cloud's bounding box is centered on the canvas."""
    scale = 1.0
    if config.fit:
        available_w = config.width - 2 * config.margin
        available_h = config.height - 2 * config.margin
        scale = min(available_w / box.width, available_h / box.height)

    transform = QtGui.QTransform()
    transform.translate(config.width / 2, config.height / 2)
    transform.scale(scale, scale)
    transform.translate(-(box.left + box.width / 2), -(box.top + box.height / 2))
    return transform


def render_rectangles(
    rectangles: Sequence[Rectangle], config: Optional[RenderConfig] = None
) -> QtGui.QImage:
    """Draw every rectangle as a filled, outlined box.

    Returns an image of ``config.width`` x ``config.height`` pixels. An empty
    sequence yields a blank background.
    """
    config = config or RenderConfig()
    image = QtGui.QImage(config.width, config.height, QtGui.QImage.Format_ARGB32)
    image.fill(QtGui.QColor(config.background))

    box = bounding_box(rectangles)
    if box is None:
        return image

    painter = QtGui.QPainter(image)
    try:
        painter.setRenderHints(QtGui.QPainter.Antialiasing)
        painter.setTransform(_cloud_transform(box, config))

        pen = QtGui.QPen(QtGui.QColor(config.outline))
        pen.setWidthF(config.outline_width)
        pen.setCosmetic(True)
        painter.setPen(pen)
        painter.setBrush(QtGui.QBrush(QtGui.QColor(config.fill)))

        for rect in rectangles:
            painter.drawRect(QtCore.QRectF(rect.left, rect.top, rect.width, rect.height))
    finally:
        painter.end()

    return image


def save_image(image: QtGui.QImage, path: str | Path, fmt: str = "PNG") -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if not image.save(str(path), fmt):
        raise RenderError(str(path), details={"format": fmt})

    logger.info(f"Saved {image.width()}x{image.height()} cloud image to {path}")
    return path


def render_to_file(
    rectangles: Sequence[Rectangle],
    path: str | Path,
    config: Optional[RenderConfig] = None,
) -> Path:
    """Render ``rectangles`` and save the result to ``path``."""
    return save_image(render_rectangles(rectangles, config), path)
