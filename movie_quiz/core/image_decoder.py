"""Decoding of raw poster bytes into Qt images."""

from __future__ import annotations

import logging

from PySide6.QtGui import QImage

logger = logging.getLogger(__name__)


def decode_poster(image_bytes: bytes) -> QImage:
    """Decode poster bytes, falling back to an empty placeholder image.

    Undecodable or empty data never raises; the caller always gets a QImage.
    """
    if not image_bytes:
        return QImage()
    image = QImage.fromData(image_bytes)
    if image.isNull():
        logger.debug("Poster data (%d bytes) could not be decoded", len(image_bytes))
        return QImage()
    return image
