# output.py
import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from pathtracer.errors import ConfigurationError

logger = logging.getLogger(__name__)


def check_output_path(path: Union[str, Path]) -> Path:
    """
    Raises ConfigurationError unless Pillow can write the format named by the
    file extension.
    """
    path = Path(path)
    extensions = Image.registered_extensions()
    fmt = extensions.get(path.suffix.lower())
    if fmt is None or fmt not in Image.SAVE:
        raise ConfigurationError(f"cannot write images with extension {path.suffix!r}: {path}")
    return path


def buffer_to_image(buffer, width: int, height: int) -> Image.Image:
    """Wraps a flat row-major RGB byte buffer as a PIL image."""
    data = np.frombuffer(bytes(buffer), dtype=np.uint8)
    expected = width * height * 3
    if data.size != expected:
        raise ValueError(
            f"buffer holds {data.size} bytes, expected {expected} for a {width}x{height} RGB image")
    return Image.fromarray(data.reshape((height, width, 3)))


def write_image(path: Union[str, Path], buffer, width: int, height: int) -> Path:
    """
    Saves the buffer; the file format follows the extension (.tiff, .png, .ppm, ...).
    """
    path = Path(path)
    buffer_to_image(buffer, width, height).save(path)
    logger.info("Image saved to %s", path)
    return path
