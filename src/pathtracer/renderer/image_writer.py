# renderer/image_writer.py
import logging
import os
from typing import Union

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


def save_image(pixels: np.ndarray, path: Union[str, os.PathLike]) -> str:
    """
    Write an (height, width, 3) uint8 RGB array to disk.

    The format follows the file suffix; paths without a suffix get ".png".
    Filesystem errors propagate to the caller.

    Returns:
        The path the image was written to
    """
    pixels = np.asarray(pixels)
    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"Expected an (height, width, 3) array, got shape {pixels.shape}")
    if pixels.dtype != np.uint8:
        raise ValueError(f"Expected uint8 pixels, got {pixels.dtype}")

    path = os.fspath(path)
    if not os.path.splitext(path)[1]:
        path += ".png"

    Image.fromarray(pixels).save(path)
    logger.info("Wrote %dx%d image to %s", pixels.shape[1], pixels.shape[0], path)
    return path


def load_image(path: Union[str, os.PathLike]) -> np.ndarray:
    """
    Read an image file back as an (height, width, 3) uint8 RGB array.
    """
    path = os.fspath(path)
    if not os.path.exists(path):
        raise FileNotFoundError(f"Image file not found: {path}")
    with Image.open(path) as img:
        if img.mode != 'RGB':
            img = img.convert('RGB')
        return np.array(img)
