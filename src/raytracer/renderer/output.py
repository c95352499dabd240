# raytracer/renderer/output.py
import logging
import os
import tempfile
from typing import Optional
import numpy as np
from PIL import Image
from raytracer.config import OUTPUT_DIR_NAME, OUTPUT_FILE_NAME

logger = logging.getLogger(__name__)

def default_output_path() -> str:
    """<system temp dir>/raytracer/out.png"""
    return os.path.join(tempfile.gettempdir(), OUTPUT_DIR_NAME, OUTPUT_FILE_NAME)

def to_image(pixels: np.ndarray, width: Optional[int] = None, height: Optional[int] = None) -> Image.Image:
    """
    Wrap a (rows, cols, 3) uint8 buffer as a Pillow RGB image, resizing it
    with bicubic (Catmull-Rom) filtering when a different size is requested.
    """
    if pixels.dtype != np.uint8 or pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"expected a (rows, cols, 3) uint8 buffer, got {pixels.dtype} {pixels.shape}")
    img = Image.fromarray(pixels)
    width = width or img.width
    height = height or img.height
    if (width, height) != img.size:
        img = img.resize((width, height), Image.Resampling.BICUBIC)
    return img

def save_png(pixels: np.ndarray, path: Optional[str] = None,
             width: Optional[int] = None, height: Optional[int] = None) -> str:
    """
    Encode the rendered buffer as PNG at `path` (default_output_path() when
    omitted), creating parent directories. Returns the path written.
    """
    path = path or default_output_path()
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    to_image(pixels, width, height).save(path, format="PNG")
    logger.info("Wrote %s", path)
    return path
