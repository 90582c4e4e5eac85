"""
Image operations for Square Cutter.

This module wraps the Pillow calls the editor needs: decoding the source
image and copying a crop rectangle out of it.

Classes:
    ImageLoadError: Raised when the source image cannot be decoded

Functions:
    is_supported_input: Check the file extension against supported formats
    load_source_image: Decode an image file into an in-memory RGBA image
    image_dimensions: Get ImageDimensions of a Pillow image
    crop_pixels: Copy a region of pixels into a new image
"""

import logging
from pathlib import Path
from typing import Any, Union

from PIL import Image

from SC_Libs.CropEditingLib.crop_models import CropRegion, ImageDimensions
from SC_Libs.constants import SUPPORTED_INPUT_IMAGES

logger = logging.getLogger(__name__)


class ImageLoadError(IOError):
    """Raised when an input image is missing or cannot be decoded."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot load image {path}: {reason}")
        self.path = path
        self.reason = reason


def is_supported_input(file_path: Path) -> bool:
    return Path(file_path).suffix.lower() in SUPPORTED_INPUT_IMAGES


def load_source_image(file_path: Union[str, Path]) -> Any:
    """
    Load an image from disk.

    The file is read completely and converted to RGBA so the handle is
    closed before the editor starts.

    Args:
        file_path: Path to a PNG or JPEG file

    Returns:
        PIL Image in RGBA mode

    Raises:
        ImageLoadError: If the file does not exist or cannot be decoded
    """
    path = Path(file_path)
    if not path.is_file():
        raise ImageLoadError(path, "file not found")

    if not is_supported_input(path):
        logger.warning(f"{path.name} is not a PNG or JPEG file, trying to decode anyway")

    try:
        with Image.open(path) as img:
            img.load()
            source = img.convert("RGBA")
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise ImageLoadError(path, str(e)) from e

    logger.info(f"Loaded {path.name} ({source.width}x{source.height})")
    return source


def image_dimensions(image: Any) -> ImageDimensions:
    return ImageDimensions(width=image.width, height=image.height)


def crop_pixels(image: Any, region: CropRegion) -> Any:
    """
    Copy the pixels of ``region`` into a new image of exactly w x h.

    Args:
        image: Source PIL Image
        region: Rectangle to copy, in image pixels

    Returns:
        A new RGBA PIL Image, detached from ``image``
    """
    cropped = image.crop(region.to_box())
    if cropped.mode != "RGBA":
        cropped = cropped.convert("RGBA")
    else:
        cropped.load()
    return cropped
