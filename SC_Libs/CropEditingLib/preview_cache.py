"""
Single-slot preview cache.

Holds the pixels of the last crop region together with the region they were
copied from. Asking again for the same region returns the very same image
object; any other region replaces the entry wholesale.
"""

import logging
from typing import Any, Optional

from SC_Libs.CropEditingLib.crop_image_ops import crop_pixels
from SC_Libs.CropEditingLib.crop_models import CropRegion

logger = logging.getLogger(__name__)


class PreviewCache:
    def __init__(self):
        self._region: Optional[CropRegion] = None
        self._image: Optional[Any] = None

    @property
    def region(self) -> Optional[CropRegion]:
        return self._region

    @property
    def image(self) -> Optional[Any]:
        return self._image

    def get(self, source: Any, region: CropRegion) -> Optional[Any]:
        """
        Get the cropped preview for ``region``.

        Args:
            source: Source PIL Image
            region: Current crop region

        Returns:
            Cropped PIL Image, or None for an empty region
        """
        if self._image is not None and region == self._region:
            return self._image

        self.invalidate()
        if region.is_empty:
            return None

        self._image = crop_pixels(source, region)
        self._region = region
        logger.debug(f"Preview regenerated for {region}")
        return self._image

    def invalidate(self) -> None:
        self._region = None
        self._image = None
