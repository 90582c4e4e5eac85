"""
Stateful crop region model.

CropRegionModel owns the current selection for one image and applies the
mutation policies from crop_region_ops. Every mutator returns True when the
region actually changed; the region is valid before and after each call.
"""

import logging
from typing import Optional

from SC_Libs.CropEditingLib.crop_config import CropToolConfig
from SC_Libs.CropEditingLib.crop_models import CropRegion, ImageDimensions
from SC_Libs.CropEditingLib import crop_region_ops

logger = logging.getLogger(__name__)


class CropRegionModel:
    """
    Current crop selection over an image of fixed size.

    Example:
        >>> model = CropRegionModel(ImageDimensions(800, 600))
        >>> model.region
        CropRegion(x=272, y=172, w=256, h=256)
        >>> model.resize_centered(16)
        True
        >>> model.region
        CropRegion(x=264, y=164, w=272, h=272)
    """

    def __init__(self, dims: ImageDimensions, config: Optional[CropToolConfig] = None):
        self.dims = dims
        self.config = config or CropToolConfig()
        self._region = crop_region_ops.initial_region(
            dims, self.config.default_size, self.config.min_size
        )

    @property
    def region(self) -> CropRegion:
        return self._region

    @property
    def min_size(self) -> int:
        return crop_region_ops.effective_min_size(self.dims, self.config.min_size)

    def _commit(self, region: Optional[CropRegion]) -> bool:
        if region is None or region == self._region:
            return False
        self._region = region
        logger.debug(f"Crop region -> {region}")
        return True

    def move_by(self, dx: int, dy: int) -> bool:
        return self._commit(crop_region_ops.translate(self._region, dx, dy, self.dims))

    def move_to(self, x: int, y: int) -> bool:
        return self._commit(crop_region_ops.place(self._region, x, y, self.dims))

    def page_jump(self, steps_x: int, steps_y: int) -> bool:
        """Jump by whole region sizes; rejected if the target leaves the image."""
        return self._commit(crop_region_ops.page_jump(self._region, steps_x, steps_y, self.dims))

    def resize_centered(self, delta: int) -> bool:
        return self._commit(
            crop_region_ops.resize_centered(
                self._region, delta, self.dims, self.config.min_size, self.config.max_size
            )
        )

    def resize_from_corner(self, width: int, height: int) -> bool:
        return self._commit(
            crop_region_ops.resize_from_corner(
                self._region, width, height, self.dims, self.config.min_size
            )
        )

    def nudge_size(self, dw: int, dh: int) -> bool:
        """
        Single-pixel resize with the top-left corner anchored.

        The edited dimension decides the new side length. No recentering
        happens here, unlike resize_centered.
        """
        if dw:
            side = self._region.w + dw
        elif dh:
            side = self._region.h + dh
        else:
            return False
        return self.resize_from_corner(side, side)
