"""
Coordinate transform between image space and display space.

The source image is scaled uniformly to fit the drawable area and centered
inside it (letterboxed). A ViewTransform is rebuilt from the current
drawable size on every paint and pointer event, because the window can be
resized at any time.
"""

from dataclasses import dataclass
from typing import Tuple

from SC_Libs.CropEditingLib.crop_models import CropRegion, ImageDimensions, ImagePoint

DisplayRect = Tuple[int, int, int, int]


@dataclass(frozen=True)
class ViewTransform:
    scale: float
    offset_x: int
    offset_y: int

    @classmethod
    def fit(cls, drawable_width: int, drawable_height: int, image: ImageDimensions) -> "ViewTransform":
        """
        Build the aspect-preserving fit of ``image`` into the drawable area.

        Args:
            drawable_width: Current drawable width in display pixels
            drawable_height: Current drawable height in display pixels
            image: Native size of the source image

        Returns:
            ViewTransform with uniform scale and centering offsets

        A drawable that is not realized yet (zero or negative size) is
        treated as 1x1 so the transform stays defined.
        """
        disp_w = max(1, int(drawable_width))
        disp_h = max(1, int(drawable_height))

        scale = min(disp_w / image.width, disp_h / image.height)
        offset_x = (disp_w - int(image.width * scale)) // 2
        offset_y = (disp_h - int(image.height * scale)) // 2
        return cls(scale=scale, offset_x=offset_x, offset_y=offset_y)

    def to_display(self, point: ImagePoint) -> ImagePoint:
        x, y = point
        return x * self.scale + self.offset_x, y * self.scale + self.offset_y

    def to_image(self, point: ImagePoint) -> ImagePoint:
        x, y = point
        return (x - self.offset_x) / self.scale, (y - self.offset_y) / self.scale

    def image_rect(self, image: ImageDimensions) -> DisplayRect:
        """Destination rectangle of the whole scaled image."""
        return (
            self.offset_x,
            self.offset_y,
            int(image.width * self.scale),
            int(image.height * self.scale),
        )

    def display_rect(self, region: CropRegion) -> DisplayRect:
        """Integer display rectangle used to draw ``region``."""
        return (
            int(region.x * self.scale) + self.offset_x,
            int(region.y * self.scale) + self.offset_y,
            int(region.w * self.scale),
            int(region.h * self.scale),
        )
