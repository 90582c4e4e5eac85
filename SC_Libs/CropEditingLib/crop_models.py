"""
Crop editing data models for Square Cutter.

This module defines the core data structures shared by the crop region
model, the interaction state machine, the preview cache and the exporter.

Classes:
    ImageDimensions: Native size of the loaded source image
    CropRegion: Immutable snapshot of the selection rectangle in image space

Type Aliases:
    ImagePoint: A pair of floats in image-space pixel units
"""

from dataclasses import dataclass
from typing import Tuple

ImagePoint = Tuple[float, float]


@dataclass(frozen=True)
class ImageDimensions:
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Image dimensions must be positive, got {self.width}x{self.height}"
            )

    @property
    def shorter_side(self) -> int:
        return min(self.width, self.height)


@dataclass(frozen=True)
class CropRegion:
    """Selection rectangle in image-space pixels, origin top-left.

    Snapshots are immutable so they can be compared against the one the
    preview cache was built from.
    """

    x: int
    y: int
    w: int
    h: int

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    @property
    def center(self) -> Tuple[int, int]:
        return self.x + self.w // 2, self.y + self.h // 2

    @property
    def is_empty(self) -> bool:
        return self.w <= 0 or self.h <= 0

    def contains(self, point: ImagePoint) -> bool:
        """Inclusive on all four edges, so the bottom-right corner itself hits."""
        px, py = point
        return self.x <= px <= self.right and self.y <= py <= self.bottom

    def fits_within(self, dims: ImageDimensions) -> bool:
        return (
            self.x >= 0
            and self.y >= 0
            and self.right <= dims.width
            and self.bottom <= dims.height
        )

    def to_box(self) -> Tuple[int, int, int, int]:
        """Return the (left, upper, right, lower) box Pillow's crop expects."""
        return self.x, self.y, self.right, self.bottom
