"""
Crop region mutation policies for Square Cutter.

Pure functions that take a valid CropRegion and return a new one that is
still square, at least the minimum size and fully inside the image. Every
function clamps internally, so callers never see an invalid intermediate
region.

Functions:
    effective_min_size: Minimum side length achievable for an image
    initial_region: Centered default square for a freshly loaded image
    clamp_position: Translate a region fully inside the image
    translate: Move by a pixel offset, clamped to bounds
    place: Move the top-left corner to a position, clamped to bounds
    page_jump: Move by whole region sizes, only if the result stays in bounds
    resize_centered: Grow or shrink around the region's center
    resize_from_corner: Resize with the top-left corner anchored
"""

from typing import Optional

from SC_Libs.CropEditingLib.crop_models import CropRegion, ImageDimensions
from SC_Libs.constants import DEFAULT_SQUARE_SIZE, MAX_SQUARE_SIZE, MIN_SQUARE_SIZE


def effective_min_size(dims: ImageDimensions, min_size: int = MIN_SQUARE_SIZE) -> int:
    """
    Get the smallest side length a region may have on this image.

    Args:
        dims: Size of the source image
        min_size: Configured minimum side length

    Returns:
        ``min_size``, reduced to the image's shorter side for tiny images
    """
    return max(1, min(min_size, dims.shorter_side))


def initial_region(
    dims: ImageDimensions,
    default_size: int = DEFAULT_SQUARE_SIZE,
    min_size: int = MIN_SQUARE_SIZE,
) -> CropRegion:
    """
    Create the startup region, centered within the image.

    Args:
        dims: Size of the source image
        default_size: Preferred side length
        min_size: Configured minimum side length

    Returns:
        A square CropRegion of ``default_size`` (or smaller if the image is
        smaller than that), centered in the image
    """
    side = max(effective_min_size(dims, min_size), min(default_size, dims.shorter_side))
    return CropRegion(
        x=(dims.width - side) // 2,
        y=(dims.height - side) // 2,
        w=side,
        h=side,
    )


def clamp_position(region: CropRegion, dims: ImageDimensions) -> CropRegion:
    """Translate ``region`` so that both corners lie inside the image."""
    x = min(max(region.x, 0), dims.width - region.w)
    y = min(max(region.y, 0), dims.height - region.h)
    if x == region.x and y == region.y:
        return region
    return CropRegion(x=x, y=y, w=region.w, h=region.h)


def translate(region: CropRegion, dx: int, dy: int, dims: ImageDimensions) -> CropRegion:
    return place(region, region.x + dx, region.y + dy, dims)


def place(region: CropRegion, x: int, y: int, dims: ImageDimensions) -> CropRegion:
    return clamp_position(CropRegion(x=int(x), y=int(y), w=region.w, h=region.h), dims)


def page_jump(
    region: CropRegion, steps_x: int, steps_y: int, dims: ImageDimensions
) -> Optional[CropRegion]:
    """
    Move the region by its own width/height per step.

    Args:
        region: Current region
        steps_x: Horizontal steps (-1 left, +1 right, 0 none)
        steps_y: Vertical steps (-1 up, +1 down, 0 none)
        dims: Size of the source image

    Returns:
        The moved region, or None when the destination would leave the image
    """
    moved = CropRegion(
        x=region.x + steps_x * region.w,
        y=region.y + steps_y * region.h,
        w=region.w,
        h=region.h,
    )
    if not moved.fits_within(dims):
        return None
    return moved


def resize_centered(
    region: CropRegion,
    delta: int,
    dims: ImageDimensions,
    min_size: int = MIN_SQUARE_SIZE,
    max_size: int = MAX_SQUARE_SIZE,
) -> CropRegion:
    """
    Grow or shrink both sides by ``delta`` while keeping the center.

    The new top-left is derived from the unchanged center and the result is
    then translated back inside the image. Growth that would exceed
    ``max_size`` or the image's shorter side is rejected outright and the
    region is returned unchanged. Shrinking stops at the minimum size.

    Args:
        region: Current square region
        delta: Side length change in pixels (positive grows)
        dims: Size of the source image
        min_size: Configured minimum side length
        max_size: Maximum side length

    Returns:
        The resized region, or ``region`` itself when nothing changes
    """
    side = region.w + delta
    if delta > 0:
        if side > max_size or side > dims.shorter_side:
            return region
    else:
        side = max(side, effective_min_size(dims, min_size))
    if side == region.w:
        return region

    center_x, center_y = region.center
    resized = CropRegion(x=center_x - side // 2, y=center_y - side // 2, w=side, h=side)
    return clamp_position(resized, dims)


def resize_from_corner(
    region: CropRegion,
    width: int,
    height: int,
    dims: ImageDimensions,
    min_size: int = MIN_SQUARE_SIZE,
) -> CropRegion:
    """
    Resize with the top-left corner fixed, then force the result square.

    Args:
        region: Current region; its top-left corner is kept
        width: Requested width
        height: Requested height
        dims: Size of the source image
        min_size: Configured minimum side length

    Returns:
        Square region whose side is ``min(width, height)`` after both were
        floored at the minimum and capped so the bottom-right corner stays
        inside the image
    """
    floor = effective_min_size(dims, min_size)
    new_w = min(max(int(width), floor), dims.width - region.x)
    new_h = min(max(int(height), floor), dims.height - region.y)
    side = min(new_w, new_h)
    if side == region.w and side == region.h:
        return region
    return CropRegion(x=region.x, y=region.y, w=side, h=side)
