"""
Frame layout for the crop editor.

Computes, in display pixels, everything the editor window paints on top of
the scaled source image: the dimming bands outside the selection, the
selection border, the corner handles, the preview square and the readout
text. Keeping this free of Qt lets it be tested without a display.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from SC_Libs.CropEditingLib.crop_models import CropRegion, ImageDimensions
from SC_Libs.CropEditingLib.view_transform import DisplayRect, ViewTransform
from SC_Libs.constants import (
    HANDLE_SQUARE_SIZE,
    OVERLAY_TEXT_TEMPLATE,
    PREVIEW_MARGIN,
    PREVIEW_SIZE,
    TEXT_ORIGIN_X,
    TEXT_ORIGIN_Y,
)


@dataclass(frozen=True)
class OverlayLayout:
    image_rect: DisplayRect
    selection_rect: Optional[DisplayRect]
    shadow_rects: List[DisplayRect]
    handle_rects: List[DisplayRect]
    preview_rect: DisplayRect
    text: str
    text_origin: Tuple[int, int] = (TEXT_ORIGIN_X, TEXT_ORIGIN_Y)


def shadow_rects(selection: DisplayRect, disp_w: int, disp_h: int) -> List[DisplayRect]:
    """Four bands covering the drawable area outside ``selection``: top, bottom, left, right."""
    x, y, w, h = selection
    return [
        (0, 0, disp_w, y),
        (0, y + h, disp_w, disp_h - (y + h)),
        (0, y, x, h),
        (x + w, y, disp_w - (x + w), h),
    ]


def handle_rects(selection: DisplayRect, size: int = HANDLE_SQUARE_SIZE) -> List[DisplayRect]:
    """Squares centered on the top-left, top-right, bottom-left and bottom-right corners."""
    x, y, w, h = selection
    half = size // 2
    return [
        (x - half, y - half, size, size),
        (x + w - half, y - half, size, size),
        (x - half, y + h - half, size, size),
        (x + w - half, y + h - half, size, size),
    ]


def preview_rect(
    disp_w: int, disp_h: int, size: int = PREVIEW_SIZE, margin: int = PREVIEW_MARGIN
) -> DisplayRect:
    return (disp_w - size - margin, disp_h - size - margin, size, size)


def overlay_text(region: CropRegion) -> str:
    return OVERLAY_TEXT_TEMPLATE.format(x=region.x, y=region.y, w=region.w, h=region.h)


def build_overlay(
    region: CropRegion,
    dims: ImageDimensions,
    disp_w: int,
    disp_h: int,
    preview_size: int = PREVIEW_SIZE,
) -> OverlayLayout:
    """
    Lay out one frame.

    Args:
        region: Current crop region
        dims: Size of the source image
        disp_w: Drawable width
        disp_h: Drawable height
        preview_size: Side of the preview square

    Returns:
        OverlayLayout with every rectangle in display pixels
    """
    disp_w = max(1, disp_w)
    disp_h = max(1, disp_h)
    transform = ViewTransform.fit(disp_w, disp_h, dims)

    selection = None
    shadows: List[DisplayRect] = []
    handles: List[DisplayRect] = []
    if not region.is_empty:
        selection = transform.display_rect(region)
        shadows = shadow_rects(selection, disp_w, disp_h)
        handles = handle_rects(selection)

    return OverlayLayout(
        image_rect=transform.image_rect(dims),
        selection_rect=selection,
        shadow_rects=shadows,
        handle_rects=handles,
        preview_rect=preview_rect(disp_w, disp_h, preview_size),
        text=overlay_text(region),
    )
