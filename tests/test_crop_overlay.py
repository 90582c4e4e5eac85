"""
Unit tests for the frame layout computed in crop_overlay.
"""

from SC_Libs.CropEditingLib.crop_models import CropRegion
from SC_Libs.CropEditingLib.crop_overlay import (
    build_overlay,
    handle_rects,
    overlay_text,
    preview_rect,
    shadow_rects,
)


def rect_area(rect):
    return max(0, rect[2]) * max(0, rect[3])


class TestShadowRects:
    """Tests for shadow_rects function."""

    def test_bands_surround_selection(self):
        bands = shadow_rects((100, 50, 200, 200), 800, 600)

        assert bands == [
            (0, 0, 800, 50),
            (0, 250, 800, 350),
            (0, 50, 100, 200),
            (300, 50, 500, 200),
        ]

    def test_bands_cover_everything_but_selection(self):
        selection = (100, 50, 200, 200)

        covered = sum(rect_area(r) for r in shadow_rects(selection, 800, 600))

        assert covered == 800 * 600 - rect_area(selection)


class TestHandleRects:
    """Tests for handle_rects function."""

    def test_squares_centered_on_corners(self):
        handles = handle_rects((100, 50, 200, 200), size=14)

        assert handles == [
            (93, 43, 14, 14),
            (293, 43, 14, 14),
            (93, 243, 14, 14),
            (293, 243, 14, 14),
        ]


class TestPreviewAndText:
    """Tests for preview_rect and overlay_text."""

    def test_preview_in_bottom_right(self):
        assert preview_rect(1280, 900) == (1004, 624, 256, 256)

    def test_overlay_text(self):
        text = overlay_text(CropRegion(272, 172, 256, 256))

        assert text.startswith("X: 272   Y: 172    W: 256   H: 256")
        assert "S = save" in text


class TestBuildOverlay:
    """Tests for build_overlay function."""

    def test_default_window_layout(self, dims):
        layout = build_overlay(CropRegion(272, 172, 256, 256), dims, 1280, 900)

        assert layout.image_rect == (40, 0, 1200, 900)
        assert layout.selection_rect == (448, 258, 384, 384)
        assert len(layout.shadow_rects) == 4
        assert len(layout.handle_rects) == 4
        assert layout.preview_rect == (1004, 624, 256, 256)
        assert layout.text_origin == (16, 16)

    def test_empty_region_draws_no_selection(self, dims):
        layout = build_overlay(CropRegion(0, 0, 0, 0), dims, 800, 600)

        assert layout.selection_rect is None
        assert layout.shadow_rects == []
        assert layout.handle_rects == []

    def test_unrealized_window(self, dims):
        layout = build_overlay(CropRegion(272, 172, 256, 256), dims, 0, 0)

        assert layout.image_rect[2] <= 1
        assert layout.image_rect[3] <= 1
