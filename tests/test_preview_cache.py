"""
Unit tests for the single-slot preview cache.
"""

import numpy as np

from SC_Libs.CropEditingLib.crop_models import CropRegion
from SC_Libs.CropEditingLib.preview_cache import PreviewCache


class TestPreviewCache:
    """Tests for PreviewCache.get and invalidate."""

    def test_starts_empty(self):
        cache = PreviewCache()

        assert cache.image is None
        assert cache.region is None

    def test_same_region_returns_same_object(self, source_image):
        cache = PreviewCache()
        region = CropRegion(272, 172, 256, 256)

        first = cache.get(source_image, region)
        second = cache.get(source_image, CropRegion(272, 172, 256, 256))

        assert first is second
        assert cache.region == region

    def test_same_region_does_not_recrop(self, source_image):
        cache = PreviewCache()
        region = CropRegion(10, 10, 64, 64)
        cache.get(source_image, region)

        class CountingImage:
            calls = 0

            def crop(self, box):
                CountingImage.calls += 1
                return source_image.crop(box)

        cache.get(CountingImage(), region)

        assert CountingImage.calls == 0

    def test_new_region_replaces_entry(self, source_image):
        cache = PreviewCache()
        old = cache.get(source_image, CropRegion(272, 172, 256, 256))

        new_region = CropRegion(0, 0, 100, 100)
        new = cache.get(source_image, new_region)

        assert new is not old
        assert new.size == (100, 100)
        assert cache.region == new_region

    def test_pixels_match_source(self, source_image):
        cache = PreviewCache()
        region = CropRegion(264, 164, 272, 272)

        preview = cache.get(source_image, region)

        expected = np.asarray(source_image)[164:164 + 272, 264:264 + 272]
        assert np.array_equal(np.asarray(preview), expected)

    def test_empty_region_holds_nothing(self, source_image):
        cache = PreviewCache()
        cache.get(source_image, CropRegion(0, 0, 50, 50))

        assert cache.get(source_image, CropRegion(0, 0, 0, 50)) is None
        assert cache.image is None
        assert cache.region is None

    def test_invalidate_forces_regeneration(self, source_image):
        cache = PreviewCache()
        region = CropRegion(0, 0, 50, 50)
        first = cache.get(source_image, region)

        cache.invalidate()

        assert cache.get(source_image, region) is not first
