"""
Unit tests for the CropRegionModel class.

Tests that every mutator reports changes correctly and that the region
stays square, at least the minimum size and inside the image after any
sequence of mutations.
"""

import random

import pytest

from SC_Libs.CropEditingLib.crop_config import CropToolConfig
from SC_Libs.CropEditingLib.crop_models import CropRegion, ImageDimensions
from SC_Libs.CropEditingLib.crop_region_model import CropRegionModel


def assert_region_valid(model: CropRegionModel) -> None:
    region = model.region
    assert region.w == region.h
    assert region.w >= model.min_size
    assert region.x >= 0 and region.y >= 0
    assert region.right <= model.dims.width
    assert region.bottom <= model.dims.height


class TestInitialState:
    """Tests for the startup region."""

    def test_initial_region_is_centered(self, model):
        assert model.region == CropRegion(272, 172, 256, 256)

    def test_uses_configured_default_size(self, dims):
        model = CropRegionModel(dims, CropToolConfig(default_size=100))

        assert model.region == CropRegion(350, 250, 100, 100)

    def test_default_config_when_none_given(self, dims):
        model = CropRegionModel(dims)

        assert model.config.min_size == 32


class TestMutators:
    """Tests for change reporting of each mutator."""

    def test_move_by_reports_change(self, model):
        assert model.move_by(1, 0) is True
        assert model.region.x == 273

    def test_move_by_at_edge_reports_no_change(self, dims):
        model = CropRegionModel(dims)
        model.move_to(0, 0)

        assert model.move_by(-1, 0) is False
        assert model.move_by(0, -1) is False
        assert model.region == CropRegion(0, 0, 256, 256)

    def test_move_to_same_position_is_no_change(self, model):
        assert model.move_to(272, 172) is False

    def test_page_jump_then_rejected(self, model):
        """Scenario: Ctrl+Right twice from the initial region."""
        assert model.page_jump(1, 0) is True
        assert model.region.x == 528

        assert model.page_jump(1, 0) is False
        assert model.region == CropRegion(528, 172, 256, 256)

    def test_resize_centered_grow(self, model):
        """Scenario: one +16 step from the initial region."""
        assert model.resize_centered(16) is True
        assert model.region == CropRegion(264, 164, 272, 272)
        assert model.region.fits_within(model.dims)

    def test_resize_from_corner(self, model):
        assert model.resize_from_corner(328, 328) is True
        assert model.region == CropRegion(272, 172, 328, 328)

    def test_nudge_size_grows_without_recentering(self, model):
        assert model.nudge_size(1, 0) is True
        assert model.region == CropRegion(272, 172, 257, 257)

    def test_nudge_size_shrinks_without_recentering(self, model):
        assert model.nudge_size(0, -1) is True
        assert model.region == CropRegion(272, 172, 255, 255)

    def test_nudge_size_at_minimum_is_no_change(self, dims):
        model = CropRegionModel(dims, CropToolConfig(default_size=32))

        assert model.nudge_size(-1, 0) is False
        assert model.region.w == 32

    def test_nudge_size_without_delta_is_no_change(self, model):
        assert model.nudge_size(0, 0) is False


class TestInvariants:
    """Random mutation sequences never break the region invariants."""

    @pytest.mark.parametrize("seed", range(5))
    @pytest.mark.parametrize("size", [(800, 600), (300, 1200), (40, 40), (20, 90)])
    def test_invariants_hold_after_every_mutation(self, seed, size):
        rng = random.Random(seed)
        model = CropRegionModel(ImageDimensions(*size))
        assert_region_valid(model)

        operations = [
            lambda: model.move_by(rng.randint(-50, 50), rng.randint(-50, 50)),
            lambda: model.move_to(rng.randint(-2000, 2000), rng.randint(-2000, 2000)),
            lambda: model.page_jump(rng.choice((-1, 0, 1)), rng.choice((-1, 0, 1))),
            lambda: model.resize_centered(rng.choice((-16, 16))),
            lambda: model.resize_from_corner(rng.randint(-100, 3000), rng.randint(-100, 3000)),
            lambda: model.nudge_size(rng.choice((-1, 0, 1)), rng.choice((-1, 0, 1))),
        ]

        for _ in range(300):
            rng.choice(operations)()
            assert_region_valid(model)
