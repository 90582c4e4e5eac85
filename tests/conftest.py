"""
Pytest configuration and shared fixtures for Square Cutter tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

import os

import numpy as np
import pytest
from PIL import Image
from PyQt5.QtWidgets import QApplication

from SC_Libs.CropEditingLib.crop_config import CropToolConfig
from SC_Libs.CropEditingLib.crop_interaction import CropInteraction
from SC_Libs.CropEditingLib.crop_models import ImageDimensions
from SC_Libs.CropEditingLib.crop_region_model import CropRegionModel
from SC_Libs.CropEditingLib.view_transform import ViewTransform


def make_gradient_image(width: int, height: int) -> Image.Image:
    """Build an RGBA image whose pixels differ by position."""
    ys, xs = np.mgrid[0:height, 0:width]
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    pixels[..., 0] = xs % 256
    pixels[..., 1] = ys % 256
    pixels[..., 2] = (xs * 7 + ys * 13) % 256
    pixels[..., 3] = 255
    return Image.fromarray(pixels)


@pytest.fixture
def source_image():
    """
    Provide an 800x600 RGBA image with position-dependent pixels.

    Returns:
        PIL Image in RGBA mode
    """
    return make_gradient_image(800, 600)


@pytest.fixture
def dims():
    return ImageDimensions(800, 600)


@pytest.fixture
def config():
    return CropToolConfig()


@pytest.fixture
def model(dims, config):
    """Crop region model over an 800x600 image, starting at (272, 172, 256, 256)."""
    return CropRegionModel(dims, config)


@pytest.fixture
def interaction(model, config):
    return CropInteraction(model, config)


@pytest.fixture
def identity_transform(dims):
    """View transform of a drawable exactly the image's size (scale 1, no offset)."""
    return ViewTransform.fit(dims.width, dims.height, dims)


@pytest.fixture
def window_transform(dims):
    """View transform of the default 1280x900 window (scale 1.5, 40 px side margins)."""
    return ViewTransform.fit(1280, 900, dims)


@pytest.fixture(scope="session")
def qapp():
    """
    Provide a QApplication on the offscreen platform.

    Widgets are never shown; events are delivered with QApplication.sendEvent
    and painting is triggered with QWidget.grab.
    """
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app
