"""
CropEditingLib - Interactive square crop editing

This module provides the crop region model, the interaction state machine,
the preview cache, the exporter and the editor window for Square Cutter.
The Qt window lives in crop_editor_window and is not imported here, so the
model layer can be used without a display.
"""

from SC_Libs.CropEditingLib.crop_config import CropToolConfig
from SC_Libs.CropEditingLib.crop_models import CropRegion, ImageDimensions
from SC_Libs.CropEditingLib.view_transform import ViewTransform
from SC_Libs.CropEditingLib.crop_region_model import CropRegionModel
from SC_Libs.CropEditingLib.crop_interaction import (
    CropInteraction,
    Dragging,
    EditorKey,
    HitZone,
    Idle,
    KeyModifiers,
    KeyOutcome,
    PointerButton,
    Resizing,
)
from SC_Libs.CropEditingLib.crop_image_ops import ImageLoadError, crop_pixels, load_source_image
from SC_Libs.CropEditingLib.preview_cache import PreviewCache
from SC_Libs.CropEditingLib.crop_exporter import CropExportError, CropExporter

__all__ = [
    "CropToolConfig",
    "CropRegion",
    "ImageDimensions",
    "ViewTransform",
    "CropRegionModel",
    "CropInteraction",
    "Dragging",
    "EditorKey",
    "HitZone",
    "Idle",
    "KeyModifiers",
    "KeyOutcome",
    "PointerButton",
    "Resizing",
    "ImageLoadError",
    "crop_pixels",
    "load_source_image",
    "PreviewCache",
    "CropExportError",
    "CropExporter",
]
