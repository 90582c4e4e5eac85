"""
Crop exporter for Square Cutter.

Writes the current crop region to a PNG file named from a running counter
and the region size, e.g. ``crop_001_256x256.png``. The counter belongs to
the exporter instance and advances on every attempted save, successful or
not.

Classes:
    CropExportError: Raised when a crop cannot be written
    CropExporter: Owns the counter and performs the save
"""

import logging
from pathlib import Path
from typing import Any, Optional, Union

from SC_Libs.CropEditingLib.crop_image_ops import crop_pixels
from SC_Libs.CropEditingLib.crop_models import CropRegion
from SC_Libs.constants import CROP_FILENAME_TEMPLATE, DEFAULT_OUTPUT_FORMAT, FIRST_CROP_COUNTER

logger = logging.getLogger(__name__)


class CropExportError(IOError):
    """Raised when a crop file cannot be encoded or written."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Failed to save {path}: {reason}")
        self.path = path
        self.reason = reason


class CropExporter:
    """
    Saves crop regions of a source image as numbered PNG files.

    Example:
        >>> exporter = CropExporter(Path("out"))
        >>> exporter.save(image, CropRegion(272, 172, 256, 256))
        PosixPath('out/crop_001_256x256.png')
    """

    def __init__(
        self,
        output_dir: Union[str, Path] = ".",
        start_counter: int = FIRST_CROP_COUNTER,
        filename_template: str = CROP_FILENAME_TEMPLATE,
    ):
        self.output_dir = Path(output_dir)
        self.filename_template = filename_template
        self._counter = int(start_counter)

    @property
    def next_counter(self) -> int:
        return self._counter

    def resolve_filename(self, counter: int, region: CropRegion) -> Path:
        return self.output_dir / self.filename_template.format(
            counter=counter, w=region.w, h=region.h
        )

    def save(self, source: Any, region: CropRegion) -> Optional[Path]:
        """
        Save ``region`` of ``source`` to the next numbered file.

        Args:
            source: Source PIL Image
            region: Crop region to export

        Returns:
            Path of the written file, or None for an empty region

        Raises:
            CropExportError: If the crop cannot be encoded or written
        """
        if region.is_empty:
            return None

        counter = self._counter
        self._counter += 1
        save_path = self.resolve_filename(counter, region)

        try:
            cropped = crop_pixels(source, region)
            cropped.save(save_path, format=DEFAULT_OUTPUT_FORMAT)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to save {save_path}: {e}")
            raise CropExportError(save_path, str(e)) from e

        logger.info(f"Saved: {save_path.name}  ({region.w}x{region.h})")
        return save_path
