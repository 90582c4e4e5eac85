"""
Configuration for the crop editor.

Classes:
    CropToolConfig: Tunables for region sizing, input handling, export and overlay
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Tuple

from SC_Libs.constants import (
    CROP_FILENAME_TEMPLATE,
    DEFAULT_SQUARE_SIZE,
    FIRST_CROP_COUNTER,
    FONT_CANDIDATES,
    FONT_POINT_SIZE,
    MAX_SQUARE_SIZE,
    MIN_SQUARE_SIZE,
    PREVIEW_SIZE,
    RESIZE_HANDLE_THRESHOLD,
    RESIZE_STEP,
)


@dataclass
class CropToolConfig:
    """Configuration for a crop editing session.

    Attributes:
        default_size: Side length of the startup region
        min_size: Smallest side length a region may shrink to
        max_size: Largest side length reachable with the grow key
        resize_step: Side length change per grow/shrink key press
        handle_threshold: Bottom-right grab distance in image pixels
        modifier_keys_enabled: Honor Shift/Ctrl arrow variants (False = arrows
                               always nudge by one pixel)
        output_dir: Directory crop files are written to
        filename_template: Format string with {counter}, {w} and {h} fields
        start_counter: First counter value used for exported files
        preview_size: Side of the on-screen preview square in display pixels
        font_candidates: Font files tried in order for the overlay text
        font_point_size: Point size of the overlay text
    """
    default_size: int = DEFAULT_SQUARE_SIZE
    min_size: int = MIN_SQUARE_SIZE
    max_size: int = MAX_SQUARE_SIZE
    resize_step: int = RESIZE_STEP
    handle_threshold: float = RESIZE_HANDLE_THRESHOLD
    modifier_keys_enabled: bool = True
    output_dir: str = "."
    filename_template: str = CROP_FILENAME_TEMPLATE
    start_counter: int = FIRST_CROP_COUNTER
    preview_size: int = PREVIEW_SIZE
    font_candidates: Tuple[str, ...] = field(default_factory=lambda: tuple(FONT_CANDIDATES))
    font_point_size: int = FONT_POINT_SIZE

    def __post_init__(self):
        """Validate sizing parameters."""
        if self.min_size < 1:
            raise ValueError(f"min_size must be >= 1, got {self.min_size}")
        if self.max_size < self.min_size:
            raise ValueError(
                f"max_size ({self.max_size}) must be >= min_size ({self.min_size})"
            )
        if not self.min_size <= self.default_size <= self.max_size:
            raise ValueError(
                f"default_size must be within [{self.min_size}, {self.max_size}], "
                f"got {self.default_size}"
            )
        if self.resize_step < 1:
            raise ValueError(f"resize_step must be >= 1, got {self.resize_step}")
        if self.handle_threshold <= 0:
            raise ValueError(f"handle_threshold must be > 0, got {self.handle_threshold}")
        if self.start_counter < 0:
            raise ValueError(f"start_counter must be >= 0, got {self.start_counter}")
        self.font_candidates = tuple(self.font_candidates)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["font_candidates"] = list(self.font_candidates)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CropToolConfig":
        """Create from dictionary, ignoring unknown keys."""
        filtered = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**filtered)
