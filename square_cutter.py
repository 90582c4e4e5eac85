"""
Square Cutter - select a square region of an image and save it as PNG.

Usage:
    python square_cutter.py <image.png|jpg>

Controls:
    Drag inside the square to move it, drag its bottom-right corner to resize.
    Arrows nudge by 1 px, Shift+Arrows resize by 1 px, Ctrl+Arrows jump by
    the square's size. +/- grow/shrink by 16 px around the center.
    S saves crop_NNN_WxH.png into the current directory, Q/Esc quits.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from PyQt5.QtWidgets import QApplication

from SC_Libs.CropEditingLib.crop_config import CropToolConfig
from SC_Libs.CropEditingLib.crop_editor_window import CropEditorWindow, load_overlay_font
from SC_Libs.CropEditingLib.crop_image_ops import ImageLoadError, load_source_image

logger = logging.getLogger("square_cutter")

USAGE = "Usage: {prog} <image.png|jpg>"


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)


def print_usage(prog: str) -> None:
    print(USAGE.format(prog=prog), file=sys.stderr)


def main(argv: Optional[List[str]] = None, config: Optional[CropToolConfig] = None) -> int:
    argv = list(sys.argv if argv is None else argv)
    prog = Path(argv[0]).name if argv else "square_cutter.py"

    if len(argv) != 2:
        print_usage(prog)
        return 1

    configure_logging()
    config = config or CropToolConfig()
    image_path = Path(argv[1])

    try:
        source_image = load_source_image(image_path)
    except ImageLoadError as e:
        logger.error(str(e))
        return 1

    app = QApplication.instance() or QApplication(argv)
    overlay_font = load_overlay_font(config.font_candidates, config.font_point_size)

    window = CropEditorWindow(source_image, image_path, config, overlay_font)
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
