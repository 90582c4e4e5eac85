import logging
from pathlib import Path
from typing import Any, Optional, Sequence, Tuple

from PyQt5.QtCore import QRect, Qt, pyqtSignal
from PyQt5.QtGui import (
    QColor,
    QFont,
    QFontDatabase,
    QFontMetrics,
    QImage,
    QPainter,
    QPen,
    QPixmap,
)
from PyQt5.QtWidgets import QLabel, QMainWindow, QWidget

from SC_Libs.CropEditingLib.crop_config import CropToolConfig
from SC_Libs.CropEditingLib.crop_exporter import CropExportError, CropExporter
from SC_Libs.CropEditingLib.crop_image_ops import image_dimensions
from SC_Libs.CropEditingLib.crop_interaction import (
    CropInteraction,
    Dragging,
    EditorKey,
    HitZone,
    KeyModifiers,
    KeyOutcome,
    PointerButton,
)
from SC_Libs.CropEditingLib.crop_models import CropRegion
from SC_Libs.CropEditingLib.crop_overlay import build_overlay
from SC_Libs.CropEditingLib.crop_region_model import CropRegionModel
from SC_Libs.CropEditingLib.preview_cache import PreviewCache
from SC_Libs.CropEditingLib.view_transform import ViewTransform
from SC_Libs.constants import (
    BACKGROUND_COLOR,
    BORDER_COLOR,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    HANDLE_COLOR,
    PREVIEW_BORDER_COLOR,
    SHADOW_COLOR,
    TEXT_COLOR,
    WINDOW_TITLE,
)

logger = logging.getLogger(__name__)

QT_KEY_MAP = {
    Qt.Key_Left: EditorKey.LEFT,
    Qt.Key_Right: EditorKey.RIGHT,
    Qt.Key_Up: EditorKey.UP,
    Qt.Key_Down: EditorKey.DOWN,
    Qt.Key_Plus: EditorKey.GROW,
    Qt.Key_Equal: EditorKey.GROW,
    Qt.Key_Minus: EditorKey.SHRINK,
    Qt.Key_S: EditorKey.SAVE,
    Qt.Key_Q: EditorKey.QUIT,
    Qt.Key_Escape: EditorKey.QUIT,
}

QT_BUTTON_MAP = {
    Qt.LeftButton: PointerButton.PRIMARY,
    Qt.RightButton: PointerButton.SECONDARY,
    Qt.MiddleButton: PointerButton.MIDDLE,
}

HIT_ZONE_CURSORS = {
    HitZone.OUTSIDE: Qt.ArrowCursor,
    HitZone.BODY: Qt.OpenHandCursor,
    HitZone.RESIZE_HANDLE: Qt.SizeFDiagCursor,
}


def translate_key(qt_key: int, qt_modifiers: Any) -> Optional[Tuple[EditorKey, KeyModifiers]]:
    """Map a Qt key code and modifier flags to editor input, or None if unbound."""
    key = QT_KEY_MAP.get(qt_key)
    if key is None:
        return None
    modifiers = KeyModifiers(
        shift=bool(int(qt_modifiers) & int(Qt.ShiftModifier)),
        ctrl=bool(int(qt_modifiers) & int(Qt.ControlModifier)),
    )
    return key, modifiers


def translate_button(qt_button: Any) -> Optional[PointerButton]:
    return QT_BUTTON_MAP.get(qt_button)


def load_overlay_font(candidates: Sequence[str], point_size: int) -> Optional[QFont]:
    """
    Load the first usable font file for the overlay text.

    Requires a running QApplication. Returns None (and logs a warning) when
    no candidate can be loaded, in which case the overlay text is skipped.
    """
    for candidate in candidates:
        if not Path(candidate).is_file():
            continue
        font_id = QFontDatabase.addApplicationFont(candidate)
        if font_id < 0:
            continue
        families = QFontDatabase.applicationFontFamilies(font_id)
        if families:
            logger.debug(f"Overlay font: {candidate}")
            return QFont(families[0], point_size)

    logger.warning("Could not load font - text overlay disabled")
    return None


def pil_to_pixmap(image: Any) -> QPixmap:
    """
    Convert a PIL Image into a QPixmap from its raw RGBA buffer.

    Args:
        image: PIL Image in any mode

    Returns:
        QPixmap holding a copy of the pixels
    """
    rgba = image if image.mode == "RGBA" else image.convert("RGBA")
    data = rgba.tobytes("raw", "RGBA")
    qimage = QImage(data, rgba.width, rgba.height, rgba.width * 4, QImage.Format_RGBA8888)
    pixmap = QPixmap.fromImage(qimage)
    if pixmap.isNull():
        logger.error("Failed to convert image to pixmap")
    return pixmap


def _qcolor(rgba: Tuple[int, int, int, int]) -> QColor:
    return QColor(*rgba)


class CropCanvas(QWidget):
    region_changed = pyqtSignal(object)
    export_finished = pyqtSignal(str)
    export_failed = pyqtSignal(str)
    quit_requested = pyqtSignal()

    def __init__(
        self,
        source_image: Any,
        config: Optional[CropToolConfig] = None,
        overlay_font: Optional[QFont] = None,
        parent=None,
    ) -> None:
        super().__init__(parent)
        self.config = config or CropToolConfig()
        self.source_image = source_image
        self.dims = image_dimensions(source_image)
        self.model = CropRegionModel(self.dims, self.config)
        self.interaction = CropInteraction(self.model, self.config)
        self.preview_cache = PreviewCache()
        self.exporter = CropExporter(
            self.config.output_dir,
            start_counter=self.config.start_counter,
            filename_template=self.config.filename_template,
        )
        self.overlay_font = overlay_font

        self._source_pixmap = pil_to_pixmap(source_image)
        self._preview_image: Optional[Any] = None
        self._preview_pixmap: Optional[QPixmap] = None

        self.setFocusPolicy(Qt.StrongFocus)
        self.setMouseTracking(True)

    def current_transform(self) -> ViewTransform:
        return ViewTransform.fit(self.width(), self.height(), self.dims)

    def _event_point(self, event) -> Tuple[float, float]:
        pos = event.pos()
        return float(pos.x()), float(pos.y())

    def _region_updated(self) -> None:
        self.region_changed.emit(self.model.region)
        self.update()

    def mousePressEvent(self, event) -> None:
        button = translate_button(event.button())
        if button is None:
            super().mousePressEvent(event)
            return

        if self.interaction.pointer_down(self._event_point(event), self.current_transform(), button):
            if isinstance(self.interaction.state, Dragging):
                self.setCursor(Qt.ClosedHandCursor)
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event) -> None:
        transform = self.current_transform()
        point = self._event_point(event)

        if self.interaction.is_idle:
            zone = self.interaction.hit_test(transform.to_image(point))
            self.setCursor(HIT_ZONE_CURSORS[zone])
            super().mouseMoveEvent(event)
            return

        if self.interaction.pointer_move(point, transform):
            self._region_updated()
        event.accept()

    def mouseReleaseEvent(self, event) -> None:
        button = translate_button(event.button())
        if button is not None and self.interaction.pointer_up(button):
            zone = self.interaction.hit_test(self.current_transform().to_image(self._event_point(event)))
            self.setCursor(HIT_ZONE_CURSORS[zone])
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def keyPressEvent(self, event) -> None:
        translated = translate_key(event.key(), event.modifiers())
        if translated is None:
            super().keyPressEvent(event)
            return

        key, modifiers = translated
        outcome = self.interaction.handle_key(key, modifiers)

        if outcome is KeyOutcome.CHANGED:
            self._region_updated()
        elif outcome is KeyOutcome.SAVE_REQUESTED:
            self.save_crop()
        elif outcome is KeyOutcome.QUIT_REQUESTED:
            self.quit_requested.emit()
        event.accept()

    def save_crop(self) -> Optional[Path]:
        try:
            saved_path = self.exporter.save(self.source_image, self.model.region)
        except CropExportError as e:
            self.export_failed.emit(str(e))
            return None

        if saved_path is not None:
            self.export_finished.emit(str(saved_path))
        return saved_path

    def _current_preview(self) -> Optional[QPixmap]:
        image = self.preview_cache.get(self.source_image, self.model.region)
        if image is None:
            self._preview_image = None
            self._preview_pixmap = None
        elif image is not self._preview_image:
            self._preview_image = image
            self._preview_pixmap = pil_to_pixmap(image)
        return self._preview_pixmap

    def paintEvent(self, event) -> None:
        region = self.model.region
        layout = build_overlay(region, self.dims, self.width(), self.height(), self.config.preview_size)
        preview = self._current_preview()

        painter = QPainter(self)
        try:
            painter.fillRect(self.rect(), _qcolor(BACKGROUND_COLOR))
            painter.setRenderHint(QPainter.SmoothPixmapTransform)
            painter.drawPixmap(QRect(*layout.image_rect), self._source_pixmap)

            if layout.selection_rect is not None:
                shadow = _qcolor(SHADOW_COLOR)
                for rect in layout.shadow_rects:
                    painter.fillRect(QRect(*rect), shadow)

                painter.setPen(QPen(_qcolor(BORDER_COLOR)))
                painter.setBrush(Qt.NoBrush)
                painter.drawRect(QRect(*layout.selection_rect))

                handle = _qcolor(HANDLE_COLOR)
                for rect in layout.handle_rects:
                    painter.fillRect(QRect(*rect), handle)

            if preview is not None:
                preview_rect = QRect(*layout.preview_rect)
                painter.drawPixmap(preview_rect, preview)
                painter.setPen(QPen(_qcolor(PREVIEW_BORDER_COLOR)))
                painter.setBrush(Qt.NoBrush)
                painter.drawRect(preview_rect)

            if self.overlay_font is not None:
                painter.setFont(self.overlay_font)
                painter.setPen(_qcolor(TEXT_COLOR))
                text_x, text_y = layout.text_origin
                baseline = text_y + QFontMetrics(self.overlay_font).ascent()
                painter.drawText(text_x, baseline, layout.text)
        finally:
            painter.end()


class CropEditorWindow(QMainWindow):
    def __init__(
        self,
        source_image: Any,
        image_path: Optional[Path] = None,
        config: Optional[CropToolConfig] = None,
        overlay_font: Optional[QFont] = None,
    ) -> None:
        super().__init__()
        self.image_path = image_path
        self.config = config or CropToolConfig()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)

        self.canvas = CropCanvas(source_image, self.config, overlay_font, parent=self)

        self._build_ui()
        self._connect_signals()

    def _build_ui(self) -> None:
        self.setCentralWidget(self.canvas)
        self.label_region = QLabel()
        self.label_source = QLabel(self.image_path.name if self.image_path else "")
        self.statusBar().addPermanentWidget(self.label_region)
        self.statusBar().addPermanentWidget(self.label_source)
        self.on_region_changed(self.canvas.model.region)
        self.canvas.setFocus()

    def _connect_signals(self) -> None:
        self.canvas.quit_requested.connect(self.close)
        self.canvas.export_finished.connect(self.on_export_finished)
        self.canvas.export_failed.connect(self.on_export_failed)
        self.canvas.region_changed.connect(self.on_region_changed)

    def on_region_changed(self, region: CropRegion) -> None:
        self.label_region.setText(f"X: {region.x}  Y: {region.y}  W: {region.w}  H: {region.h}")

    def on_export_finished(self, path: str) -> None:
        region = self.canvas.model.region
        self.statusBar().showMessage(f"Saved: {Path(path).name}  ({region.w}x{region.h})", 5000)

    def on_export_failed(self, message: str) -> None:
        self.statusBar().showMessage(message, 8000)
