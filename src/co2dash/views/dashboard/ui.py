"""
UI layout and component initialization for the dashboard window.
Separates visual construction from the window controller.
"""

from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QImage, QPixmap
from PyQt6.QtWidgets import (
    QButtonGroup, QHBoxLayout, QLabel, QPushButton, QRadioButton,
    QSizePolicy, QSlider, QStackedWidget, QVBoxLayout, QWidget, QGridLayout
)

from co2dash import constants
from co2dash.core.theme import Theme
from co2dash.utils import styles as style_utils
from co2dash.views.dashboard.renderer import ChartImage


def chart_image_to_qimage(image: ChartImage) -> QImage:
    """Wraps the RGBA buffer in a QImage that owns its own copy of the pixels."""
    buffer = image.rgba.tobytes()
    qimage = QImage(buffer, image.width, image.height, 4 * image.width, QImage.Format.Format_RGBA8888)
    return qimage.copy()


class ChartView(QLabel):
    """
    Displays a cached chart image, scaled to the available space.
    Resizing only rescales the pixmap; it never asks for a new render.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(200, 120)
        self._pixmap: Optional[QPixmap] = None
        self._image: Optional[ChartImage] = None

    @property
    def image(self) -> Optional[ChartImage]:
        return self._image

    def set_chart(self, image: Optional[ChartImage]) -> None:
        if image is self._image:
            return
        self._image = image
        self._pixmap = QPixmap.fromImage(chart_image_to_qimage(image)) if image is not None else None
        self._rescale()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._rescale()

    def _rescale(self) -> None:
        if self._pixmap is None:
            self.clear()
            return
        self.setPixmap(self._pixmap.scaled(
            self.size(),
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        ))


class DashboardWindowUI:
    """ Handles all UI layout and component initialization for DashboardWindow. """

    PAGE_LOADING = 0
    PAGE_LOADED = 1
    PAGE_ERROR = 2

    def __init__(self, window: QWidget):
        self.window = window
        self.logger = window.logger

        self.stack = None
        # Loaded page
        self.co2_value = None
        self.tvoc_value = None
        self.quality_value = None
        self.status_value = None
        self.updated_value = None
        self.low_slider = None
        self.high_slider = None
        self.low_time_label = None
        self.high_time_label = None
        self.theme_group = None
        self.theme_buttons = {}
        self.refresh_button = None
        self.chart_view = None
        # Error page
        self.error_refresh_button = None

    def setupUi(self):
        """Constructs the three state pages inside a stacked widget."""
        root = QVBoxLayout(self.window)
        root.setContentsMargins(16, 16, 16, 16)
        self.stack = QStackedWidget(self.window)
        root.addWidget(self.stack)

        self.stack.addWidget(self._build_loading_page())
        self.stack.addWidget(self._build_loaded_page())
        self.stack.addWidget(self._build_error_page())
        self.stack.setCurrentIndex(self.PAGE_LOADING)

    def _build_loading_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        label = QLabel(constants.strings.LOADING_MESSAGE)
        layout.addWidget(label)
        layout.addStretch()
        return page

    def _build_error_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        label = QLabel(constants.strings.ERROR_MESSAGE)
        label.setObjectName("errorLabel")
        layout.addWidget(label)
        self.error_refresh_button = QPushButton(constants.strings.REFRESH_BUTTON)
        layout.addWidget(self.error_refresh_button, 0, Qt.AlignmentFlag.AlignLeft)
        layout.addStretch()
        return page

    def _build_loaded_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setSpacing(16)

        top_row = QHBoxLayout()
        top_row.setSpacing(8)
        top_row.addLayout(self._build_summary())
        top_row.addLayout(self._build_sliders())
        top_row.addLayout(self._build_theme_chooser())
        top_row.addStretch()
        layout.addLayout(top_row)

        self.refresh_button = QPushButton(constants.strings.REFRESH_BUTTON)
        layout.addWidget(self.refresh_button, 0, Qt.AlignmentFlag.AlignLeft)

        self.chart_view = ChartView(page)
        layout.addWidget(self.chart_view, 1)
        return page

    def _build_summary(self) -> QGridLayout:
        grid = QGridLayout()
        grid.setHorizontalSpacing(8)
        rows = [
            (constants.strings.CO2_LABEL, "co2_value"),
            (constants.strings.TVOC_LABEL, "tvoc_value"),
            (constants.strings.QUALITY_LABEL, "quality_value"),
            (constants.strings.STATUS_LABEL, "status_value"),
        ]
        for row, (caption, attr) in enumerate(rows):
            title = QLabel(caption)
            title.setObjectName("summaryTitle")
            value = QLabel("")
            grid.addWidget(title, row, 0)
            grid.addWidget(value, row, 1)
            setattr(self, attr, value)

        updated_title = QLabel(constants.strings.UPDATED_LABEL)
        updated_title.setObjectName("subtleText")
        self.updated_value = QLabel("")
        self.updated_value.setObjectName("subtleText")
        grid.addWidget(updated_title, len(rows), 0)
        grid.addWidget(self.updated_value, len(rows), 1)
        return grid

    def _build_sliders(self) -> QVBoxLayout:
        column = QVBoxLayout()
        self.low_slider, self.low_time_label = self._create_slider_row(column)
        self.high_slider, self.high_time_label = self._create_slider_row(column)
        column.addStretch()
        return column

    def _create_slider_row(self, parent_layout: QVBoxLayout):
        """ Internal helper to create a slider with its time label. """
        row = QHBoxLayout()
        slider = QSlider(Qt.Orientation.Horizontal)
        slider.setFixedWidth(constants.graph.SLIDER_WIDTH)
        slider.setSingleStep(1)
        slider.setPageStep(1)
        label = QLabel("")
        row.addWidget(slider)
        row.addWidget(label)
        parent_layout.addLayout(row)
        return slider, label

    def _build_theme_chooser(self) -> QVBoxLayout:
        column = QVBoxLayout()
        column.setSpacing(8)
        column.addWidget(QLabel(constants.strings.THEME_PROMPT))
        self.theme_group = QButtonGroup(self.window)
        for theme in (Theme.LIGHT, Theme.DARK):
            button = QRadioButton(theme.label)
            self.theme_group.addButton(button)
            self.theme_buttons[theme] = button
            column.addWidget(button)
        column.addStretch()
        return column

    def show_page(self, index: int) -> None:
        self.stack.setCurrentIndex(index)

    def apply_theme(self, is_dark: bool) -> None:
        self.window.setStyleSheet(style_utils.dashboard_style(is_dark))
