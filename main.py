import logging
import os
import sys

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from core.config import SortConfig
from sortviz.sort_ctrl import SortRaceController
from widgets.graphics_view import CustomGraphicsView


def _configure_logging() -> None:
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


class MainWindow(QMainWindow):
    """Three algorithm panels side by side above a shared control strip."""

    def __init__(self, config=None):
        super().__init__()
        self.setWindowTitle("Sorting Algorithm Race")
        self.resize(1280, 760)

        self.config = config or SortConfig()
        self.controller = SortRaceController(self.config)
        self.canvases = {}

        self._build_ui()
        self._connect_signals()

        self.controller.on_activate(self.canvases)

    def _build_ui(self):
        central = QWidget(self)
        self.setCentralWidget(central)

        root_layout = QVBoxLayout(central)
        root_layout.setContentsMargins(8, 8, 8, 8)
        root_layout.setSpacing(8)

        panels_layout = QHBoxLayout()
        panels_layout.setSpacing(8)
        race = self.controller.race
        for key, title in race.titles.items():
            column = QVBoxLayout()
            column.setSpacing(4)
            label = QLabel(title)
            label.setAlignment(Qt.AlignCenter)
            canvas = CustomGraphicsView()
            column.addWidget(label)
            column.addWidget(canvas, 1)
            panels_layout.addLayout(column, 1)
            self.canvases[key] = canvas
        root_layout.addLayout(panels_layout, 1)

        speed_layout = QHBoxLayout()
        speed_label = QLabel("Animation Speed")
        self.speed_value_label = QLabel(f"{self.config.settle_ms} ms")
        self.speed_slider = QSlider(Qt.Horizontal)
        self.speed_slider.setRange(self.config.MIN_SETTLE_MS, self.config.MAX_SETTLE_MS)
        self.speed_slider.setValue(self.config.settle_ms)
        speed_layout.addWidget(speed_label)
        speed_layout.addWidget(self.speed_slider, 1)
        speed_layout.addWidget(self.speed_value_label)
        root_layout.addLayout(speed_layout)

        root_layout.addWidget(self.controller.build_panel(), 0)

    def _connect_signals(self):
        self.speed_slider.valueChanged.connect(self._on_speed_slider_changed)
        self.config.speedChanged.connect(self._on_speed_changed)

    def _on_speed_slider_changed(self, value):
        self.config.set_settle_ms(value)

    def _on_speed_changed(self, settle_ms):
        self.speed_value_label.setText(f"{settle_ms} ms")


def main():
    _configure_logging()
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
