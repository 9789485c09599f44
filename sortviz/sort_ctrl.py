import logging

from PyQt5.QtWidgets import (
    QFormLayout,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from core.config import SortConfig
from sortviz.sort_input import ArrayInputError
from sortviz.sort_race import SortRace

logger = logging.getLogger(__name__)


class SortRaceController(QWidget):
    """
    Builds the race control panel and bridges it to SortRace.
    """

    def __init__(self, config: SortConfig, race=None):
        super().__init__()
        self.config = config
        self.race = race or SortRace(config)

        self._build_inputs()
        self.panel = self._create_panel()

        self.race.controlsChanged.connect(self._apply_controls)

    # ---------- Panel UI ----------

    def _build_inputs(self):
        self.size_edit = QLineEdit(str(self.config.array_size))
        self.size_edit.setPlaceholderText(
            f"{self.config.MIN_ARRAY_SIZE} – {self.config.MAX_ARRAY_SIZE}"
        )
        self.size_edit.returnPressed.connect(self._on_set_size)

        self.manual_edit = QLineEdit()
        self.manual_edit.setPlaceholderText("e.g. 5, 42, 17, 100")
        self.manual_edit.returnPressed.connect(self._on_set_manual)

    def _create_panel(self):
        container = QWidget()
        layout = QGridLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setHorizontalSpacing(12)
        layout.setVerticalSpacing(12)
        layout.setColumnStretch(0, 1)
        layout.setColumnStretch(1, 1)

        # Playback
        self.generate_btn = QPushButton("Generate New Array")
        self.generate_btn.clicked.connect(self._on_generate)
        self.run_btn = QPushButton("Sort All")
        self.run_btn.clicked.connect(self.race.run_all)
        self.stop_btn = QPushButton("Stop")
        self.stop_btn.clicked.connect(self.race.stop_all)
        self.stop_btn.setDisabled(True)

        playback_group = QGroupBox("Playback")
        playback_group.setStyleSheet("QGroupBox { color: white; }")
        playback_layout = QHBoxLayout(playback_group)
        playback_layout.setContentsMargins(12, 10, 12, 12)
        playback_layout.setSpacing(6)
        playback_layout.addWidget(self.generate_btn)
        playback_layout.addWidget(self.run_btn)
        playback_layout.addWidget(self.stop_btn)
        layout.addWidget(playback_group, 0, 0, 1, 2)

        # Array size
        self.size_btn = QPushButton("Set Size")
        self.size_btn.clicked.connect(self._on_set_size)
        size_group = QGroupBox("Array Size")
        size_group.setStyleSheet("QGroupBox { color: white; }")
        size_layout = QFormLayout()
        size_layout.setContentsMargins(12, 8, 12, 12)
        size_layout.setSpacing(6)
        size_layout.addRow("Size:", self.size_edit)
        size_layout.addRow(self.size_btn)
        size_group.setLayout(size_layout)
        layout.addWidget(size_group, 1, 0)

        # Manual array
        self.manual_btn = QPushButton("Set Array")
        self.manual_btn.clicked.connect(self._on_set_manual)
        manual_group = QGroupBox("Manual Array")
        manual_group.setStyleSheet("QGroupBox { color: white; }")
        manual_layout = QFormLayout()
        manual_layout.setContentsMargins(12, 8, 12, 12)
        manual_layout.setSpacing(6)
        manual_layout.addRow("Values:", self.manual_edit)
        manual_layout.addRow(self.manual_btn)
        manual_group.setLayout(manual_layout)
        layout.addWidget(manual_group, 1, 1)

        layout.setRowStretch(2, 1)
        return container

    def build_panel(self):
        return self.panel

    # ---------- Controller lifecycle ----------

    def on_activate(self, canvases):
        """Bind one canvas per algorithm, keyed like race.players."""
        for key, canvas in canvases.items():
            self.race.players[key].view.bind_canvas(canvas)
        if not self.race.values:
            self.race.generate()

    # ---------- UI handlers ----------

    def _on_generate(self):
        self._guarded(self.race.generate)

    def _on_set_size(self):
        self._guarded(self.race.set_array_size, self.size_edit.text())

    def _on_set_manual(self):
        self._guarded(self.race.set_manual_array, self.manual_edit.text())

    def _guarded(self, action, *args):
        try:
            action(*args)
        except ArrayInputError as exc:
            logger.warning("rejected input: %s", exc)
            QMessageBox.warning(self, "Invalid Input", str(exc))

    # ---------- State helpers ----------

    def _apply_controls(self, run_enabled, stop_enabled):
        running = self.race.is_running
        self.run_btn.setEnabled(run_enabled)
        self.stop_btn.setEnabled(stop_enabled)
        for widget in (
            self.generate_btn,
            self.size_btn,
            self.size_edit,
            self.manual_btn,
            self.manual_edit,
        ):
            widget.setDisabled(running)
