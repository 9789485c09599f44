"""
Playback controller for one panel.

State machine:
    IDLE            →  start()          →  RUNNING
    RUNNING         →  stop()           →  STOP_REQUESTED
    RUNNING / STOP_REQUESTED → (driver exhausted) → IDLE

The driver is resumed from a single-shot timer after each pause, so all
three panels interleave on the Qt event loop. stop() only raises a flag;
the driver notices it at its next poll point.
"""

import logging

from PyQt5.QtCore import QObject, QTimer, pyqtSignal

from sortviz.sort_state import PlaybackState, pause_duration

logger = logging.getLogger(__name__)


class SortPlayer(QObject):
    started = pyqtSignal()
    finished = pyqtSignal()

    def __init__(self, name, driver, model, view, config):
        super().__init__()
        self.name = name
        self.driver = driver
        self.model = model
        self.view = view
        self.config = config
        self.state = PlaybackState.IDLE
        self._stop_flag = False
        self._steps = None
        self.step_count = 0

    @property
    def is_idle(self) -> bool:
        return self.state is PlaybackState.IDLE

    def stop_requested(self) -> bool:
        return self._stop_flag

    # ---------- Lifecycle ----------

    def start(self):
        if not self.is_idle:
            return
        self.state = PlaybackState.RUNNING
        self._stop_flag = False
        self.step_count = 0
        self._steps = self.driver(self.model, self.stop_requested)
        logger.debug("%s: started on %d items", self.name, len(self.model))
        self.started.emit()
        self._advance()

    def stop(self):
        if self.state is not PlaybackState.RUNNING:
            return
        self._stop_flag = True
        self.state = PlaybackState.STOP_REQUESTED
        logger.debug("%s: stop requested", self.name)

    # ---------- Stepping ----------

    def _advance(self):
        if self._steps is None:
            return
        try:
            request = next(self._steps)
        except StopIteration:
            self._finish()
            return

        self.step_count += 1
        self.view.update_visualization(self.model.snapshot(), request)
        self._schedule(pause_duration(request.pause, self.config))

    def _schedule(self, delay_ms: int):
        QTimer.singleShot(delay_ms, self._advance)

    def _finish(self):
        cancelled = self._stop_flag
        self._steps = None
        self._stop_flag = False
        self.state = PlaybackState.IDLE
        logger.debug(
            "%s: %s after %d steps",
            self.name,
            "cancelled" if cancelled else "finished",
            self.step_count,
        )
        self.finished.emit()
