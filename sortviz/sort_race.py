import logging
import random
from functools import partial

from PyQt5.QtCore import QObject, pyqtSignal

from sortviz.sort_input import ArrayInputError, parse_array_size, parse_manual_array
from sortviz.sort_model import SortModel
from sortviz.sort_player import SortPlayer
from sortviz.sort_steps import ALGORITHMS
from sortviz.sort_view import SortView

logger = logging.getLogger(__name__)


class SortRace(QObject):
    """
    Runs one player per algorithm over copies of the same array and owns
    the run/stop control state.
    """

    controlsChanged = pyqtSignal(bool, bool)  # run enabled, stop enabled
    runFinished = pyqtSignal()

    def __init__(self, config, algorithms=ALGORITHMS, rng=None):
        super().__init__()
        self.config = config
        self._rng = rng or random.Random()
        self._pending = set()
        self.values = []
        self.titles = {}
        self.players = {}
        for key, (title, driver) in algorithms.items():
            player = SortPlayer(key, driver, SortModel(), SortView(config), config)
            player.finished.connect(partial(self._on_player_finished, key))
            self.titles[key] = title
            self.players[key] = player

    @property
    def is_running(self) -> bool:
        return bool(self._pending)

    # ---------- Array seeding ----------

    def generate(self):
        self._ensure_idle()
        values = [
            self._rng.randint(self.config.min_value, self.config.max_value)
            for _ in range(self.config.array_size)
        ]
        logger.info("generated %d values: %s", len(values), values)
        self._seed(values)

    def set_array_size(self, text):
        self._ensure_idle()
        size = parse_array_size(text, self.config)
        self.config.array_size = size
        self.generate()

    def set_manual_array(self, text):
        self._ensure_idle()
        values = parse_manual_array(text, self.config)
        logger.info("manual array of %d values: %s", len(values), values)
        self._seed(values)

    def _seed(self, values):
        self.values = list(values)
        for player in self.players.values():
            player.model.create_from_iterable(list(values))
            player.view.update_visualization(player.model.snapshot())
        self.controlsChanged.emit(True, False)

    def _ensure_idle(self):
        if self.is_running:
            raise ArrayInputError("Stop the running sort before changing the array.")

    # ---------- Playback ----------

    def run_all(self):
        if self.is_running:
            return
        self._pending = set(self.players)
        self.controlsChanged.emit(False, True)
        for player in self.players.values():
            player.start()

    def stop_all(self):
        if not self.is_running:
            return
        for player in self.players.values():
            player.stop()
        self.controlsChanged.emit(False, False)

    def _on_player_finished(self, key):
        self._pending.discard(key)
        if self._pending:
            return
        logger.debug("all players idle")
        self.controlsChanged.emit(True, False)
        self.runFinished.emit()
