from PyQt5.QtCore import QObject, pyqtSignal


class Palette:
    """Bar fill colours, one per highlight role."""

    DEFAULT = "#1976D2"
    COMPARE = "#2196F3"
    MIN = "#FF9800"
    CURRENT = "#E91E63"
    SWAP = "#9C27B0"


class SortConfig(QObject):
    """
    Single owned configuration for the sorting race. Controls mutate this
    instance; views and players read durations from it at use time so a
    speed change applies to the next step of a running sort.
    """

    speedChanged = pyqtSignal(int)

    MIN_SETTLE_MS = 100
    MAX_SETTLE_MS = 2000
    MIN_PULSE_MS = 50

    MIN_ARRAY_SIZE = 2
    MAX_ARRAY_SIZE = 50

    def __init__(self, array_size=15, min_value=5, max_value=100, settle_ms=1000):
        super().__init__()
        if min_value > max_value:
            raise ValueError("min_value must not exceed max_value")
        self.array_size = array_size
        self.min_value = min_value
        self.max_value = max_value
        self.palette = Palette()
        self._settle_ms = self._clamp_settle(settle_ms)

    @property
    def settle_ms(self) -> int:
        return self._settle_ms

    @property
    def pulse_ms(self) -> int:
        """Colour-only animation time, derived from the settle duration."""
        # floor(settle * 0.3) in integer arithmetic
        return max(self.MIN_PULSE_MS, self._settle_ms * 3 // 10)

    def set_settle_ms(self, value: int):
        """Clamp and broadcast the settle duration (100 – 2000 ms)."""
        value = self._clamp_settle(value)
        if value != self._settle_ms:
            self._settle_ms = value
            self.speedChanged.emit(self._settle_ms)

    def _clamp_settle(self, value) -> int:
        return max(self.MIN_SETTLE_MS, min(self.MAX_SETTLE_MS, int(value)))
