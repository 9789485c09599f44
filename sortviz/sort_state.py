"""
Shared value types passed between step drivers, players and views.

A step driver never touches a view directly. It yields RenderRequest
values; the player renders each one and waits for the requested pause
before resuming the driver.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class PlaybackState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOP_REQUESTED = "stop_requested"


class Pause(Enum):
    NONE = "none"
    PULSE = "pulse"
    SETTLE = "settle"


class AnimationTier(Enum):
    FULL = "full"    # geometry + colour over the settle duration
    COLOR = "color"  # geometry snaps, colour fades over the pulse duration
    NONE = "none"    # everything snaps


@dataclass(frozen=True)
class RenderRequest:
    """
    One redraw of a panel.

    Attributes:
        compared      : indices currently under comparison.
        current       : the single "current" index, if any.
        min_idx       : running minimum (selection sort only).
        swap          : index pair about to be, or just, swapped.
        animate_bars  : animate position and size.
        animate_color : animate colour only (ignored when animate_bars).
        pause         : how long the driver waits after this render.
    """

    compared: Tuple[int, ...] = ()
    current: Optional[int] = None
    min_idx: Optional[int] = None
    swap: Tuple[int, ...] = ()
    animate_bars: bool = True
    animate_color: bool = True
    pause: Pause = Pause.NONE

    @property
    def tier(self) -> AnimationTier:
        if self.animate_bars:
            return AnimationTier.FULL
        if self.animate_color:
            return AnimationTier.COLOR
        return AnimationTier.NONE


SEED_RENDER = RenderRequest()
FINAL_RENDER = RenderRequest(animate_bars=False, animate_color=False)


def pause_duration(pause: Pause, config) -> int:
    """Milliseconds to wait for *pause* under the current configuration."""
    if pause is Pause.PULSE:
        return config.pulse_ms
    if pause is Pause.SETTLE:
        return config.settle_ms
    return 0
