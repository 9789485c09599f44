from PyQt5.QtCore import (
    QEasingCurve,
    QParallelAnimationGroup,
    QPropertyAnimation,
)

from sortviz.sort_state import AnimationTier


class AnimationToolkit:
    """
    Helper factory to standardize animation creation. Durations come from
    the shared SortConfig at the moment an animation is built.
    """

    def __init__(self, config):
        self.config = config

    def tier_duration(self, tier):
        if tier is AnimationTier.FULL:
            return self.config.settle_ms
        if tier is AnimationTier.COLOR:
            return self.config.pulse_ms
        return 0

    def move_item(self, item, end_pos, duration, easing=QEasingCurve.InOutCubic):
        anim = QPropertyAnimation(item, b"pos")
        anim.setDuration(duration)
        anim.setEndValue(end_pos)
        anim.setEasingCurve(easing)
        return anim

    def reshape_bar(self, bar, end_rect, duration, easing=QEasingCurve.InOutCubic):
        anim = QPropertyAnimation(bar, b"barRect")
        anim.setDuration(duration)
        anim.setEndValue(end_rect)
        anim.setEasingCurve(easing)
        return anim

    def fade_brush(self, bar, end_color, duration, easing=QEasingCurve.InOutCubic):
        """Cross-fade a bar's fill from whatever it shows now to end_color."""
        anim = QPropertyAnimation(bar, b"fillColor")
        anim.setDuration(duration)
        anim.setEndValue(end_color)
        anim.setEasingCurve(easing)
        return anim

    @staticmethod
    def parallel(*animations):
        group = QParallelAnimationGroup()
        for anim in animations:
            if anim:
                group.addAnimation(anim)
        return group
