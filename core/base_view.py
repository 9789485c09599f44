from PyQt5.QtCore import QObject, QRectF
from PyQt5.QtWidgets import QGraphicsScene

from core.animation import AnimationToolkit


class BaseStructureView(QObject):
    """
    Base class for panel views, providing:
    - a fixed-size QGraphicsScene
    - animation helper + lifecycle management
    - interruption of in-flight animations when a new frame arrives
    """

    def __init__(self, config, scene_rect: QRectF):
        super().__init__()
        self.config = config
        self.scene = QGraphicsScene()
        self.scene.setSceneRect(scene_rect)
        self.anim = AnimationToolkit(config)
        self._running = []
        self._canvas = None  # bound QGraphicsView (optional)

    def bind_canvas(self, view):
        self._canvas = view
        if view:
            view.setScene(self.scene)
            view.fit_scene()

    @property
    def animating(self) -> bool:
        return bool(self._running)

    def _stop_running(self):
        """Halt every tracked animation where it is; the next frame takes over."""
        running, self._running = self._running, []
        for animation in running:
            animation.stop()

    def _track_animation(self, animation, finalizer=None):
        """
        Keeps references so that animations are not garbage collected.
        Optionally runs a callback after completion.
        """
        if animation is None:
            return

        self._running.append(animation)

        def _cleanup():
            if animation in self._running:
                self._running.remove(animation)
            if finalizer:
                finalizer()

        animation.finished.connect(_cleanup)
        animation.start()
