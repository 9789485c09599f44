from PyQt5.QtCore import QPointF, QRectF, Qt, pyqtProperty
from PyQt5.QtGui import QBrush, QColor, QFont, QFontMetricsF, QPainter, QPen
from PyQt5.QtWidgets import QGraphicsObject, QGraphicsRectItem

from core.base_view import BaseStructureView
from sortviz.sort_projector import PanelGeometry, project
from sortviz.sort_state import SEED_RENDER, AnimationTier


class SortView(BaseStructureView):
    """
    One panel of the race. Bars and value labels are keyed by cell id so a
    swap moves the existing items instead of rebuilding them.
    """

    def __init__(self, config, geometry=PanelGeometry):
        super().__init__(
            config,
            QRectF(0, 0, geometry.outer_width(), geometry.outer_height()),
        )
        self.geometry = geometry
        self.bars = {}
        self.labels = {}
        self.order = []

        # plot area; bars are children so projector coordinates apply as-is
        self._plot = QGraphicsRectItem(0, 0, geometry.width, geometry.height)
        self._plot.setPen(QPen(Qt.NoPen))
        self._plot.setPos(geometry.margin_left, geometry.margin_top)
        self.scene.addItem(self._plot)

    # ---------- Public API ----------

    def update_visualization(self, snapshot, request=SEED_RENDER):
        """Reconcile the panel with ``snapshot`` and animate per request.tier."""
        self._stop_running()
        targets = project(snapshot, request, self.config.palette, self.geometry)

        keep_ids = {target.node_id for target in targets}
        for node_id in list(self.bars.keys()):
            if node_id not in keep_ids:
                self._remove(node_id)

        for target in targets:
            if target.node_id not in self.bars:
                self._create(target)

        tier = request.tier
        animations = []
        duration = self.anim.tier_duration(tier)
        for target in targets:
            bar = self.bars[target.node_id]
            label = self.labels[target.node_id]
            rect = QRectF(target.x, target.y, target.width, target.height)
            color = QColor(target.color)
            label_pos = QPointF(target.label_x, target.label_y)
            label.set_value(target.value)

            if tier is AnimationTier.FULL:
                animations.append(self.anim.reshape_bar(bar, rect, duration))
                animations.append(self.anim.fade_brush(bar, color, duration))
                animations.append(self.anim.move_item(label, label_pos, duration))
                continue

            bar.setBarRect(rect)
            label.setPos(label_pos)
            if tier is AnimationTier.COLOR:
                animations.append(self.anim.fade_brush(bar, color, duration))
            else:
                bar.setFillColor(color)

        self.order = [target.node_id for target in targets]
        if animations:
            self._track_animation(self.anim.parallel(*animations))

    def bar_color(self, node_id) -> str:
        return self.bars[node_id].fillColor.name().upper()

    def bar_rect(self, node_id) -> QRectF:
        return self.bars[node_id].barRect

    # ---------- Internal helpers ----------

    def _create(self, target):
        # enters at zero height on the baseline of its band
        start = QRectF(target.x, self.geometry.height, target.width, 0)
        bar = BarItem(target.node_id, start, QColor(target.color), self._plot)
        label = BarLabelItem(target.node_id, target.value, self._plot)
        label.setPos(target.label_x, target.label_y)
        self.bars[target.node_id] = bar
        self.labels[target.node_id] = label

    def _remove(self, node_id):
        for items in (self.bars, self.labels):
            item = items.pop(node_id, None)
            if item is not None and item.scene():
                self.scene.removeItem(item)


class BarItem(QGraphicsObject):
    def __init__(self, node_id, rect, color, parent=None):
        super().__init__(parent)
        self.node_id = node_id
        self._rect = QRectF(rect)
        self._fill = QColor(color)
        self.setZValue(1)

    def boundingRect(self):
        return QRectF(self._rect)

    def paint(self, painter, option, widget=None):
        radius = PanelGeometry.corner_radius
        painter.setRenderHint(QPainter.Antialiasing)
        painter.setPen(Qt.NoPen)
        painter.setBrush(QBrush(self._fill))
        painter.drawRoundedRect(self._rect, radius, radius)

    def getBarRect(self):
        return QRectF(self._rect)

    def setBarRect(self, rect):
        self.prepareGeometryChange()
        self._rect = QRectF(rect)
        self.update()

    def getFillColor(self):
        return QColor(self._fill)

    def setFillColor(self, color):
        self._fill = QColor(color)
        self.update()

    barRect = pyqtProperty(QRectF, fget=getBarRect, fset=setBarRect)
    fillColor = pyqtProperty(QColor, fget=getFillColor, fset=setFillColor)


class BarLabelItem(QGraphicsObject):
    """Value text; its position is the text baseline, centred on the bar."""

    def __init__(self, node_id, value, parent=None):
        super().__init__(parent)
        self.node_id = node_id
        self._text = str(value)
        self._font = QFont()
        self._font.setPointSize(8)
        self.textColor = QColor("#ffffff")
        self.setZValue(2)

    @property
    def text(self):
        return self._text

    def _text_width(self):
        return QFontMetricsF(self._font).horizontalAdvance(self._text)

    def boundingRect(self):
        metrics = QFontMetricsF(self._font)
        width = self._text_width()
        return QRectF(-width / 2, -metrics.ascent(), width, metrics.height())

    def paint(self, painter, option, widget=None):
        painter.setRenderHint(QPainter.TextAntialiasing)
        painter.setFont(self._font)
        painter.setPen(self.textColor)
        painter.drawText(QPointF(-self._text_width() / 2, 0), self._text)

    def set_value(self, value):
        text = str(value)
        if text != self._text:
            self.prepareGeometryChange()
            self._text = text
            self.update()
