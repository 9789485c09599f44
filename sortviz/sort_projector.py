"""
Pure projection from (cells, highlight) to bar geometry and colour.

Coordinates are relative to the plot area's top-left corner; the view adds
the margins. Bars sit in evenly spaced bands with inner and outer padding,
and the vertical scale is rebuilt from the live maximum on every call so
the tallest bar always spans the full plot height.
"""

from dataclasses import dataclass
from typing import List


class PanelGeometry:
    width = 250
    height = 300
    margin_top = 20
    margin_right = 10
    margin_bottom = 30
    margin_left = 10
    band_padding = 0.1
    corner_radius = 4
    label_offset = 16

    @classmethod
    def outer_width(cls):
        return cls.width + cls.margin_left + cls.margin_right

    @classmethod
    def outer_height(cls):
        return cls.height + cls.margin_top + cls.margin_bottom


@dataclass(frozen=True)
class BarTarget:
    node_id: int
    value: float
    x: float
    y: float
    width: float
    height: float
    color: str
    label_x: float
    label_y: float


def band_layout(count: int, extent: float, padding: float):
    """Return (start, step, bandwidth) for ``count`` centred bands."""
    step = extent / max(1.0, count - padding + 2 * padding)
    start = (extent - step * (count - padding)) / 2
    bandwidth = step * (1 - padding)
    return start, step, bandwidth


def scale_height(value, max_value, extent: float) -> float:
    if max_value <= 0:
        max_value = 1
    return value / max_value * extent


def bar_color(index: int, highlight, palette) -> str:
    """Resolve one bar's colour; swap > current > min > compared > default."""
    if index in highlight.swap:
        return palette.SWAP
    if index == highlight.current:
        return palette.CURRENT
    if index == highlight.min_idx:
        return palette.MIN
    if index in highlight.compared:
        return palette.COMPARE
    return palette.DEFAULT


def project(cells, highlight, palette, geometry=PanelGeometry) -> List[BarTarget]:
    if not cells:
        return []

    start, step, bandwidth = band_layout(
        len(cells), geometry.width, geometry.band_padding
    )
    max_value = max(cell["value"] for cell in cells)

    targets = []
    for idx, cell in enumerate(cells):
        bar_height = scale_height(cell["value"], max_value, geometry.height)
        x = start + idx * step
        y = geometry.height - bar_height
        targets.append(
            BarTarget(
                node_id=cell["id"],
                value=cell["value"],
                x=x,
                y=y,
                width=bandwidth,
                height=bar_height,
                color=bar_color(idx, highlight, palette),
                label_x=x + bandwidth / 2,
                label_y=y + geometry.label_offset,
            )
        )
    return targets
