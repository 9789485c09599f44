import itertools
from typing import Any, Dict, List


class SortModel:
    """
    Array being sorted. Cells carry a stable id so the view can match bars
    across redraws; while a sort runs the only mutation is swap().
    """

    def __init__(self):
        self._id_iter = itertools.count()
        self._items: List[Dict[str, Any]] = []

    def __len__(self):
        return len(self._items)

    def clear(self):
        self._items.clear()
        self._id_iter = itertools.count()

    def _new_cell(self, value):
        cell_id = next(self._id_iter)
        return {"id": cell_id, "value": value}

    def create_from_iterable(self, values):
        """Reseed the model; ids restart at 0 for every new array."""
        self.clear()
        for value in values:
            self._items.append(self._new_cell(value))

    def _check_index(self, index: int):
        if index < 0 or index >= len(self._items):
            raise IndexError("Index out of range")

    def value_at(self, index: int):
        self._check_index(index)
        return self._items[index]["value"]

    def swap(self, i: int, j: int):
        self._check_index(i)
        self._check_index(j)
        self._items[i], self._items[j] = self._items[j], self._items[i]

    def values(self):
        return [cell["value"] for cell in self._items]

    def ids(self):
        return [cell["id"] for cell in self._items]

    def snapshot(self):
        return [{"id": cell["id"], "value": cell["value"]} for cell in self._items]
