"""
Step drivers for the three sorting algorithms.

Each driver is a generator over a SortModel. It yields a RenderRequest
whenever the panel should be redrawn; the caller resumes it once the
requested pause has elapsed. ``should_stop`` is polled at the top of every
outer and inner loop iteration. A driver always finishes with one
unannotated, unanimated render so no highlight colour lingers, including
after a cancellation.
"""

from sortviz.sort_state import FINAL_RENDER, Pause, RenderRequest


def _compare(compared, current=None, min_idx=None):
    return RenderRequest(
        compared=tuple(compared),
        current=current,
        min_idx=min_idx,
        animate_bars=False,
        animate_color=True,
        pause=Pause.PULSE,
    )


def _swap_cadence(model, i, j):
    yield RenderRequest(
        swap=(i, j), animate_bars=False, animate_color=True, pause=Pause.PULSE
    )
    model.swap(i, j)
    yield RenderRequest(
        swap=(i, j), animate_bars=True, animate_color=False, pause=Pause.SETTLE
    )


def selection_sort(model, should_stop):
    n = len(model)
    for i in range(n - 1):
        if should_stop():
            break
        min_idx = i
        for j in range(i + 1, n):
            if should_stop():
                break
            yield _compare((j,), current=i, min_idx=min_idx)
            # strict: the leftmost of equal minimums stays selected
            if model.value_at(j) < model.value_at(min_idx):
                min_idx = j

        if should_stop():
            break
        if min_idx != i:
            yield from _swap_cadence(model, i, min_idx)
    yield FINAL_RENDER


def bubble_sort(model, should_stop):
    n = len(model)
    for i in range(n - 1):
        if should_stop():
            break
        for j in range(n - i - 1):
            if should_stop():
                break
            yield _compare((j, j + 1), current=j)
            if model.value_at(j) > model.value_at(j + 1):
                yield from _swap_cadence(model, j, j + 1)
    yield FINAL_RENDER


def insertion_sort(model, should_stop):
    """Moves each element left through a chain of adjacent swaps."""
    n = len(model)
    for i in range(1, n):
        if should_stop():
            break
        j = i
        while j > 0:
            if should_stop():
                break
            yield _compare((j - 1, j), current=j)
            if not model.value_at(j - 1) > model.value_at(j):
                break
            yield from _swap_cadence(model, j, j - 1)
            j -= 1
    yield FINAL_RENDER


# Panel order: key -> (title, driver)
ALGORITHMS = {
    "selection": ("Selection Sort", selection_sort),
    "bubble": ("Bubble Sort", bubble_sort),
    "insertion": ("Insertion Sort", insertion_sort),
}
