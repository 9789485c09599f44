import random

import pytest

from sortviz.sort_model import SortModel
from sortviz.sort_state import FINAL_RENDER, AnimationTier, Pause
from sortviz.sort_steps import ALGORITHMS, bubble_sort, insertion_sort, selection_sort

DRIVERS = [driver for _, driver in ALGORITHMS.values()]


class CountingModel(SortModel):
    def __init__(self):
        super().__init__()
        self.swaps = []

    def swap(self, i, j):
        super().swap(i, j)
        self.swaps.append((i, j))


def _never():
    return False


def _run(driver, values):
    model = CountingModel()
    model.create_from_iterable(values)
    requests = list(driver(model, _never))
    return model, requests


def _inputs():
    rng = random.Random(1234)
    cases = [
        [3, 1, 2],
        [1, 2],
        [2, 1],
        [5, 5, 5, 5],
        [9, 8, 7, 6, 5, 4, 3, 2, 1],
        [4, 1, 4, 2, 1, 3],
    ]
    cases += [[rng.randint(5, 100) for _ in range(rng.randint(2, 20))] for _ in range(10)]
    return cases


@pytest.mark.parametrize("driver", DRIVERS)
@pytest.mark.parametrize("values", _inputs())
def test_sorts_to_non_decreasing_permutation(driver, values):
    model, requests = _run(driver, values)
    assert model.values() == sorted(values)
    assert sorted(model.ids()) == list(range(len(values)))
    assert requests[-1] == FINAL_RENDER


@pytest.mark.parametrize("driver", DRIVERS)
def test_final_render_is_unannotated_and_unanimated(driver):
    _, requests = _run(driver, [2, 1, 3])
    final = requests[-1]
    assert final.tier is AnimationTier.NONE
    assert final.compared == () and final.swap == ()
    assert final.current is None and final.min_idx is None


def test_selection_sort_trace():
    model = CountingModel()
    model.create_from_iterable([3, 1, 2])
    settled = []
    for request in selection_sort(model, _never):
        if request.pause is Pause.SETTLE:
            settled.append(model.values())
    assert settled == [[1, 3, 2], [1, 2, 3]]
    assert model.swaps == [(0, 1), (1, 2)]


def test_selection_sort_compare_annotations():
    _, requests = _run(selection_sort, [3, 1, 2])
    compares = [r for r in requests if r.compared]
    assert [(r.compared, r.current, r.min_idx) for r in compares] == [
        ((1,), 0, 0),
        ((2,), 0, 1),
        ((2,), 1, 1),
    ]
    assert all(r.tier is AnimationTier.COLOR for r in compares)
    assert all(r.pause is Pause.PULSE for r in compares)


def test_selection_sort_keeps_leftmost_minimum():
    model = CountingModel()
    model.create_from_iterable([2, 1, 1])
    list(selection_sort(model, _never))
    # ids 1 and 2 both hold 1; the leftmost wins the first slot
    assert model.ids()[0] == 1
    assert model.values() == [1, 1, 2]


def test_selection_sort_skips_swap_when_minimum_in_place():
    model, requests = _run(selection_sort, [1, 2, 3])
    assert model.swaps == []
    assert not any(r.swap for r in requests)


def test_bubble_sort_does_not_swap_equal_neighbours():
    model, _ = _run(bubble_sort, [5, 5, 5])
    assert model.swaps == []
    assert model.ids() == [0, 1, 2]


def test_bubble_sort_shrinks_unsorted_boundary():
    _, requests = _run(bubble_sort, [4, 3, 2, 1])
    compares = [r.compared for r in requests if r.compared]
    assert compares == [(0, 1), (1, 2), (2, 3), (0, 1), (1, 2), (0, 1)]


def test_swap_cadence_order():
    _, requests = _run(bubble_sort, [2, 1])
    assert [(r.tier, r.pause) for r in requests] == [
        (AnimationTier.COLOR, Pause.PULSE),   # compare
        (AnimationTier.COLOR, Pause.PULSE),   # swap highlight
        (AnimationTier.FULL, Pause.SETTLE),   # swap settle
        (AnimationTier.NONE, Pause.NONE),     # final
    ]
    assert requests[1].swap == requests[2].swap == (0, 1)


def test_insertion_sort_uses_chain_of_adjacent_swaps():
    model, _ = _run(insertion_sort, [3, 2, 1])
    assert model.swaps == [(1, 0), (2, 1), (1, 0)]
    assert all(abs(i - j) == 1 for i, j in model.swaps)


def test_insertion_sort_compares_before_each_shift():
    _, requests = _run(insertion_sort, [2, 1, 3])
    compares = [(r.compared, r.current) for r in requests if r.compared]
    assert compares == [((0, 1), 1), ((1, 2), 2)]


@pytest.mark.parametrize("driver", DRIVERS)
@pytest.mark.parametrize("stop_at", [1, 3, 7])
def test_cancellation_stops_mutation_once_observed(driver, stop_at):
    model = CountingModel()
    model.create_from_iterable([9, 8, 7, 6, 5, 4, 3, 2, 1])
    state = {"stop": False, "seen_true_at": None}

    def should_stop():
        if state["stop"] and state["seen_true_at"] is None:
            state["seen_true_at"] = len(model.swaps)
        return state["stop"]

    requests = []
    for request in driver(model, should_stop):
        requests.append(request)
        if len([r for r in requests if r.compared]) == stop_at:
            state["stop"] = True

    assert state["seen_true_at"] is not None
    assert len(model.swaps) == state["seen_true_at"]
    assert model.values() != sorted(model.values())
    assert requests[-1] == FINAL_RENDER
    # at most one swap cadence may follow the compare that raised the flag
    tail = requests[[i for i, r in enumerate(requests) if r.compared][-1] + 1:]
    assert len(tail) <= 3
    assert sorted(model.ids()) == list(range(9))


@pytest.mark.parametrize("driver", DRIVERS)
def test_stop_before_start_only_renders_final(driver):
    model = SortModel()
    model.create_from_iterable([3, 2, 1])
    requests = list(driver(model, lambda: True))
    assert requests == [FINAL_RENDER]
    assert model.values() == [3, 2, 1]


def test_registry_order():
    assert list(ALGORITHMS) == ["selection", "bubble", "insertion"]
