import pytest

from sortviz.sort_model import SortModel


def test_create_from_iterable_assigns_sequential_ids():
    model = SortModel()
    model.create_from_iterable([5, 100, 7])
    assert model.snapshot() == [
        {"id": 0, "value": 5},
        {"id": 1, "value": 100},
        {"id": 2, "value": 7},
    ]


def test_reseeding_restarts_ids():
    model = SortModel()
    model.create_from_iterable([1, 2, 3, 4])
    model.create_from_iterable([9, 8])
    assert model.ids() == [0, 1]
    assert model.values() == [9, 8]


def test_swap_moves_cells_with_their_ids():
    model = SortModel()
    model.create_from_iterable([3, 1, 2])
    model.swap(0, 1)
    assert model.values() == [1, 3, 2]
    assert model.ids() == [1, 0, 2]


def test_snapshot_is_a_copy():
    model = SortModel()
    model.create_from_iterable([3, 1])
    snap = model.snapshot()
    model.swap(0, 1)
    assert [cell["value"] for cell in snap] == [3, 1]


@pytest.mark.parametrize("i, j", [(-1, 0), (0, 3), (5, 1)])
def test_swap_rejects_out_of_range(i, j):
    model = SortModel()
    model.create_from_iterable([3, 1, 2])
    with pytest.raises(IndexError):
        model.swap(i, j)
    assert model.values() == [3, 1, 2]


def test_value_at_out_of_range():
    model = SortModel()
    with pytest.raises(IndexError):
        model.value_at(0)
