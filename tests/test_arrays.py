import pytest

from exerkit.arrays import largest, second_smallest, smallest, third_smallest, top_three

SAMPLES = [[3], [5, -2, 9, 0], [-7, -3, -10], [4, 4, 4], list(range(50, 0, -3))]


@pytest.mark.parametrize("values", SAMPLES)
def test_largest_and_smallest(values):
    assert largest(values) == max(values)
    assert smallest(values) == min(values)
    assert smallest(values) <= largest(values)


def test_empty_input_raises():
    with pytest.raises(ValueError):
        largest([])
    with pytest.raises(ValueError):
        smallest([])
    with pytest.raises(ValueError):
        top_three([])


def test_accepts_generators():
    assert largest(x for x in [1, 8, 3]) == 8
    assert smallest(iter([4, 2, 6])) == 2


def test_second_smallest():
    assert second_smallest([5, 1, 3, 1]) == 3
    assert second_smallest([2, 2, 9]) == 9
    assert second_smallest([4, 4, 4]) is None
    assert second_smallest([7]) is None
    assert second_smallest([]) is None


def test_top_three():
    assert top_three([4, 9, 2, 9, 7]) == (9, 7, 4)
    assert top_three([5, 5]) == (5, None, None)
    assert top_three([1, 6]) == (6, 1, None)


def test_top_three_is_descending():
    values = [12, -4, 30, 30, 8, 19, 0]
    first, second, third = top_three(values)
    assert first == max(values)
    assert first > second > third


def test_third_smallest_ascending_input():
    assert third_smallest([1, 2, 3, 4]) == 3
    assert third_smallest([1, 1, 2, 2, 3]) == 3
    assert third_smallest([10, 20, 30]) == 30


def test_third_smallest_unfilled_slot():
    assert third_smallest([1, 1, 1]) is None


def test_third_smallest_needs_three_values():
    with pytest.raises(ValueError):
        third_smallest([5, 1])