import heapq
import random
import statistics

import pytest

from dsapractice.heaps import MedianFinder, heap_sort, is_min_heap


def test_is_min_heap_accepts_heapified():
    values = [6, 8, 7, 9, 1, 4, 3, 2, 5, 0]
    heapq.heapify(values)
    assert is_min_heap(values) is True


def test_is_min_heap_rejects_out_of_order():
    assert is_min_heap([2, 1]) is False


def test_heap_sort_source_list():
    values = [6, 8, 7, 9, 1, 4, 3, 2, 5, 0]
    original = list(values)
    assert heap_sort(values) == sorted(original)
    assert values == original


@pytest.mark.parametrize("seed", range(4))
def test_heap_sort_random(seed):
    rng = random.Random(seed)
    values = [rng.randint(-50, 50) for _ in range(rng.randint(0, 40))]
    assert heap_sort(values) == sorted(values)


def test_median_matches_running_median():
    rng = random.Random(7)
    finder = MedianFinder()
    seen = []
    for _ in range(40):
        value = rng.randint(-100, 100)
        finder.insert(value)
        seen.append(value)
        assert finder.median() == statistics.median(seen)
    assert len(finder) == len(seen)


def test_median_empty_raises():
    with pytest.raises(ValueError):
        MedianFinder().median()


def test_median_single_value():
    finder = MedianFinder()
    finder.insert(5)
    assert finder.median() == 5