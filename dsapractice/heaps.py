"""Heap exercises: heap checks, heap sort and a running median."""

import heapq


def is_min_heap(values):
    """Tell whether ``values`` satisfy the min-heap property."""
    values = list(values)
    return all(values[(i - 1) // 2] <= values[i] for i in range(1, len(values)))


def heap_sort(values):
    """Return the values in ascending order, taken one by one off a min-heap."""
    heap = list(values)
    heapq.heapify(heap)
    return [heapq.heappop(heap) for _ in range(len(heap))]


class MedianFinder:
    """Running median of a stream, kept in two balanced heaps."""

    def __init__(self):
        self._lower = []  # max-heap of the lower half, stored negated
        self._upper = []  # min-heap of the upper half

    def __len__(self):
        return len(self._lower) + len(self._upper)

    def insert(self, value):
        """Add a value to the stream."""
        if self._upper and value > self._upper[0]:
            heapq.heappush(self._upper, value)
        else:
            heapq.heappush(self._lower, -value)
        if len(self._lower) - len(self._upper) == 2:
            heapq.heappush(self._upper, -heapq.heappop(self._lower))
        elif len(self._upper) - len(self._lower) == 2:
            heapq.heappush(self._lower, -heapq.heappop(self._upper))

    def median(self):
        """Return the median of the values seen so far."""
        if not self._lower and not self._upper:
            raise ValueError("no values inserted")
        if len(self._lower) == len(self._upper):
            return (-self._lower[0] + self._upper[0]) / 2
        if len(self._lower) > len(self._upper):
            return -self._lower[0]
        return self._upper[0]