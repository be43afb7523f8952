"""Searching and selection exercises."""

import heapq
from collections import Counter
from itertools import chain


def binary_search(values, key):
    """Return an index of ``key`` in the sorted ``values``, or -1."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == key:
            return mid
        if values[mid] < key:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_rotated(values, key):
    """Return the index of ``key`` in a rotated sorted sequence, or -1."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == key:
            return mid
        if values[low] <= values[mid]:
            if values[low] <= key <= values[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif values[mid] <= key <= values[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def kth_smallest(values, k):
    """Return the k-th smallest value (1-based)."""
    ordered = sorted(values)
    if not 1 <= k <= len(ordered):
        raise ValueError("k is out of range")
    return ordered[k - 1]


def kth_smallest_in_matrix(matrix, k):
    """Return the k-th smallest entry of a matrix, or its largest if there are fewer."""
    if k < 1:
        raise ValueError("k must be at least 1")
    smallest = heapq.nsmallest(k, chain.from_iterable(matrix))
    if not smallest:
        raise ValueError("matrix is empty")
    return smallest[-1]


def _fits(pages, students, limit):
    readers, load = 1, 0
    for count in pages:
        if load + count > limit:
            readers += 1
            load = count
        else:
            load += count
    return readers <= students


def min_pages(pages, students):
    """Smallest possible maximum of pages any student reads with contiguous allocation."""
    pages = list(pages)
    if not pages:
        raise ValueError("no books to allocate")
    low, high = max(pages), sum(pages)
    result = 0
    while low <= high:
        mid = (low + high) // 2
        if _fits(pages, students, mid):
            result = mid
            high = mid - 1
        else:
            low = mid + 1
    return result


def count_occurrences(values, x):
    """Count how often ``x`` occurs."""
    return sum(1 for value in values if value == x)


def first_element_k_times(values, k):
    """Return the first value whose running count reaches ``k``, or None."""
    counts = Counter()
    for value in values:
        counts[value] += 1
        if counts[value] == k:
            return value
    return None