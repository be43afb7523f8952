"""Exercises on runs, windows and subsets of sequences."""

from collections import Counter
from itertools import accumulate, combinations


def longest_consecutive_subsequence(values):
    """Return the length of the longest run of consecutive integers present."""
    present = set(values)
    best = 0
    for start in present:
        if start - 1 in present:
            continue
        length = 1
        while start + length in present:
            length += 1
        best = max(best, length)
    return best


def subarray_with_sum(values, target):
    """Return (first, last) indices of a window of non-negative values summing to ``target``.

    Returns None when there is no such window.
    """
    values = list(values)
    if not values:
        return None
    window = values[0]
    start = 0
    for end in range(1, len(values) + 1):
        while window > target and start < end - 1:
            window -= values[start]
            start += 1
        if window == target:
            return start, end - 1
        if end < len(values):
            window += values[end]
    return None


def subsets(values):
    """Return every subset, each in input order, the whole list sorted."""
    items = list(values)
    return sorted(
        list(combo)
        for size in range(len(items) + 1)
        for combo in combinations(items, size)
    )


def trapped_water(heights):
    """Return how much rain water the blocks trap, using running maxima."""
    heights = list(heights)
    if not heights:
        return 0
    left = accumulate(heights, max)
    right = list(accumulate(reversed(heights), max))
    right.reverse()
    return sum(min(lmax, rmax) - height for lmax, rmax, height in zip(left, right, heights))


def trapped_water_two_pointers(heights):
    """Return how much rain water the blocks trap, closing in from both ends."""
    heights = list(heights)
    left, right = 0, len(heights) - 1
    left_max = right_max = 0
    water = 0
    while left < right:
        if heights[left] < heights[right]:
            if heights[left] > left_max:
                left_max = heights[left]
            else:
                water += left_max - heights[left]
            left += 1
        else:
            if heights[right] > right_max:
                right_max = heights[right]
            else:
                water += right_max - heights[right]
            right -= 1
    return water


def max_zero_sum_length(values):
    """Return the length of the longest contiguous window summing to zero."""
    first_seen = {0: -1}
    total = 0
    best = 0
    for index, value in enumerate(values):
        total += value
        if total in first_seen:
            best = max(best, index - first_seen[total])
        else:
            first_seen[total] = index
    return best


def sort_by_frequency(values):
    """Sort by falling frequency, smaller values first among equals."""
    counts = Counter(values)
    return sorted(counts.elements(), key=lambda value: (-counts[value], value))


def max_histogram_area(heights):
    """Return the largest rectangle area under a histogram."""
    best = 0
    stack = []
    heights = list(heights)
    for index, height in enumerate([*heights, 0]):
        start = index
        while stack and stack[-1][1] >= height:
            start, top = stack.pop()
            best = max(best, top * (index - start))
        stack.append((start, height))
    return best