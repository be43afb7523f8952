"""Greedy scheduling exercises: trades, intervals, platforms and activities."""

from itertools import pairwise


def stock_buy_sell(prices):
    """Return (buy_day, sell_day) pairs that catch every rising stretch."""
    prices = list(prices)
    trades = []
    buy = None
    for day, (today, tomorrow) in enumerate(pairwise(prices)):
        if buy is None and today < tomorrow:
            buy = day
        elif buy is not None and today > tomorrow:
            trades.append((buy, day))
            buy = None
    if buy is not None and prices[buy] < prices[-1]:
        trades.append((buy, len(prices) - 1))
    return trades


def merge_intervals(intervals):
    """Merge overlapping (start, end) intervals, returned sorted."""
    merged = []
    for start, end in sorted(tuple(interval) for interval in intervals):
        if merged and start <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def min_platforms(arrivals, departures):
    """Return how many platforms keep every train from waiting."""
    arrivals = sorted(arrivals)
    departures = sorted(departures)
    if len(arrivals) != len(departures):
        raise ValueError("every arrival needs a departure")
    if not arrivals:
        return 0
    count = len(arrivals)
    in_use = needed = 1
    i, j = 1, 0
    while i < count and j < count:
        if arrivals[i] <= departures[j]:
            in_use += 1
            i += 1
        else:
            in_use -= 1
            j += 1
        needed = max(needed, in_use)
    return needed


def select_activities(starts, finishes):
    """Pick activities greedily; they must already be sorted by finish time."""
    starts = list(starts)
    finishes = list(finishes)
    if len(starts) != len(finishes):
        raise ValueError("every start needs a finish")
    if not starts:
        return []
    chosen = [0]
    last_finish = finishes[0]
    for index, (start, finish) in enumerate(zip(starts, finishes)):
        if index and start >= last_finish:
            chosen.append(index)
            last_finish = finish
    return chosen