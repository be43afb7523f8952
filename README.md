# dsapractice

A collection of classic data-structure and algorithm practice problems.
Each one is solved as a small Python function or class that takes ordinary
values (lists, strings, integers) and returns its result.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsapractice.strings` | `remove_duplicates`, `are_anagrams`, `keypad_sequence`, `is_balanced` |
| `dsapractice.searching` | `binary_search`, `search_rotated`, `kth_smallest`, `kth_smallest_in_matrix`, `min_pages`, `count_occurrences`, `first_element_k_times` |
| `dsapractice.sequences` | `longest_consecutive_subsequence`, `subarray_with_sum`, `subsets`, `trapped_water`, `trapped_water_two_pointers`, `max_zero_sum_length`, `sort_by_frequency`, `max_histogram_area` |
| `dsapractice.scheduling` | `stock_buy_sell`, `merge_intervals`, `min_platforms`, `select_activities` |
| `dsapractice.heaps` | `is_min_heap`, `heap_sort`, `MedianFinder` |
| `dsapractice.linked_list` | `ListNode`, `from_iterable`, `to_list`, `remove_duplicates`, `merge_k_sorted`, `middle`, `is_palindrome`, `reverse` |
| `dsapractice.graphs` | `has_cycle`, `floyd_warshall`, `format_distances`, `topological_sort`, `alien_order`, `INF` |

## Examples

```python
from dsapractice.strings import is_balanced, keypad_sequence
from dsapractice.scheduling import select_activities
from dsapractice.heaps import MedianFinder
from dsapractice.linked_list import from_iterable, reverse, to_list
from dsapractice.graphs import alien_order

is_balanced("{()}[]")                      # True
keypad_sequence("HI")                      # "44444"

select_activities([1, 3, 2, 0, 5, 8, 11],
                  [3, 4, 5, 7, 9, 10, 12])  # [0, 1, 4, 6]

finder = MedianFinder()
finder.insert(5)
finder.insert(15)
finder.median()                            # 10.0

to_list(reverse(from_iterable([1, 2, 3])))  # [3, 2, 1]

alien_order(["caa", "aaa", "aab"], 3)       # ['c', 'a', 'b']
```

## Notes on behaviour

- Lookups that find nothing return a sentinel rather than raising:
  `binary_search` and `search_rotated` return `-1`,
  `first_element_k_times` and `subarray_with_sum` return `None`.
- Invalid input raises `ValueError`: a `k` out of range in `kth_smallest`,
  a character without a keypad code in `keypad_sequence`, an empty list in
  `min_pages`, `median()` before any value was inserted, mismatched lengths
  in `min_platforms` and `select_activities`, and out-of-range vertices or
  letters in `has_cycle` and `alien_order`.
- `floyd_warshall` treats `INF` (99999) as "no edge", and `format_distances`
  prints such cells as `INF`.
- `linked_list.remove_duplicates` and `linked_list.reverse` change the list
  in place; `merge_k_sorted` builds a new list and leaves its inputs intact.

## What this package does not do

It is a library only: there is no command-line program. It offers no
bit-manipulation helpers, no binary-tree functions, and no cache or stack
containers; the modules listed above are all it holds.