# arraykit

A handful of classic array algorithms with plain Python interfaces. The package
is a library only: it has no command-line tool and no dependencies outside the
standard library.

## Installation

```
pip install arraykit
```

To run the test suite, install the test extra:

```
pip install "arraykit[test]"
```

## What is inside

| Module | Function / class | Purpose |
| --- | --- | --- |
| `arraykit.randomized_set` | `RandomizedSet` | Set with O(1) insert, remove and uniform random pick |
| `arraykit.jumps` | `can_jump(nums)` | Whether the last index is reachable from index 0 |
| `arraykit.jumps` | `min_jumps(nums)` | Fewest jumps to reach the last index |
| `arraykit.majority` | `majority_element(nums)` | Boyer–Moore majority vote |
| `arraykit.products` | `product_except_self(nums)` | Product of all other elements, no division |
| `arraykit.rotation` | `rotate(nums, k)` | Rotate a list right by `k`, in place |
| `arraykit.citations` | `h_index(citations)` | The h-index of a citation list |
| `arraykit.profit` | `max_profit(prices)` | Best single buy/sell profit |
| `arraykit.profit` | `max_profit_many_trades(prices)` | Best profit with unlimited non-overlapping trades |
| `arraykit.compaction` | `remove_duplicates(nums)` | Compact a sorted list in place, return the new length |
| `arraykit.compaction` | `remove_element(nums, val)` | Move every item other than `val` to the front, return their count |

## Examples

```python
from arraykit.jumps import can_jump, min_jumps
from arraykit.profit import max_profit, max_profit_many_trades
from arraykit.rotation import rotate
from arraykit.citations import h_index
from arraykit.products import product_except_self
from arraykit.randomized_set import RandomizedSet

can_jump([2, 3, 1, 1, 4])                # True
can_jump([])                             # False
min_jumps([2, 3, 1, 1, 4])               # 2
max_profit([7, 1, 5, 3, 6, 4])           # 5
max_profit_many_trades([1, 2, 3, 4, 5])  # 4
h_index([3, 0, 6, 1, 5])                 # 3
product_except_self([1, 2, 3, 4])        # [24, 12, 8, 6]

nums = [1, 2, 3, 4, 5, 6, 7]
rotate(nums, 3)
nums                                     # [5, 6, 7, 1, 2, 3, 4]

s = RandomizedSet()
s.insert(1)                              # True
s.insert(1)                              # False
s.remove(2)                              # False
s.get_random()                           # 1
len(s), 1 in s, list(s)                  # (1, True, [1])
```

`RandomizedSet` holds any hashable values. It accepts an optional
`random.Random` instance, which makes its picks reproducible:

```python
import random
s = RandomizedSet(random.Random(42))
```

`get_random()` on an empty set raises `IndexError`.

## Notes on inputs

- `min_jumps` assumes the last index can be reached; an empty or one-element
  list gives `0`.
- `majority_element` assumes a majority element exists; an empty input gives `0`.
- `remove_duplicates` expects a sorted list.

The in-place functions (`rotate`, `remove_duplicates`, `remove_element`) change
the list they are given, the same way `list.sort` does. `remove_duplicates` and
`remove_element` leave the items past the returned length as they were.