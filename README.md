# algodrills

Compact Python solutions to a set of classic programming exercises on
arrays, strings, singly linked lists and binary trees. Everything is plain
Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algodrills.arrays`

Functions that rearrange the list they are given in place:

- `remove_duplicates(nums)` compacts a sorted list so each value appears
  once and returns the count `k`; the unique values occupy `nums[:k]`.
- `remove_element(nums, val)` moves the elements not equal to `val` to the
  front, keeping their order, and returns how many were kept.
- `move_zeroes(nums)` moves all zeroes to the end, keeping the order of the
  rest.
- `merge(nums1, m, nums2, n)` merges the first `n` values of `nums2` into
  `nums1`, which holds `m` sorted values followed by room for `n` more.

Functions that compute a result from their input:

- `product_except_self(nums)`, `increasing_triplet(nums)`,
  `can_place_flowers(flowerbed, n)` (the flowerbed is left unchanged),
  `pivot_index(nums)` (returns `-1` if there is no pivot),
  `unique_occurrences(arr)`, `largest_altitude(gain)`.
- `find_difference(nums1, nums2)` returns a tuple of two lists: the distinct
  values found only in `nums1` and those found only in `nums2`.
- `find_max_average(nums, k)` raises `ValueError` unless
  `1 <= k <= len(nums)`.
- `image_smoother(img)` replaces each cell with the mean of its 3x3
  neighbourhood, truncated toward zero; it raises `ValueError` for an image
  with no rows.
- `kids_with_candies(candies, extra_candies)` raises `ValueError` for an
  empty list.

```python
from algodrills.arrays import product_except_self, pivot_index

product_except_self([1, 2, 3, 4])   # [24, 12, 8, 6]
pivot_index([1, 7, 3, 6, 5, 6])     # 3
```

### `algodrills.strings`

`reverse_words(s)`, `reverse_vowels(s)`, `is_subsequence(s, t)`,
`gcd_of_strings(str1, str2)`, `max_vowels(s, k)` (counts lowercase vowels)
and `merge_alternately(word1, word2)`.

`compress(chars)` run-length encodes a list of characters in place and
returns the new length; the encoding occupies `chars[:length]`.

```python
from algodrills.strings import reverse_words, gcd_of_strings

reverse_words("  the sky   is blue ")   # "blue is sky the"
gcd_of_strings("ABCABC", "ABC")          # "ABC"
```

### `algodrills.linked_list`

A `ListNode` type (iterable over its values from that node on) with
`from_values(values)` and `to_values(head)` helpers, plus `reverse_list(head)`,
`odd_even_list(head)` and `delete_middle(head)`. The list operations work in
place and return the resulting head; `delete_middle` removes the node at
index `len // 2` and turns a one-node list into an empty one (`None`).

```python
from algodrills.linked_list import from_values, to_values, reverse_list

to_values(reverse_list(from_values([1, 2, 3])))   # [3, 2, 1]
```

### `algodrills.trees`

A `TreeNode` type with `max_depth(root)`, `find_target(root, k)` (whether two
distinct nodes sum to `k`), `search_bst(root, val)` (the matching node or
`None`), `leaves(root)` (a generator of leaf values, left to right) and
`leaf_similar(root1, root2)`.

### `algodrills.search`

`guess_number(n, guess)` finds the picked number in `1..n` by binary search,
where `guess(num)` returns `-1` if `num` is too high, `1` if it is too low and
`0` when it is right. It returns `-1` if the oracle never answers `0`.

```python
from algodrills.search import guess_number

guess_number(10, lambda num: (num < 6) - (num > 6))   # 6
```

### `algodrills.recent`

`RecentCounter` counts the pings made within the last 3000 time units,
inclusive: `ping(t)` records a ping at time `t` and returns how many pings
fall within `[t - 3000, t]`.

```python
from algodrills.recent import RecentCounter

counter = RecentCounter()
counter.ping(1)      # 1
counter.ping(100)    # 2
counter.ping(3001)   # 3
counter.ping(3002)   # 3
```

## Command line

The package installs one command that merges two words alternately,
character by character:

```
algodrills-merge abc pqrs
```

prints `Merged String: apbqcrs`. A word not given on the command line is
asked for at a prompt.