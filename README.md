# slicekit

Helpers for everyday work with Python lists. They cover searching,
deduplicating, grouping, folding, mapping, sorting and binary search. There
are also helpers for in-place edits and for building random lists. The
package needs Python 3.10 or later and uses only the standard library.

## Installation

```
pip install slicekit
```

## Modules

- `slicekit.comparable` provides `contains`, `equal`, `find`, `find_all`,
  `unique`, `group` and `purge`. Each one takes an optional `eq` function for
  comparing two values. The default is `==`.
  - `find` starts searching at index `start`. It returns -1 when the value is
    not found. A negative `start` raises `ValueError`.
  - `equal` treats `None` as an empty list.
  - `unique` keeps values in the order they first appear. Without `eq`, the
    values must be hashable.
  - `group` collects each run of consecutive values that are equal to the
    first value of the run.
- `slicekit.numeric` provides `total`, `product` and `arange`.
  - `total` and `product` return 0 and 1 for an empty list.
  - `arange(start, end, step)` returns the numbers from `start` up to but not
    including `end`. It raises `ValueError` when the step is zero.
- `slicekit.folds` provides `reduce`, `all_of` and `any_of`. If `all_of` or
  `any_of` gets no predicate, every value must be a `bool`. Otherwise they
  raise `TypeError`.
- `slicekit.iterate` provides `enumerate_items` and `values`, which are
  generators, and `collect`, which turns any iterable into a list.
- `slicekit.core` provides `clone`, `concat`, `create`, `filter_values`,
  `filter_index`, `flatten`, `repeat`, `reverse`, `reverse_clone`,
  `drop_while`, `take_while`, `get`, `get_slice`, `repeat_seq`, `create_with`
  and `adjust`.
  - `adjust(seq, length, fill)` returns a copy that is cut to `length` values
    or padded to it with `fill`.
  - `concat()` and `create()` return `None` when called with no arguments.
- `slicekit.ordered` provides `minimum`, `maximum`, `extrema`, `sort`,
  `sort_clone`, `is_sorted` and `search`. Each one takes an optional `less`
  function, where `less(a, b)` is true if `a` orders before `b`.
  - Sorting is always stable. The `stable` argument is accepted but does not
    change the result.
  - `search` performs a binary search on an ascending list. It returns
    `(index, found)`.
- `slicekit.mapping` provides `map_values`, `map2` and `map3`. These stop at
  the end of the shortest input. They return `None` if any input is `None`.
- `slicekit.modify` provides `insert`, `delete`, `delete_range`,
  `delete_pred` and `fill`. These change the list in place and return it
  (`fill` returns nothing). Out-of-range indexes raise `IndexError`.
- `slicekit.randomize` provides `shuffle`, `random_ints` and `random_floats`.
  Each one takes an optional `random.Random` instance.
  - `random_ints(length, n)` draws from `[0, n)`.
  - With `n == 0`, `random_ints` draws from `[0, 2**63)`.

## Examples

```python
from slicekit.comparable import group, unique
from slicekit.ordered import search
from slicekit.modify import delete

group([1, 1, 2, 2, 1])       # [[1, 1], [2, 2], [1]]
unique([2, 1, 2])            # [2, 1]
search([1, 3], 2)            # (1, False)

items = [1, 2, 3]
delete(items, 0, 2)          # [2]
```

## None versus empty lists

Many functions return `None` when they are given `None` instead of a list.
This lets you tell "no list" apart from "empty list".

## Errors

`minimum`, `maximum` and `extrema` raise `ValueError` for an empty or missing
list.

`get` and `get_slice` accept negative indexes, counted from the end. They
raise `IndexError` when an index or slice bound is out of range.

## Running the tests

```
pip install slicekit[test]
pytest
```