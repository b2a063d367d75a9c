# topmark:header:start
#
#   project      : KeySeq
#   file         : arr.py
#   file_relpath : src/keyseq/arr.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Flat facade over every eager operation.

Import this module under a short name and call operations directly:

```python
from keyseq import arr

arr.chunk([1, 2, 3, 4, 5], 2)            # [[1, 2], [3, 4], [5]]
arr.take_if({"a": 1, "b": 2}, lambda v: v > 1)   # {"b": 2}
arr.sort_desc([3, 1, 2])                 # [3, 2, 1]
```

Several names (``filter``, ``map``, ``min``, ``max``, ``sum``, ``zip``, ``set``,
``slice``) intentionally mirror builtins; use them qualified (``arr.map``) rather
than with ``from keyseq.arr import *``.

The functions live in the ``keyseq.ops`` submodules; this module only re-exports
them.
"""

from __future__ import annotations

from keyseq.core.kinds import classify, is_list, is_map
from keyseq.ops.access import (
    at,
    at_or,
    at_or_none,
    coalesce,
    coalesce_or_none,
    count,
    first,
    first_index,
    first_index_or_none,
    first_key,
    first_key_or_none,
    first_or,
    first_or_none,
    get,
    get_or,
    get_or_none,
    is_empty,
    is_not_empty,
    key_at,
    key_at_or_none,
    keys,
    last,
    last_index,
    last_index_or_none,
    last_key,
    last_key_or_none,
    last_or,
    last_or_none,
    single,
    values,
)
from keyseq.ops.membership import (
    contains,
    contains_all,
    contains_all_keys,
    contains_any,
    contains_any_keys,
    contains_key,
    contains_none,
    contains_slice,
    does_not_contain,
    does_not_contain_key,
    ends_with,
    ensure_count_is,
    ensure_element_type,
    ensure_exact_keys,
    satisfy_all,
    satisfy_any,
    satisfy_none,
    satisfy_once,
    starts_with,
)
from keyseq.ops.selection import (
    drop_every,
    drop_first,
    drop_if,
    drop_keys,
    drop_last,
    drop_until,
    drop_while,
    filter,
    prioritize,
    replace,
    slice,
    take_every,
    take_first,
    take_if,
    take_keys,
    take_last,
    take_until,
    take_while,
    without,
)
from keyseq.ops.setops import (
    diff,
    diff_keys,
    duplicates,
    intersect,
    intersect_keys,
    sym_diff,
    unique,
)
from keyseq.ops.grouping import (
    chunk,
    each,
    flat_map,
    flatten,
    flip,
    group_by,
    key_by,
    map,
    map_with_key,
    partition,
    slide,
    split_after,
    split_after_index,
    split_before,
    split_before_index,
    split_evenly,
)
from keyseq.ops.sorting import (
    reverse,
    sort,
    sort_asc,
    sort_by_key,
    sort_by_key_asc,
    sort_by_key_desc,
    sort_desc,
    sort_with,
    sort_with_key,
)
from keyseq.ops.structure import (
    append,
    from_iterable,
    merge,
    merge_recursive,
    of,
    pad_left,
    pad_right,
    prepend,
    repeat,
    rotate,
    swap,
    with_defaults,
    zip,
)
from keyseq.ops.mutation import (
    clear,
    insert_at,
    pop,
    pop_many,
    pop_or_none,
    pull,
    pull_many,
    pull_or,
    pull_or_none,
    push,
    reindex,
    remove,
    set,
    set_if_exists,
    set_if_not_exists,
    shift,
    shift_many,
    shift_or_none,
)
from keyseq.ops.sampling import (
    sample,
    sample_key,
    sample_key_or_none,
    sample_keys,
    sample_many,
    sample_or,
    sample_or_none,
    shuffle,
)
from keyseq.ops.reductions import (
    average,
    average_or_none,
    fold,
    max,
    max_or_none,
    min,
    min_max,
    min_max_or_none,
    min_or_none,
    product,
    ratio,
    ratio_or_none,
    reduce,
    reduce_or,
    reduce_or_none,
    sum,
)
from keyseq.ops.text import (
    join,
    to_url_query,
)

__all__: list[str] = [
    "classify",
    "is_list",
    "is_map",
    # access
    "at",
    "at_or",
    "at_or_none",
    "key_at",
    "key_at_or_none",
    "get",
    "get_or",
    "get_or_none",
    "first",
    "first_or",
    "first_or_none",
    "first_key",
    "first_key_or_none",
    "first_index_or_none",
    "first_index",
    "last",
    "last_or",
    "last_or_none",
    "last_key",
    "last_key_or_none",
    "last_index_or_none",
    "last_index",
    "keys",
    "values",
    "single",
    "coalesce_or_none",
    "coalesce",
    "count",
    "is_empty",
    "is_not_empty",
    # membership
    "contains",
    "does_not_contain",
    "contains_all",
    "contains_any",
    "contains_none",
    "contains_key",
    "does_not_contain_key",
    "contains_all_keys",
    "contains_any_keys",
    "contains_slice",
    "starts_with",
    "ends_with",
    "satisfy_all",
    "satisfy_any",
    "satisfy_none",
    "satisfy_once",
    "ensure_count_is",
    "ensure_element_type",
    "ensure_exact_keys",
    # selection
    "take_if",
    "filter",
    "drop_if",
    "take_first",
    "drop_first",
    "take_last",
    "drop_last",
    "take_while",
    "take_until",
    "drop_while",
    "drop_until",
    "take_every",
    "drop_every",
    "take_keys",
    "drop_keys",
    "slice",
    "without",
    "prioritize",
    "replace",
    # setops
    "diff",
    "diff_keys",
    "intersect",
    "intersect_keys",
    "sym_diff",
    "unique",
    "duplicates",
    # grouping
    "group_by",
    "key_by",
    "flip",
    "partition",
    "chunk",
    "slide",
    "split_after",
    "split_before",
    "split_after_index",
    "split_before_index",
    "split_evenly",
    "map",
    "map_with_key",
    "flat_map",
    "flatten",
    "each",
    # sorting
    "sort",
    "sort_asc",
    "sort_desc",
    "sort_by_key",
    "sort_by_key_asc",
    "sort_by_key_desc",
    "sort_with",
    "sort_with_key",
    "reverse",
    # structure
    "of",
    "from_iterable",
    "append",
    "prepend",
    "merge_recursive",
    "merge",
    "pad_left",
    "pad_right",
    "repeat",
    "rotate",
    "swap",
    "with_defaults",
    "zip",
    # mutation
    "clear",
    "reindex",
    "insert_at",
    "push",
    "pop_or_none",
    "pop",
    "pop_many",
    "shift_or_none",
    "shift",
    "shift_many",
    "pull",
    "pull_or",
    "pull_or_none",
    "pull_many",
    "set",
    "set_if_exists",
    "set_if_not_exists",
    "remove",
    # sampling
    "sample_keys",
    "sample_key_or_none",
    "sample_key",
    "sample",
    "sample_or",
    "sample_or_none",
    "sample_many",
    "shuffle",
    # reductions
    "sum",
    "product",
    "average_or_none",
    "average",
    "min_or_none",
    "min",
    "max_or_none",
    "max",
    "min_max_or_none",
    "min_max",
    "ratio_or_none",
    "ratio",
    "reduce_or",
    "reduce_or_none",
    "reduce",
    "fold",
    # text
    "join",
    "to_url_query",
]
