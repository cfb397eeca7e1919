# algoviz

Step-by-step traces of classic sorting and searching algorithms. Each
algorithm takes a list of integers, returns its result, and writes every
comparison, swap, pass or probe to a `Trace`. ANSI colours mark the
elements involved, so the output reads best in a terminal.

## Install

    pip install .

## The trace

`algoviz.render.Trace` collects the text an algorithm produces. Give it a
stream to echo the steps as they happen. `text()` returns everything
written so far.

    import sys
    from algoviz.render import Trace
    from algoviz.divide_sorts import merge_sort

    trace = Trace(sys.stdout)   # echo each step to the terminal
    result = merge_sort([5, 1, 4, 2], trace)

    quiet = Trace()             # collect the steps only
    merge_sort([3, 2, 1], quiet)
    steps = quiet.text()

The trace argument may be left out. The steps are then discarded.

`algoviz.render` also provides `red`, `green` and `magenta`, which wrap a
value in that terminal colour. `join_values` renders values with a space
after each one.

## Sorting

All sorts return a new list and leave their input alone.

- `algoviz.divide_sorts.merge_sort(values, trace)`: top-down merge sort.
  It shows each run before it is split and again after it is merged.
- `algoviz.divide_sorts.quick_sort(values, trace)`: quick sort that uses
  the first element of each range as the pivot. It shows each pointer
  move and swap.
- `algoviz.distribution_sorts.bucket_sort(values, gap, trace)`: scatters
  the values into buckets `gap` values wide, sorts each bucket, then
  gathers them. It raises `ValueError` for an empty list or a gap that is
  not positive.
- `algoviz.distribution_sorts.radix_sort(values, trace)`: least
  significant digit first, base 10. It lists the values zero-padded after
  each digit pass. It raises `ValueError` for an empty list or for
  negative values.
- `algoviz.tree_sorts.heap_sort(values, max_heap=True, trace=None)`:
  sorts ascending with a max heap or a min heap and draws the heap at
  each step. It raises `ValueError` for an empty list.
- `algoviz.tree_sorts.tree_sort(values, trace)`: inserts each value into
  a binary search tree, draws the tree after each insertion, and reads
  it back in order. The tree keeps one copy of each key. Slots past the
  distinct keys keep the values that stood there in the input. It raises
  `ValueError` for an empty list.
- `algoviz.tree_sorts.tournament_sort(values, trace)`: plays repeated
  knockout tournaments and returns the values in **descending** order.

`algoviz.tree_sorts.SearchTree` is the binary search tree behind
`tree_sort`:

    from algoviz.tree_sorts import SearchTree

    tree = SearchTree([8, 3, 10, 3])
    tree.insert(6)
    tree.inorder()   # [3, 6, 8, 10]
    print(tree.render())

`render()` draws the tree sideways. The right subtree is at the top and
each level is indented ten columns.

`algoviz.tree_sorts.element_positions(values)` pairs each value with the
1-based position of its first occurrence.

## Searching

Both searches expect a list sorted in ascending order. They return the
index they found, or `None`.

- `algoviz.segment_searches.ternary_search(values, target, trace)`:
  splits the range in three at each step.
- `algoviz.segment_searches.exponential_search(values, target, trace)`:
  doubles the probe index until the probed value passes the target, then
  binary-searches the last span. It stops as soon as the doubled index
  runs past the end of the list. Values after the last probe are not
  examined, so it can return `None` for a target that is in the list.

## What this package does not do

- It installs no command-line program and has no interactive menu. You
  call the algorithms from Python.
- It does not include insertion, selection, bubble, shell or comb sort.
- It does not include linear, binary, jump or interpolation search.

## Running the tests

    pip install .[test]
    pytest