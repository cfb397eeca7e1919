"""Sorts driven by tree structures: heap sort, binary-search-tree sort and tournament sort."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from algoviz.render import Trace, join_values, red

_NEGATIVE_INFINITY = float("-inf")
_LEVEL_INDENT = 10


def _ensure(trace: Trace | None) -> Trace:
    return trace if trace is not None else Trace()


# ---------------------------------------------------------------- heap sort


def _heap_picture(items: list[int], pass_number: int, current: int, max_index: int) -> str:
    """Draw the heap level by level, up to ``max_index``."""
    levels = pass_number.bit_length() - 1
    parts: list[str] = []
    index = 0
    level = 0
    while index <= max_index or level == levels:
        in_level = 1 << level
        in_next_level = 1 << (level + 1)
        spacing = 20 // in_level - 1
        initial_spacing = 40 // in_next_level - 1
        for position in range(in_level):
            if index > max_index:
                break
            parts.append(" ".rjust(initial_spacing))
            if index == current or (level == 0 and position == 0):
                parts.append(f"{items[index]} ")
            else:
                parts.append(f" {items[index]} ")
            parts.append(" ".rjust(spacing))
            index += 1
        parts.append("\n\n")
        level += 1
    parts.append("\n" * 6)
    return "".join(parts)


def _sift_down(
    items: list[int], size: int, root: int, max_heap: bool, pass_number: int, trace: Trace
) -> None:
    def wins(candidate: int, best: int) -> bool:
        if max_heap:
            return items[candidate] > items[best]
        return items[candidate] < items[best]

    while True:
        best = root
        for child in (2 * root + 1, 2 * root + 2):
            if child < size and wins(child, best):
                best = child
        if best == root:
            return
        trace.write(_heap_picture(items, pass_number, root, size - 1))
        items[root], items[best] = items[best], items[root]
        root = best


def heap_sort(values: Iterable[int], max_heap: bool = True, trace: Trace | None = None) -> list[int]:
    """Sort ascending with a max heap or a min heap, drawing the heap at each step."""
    trace = _ensure(trace)
    items = list(values)
    if not items:
        raise ValueError("heap sort needs at least one value")
    n = len(items)
    pass_number = 1
    trace.write(_heap_picture(items, pass_number, 0, n - 1))

    for root in range(n // 2 - 1, -1, -1):
        _sift_down(items, n, root, max_heap, pass_number, trace)

    for end in range(n - 1, 0, -1):
        trace.write(_heap_picture(items, pass_number, 0, end))
        items[0], items[end] = items[end], items[0]
        pass_number += 1
        _sift_down(items, end, 0, max_heap, pass_number, trace)

    trace.write(_heap_picture(items, pass_number, 0, 0))

    result = items if max_heap else items[::-1]
    trace.write("Sorted array is:\n")
    trace.line(join_values(result))
    return result


# ---------------------------------------------------------------- tree sort


@dataclass
class _Node:
    key: int
    left: _Node | None = None
    right: _Node | None = None


class SearchTree:
    """A binary search tree that keeps one copy of each key."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        for key in keys:
            self.insert(key)

    def insert(self, key: int) -> None:
        """Add ``key``; a key already present is ignored."""
        if self._root is None:
            self._root = _Node(key)
            return
        node = self._root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = _Node(key)
                    return
                node = node.left
            elif key > node.key:
                if node.right is None:
                    node.right = _Node(key)
                    return
                node = node.right
            else:
                return

    def _walk(self, node: _Node | None) -> Iterator[int]:
        if node is not None:
            yield from self._walk(node.left)
            yield node.key
            yield from self._walk(node.right)

    def inorder(self) -> list[int]:
        """The keys in ascending order."""
        return list(self._walk(self._root))

    def _render(self, node: _Node | None, space: int, parts: list[str]) -> None:
        if node is None:
            return
        space += _LEVEL_INDENT
        self._render(node.right, space, parts)
        parts.append(f"\n{' ' * (space - _LEVEL_INDENT)}{node.key}\n")
        self._render(node.left, space, parts)

    def render(self) -> str:
        """Draw the tree sideways: right subtree on top, one level per ten columns."""
        parts: list[str] = []
        self._render(self._root, 0, parts)
        return "".join(parts)


def tree_sort(values: Iterable[int], trace: Trace | None = None) -> list[int]:
    """Sort by inserting into a search tree and reading it back in order.

    The tree drops repeated keys, so the slots past the distinct keys keep
    the values that stood there in the input.
    """
    trace = _ensure(trace)
    items = list(values)
    if not items:
        raise ValueError("tree sort needs at least one value")
    tree = SearchTree()
    for value in items:
        tree.insert(value)
        trace.line(f"Insert{red(value)}  into the tree: ")
        trace.write(tree.render())
        trace.line()
    ordered = tree.inorder()
    return ordered + items[len(ordered):]


# ---------------------------------------------------------- tournament sort


def _row(values: list[float], space: int) -> str:
    cells = "".join(
        ("-inf" if value == _NEGATIVE_INFINITY else f"{value} ") + " " * (space // 2)
        for value in values
    )
    return f"\n\n{' ' * space}{cells}"


def _play_tournament(players: list[float], trace: Trace) -> float:
    """Play pairwise rounds up to a single winner, drawing the rounds from the top down."""
    rounds: list[tuple[list[float], int]] = []
    current = list(players)
    space = 0
    while len(current) > 1:
        if len(current) % 2:
            current.append(_NEGATIVE_INFINITY)
        space += len(current) // 2
        current = [max(current[k], current[k + 1]) for k in range(0, len(current), 2)]
        rounds.append((current, space * 2))
    for winners, indent in reversed(rounds):
        trace.write(_row(winners, indent))
    return current[0]


def tournament_sort(values: Iterable[int], trace: Trace | None = None) -> list[int]:
    """Sort in descending order by repeatedly playing a knockout tournament."""
    trace = _ensure(trace)
    players: list[float] = list(values)
    n = len(players)
    result: list[int] = []
    for _ in range(n):
        winner = _play_tournament(players, trace)
        trace.write(_row(players, n // 2))
        result.append(int(winner))
        trace.write("\n\n")
        players[players.index(winner)] = _NEGATIVE_INFINITY
    return result


def element_positions(values: Iterable[int]) -> list[tuple[int, int]]:
    """Pair each value with the 1-based line of its first occurrence."""
    items = list(values)
    return [(value, items.index(value) + 1) for value in items]