"""Weighted trees and their heaviest root-to-leaf path."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence, TextIO, TypeVar

NO_CHILD = -1
"""Child index that stands for an empty subtree (written as 0 in the input)."""

_T = TypeVar("_T")


class TreeFormatError(ValueError):
    """Raised when a tree description is malformed or does not form a tree."""


@dataclass(frozen=True)
class Node:
    """A tree node: its value and the 0-based indices of its children."""

    value: float
    children: tuple[int, ...] = ()

    @property
    def is_leaf(self) -> bool:
        return not self.children


@dataclass(frozen=True)
class PathResult:
    """Total value of a path and the 0-based node indices along it."""

    total: float
    path: tuple[int, ...] = ()


def parse_tree(text: str) -> list[Node]:
    """Parse a whitespace-separated tree description.

    The description is a node count followed, for each node, by its value,
    its number of children and the 1-based indices of those children.
    A child index of 0 means an empty subtree. Trailing tokens are ignored.
    """
    tokens = iter(text.split())

    def take(kind: Callable[[str], _T], what: str) -> _T:
        try:
            token = next(tokens)
        except StopIteration:
            raise TreeFormatError(f"unexpected end of input, expected {what}") from None
        try:
            return kind(token)
        except ValueError:
            raise TreeFormatError(f"invalid {what}: {token!r}") from None

    count = take(int, "node count")
    if count < 0:
        raise TreeFormatError(f"negative node count: {count}")

    def child_index(number: int) -> int:
        child = take(int, f"child of node {number}")
        if not 0 <= child <= count:
            raise TreeFormatError(f"node {number} refers to missing node {child}")
        return child - 1

    nodes = []
    for number in range(1, count + 1):
        value = take(float, f"value of node {number}")
        arity = take(int, f"child count of node {number}")
        if arity < 0:
            raise TreeFormatError(f"node {number} has a negative child count")
        nodes.append(Node(value, tuple(child_index(number) for _ in range(arity))))
    return nodes


def read_tree(stream: TextIO) -> list[Node]:
    """Read a tree description from an open text stream."""
    return parse_tree(stream.read())


def _check_root(tree: Sequence[Node], root: int) -> None:
    if root != NO_CHILD and not 0 <= root < len(tree):
        raise IndexError(f"root {root} is outside a tree of {len(tree)} nodes")


def _choose(node: Node, totals: dict[int, float]) -> tuple[float, int | None]:
    """Total for a node and the child its best path continues to."""
    if node.is_leaf:
        return node.value, None
    best, chosen = -1.0, None
    for child in node.children:
        total = 0.0 if child == NO_CHILD else totals[child]
        if total > best:
            best, chosen = total, (None if child == NO_CHILD else child)
    return node.value + best, chosen


def max_path(tree: Sequence[Node], root: int = 0) -> PathResult:
    """Find the root-to-leaf path with the largest sum of values.

    Ties go to the earliest child. An empty subtree counts as a path of
    total 0 with no nodes.
    """
    _check_root(tree, root)
    if root == NO_CHILD:
        return PathResult(0.0)

    totals: dict[int, float] = {}
    best_next: dict[int, int | None] = {}
    open_nodes: set[int] = set()
    stack: list[tuple[int, bool]] = [(root, False)]
    while stack:
        idx, expanded = stack.pop()
        if expanded:
            totals[idx], best_next[idx] = _choose(tree[idx], totals)
            open_nodes.discard(idx)
            continue
        if idx in totals:
            continue
        if idx in open_nodes:
            raise TreeFormatError(f"node {idx + 1} is its own descendant")
        open_nodes.add(idx)
        stack.append((idx, True))
        stack.extend(
            (child, False)
            for child in tree[idx].children
            if child != NO_CHILD and child not in totals
        )

    path = []
    current: int | None = root
    while current is not None:
        path.append(current)
        current = best_next[current]
    return PathResult(totals[root], tuple(path))


def format_result(result: PathResult) -> str:
    """Render a result as the two report lines, with 1-based node numbers."""
    numbers = "".join(f"{idx + 1} " for idx in result.path)
    return f"Max Sum: {result.total:.2f}\nPath: {numbers}\n"