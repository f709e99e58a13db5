"""Heaviest-path search that explores subtrees on worker threads."""

from __future__ import annotations

import threading
from typing import Sequence

from treepath.tree import NO_CHILD, Node, PathResult, TreeFormatError, _check_root


class _Worker(threading.Thread):
    """Solves one subtree and keeps its result or its error."""

    def __init__(self, tree, idx, max_threads, ancestors):
        super().__init__(daemon=True)
        self._job = (tree, idx, max_threads, ancestors)
        self._result: PathResult | None = None
        self._error: BaseException | None = None

    def run(self) -> None:
        try:
            self._result = _solve(*self._job)
        except BaseException as exc:  # handed back to the joining thread
            self._error = exc

    def outcome(self) -> PathResult:
        self.join()
        if self._error is not None:
            raise self._error
        assert self._result is not None
        return self._result


def _solve(
    tree: Sequence[Node], idx: int, max_threads: int, ancestors: frozenset[int]
) -> PathResult:
    if idx == NO_CHILD:
        return PathResult(0.0)
    if idx in ancestors:
        raise TreeFormatError(f"node {idx + 1} is its own descendant")
    node = tree[idx]
    if node.is_leaf:
        return PathResult(node.value, (idx,))

    lineage = ancestors | {idx}
    workers = [
        _Worker(tree, child, max_threads, lineage)
        for child in node.children[:max_threads]
    ]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    results = [worker.outcome() for worker in workers]
    results.extend(
        _solve(tree, child, max_threads, lineage)
        for child in node.children[max_threads:]
    )

    best = PathResult(-1.0)
    for result in results:
        if result.total > best.total:
            best = result
    return PathResult(node.value + best.total, (idx,) + best.path)


def max_path_threaded(
    tree: Sequence[Node], root: int = 0, max_threads: int = 4
) -> PathResult:
    """Find the heaviest root-to-leaf path, spawning threads per node.

    At every node the first ``max_threads`` children are explored on their
    own threads and the rest in the calling thread. The result is the same
    as that of ``max_path``.
    """
    if max_threads < 0:
        raise ValueError("max_threads must not be negative")
    _check_root(tree, root)
    return _solve(tree, root, max_threads, frozenset())