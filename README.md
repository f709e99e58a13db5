# treepath

`treepath` reads a tree whose nodes carry numeric values. It finds the
root-to-leaf path with the largest sum of values. The search can run in a
single thread, or it can start worker threads at every node.

## Input format

The first token is the number of nodes, `N`. Then come `N` node records, one
for each node, in order. A node record is:

```
<value> <number of children> <child> <child> ...
```

Child numbers are 1-based. A child number of `0` stands for an empty subtree.
An empty subtree counts as a path with total 0 and no nodes. Whitespace,
newlines included, separates the tokens. Tokens after the last record are
ignored. The search starts at node 1. For example:

```
3
1.5 2 2 3
4 0
2 0
```

When two children give the same total, the earlier child wins. Some input is
rejected: a missing or non-numeric token, a negative count, a child number
outside `0..N`, or a node that is its own descendant.

## Command line

```
treepath [FILE] [--threads N]
```

This reads the tree from `FILE`, or from standard input if no file is given,
and prints the best path:

```
treepath < tree.txt
```

```
Max Sum: 5.50
Path: 1 2 
```

The sum is printed with two decimals. The node numbers are 1-based, and each
is followed by a space. The search is serial by default. `--threads N` runs
the threaded search instead: at every node, the first `N` children are each
explored on their own thread and the rest in the current thread. On a bad
file or malformed input, the command prints `error: ...` to standard error
and exits with status 1.

### Generating sample records

`treepath-generate` writes sample node records. It has two subcommands:

```
treepath-generate write [--path sequencia.txt] [--count 50000]
treepath-generate append [--path sequencia.txt] [--start 20001] [--stop 40000]
```

`write` creates or truncates the file. It writes one line `i 2 2i 2i+1` for
each `i` from 1 to `count`. `append` adds one line `i 0` for each `i` from
`start` to `stop`, both included.

These lines are records only. The generator writes no leading node count, and
it does not check that the child numbers it writes name existing nodes. To
feed such a file to `treepath`, you must put the node count in front of the
records yourself, and the records must form a valid tree.

## Library use

```python
from treepath.tree import parse_tree, max_path, format_result
from treepath.parallel import max_path_threaded

tree = parse_tree("3\n1.5 2 2 3\n4 0\n2 0\n")
result = max_path(tree, 0)          # PathResult(total=5.5, path=(0, 1))
print(format_result(result), end="")

threaded = max_path_threaded(tree, 0, 3)
assert threaded == result
```

- `treepath.tree.Node` holds a node's `value` and the 0-based indices of its
  `children`, where `-1` marks an empty subtree. `is_leaf` is true when the
  node has no children.
- `treepath.tree.PathResult` holds the `total` and the 0-based `path`.
- `parse_tree(text)` parses a description into a list of `Node`.
  `read_tree(stream)` does the same with an open text stream. Malformed input
  raises `TreeFormatError`, a subclass of `ValueError`.
- `max_path(tree, root=0)` searches without recursion. A root outside the
  tree raises `IndexError`.
- `max_path_threaded(tree, root=0, max_threads=4)` gives the same result with
  threads. A negative `max_threads` raises `ValueError`.
- `format_result(result)` renders the two output lines shown above.

`treepath.generate` provides `branch_lines(start, stop)` and
`leaf_lines(start, stop)`, which yield the record lines.
`write_sequence(path, count)` writes branch records to a new file, and
`append_leaves(path, start, stop)` adds leaf records to the end of a file.

## Tests

```
pip install -e .[test]
pytest
```