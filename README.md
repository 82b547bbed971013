# bstree

Small binary tree and binary search tree structures in which every node knows
its parent, together with a writer for Graphviz `dot` files.

## Installation

```
pip install .
```

The tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Binary search trees

`bstree.bst.BstNode` is a node of a binary search tree holding an integer key,
with `parent`, `left` and `right` links.

```python
from bstree.bst import BstNode, tree_delete

root = BstNode(15)
for key in (6, 18, 3, 7, 17, 20):
    root.tree_insert(key)

root.tree_search(7)        # node with key 7, or None if absent
root.minimum().key         # 3
root.maximum().key         # 20
root.tree_search(7).tree_successor().key   # 15, the key that follows 7

root = tree_delete(root, root.tree_search(6))
```

- `add_left_child(value)` / `add_right_child(value)` attach a new child,
  replacing any existing one, and return it.
- `tree_insert(value)` adds a new leaf in search order and returns it; equal
  keys go to the right.
- `tree_search`, `minimum` and `maximum` return a copy of the found node (made
  with `copy()`), which shares the original's key, parent and children.
- `root()` follows parent links to the topmost node.
- `tree_successor()` returns the node with the next larger key, or `None`.
  `tree_successor_simpler()` is a variant that treats any node lacking a
  parent or either child as nil; it raises `ValueError` when its walk needs a
  parent that does not exist.
- `tree_delete(root, node)` removes the node and returns the root of the tree
  afterwards, which changes when the root itself is removed.

Nodes are matched by key when relinking, so keys are expected to be unique.

## Plain binary trees

`bstree.tree.Node` is a binary tree node with an integer `value` and no
ordering rule.

- `count_nodes()` counts the nodes in the subtree; `count_nodes_from(node, count)`
  does the same with `count` added at every level.
- `tree_depth()` gives the longest path down from the node, in edges (a lone
  node has depth 0).
- `get_node_by_value(value)` and `get_node_by_full_property(node)` return a
  copy of a matching node. Both descend into the left child when there is one
  and only fall back to the right child when the left one is missing.
- `sibling()` returns the other child of the node's parent, or `None` for a root.
- `discard_node_by_value(value)` cuts the links along the path to the matching
  node and reports whether it was found.

## Graphviz output

```python
from bstree.dot import dot_source, write_dotfile

print(dot_source(root))
write_dotfile(root, "tree.dot")
```

Both accept a `Node` or a `BstNode`. The output is an undirected
`graph tree{ ... }` with one tab-indented `parent--child;` edge per line, and
can be rendered with Graphviz, for example `dot -Tpng tree.dot -o tree.png`.

## Demonstration

```
bstree-demo
```

builds a sample search tree, prints search, minimum, maximum, root and
successor results, inserts and deletes a series of keys, and writes
`bst_graph.dot`, `bst_insert.dot` and `bst_delete.dot`.

```
bstree-demo OUTPUT_DIR --binary-tree
```

writes the files into `OUTPUT_DIR` (created if needed; the default is the
current directory) and, with `--binary-tree`, first runs a plain binary tree
walkthrough that writes `prime.dot`, `prime_t2.dot`, `prime_t3.dot` and
`prime_t4.dot`.

The same walkthroughs are available from Python as
`bstree.demo.run_bst_demo(output_dir)`, `bstree.demo.run_binary_tree_demo(output_dir)`
and `bstree.demo.build_sample_bst()`.

## What it does not do

The search tree does no balancing, and nothing here renders images itself:
turning `.dot` files into pictures needs Graphviz installed separately.