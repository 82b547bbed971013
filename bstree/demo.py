"""Command-line walkthrough that builds sample trees and writes their dot graphs."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from bstree.bst import BstNode, tree_delete
from bstree.dot import write_dotfile
from bstree.tree import Node, count_nodes_from

PathLike = Union[str, Path]

SEARCH_KEYS = (15, 9, 22)
SUCCESSOR_KEYS = (2, 20, 15, 13, 9, 7, 22)
INSERT_KEYS = (10, 30, 25, 21, 19, 11, 23, 27, 28, 26)
DELETE_KEYS = (2, 3, 17, 20, 7, 4, 13, 9, 10)


def build_sample_bst() -> BstNode:
    """Build the sample search tree rooted at 15 and return its root."""
    root = BstNode(15)
    left = root.add_left_child(6)
    right = root.add_right_child(18)

    right.add_left_child(17)
    right.add_right_child(20)

    terminal = left.add_left_child(3)
    second_right = left.add_right_child(7)
    terminal.add_left_child(2)
    terminal.add_right_child(4)

    third = second_right.add_right_child(13)
    third.add_left_child(9)
    return root


def run_bst_demo(output_dir: PathLike = ".") -> BstNode:
    """Exercise search, extremes, successors, insertion and deletion.

    Writes ``bst_graph.dot``, ``bst_insert.dot`` and ``bst_delete.dot`` into
    ``output_dir``, prints the results and returns the final root.
    """
    out = Path(output_dir)
    root = build_sample_bst()
    write_dotfile(root, out / "bst_graph.dot")

    for key in SEARCH_KEYS:
        found = root.tree_search(key)
        result = f"found -> {found.key}" if found is not None else "not found"
        print(f"tree search result of key {key} is {result}")

    minimum = root.minimum()
    print(f"minimum result {minimum.key}")
    maximum = root.maximum()
    print(f"maximum result {maximum.key}")
    print(f"root node {maximum.root().key}")

    for key in SUCCESSOR_KEYS:
        node = root.tree_search(key)
        if node is None:
            print(f"node with key of {key} does not exist, failed to get successor")
            continue
        successor = node.tree_successor_simpler()
        result = str(successor.key) if successor is not None else "not found"
        print(f"successor of node ({key}) is {result}")

    print("Inserting node with value 10,30,25,21,19,11,23,27,28...")
    for value in INSERT_KEYS:
        root.tree_insert(value)
    write_dotfile(root, out / "bst_insert.dot")

    print("Deleting node with value 2,3,17,20,7,4,13,9,10...")
    for key in DELETE_KEYS:
        node = root.tree_search(key)
        if node is not None:
            root = tree_delete(root, node)
    write_dotfile(root, out / "bst_delete.dot")
    return root


def run_binary_tree_demo(output_dir: PathLike = ".") -> Tuple[Node, Node]:
    """Exercise the plain binary tree and write ``prime*.dot`` into ``output_dir``.

    Returns the original root and the trimmed copy made by discarding node 3.
    """
    out = Path(output_dir)
    root = Node(5)
    left = root.add_left_child(3)
    right = root.add_right_child(7)
    write_dotfile(root, out / "prime.dot")

    left.add_left_child(2)
    left.add_right_child(4)
    right.add_right_child(10)
    write_dotfile(root, out / "prime_t2.dot")

    print(f"Current tree depth: {root.tree_depth()}")
    print(f"Amount of nodes in current tree: {root.count_nodes()}")
    print(f"Amount of nodes in current subtree: {count_nodes_from(right, 0)}")

    left.sibling()

    by_value = root.get_node_by_value(3)
    print(f"left subtree seek by value {by_value!r}")
    by_property = root.get_node_by_full_property(by_value) if by_value is not None else None
    print(f"left subtree seek by full property {by_property!r}")

    trimmed = root.copy()
    flag = trimmed.discard_node_by_value(3)
    print(f"status of node deletion: {flag}")
    write_dotfile(trimmed, out / "prime_t3.dot")

    print(f"Depth after discard {trimmed.tree_depth()}")
    print(f"Count nodes after discard {trimmed.count_nodes()}")
    write_dotfile(root, out / "prime_t4.dot")
    return root, trimmed


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the search tree walkthrough, optionally the plain tree one as well."""
    parser = argparse.ArgumentParser(
        prog="bstree", description="Build sample trees and write Graphviz dot files."
    )
    parser.add_argument(
        "output_dir", nargs="?", default=".", help="directory for the dot files"
    )
    parser.add_argument(
        "--binary-tree",
        action="store_true",
        help="also run the plain binary tree walkthrough",
    )
    args = parser.parse_args(argv)

    out = Path(args.output_dir)
    out.mkdir(parents=True, exist_ok=True)
    if args.binary_tree:
        run_binary_tree_demo(out)
    run_bst_demo(out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())