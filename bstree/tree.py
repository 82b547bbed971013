"""A plain binary tree whose nodes keep a link to their parent."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value."""

    value: int
    parent: Optional["Node"] = field(default=None, repr=False)
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    def add_left_child(self, value: int) -> "Node":
        """Attach a new left child with ``value``, replacing any existing one."""
        self.left = Node(value, parent=self)
        return self.left

    def add_right_child(self, value: int) -> "Node":
        """Attach a new right child with ``value``, replacing any existing one."""
        self.right = Node(value, parent=self)
        return self.right

    def copy(self) -> "Node":
        """Return a new node sharing this node's value, parent and children."""
        return Node(self.value, parent=self.parent, left=self.left, right=self.right)

    def get_node_by_value(self, value: int) -> Optional["Node"]:
        """Return a copy of the first node holding ``value``.

        The search descends into the left subtree when there is one and only
        falls back to the right subtree when the left child is missing.
        """
        if self.value == value:
            return self.copy()
        if self.left is not None:
            return self.left.get_node_by_value(value)
        if self.right is not None:
            return self.right.get_node_by_value(value)
        return None

    def get_node_by_full_property(self, node: "Node") -> Optional["Node"]:
        """Return a copy of the node whose value, parent and children match ``node``.

        Parent and children are compared by value; absent on both sides counts
        as a match. The search follows the same left-first path as
        :meth:`get_node_by_value`.
        """
        if (
            self.value == node.value
            and _same_value(node.parent, self.parent)
            and _same_value(node.left, self.left)
            and _same_value(node.right, self.right)
        ):
            return self.copy()
        if self.left is not None:
            return self.left.get_node_by_full_property(node)
        if self.right is not None:
            return self.right.get_node_by_full_property(node)
        return None

    def discard_node_by_value(self, value: int) -> bool:
        """Cut off the subtree holding ``value``; return whether it was found.

        The matching node loses its parent link, and every node on the path
        down to it loses the child link it was reached through.
        """
        if self.value == value:
            self.parent = None
            return True
        if self.left is not None:
            found = self.left.discard_node_by_value(value)
            self.left = None
            return found
        if self.right is not None:
            found = self.right.discard_node_by_value(value)
            self.right = None
            return found
        return False

    def count_nodes(self) -> int:
        """Return the number of nodes in the subtree rooted here."""
        return count_nodes_from(self, 0)

    def tree_depth(self) -> int:
        """Return the length, in edges, of the longest path down from this node."""
        left_depth = self.left.tree_depth() + 1 if self.left is not None else 0
        right_depth = self.right.tree_depth() + 1 if self.right is not None else 0
        return max(left_depth, right_depth)

    def sibling(self) -> Optional["Node"]:
        """Return the other child of this node's parent, or None for a root."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is not None and parent.left.value == self.value:
            return parent.right
        return parent.left


def count_nodes_from(node: Node, count: int) -> int:
    """Count the nodes under ``node``, with ``count`` added at every level."""
    left_count = count_nodes_from(node.left, count) if node.left is not None else 0
    right_count = count_nodes_from(node.right, count) if node.right is not None else 0
    return count + left_count + right_count + 1


def _same_value(first: Optional[Node], second: Optional[Node]) -> bool:
    if first is None and second is None:
        return True
    if first is None or second is None:
        return False
    return first.value == second.value