"""A binary search tree whose nodes keep a link to their parent."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(eq=False)
class BstNode:
    """A binary search tree node holding an integer key."""

    key: int
    parent: Optional["BstNode"] = field(default=None, repr=False)
    left: Optional["BstNode"] = None
    right: Optional["BstNode"] = None

    def add_left_child(self, value: int) -> "BstNode":
        """Attach a new left child with ``value``, replacing any existing one."""
        self.left = BstNode(value, parent=self)
        return self.left

    def add_right_child(self, value: int) -> "BstNode":
        """Attach a new right child with ``value``, replacing any existing one."""
        self.right = BstNode(value, parent=self)
        return self.right

    def copy(self) -> "BstNode":
        """Return a new node sharing this node's key, parent and children."""
        return BstNode(self.key, parent=self.parent, left=self.left, right=self.right)

    def tree_search(self, value: int) -> Optional["BstNode"]:
        """Return a copy of the node holding ``value``, or None.

        When ``value`` is smaller than a key but there is no left child, the
        search continues in the right subtree.
        """
        node: Optional[BstNode] = self
        while node is not None:
            if node.key == value:
                return node.copy()
            if value < node.key and node.left is not None:
                node = node.left
            else:
                node = node.right
        return None

    def minimum(self) -> "BstNode":
        """Return a copy of the node with the smallest key in this subtree."""
        node = self
        while node.left is not None:
            node = node.left
        return node.copy()

    def maximum(self) -> "BstNode":
        """Return a copy of the node with the largest key in this subtree."""
        node = self
        while node.right is not None:
            node = node.right
        return node.copy()

    def root(self) -> "BstNode":
        """Return the topmost ancestor of this node, or the node itself."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def _ancestors(self) -> Iterator["BstNode"]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def tree_successor(self) -> Optional["BstNode"]:
        """Return the node with the next larger key, or None if there is none."""
        if self.right is not None:
            return self.right.minimum()
        current = self
        for ancestor in self._ancestors():
            if ancestor.left is not None and ancestor.left.key == current.key:
                return ancestor
            current = ancestor
        return None

    def tree_successor_simpler(self) -> Optional["BstNode"]:
        """Return a successor using the nil-node shortcut.

        A node counts as nil unless it has a parent and both children. Raises
        ValueError when the walk needs a parent that does not exist.
        """
        if not _is_nil(self.right):
            return self.right.minimum()  # type: ignore[union-attr]

        if self.parent is None:
            raise ValueError(f"node {self.key} has no parent")
        current = self
        ancestor = self.parent
        ancestor_right = ancestor.right
        while _is_nil(ancestor) and _same_key(current, ancestor_right):
            current = ancestor
            if ancestor.parent is None:
                raise ValueError(f"node {ancestor.key} has no parent")
            ancestor = ancestor.parent

        if ancestor.key == current.root().key:
            return None
        return ancestor

    def tree_insert(self, value: int) -> "BstNode":
        """Insert ``value`` as a new leaf below this node and return the leaf."""
        node = self
        while True:
            if value < node.key:
                if node.left is None:
                    return node.add_left_child(value)
                node = node.left
            else:
                if node.right is None:
                    return node.add_right_child(value)
                node = node.right


def tree_delete(root: BstNode, node: BstNode) -> BstNode:
    """Remove ``node`` from the tree rooted at ``root`` and return the new root."""
    if node.left is None:
        return _transplant(root, node, node.right)
    if node.right is None:
        return _transplant(root, node, node.left)

    right = node.right
    successor = node.tree_successor()
    if successor is None:
        return root
    if successor.key != right.key:
        root = _transplant(root, successor, successor.right)
        successor.right = right
        right.parent = successor

    left = node.left
    root = _transplant(root, node, successor)
    successor.left = left
    if left is not None:
        left.parent = successor
    return root


def _transplant(root: BstNode, old: BstNode, new: Optional[BstNode]) -> BstNode:
    parent = old.parent
    if parent is None:
        return new if new is not None else BstNode(0)
    if parent.left is not None and parent.left.key == old.key:
        parent.left = new
    else:
        parent.right = new
    if new is not None:
        new.parent = parent
    return root


def _is_nil(node: Optional[BstNode]) -> bool:
    if node is None:
        return True
    return node.parent is None or node.left is None or node.right is None


def _same_key(node: BstNode, other: Optional[BstNode]) -> bool:
    return other is not None and other.key == node.key