"""Binary trees and binary search trees with parent links, and Graphviz dot export."""

__version__ = "0.1.0"
__all__ = ["tree", "bst", "dot", "demo"]