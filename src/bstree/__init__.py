from bstree.node import Node
from bstree.tree import Tree

__all__ = ["Node", "Tree"]
