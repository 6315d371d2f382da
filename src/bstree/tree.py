from typing import Generic, Iterator, List, Optional

from bstree.node import Node, T


class Tree(Generic[T]):
    """An unbalanced binary search tree holding a set of ordered keys.

    Duplicate inserts are ignored, lookups and deletes of absent keys are
    no-ops, and ``min``/``max`` return None on an empty tree. Nothing rebalances
    the tree, so inserting keys in sorted order degrades it to a linked list.
    """

    def __init__(self) -> None:
        self._root: Optional[Node[T]] = None
        self._size: int = 0

    @property
    def root(self) -> Optional[Node[T]]:
        return self._root

    def insert(self, value: T) -> None:
        if self._root is None:
            self._root = Node(value)
            self._size += 1
            return
        if self._root.insert(value):
            self._size += 1

    def get(self, value: T) -> Optional[Node[T]]:
        if self._root is None:
            return None
        return self._root.get(value)

    def contains(self, value: T) -> bool:
        return self.get(value) is not None

    def delete(self, value: T) -> None:
        """Remove ``value`` if present.

        A node with at most one child is replaced by that child. A node with two
        children keeps its place in the tree and takes the key of its in-order
        predecessor (the largest key of its left subtree); the predecessor's own
        node is then spliced out of the left subtree. The predecessor never has
        a right child, so that splice is always a single-child replacement.
        """
        parent: Optional[Node[T]] = None
        node = self._root
        is_left_child = False

        while node is not None:
            if value < node.key:
                parent = node
                node = node.left
                is_left_child = True
            elif value > node.key:
                parent = node
                node = node.right
                is_left_child = False
            else:
                break

        if node is None:
            return

        if node.left is None:
            replacement = node.right
        elif node.right is None:
            replacement = node.left
        else:
            predecessor_parent = node
            predecessor = node.left
            while predecessor.right is not None:
                predecessor_parent = predecessor
                predecessor = predecessor.right
            node.key = predecessor.key
            if predecessor_parent is node:
                predecessor_parent.left = predecessor.left
            else:
                predecessor_parent.right = predecessor.left
            self._size -= 1
            return

        if parent is None:
            self._root = replacement
        elif is_left_child:
            parent.left = replacement
        else:
            parent.right = replacement
        self._size -= 1

    def min(self) -> Optional[T]:
        if self._root is None:
            return None
        return self._root.min()

    def max(self) -> Optional[T]:
        if self._root is None:
            return None
        return self._root.max()

    def in_order(self) -> List[T]:
        if self._root is None:
            return []
        return self._root.in_order()

    def pre_order(self) -> List[T]:
        if self._root is None:
            return []
        return self._root.pre_order()

    def post_order(self) -> List[T]:
        if self._root is None:
            return []
        return self._root.post_order()

    def height(self) -> int:
        if self._root is None:
            return 0
        return self._root.height()

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def copy(self) -> 'Tree[T]':
        # re-inserting in pre-order rebuilds the same shape
        clone: Tree[T] = Tree()
        for value in self.pre_order():
            clone.insert(value)
        return clone

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.in_order())

    def __repr__(self) -> str:
        return f"Tree({self.in_order()})"

    def __str__(self) -> str:
        return f"Tree(size={self._size})"
