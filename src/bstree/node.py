from typing import Any, Generic, List, Optional, Protocol, Tuple, TypeVar


class Comparable(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...
    def __gt__(self, other: Any, /) -> bool: ...


T = TypeVar('T', bound=Comparable)


class Node(Generic[T]):
    """One key of a binary search tree and the two subtrees hanging off it.

    Every key in ``left`` is strictly smaller than ``key`` and every key in
    ``right`` strictly larger. A node exclusively owns its children; there are
    no parent links.

    The subtree algorithms walk with loops and list-backed stacks, so a
    degenerate (fully skewed) subtree never hits the interpreter recursion limit.
    """

    __slots__ = ('key', 'left', 'right')

    def __init__(self, key: T) -> None:
        self.key: T = key
        self.left: Optional[Node[T]] = None
        self.right: Optional[Node[T]] = None

    def insert(self, value: T) -> bool:
        """Insert ``value`` below this node.

        Returns False when ``value`` is already present, in which case nothing
        changes.
        """
        node = self
        while True:
            if value < node.key:
                if node.left is None:
                    node.left = Node(value)
                    return True
                node = node.left
            elif value > node.key:
                if node.right is None:
                    node.right = Node(value)
                    return True
                node = node.right
            else:
                return False

    def get(self, value: T) -> Optional['Node[T]']:
        node: Optional[Node[T]] = self
        while node is not None:
            if value < node.key:
                node = node.left
            elif value > node.key:
                node = node.right
            else:
                return node
        return None

    def in_order(self) -> List[T]:
        result: List[T] = []
        stack: List[Node[T]] = []
        node: Optional[Node[T]] = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.key)
            node = node.right
        return result

    def pre_order(self) -> List[T]:
        result: List[T] = []
        stack: List[Node[T]] = [self]
        while stack:
            node = stack.pop()
            result.append(node.key)
            # right goes first so left is popped first
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def post_order(self) -> List[T]:
        # key-right-left, reversed
        result: List[T] = []
        stack: List[Node[T]] = [self]
        while stack:
            node = stack.pop()
            result.append(node.key)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def min_node(self) -> 'Node[T]':
        node = self
        while node.left is not None:
            node = node.left
        return node

    def max_node(self) -> 'Node[T]':
        node = self
        while node.right is not None:
            node = node.right
        return node

    def min(self) -> T:
        return self.min_node().key

    def max(self) -> T:
        return self.max_node().key

    def height(self) -> int:
        """Number of nodes on the longest path from this node down to a leaf."""
        best = 0
        stack: List[Tuple[Node[T], int]] = [(self, 1)]
        while stack:
            node, depth = stack.pop()
            if depth > best:
                best = depth
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return best

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"Node({self.key!r})"
