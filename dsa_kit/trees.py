"""General and binary trees with search, traversal, comparison and inversion."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class Tree:
    """A tree node holding an integer value and any number of children."""

    value: int
    children: list[Tree] = field(default_factory=list)

    def bfs(self, value: int) -> bool:
        """Report whether ``value`` occurs in the tree, searching breadth first."""
        queue: deque[Tree] = deque([self])
        while queue:
            node = queue.popleft()
            if node.value == value:
                return True
            queue.extend(node.children)
        return False

    def levels(self) -> Iterator[list[int]]:
        """Yield the values of each depth of the tree, top level first."""
        level = [self]
        while level:
            yield [node.value for node in level]
            level = [child for node in level for child in node.children]


@dataclass(eq=False)
class BinaryTree:
    """A binary tree node with optional left and right subtrees."""

    value: int
    left: BinaryTree | None = None
    right: BinaryTree | None = None

    def pre_order(self) -> list[int]:
        """Return the values in pre-order: node, left, right."""
        return list(self._pre())

    def in_order(self) -> list[int]:
        """Return the values in in-order: left, node, right."""
        return list(self._in())

    def post_order(self) -> list[int]:
        """Return the values in post-order: left, right, node."""
        return list(self._post())

    def _pre(self) -> Iterator[int]:
        yield self.value
        if self.left is not None:
            yield from self.left._pre()
        if self.right is not None:
            yield from self.right._pre()

    def _in(self) -> Iterator[int]:
        if self.left is not None:
            yield from self.left._in()
        yield self.value
        if self.right is not None:
            yield from self.right._in()

    def _post(self) -> Iterator[int]:
        if self.left is not None:
            yield from self.left._post()
        if self.right is not None:
            yield from self.right._post()
        yield self.value


def is_equal(t1: BinaryTree | None, t2: BinaryTree | None) -> bool:
    """Report whether two binary trees have the same shape and values."""
    if t1 is None and t2 is None:
        return True
    if t1 is None or t2 is None:
        return False
    if t1.value != t2.value:
        return False
    return is_equal(t1.left, t2.left) and is_equal(t1.right, t2.right)


def dfs_bst(tree: BinaryTree | None, value: int) -> bool:
    """Report whether ``value`` is in the binary search tree ``tree``."""
    node = tree
    while node is not None:
        if node.value == value:
            return True
        node = node.left if value < node.value else node.right
    return False


def invert(tree: BinaryTree | None) -> None:
    """Mirror ``tree`` in place by swapping every node's children."""
    if tree is None:
        return
    tree.left, tree.right = tree.right, tree.left
    invert(tree.left)
    invert(tree.right)


def search_bt(tree: BinaryTree | None, value: int) -> bool:
    """Report whether ``value`` occurs anywhere in the binary tree ``tree``."""
    if tree is None:
        return False
    if tree.value == value:
        return True
    return search_bt(tree.left, value) or search_bt(tree.right, value)