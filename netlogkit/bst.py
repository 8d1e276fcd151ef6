"""Binary trees and a binary search tree with traversal and ranking helpers."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from itertools import islice
from typing import Any, Iterator, Optional

_TOP_SLOTS = 5

_VISIT_TITLES = {
    1: "Se imprime el BST en PreOrden",
    2: "Se imprime el BST en InOrden",
    3: "Se imprime el BST en PostOrden",
    4: "Se imprime el BST por nivel ",
}


@dataclass(eq=False)
class TreeNode:
    """A tree node holding a value, its children, its parent and its level."""

    info: Any
    left: Optional["TreeNode"] = field(default=None, repr=False)
    right: Optional["TreeNode"] = field(default=None, repr=False)
    parent: Optional["TreeNode"] = field(default=None, repr=False)
    level: int = 0
    rank: int = 0

    def __str__(self) -> str:
        return str(self.info)


class BinaryTree:
    """A plain binary tree with the usual traversals and a top-n ranking."""

    def __init__(self) -> None:
        self.root: Optional[TreeNode] = None
        self.label: Any = None
        self._top: list[Any] = [None] * _TOP_SLOTS

    @staticmethod
    def _as_node(value: Any) -> TreeNode:
        return value if isinstance(value, TreeNode) else TreeNode(value)

    def insert_under(self, value: Any, parent: Optional[TreeNode]) -> bool:
        """Attach a value below parent, filling the first free slot down the left side.

        An empty tree takes the node as its root and a missing parent makes the
        node the new root with the old root as its left child; both of these
        report False. Otherwise the result is True.
        """
        node = self._as_node(value)
        if self.root is None:
            self.root = node
            return False
        if parent is None:
            node.left = self.root
            self.root.parent = node
            self.root = node
            return False
        while parent.left is not None and parent.right is not None:
            parent = parent.left
        if parent.left is None:
            parent.left = node
        else:
            parent.right = node
        node.parent = parent
        return True

    def is_empty(self) -> bool:
        """True when the tree has no root."""
        return self.root is None

    def clear(self) -> None:
        """Drop every node."""
        self.root = None

    def _preorder_nodes(self) -> Iterator[TreeNode]:
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _inorder_nodes(self, reverse: bool = False) -> Iterator[TreeNode]:
        stack: list[TreeNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.right if reverse else node.left
            node = stack.pop()
            yield node
            node = node.left if reverse else node.right

    def _postorder_nodes(self) -> Iterator[TreeNode]:
        collected: list[TreeNode] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            collected.append(node)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return reversed(collected)

    def preorder(self) -> Iterator[Any]:
        """Values in node-left-right order."""
        return (node.info for node in self._preorder_nodes())

    def inorder(self) -> Iterator[Any]:
        """Values in left-node-right order."""
        return (node.info for node in self._inorder_nodes())

    def postorder(self) -> Iterator[Any]:
        """Values in left-right-node order."""
        return (node.info for node in self._postorder_nodes())

    def leaves(self) -> Iterator[Any]:
        """Values of the childless nodes, left to right."""
        return (
            node.info
            for node in self._preorder_nodes()
            if node.left is None and node.right is None
        )

    def top_n(self, n: int) -> list[Any]:
        """Return the n largest values, largest first, remembering the first five."""
        ranked = list(islice(self._inorder_nodes(reverse=True), max(n, 0)))
        for position, node in enumerate(ranked[:_TOP_SLOTS]):
            node.rank = position + 1
            self._top[position] = node.info
        return [node.info for node in ranked]

    def top(self, index: int) -> Any:
        """Value remembered at a position (0-4) by the last top_n calls."""
        if not 0 <= index < _TOP_SLOTS:
            raise IndexError(f"top index must be between 0 and {_TOP_SLOTS - 1}")
        return self._top[index]


class BST(BinaryTree):
    """Binary search tree rejecting duplicate values."""

    def __init__(self) -> None:
        super().__init__()
        self._height = 0

    def search(self, value: Any) -> Optional[TreeNode]:
        """Return the node holding value, or None."""
        node = self.root
        while node is not None:
            if node.info == value:
                return node
            node = node.left if node.info > value else node.right
        return None

    def insert(self, value: Any) -> bool:
        """Insert a value or node in order; False if it is None or already present."""
        if value is None:
            return False
        node = self._as_node(value)
        key = node.info
        current = self.root
        parent: Optional[TreeNode] = None
        while current is not None:
            if current.info == key:
                return False
            parent = current
            current = current.left if current.info > key else current.right
        node.parent = parent
        if parent is None:
            self.root = node
        elif parent.info > key:
            parent.left = node
        else:
            parent.right = node
        return True

    def height(self) -> int:
        """Number of levels found by the last set_levels call."""
        return self._height

    def ancestors(self, node: TreeNode) -> list[Any]:
        """Values of the node's ancestors, nearest first, up to the root."""
        result = []
        current = node
        while current is not self.root:
            parent = current.parent
            if parent is None:
                raise ValueError("node does not belong to this tree")
            result.append(parent.info)
            current = parent
        return result

    def level_of(self, node: TreeNode) -> int:
        """Level stored on the node (the root is level 1 after set_levels)."""
        return node.level

    def _breadth_first(self) -> Iterator[TreeNode]:
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            node = queue.popleft()
            yield node
            for child in (node.left, node.right):
                if child is not None:
                    queue.append(child)

    def set_levels(self) -> None:
        """Store each node's level and record the tree height."""
        if self.root is None:
            return
        self.root.level = 1
        current = 0
        for node in self._breadth_first():
            for child in (node.left, node.right):
                if child is not None:
                    child.level = node.level + 1
            if current != node.level:
                current += 1
                self._height = current

    def levels(self) -> list[list[Any]]:
        """Values grouped by level, top level first, left to right."""
        self.set_levels()
        groups: list[list[Any]] = []
        for node in self._breadth_first():
            if node.level > len(groups):
                groups.append([])
            groups[-1].append(node.info)
        return groups

    def visit(self, option: int) -> str:
        """Render a traversal: 1 preorder, 2 inorder, 3 postorder, 4 by level."""
        title = _VISIT_TITLES.get(option)
        if title is None:
            return ""
        if option == 1:
            body = "".join(f"{value} " for value in self.preorder())
        elif option == 2:
            body = "".join(f"{value} " for value in self.inorder())
        elif option == 3:
            body = "".join(f"{value} " for value in self.postorder())
        elif self.is_empty():
            body = ""
        else:
            body = "".join(
                f"\nNivel {number}: " + "".join(f"{value} - " for value in level)
                for number, level in enumerate(self.levels(), start=1)
            )
        return f"\n{title}\n{body}\n"