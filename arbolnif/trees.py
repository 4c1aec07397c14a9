"""Binary trees keyed by comparable values: the common base, a search tree and a level-filled tree."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Iterator, List, Optional

from arbolnif.nodes import BinaryNode, format_node


class BinaryTree(ABC):
    """Abstract binary tree with in-order iteration and a level-by-level rendering."""

    def __init__(self) -> None:
        self.root: Optional[BinaryNode] = None

    @abstractmethod
    def insert(self, key: Any, trace: bool = False) -> bool:
        """Insert ``key``; return False if it was already present."""

    @abstractmethod
    def search(self, key: Any) -> bool:
        """Return True if ``key`` is stored in the tree."""

    def __contains__(self, key: Any) -> bool:
        return self.search(key)

    def __iter__(self) -> Iterator[Any]:
        """Yield the keys in in-order (left, node, right)."""
        stack: List[BinaryNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def is_empty(self) -> bool:
        """True when the tree holds no keys."""
        return self.root is None

    def inorder(self) -> List[Any]:
        """Return the keys in in-order."""
        return list(self)

    def levels(self) -> List[List[Optional[BinaryNode]]]:
        """Return the tree by levels, with ``None`` standing for each missing child."""
        result: List[List[Optional[BinaryNode]]] = []
        queue: deque[tuple[Optional[BinaryNode], int]] = deque([(self.root, 0)])
        while queue:
            node, level = queue.popleft()
            if level == len(result):
                result.append([])
            result[level].append(node)
            if node is not None:
                queue.append((node.left, level + 1))
                queue.append((node.right, level + 1))
        return result

    def render(self) -> str:
        """Render the tree one level per line, as ``Nivel k: [a][b][.]``."""
        parts = []
        for number, nodes in enumerate(self.levels()):
            parts.append(f"\nNivel {number}: " + "".join(format_node(n) for n in nodes))
        return "".join(parts) + "\n"

    def __str__(self) -> str:
        return self.render()


class SearchTree(BinaryTree):
    """Binary search tree: smaller keys to the left, greater keys to the right."""

    def insert(self, key: Any, trace: bool = False) -> bool:
        if self.root is None:
            self.root = BinaryNode(key)
            return True
        node = self.root
        while True:
            if key < node.data:
                if node.left is None:
                    node.left = BinaryNode(key)
                    return True
                node = node.left
            elif key > node.data:
                if node.right is None:
                    node.right = BinaryNode(key)
                    return True
                node = node.right
            else:
                return False

    def search(self, key: Any) -> bool:
        node = self.root
        while node is not None:
            if key == node.data:
                return True
            node = node.left if key < node.data else node.right
        return False


class BalancedTree(BinaryTree):
    """Binary tree filled level by level, left to right, regardless of key order."""

    def insert(self, key: Any, trace: bool = False) -> bool:
        if self.search(key):
            return False
        if self.root is None:
            self.root = BinaryNode(key)
            return True
        queue: deque[BinaryNode] = deque([self.root])
        while queue:
            node = queue.popleft()
            if node.left is None:
                node.left = BinaryNode(key)
                return True
            if node.right is None:
                node.right = BinaryNode(key)
                return True
            queue.append(node.left)
            queue.append(node.right)
        return False

    def search(self, key: Any) -> bool:
        stack: List[Optional[BinaryNode]] = [self.root]
        while stack:
            node = stack.pop()
            if node is None:
                continue
            if key == node.data:
                return True
            stack.append(node.right)
            stack.append(node.left)
        return False