"""AVL tree: a binary search tree that rebalances itself with rotations on insertion."""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO, Tuple

from arbolnif.nodes import AVLNode, format_node
from arbolnif.trees import SearchTree


class AVLTree(SearchTree):
    """Self-balancing search tree; each node keeps left height minus right height."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        super().__init__()
        self._out = out

    @property
    def out(self) -> TextIO:
        """Stream that rotation traces are written to."""
        return self._out if self._out is not None else sys.stdout

    def insert(self, key: Any, trace: bool = False) -> bool:
        """Insert ``key``, rebalancing as needed; return False if it was already present.

        With ``trace`` set, every rotation is reported on the output stream.
        """
        self.root, _, inserted = self._insert(self.root, key, trace)
        return inserted

    def search(self, key: Any) -> bool:
        return super().search(key)

    def _insert(
        self, node: Optional[AVLNode], key: Any, trace: bool
    ) -> Tuple[AVLNode, bool, bool]:
        """Insert below ``node``; return the new subtree root, whether it grew, and whether the key was new."""
        if node is None:
            return AVLNode(key), True, True
        if key < node.data:
            node.left, grew, inserted = self._insert(node.left, key, trace)
            if grew:
                node, grew = self._rebalance_left(node, trace)
            return node, grew, inserted
        if key > node.data:
            node.right, grew, inserted = self._insert(node.right, key, trace)
            if grew:
                node, grew = self._rebalance_right(node, trace)
            return node, grew, inserted
        return node, False, False

    def _rebalance_left(self, node: AVLNode, trace: bool) -> Tuple[AVLNode, bool]:
        if node.balance == -1:
            node.balance = 0
            return node, False
        if node.balance == 0:
            node.balance = 1
            return node, True
        if node.left is not None and node.left.balance == 1:
            return self._rotate_left_left(node, trace), False
        return self._rotate_left_right(node, trace), False

    def _rebalance_right(self, node: AVLNode, trace: bool) -> Tuple[AVLNode, bool]:
        if node.balance == 1:
            node.balance = 0
            return node, False
        if node.balance == 0:
            node.balance = -1
            return node, True
        if node.right is not None and node.right.balance == -1:
            return self._rotate_right_right(node, trace), False
        return self._rotate_right_left(node, trace), False

    def _report(self, kind: str, node: AVLNode, trace: bool) -> None:
        if trace:
            self.out.write(
                f"Realizando una rotación {kind} desde el nodo {format_node(node)}...\n"
            )

    def _rotate_left_left(self, node: AVLNode, trace: bool) -> AVLNode:
        self._report("izquierda-izquierda", node, trace)
        pivot = node.left
        node.left = pivot.right
        pivot.right = node
        if pivot.balance == 1:
            node.balance = 0
            pivot.balance = 0
        else:
            node.balance = 1
            pivot.balance = -1
        return pivot

    def _rotate_right_right(self, node: AVLNode, trace: bool) -> AVLNode:
        self._report("derecha-derecha", node, trace)
        pivot = node.right
        node.right = pivot.left
        pivot.left = node
        if pivot.balance == -1:
            node.balance = 0
            pivot.balance = 0
        else:
            node.balance = -1
            pivot.balance = 1
        return pivot

    def _rotate_left_right(self, node: AVLNode, trace: bool) -> AVLNode:
        self._report("izquierda-derecha", node, trace)
        child = node.left
        pivot = child.right
        node.left = pivot.right
        pivot.right = node
        child.right = pivot.left
        pivot.left = child
        child.balance = 1 if pivot.balance == -1 else 0
        node.balance = -1 if pivot.balance == 1 else 0
        pivot.balance = 0
        return pivot

    def _rotate_right_left(self, node: AVLNode, trace: bool) -> AVLNode:
        self._report("derecha-izquierda", node, trace)
        child = node.right
        pivot = child.left
        node.right = pivot.left
        pivot.left = node
        child.left = pivot.right
        pivot.right = child
        child.balance = -1 if pivot.balance == 1 else 0
        node.balance = 1 if pivot.balance == -1 else 0
        pivot.balance = 0
        return pivot