"""Nodes for binary and AVL trees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

EMPTY_NODE = "[.]"


@dataclass(eq=False)
class BinaryNode:
    """A binary tree node holding one key and two optional children."""

    data: Any
    left: Optional["BinaryNode"] = None
    right: Optional["BinaryNode"] = None

    def __str__(self) -> str:
        return f"[{self.data}]"


@dataclass(eq=False)
class AVLNode(BinaryNode):
    """A binary node that also stores its balance factor (left height minus right height)."""

    left: Optional["AVLNode"] = None
    right: Optional["AVLNode"] = None
    balance: int = 0

    def __str__(self) -> str:
        return f"[{self.data}({self.balance})]"


def format_node(node: Optional[BinaryNode]) -> str:
    """Render a node, or the empty marker for a missing child."""
    return EMPTY_NODE if node is None else str(node)