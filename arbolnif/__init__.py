"""Binary search, level-filled and AVL trees of NIF keys, with a command-line menu."""

__version__ = "0.1.0"
__all__ = ["nif", "nodes", "trees", "avl", "cli"]