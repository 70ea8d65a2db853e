"""Binary tree nodes and their depth-first traversals."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def preorder_traversal(root: TreeNode | None) -> list[int]:
    """Return the values in node, left, right order."""
    values: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        values.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return values


def postorder_traversal(root: TreeNode | None) -> list[int]:
    """Return the values in left, right, node order."""
    values: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        values.append(node.val)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    values.reverse()
    return values