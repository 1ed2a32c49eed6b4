"""Binary tree construction and traversal algorithms."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class TreeNode:
    """A node of a binary tree holding an integer value."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from a level-order listing where ``None`` marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                pending.append(child)
    return root


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    level = [root] if root else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return node values in left, node, right order."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node:
        while node:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.val)
        node = node.right
    return result


def preorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return node values in node, left, right order."""
    result: list[int] = []
    stack = [root] if root else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right:
            stack.append(node.right)
        if node.left:
            stack.append(node.left)
    return result


def postorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return node values in left, right, node order."""
    result: list[int] = []
    stack = [root] if root else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.left:
            stack.append(node.left)
        if node.right:
            stack.append(node.right)
    result.reverse()
    return result


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the values of each level, top to bottom, left to right."""
    return [[node.val for node in level] for level in _levels(root)]


def zigzag_level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return level values alternating left-to-right and right-to-left."""
    result = []
    for depth, level in enumerate(_levels(root)):
        row = [node.val for node in level]
        result.append(row if depth % 2 == 0 else row[::-1])
    return result


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """Return the rightmost value of each level."""
    return [level[-1].val for level in _levels(root)]


def vertical_traversal(root: Optional[TreeNode]) -> list[list[int]]:
    """Group values by column, ordered by column, then row, then value."""
    columns: defaultdict[int, defaultdict[int, list[int]]] = defaultdict(
        lambda: defaultdict(list)
    )
    queue = deque([(root, 0, 0)] if root else [])
    while queue:
        node, x, y = queue.popleft()
        columns[x][y].append(node.val)
        if node.left:
            queue.append((node.left, x - 1, y + 1))
        if node.right:
            queue.append((node.right, x + 1, y + 1))
    return [
        [val for y in sorted(rows) for val in sorted(rows[y])]
        for _, rows in sorted(columns.items())
    ]


def min_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the shortest root-to-leaf path."""
    for depth, level in enumerate(_levels(root), start=1):
        if any(node.left is None and node.right is None for node in level):
            return depth
    return 0


def has_path_sum(root: Optional[TreeNode], target_sum: int) -> bool:
    """Tell whether some root-to-leaf path adds up to ``target_sum``."""
    stack = [(root, target_sum)] if root else []
    while stack:
        node, remaining = stack.pop()
        remaining -= node.val
        if node.left is None and node.right is None:
            if remaining == 0:
                return True
            continue
        stack.extend(
            (child, remaining) for child in (node.left, node.right) if child
        )
    return False