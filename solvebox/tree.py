"""Binary tree nodes and vertical-order traversal."""

from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A node of a binary tree holding an integer value."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def vertical_traversal(root: TreeNode | None) -> list[list[int]]:
    """Return node values grouped by column, left to right.

    Within a column, values are ordered by row; values sharing both row
    and column are ordered by value.
    """
    if root is None:
        return []

    columns: defaultdict[int, defaultdict[int, list[int]]] = defaultdict(
        lambda: defaultdict(list)
    )
    queue: deque[tuple[TreeNode, int, int]] = deque([(root, 0, 0)])
    while queue:
        node, column, row = queue.popleft()
        columns[column][row].append(node.val)
        if node.left is not None:
            queue.append((node.left, column - 1, row + 1))
        if node.right is not None:
            queue.append((node.right, column + 1, row + 1))

    return [
        [value for row in sorted(rows) for value in sorted(rows[row])]
        for rows in (columns[column] for column in sorted(columns))
    ]