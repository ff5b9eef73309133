"""Binary trees and algorithms over them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from itertools import islice


@dataclass
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_level_order(values: Sequence[int | None]) -> TreeNode | None:
    """Build a tree from level-order values, ``None`` marking a missing child."""
    if not values or values[0] is None:
        return None
    items = iter(values)
    root = TreeNode(next(items))
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for side in ("left", "right"):
            value = next(items, None)
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                pending.append(child)
    return root


def has_path_sum(root: TreeNode | None, target_sum: int) -> bool:
    """Whether some root-to-leaf path adds up to ``target_sum``."""
    if root is None:
        return False
    if root.left is None and root.right is None:
        return target_sum == root.val
    remaining = target_sum - root.val
    return has_path_sum(root.left, remaining) or has_path_sum(root.right, remaining)


def build_tree(preorder: Sequence[int], inorder: Sequence[int]) -> TreeNode | None:
    """Rebuild a tree from its preorder and inorder traversals."""
    if len(preorder) != len(inorder):
        raise ValueError("preorder and inorder must have the same length")
    values = iter(preorder)

    def build(start: int, end: int) -> TreeNode | None:
        if start > end:
            return None
        value = next(values)
        node = TreeNode(value)
        if start == end:
            return node
        try:
            pos = inorder.index(value, start, end + 1)
        except ValueError:
            raise ValueError("traversals do not describe the same tree") from None
        node.left = build(start, pos - 1)
        node.right = build(pos + 1, end)
        return node

    return build(0, len(inorder) - 1)


def max_depth(root: TreeNode | None) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def max_path_sum(root: TreeNode | None) -> int:
    """Largest sum of a path between any two nodes of a non-empty tree."""
    if root is None:
        raise ValueError("max_path_sum() needs a non-empty tree")
    best = root.val

    def gain(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left, right = gain(node.left), gain(node.right)
        through_one = max(node.val, node.val + max(left, right))
        best = max(best, through_one, left + right + node.val)
        return through_one

    gain(root)
    return best


def right_side_view(root: TreeNode | None) -> list[int]:
    """The value of the rightmost node on each level, top to bottom."""
    view: list[int] = []

    def visit(node: TreeNode | None, level: int) -> None:
        if node is None:
            return
        if len(view) == level:
            view.append(node.val)
        visit(node.right, level + 1)
        visit(node.left, level + 1)

    visit(root, 0)
    return view


def _inorder(root: TreeNode | None) -> Iterator[int]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.val
        node = node.right


def kth_smallest(root: TreeNode | None, k: int) -> int:
    """The ``k``-th smallest value (1-based) of a binary search tree."""
    if k < 1:
        raise ValueError("k must be at least 1")
    for value in islice(_inorder(root), k - 1, None):
        return value
    raise ValueError(f"the tree has fewer than {k} nodes")


def good_nodes(root: TreeNode | None) -> int:
    """Count nodes whose value is at least every value on the path from the root."""
    if root is None:
        return 0
    total = 0
    stack = [(root, root.val)]
    while stack:
        node, highest = stack.pop()
        if node.val >= highest:
            total += 1
            highest = node.val
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, highest))
    return total