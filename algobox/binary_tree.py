"""Binary trees: construction, traversal and the classic queries on them."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass
class TreeNode:
    """A binary tree node; equality compares whole subtrees."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def from_level_order(values: Sequence[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from a level-order list in which None marks a missing child."""
    if not values or values[0] is None:
        return None
    items = iter(values)
    root = TreeNode(next(items))
    queue = deque([root])
    missing = object()
    while queue:
        node = queue.popleft()
        left = next(items, missing)
        if left is missing:
            break
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(items, missing)
        if right is missing:
            break
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def build_tree(preorder: Sequence[int], inorder: Sequence[int]) -> Optional[TreeNode]:
    """Rebuild a tree from its preorder and inorder traversals."""
    position = {value: index for index, value in enumerate(inorder)}

    def build(pre_lo: int, pre_hi: int, in_lo: int) -> Optional[TreeNode]:
        if pre_lo > pre_hi:
            return None
        root_val = preorder[pre_lo]
        try:
            root_index = position[root_val]
        except KeyError:
            raise ValueError(f"value {root_val!r} missing from inorder") from None
        left_len = root_index - in_lo
        node = TreeNode(root_val)
        node.left = build(pre_lo + 1, pre_lo + left_len, in_lo)
        node.right = build(pre_lo + left_len + 1, pre_hi, root_index + 1)
        return node

    return build(0, len(preorder) - 1, 0)


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Tell whether the tree is a mirror image of itself."""
    level: list[Optional[TreeNode]] = [root] if root is not None else []
    while level:
        values = [node.val if node is not None else None for node in level]
        if values != values[::-1]:
            return False
        level = [
            child
            for node in level
            if node is not None
            for child in (node.left, node.right)
        ]
    return True


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of levels in the tree."""
    depth = 0
    level = [root] if root is not None else []
    while level:
        depth += 1
        level = [child for node in level for child in (node.left, node.right) if child]
    return depth


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""

    def height(node: Optional[TreeNode]) -> int:
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        if left < 0 or right < 0 or abs(left - right) > 1:
            return -1
        return max(left, right) + 1

    return height(root) != -1


def del_nodes(root: Optional[TreeNode], to_delete: Iterable[int]) -> list[TreeNode]:
    """Delete nodes with the given values and return the roots of the forest left."""
    doomed = set(to_delete)
    roots: list[TreeNode] = []

    def visit(node: Optional[TreeNode], is_root: bool) -> Optional[TreeNode]:
        if node is None:
            return None
        if node.val in doomed:
            visit(node.left, True)
            visit(node.right, True)
            return None
        if is_root:
            roots.append(node)
        node.left = visit(node.left, False)
        node.right = visit(node.right, False)
        return node

    visit(root, True)
    return roots


def preorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return node values in root-left-right order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right:
            stack.append(node.right)
        if node.left:
            stack.append(node.left)
    return result


def postorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return node values in left-right-root order."""
    result: list[int] = []
    stack = [(root, False)] if root is not None else []
    while stack:
        node, expanded = stack.pop()
        if expanded:
            result.append(node.val)
            continue
        stack.append((node, True))
        if node.right:
            stack.append((node.right, False))
        if node.left:
            stack.append((node.left, False))
    return result


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return node values in left-root-right order."""
    result: list[int] = []
    stack = [(root, False)] if root is not None else []
    while stack:
        node, expanded = stack.pop()
        if expanded:
            result.append(node.val)
            continue
        if node.right:
            stack.append((node.right, False))
        stack.append((node, True))
        if node.left:
            stack.append((node.left, False))
    return result


def path_sum(root: Optional[TreeNode], target_sum: int) -> int:
    """Count downward paths whose values add up to ``target_sum``."""
    prefix = Counter({0: 1})

    def visit(node: Optional[TreeNode], running: int) -> int:
        if node is None:
            return 0
        running += node.val
        count = prefix[running - target_sum]
        prefix[running] += 1
        count += visit(node.left, running) + visit(node.right, running)
        prefix[running] -= 1
        return count

    return visit(root, 0)


def diameter_of_binary_tree(root: Optional[TreeNode]) -> int:
    """Return the number of edges on the longest path between two nodes."""
    best = 0

    def height(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    height(root)
    return best


def average_of_levels(root: Optional[TreeNode]) -> list[float]:
    """Return the mean value of each level, top to bottom."""
    averages: list[float] = []
    level = [root] if root is not None else []
    while level:
        averages.append(sum(node.val for node in level) / len(level))
        level = [child for node in level for child in (node.left, node.right) if child]
    return averages


def trim_bst(root: Optional[TreeNode], low: int, high: int) -> Optional[TreeNode]:
    """Cut a search tree down to the values in ``[low, high]`` and return its root."""
    if root is None:
        return None
    if root.val > high:
        return trim_bst(root.left, low, high)
    if root.val < low:
        return trim_bst(root.right, low, high)
    root.left = trim_bst(root.left, low, high)
    root.right = trim_bst(root.right, low, high)
    return root


def recover_tree(root: Optional[TreeNode]) -> None:
    """Repair, in place, a search tree in which two values were swapped.

    Raises ValueError when the tree is empty or already in order.
    """
    if root is None:
        raise ValueError("cannot recover an empty tree")
    first: Optional[TreeNode] = None
    second: Optional[TreeNode] = None
    previous: Optional[TreeNode] = None
    stack = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            if previous is not None and previous.val > node.val:
                if first is not None:
                    first.val, node.val = node.val, first.val
                    return
                first, second = previous, node
            previous = node
            continue
        if node.right:
            stack.append((node.right, False))
        stack.append((node, True))
        if node.left:
            stack.append((node.left, False))
    if first is None or second is None:
        raise ValueError("tree has no swapped values")
    first.val, second.val = second.val, first.val