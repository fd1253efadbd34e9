"""Binary tree problems: traversals, paths, ancestors and deletion."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


@dataclass(eq=False)
class TreeNode:
    """A binary tree node. Nodes compare by identity."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_tree(values: Sequence[int | None]) -> TreeNode | None:
    """Build a tree from a level-order list where ``None`` marks a missing child."""
    if not values or values[0] is None:
        return None
    items = iter(values)
    root = TreeNode(next(items))
    pending: deque[TreeNode] = deque([root])
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


def _levels(root: TreeNode | None) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [child for node in level for child in (node.left, node.right) if child]


def max_ancestor_diff(root: TreeNode | None) -> int:
    """Largest ``|a.val - b.val|`` where ``a`` is an ancestor of ``b``.

    Raises ValueError for an empty tree.
    """
    if root is None:
        raise ValueError("tree is empty")

    def walk(node: TreeNode | None, low: int, high: int) -> int:
        if node is None:
            return 0
        diff = max(abs(node.val - low), abs(node.val - high))
        low, high = min(low, node.val), max(high, node.val)
        return max(diff, walk(node.left, low, high), walk(node.right, low, high))

    return walk(root, root.val, root.val)


def max_depth(root: TreeNode | None) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def max_level_sum(root: TreeNode | None) -> int:
    """1-based level with the largest sum; the shallowest wins ties. 0 when empty."""
    best_level, best_sum = 0, None
    for depth, level in enumerate(_levels(root), start=1):
        total = sum(node.val for node in level)
        if best_sum is None or total > best_sum:
            best_level, best_sum = depth, total
    return best_level


def longest_zigzag(root: TreeNode | None) -> int:
    """Edge count of the longest path that alternates left and right moves."""

    def walk(node: TreeNode | None, length: int, go_left: bool) -> int:
        if node is None:
            return 0
        if go_left:
            return max(length, walk(node.left, length + 1, False), walk(node.right, 1, True))
        return max(length, walk(node.right, length + 1, True), walk(node.left, 1, False))

    return max(walk(root, 0, True), walk(root, 0, False))


def good_nodes(root: TreeNode | None) -> int:
    """Nodes whose value is at least every value on the path from the root."""

    def count(node: TreeNode | None, highest: int) -> int:
        if node is None:
            return 0
        good = int(node.val >= highest)
        highest = max(highest, node.val)
        return good + count(node.left, highest) + count(node.right, highest)

    return 0 if root is None else count(root, root.val)


def right_side_view(root: TreeNode | None) -> list[int]:
    """Value of the rightmost node on each level, top to bottom."""
    return [level[-1].val for level in _levels(root)]


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Deepest node having both ``p`` and ``q`` as descendants (a node descends from itself)."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def _path_to(root: TreeNode | None, value: int) -> list[TreeNode] | None:
    if root is None:
        return None
    if root.val == value:
        return [root]
    for child in (root.left, root.right):
        path = _path_to(child, value)
        if path is not None:
            return [root, *path]
    return None


def lowest_common_ancestor_by_path(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode:
    """Lowest common ancestor found by comparing the root paths to ``p`` and ``q``.

    Nodes are located by value. Raises ValueError if either is absent.
    """
    p_path = _path_to(root, p.val)
    q_path = _path_to(root, q.val)
    if p_path is None or q_path is None:
        raise ValueError("node not found in tree")
    common = p_path[0]
    for a, b in zip(p_path, q_path):
        if a is not b:
            break
        common = a
    return common


def path_sum(root: TreeNode | None, target_sum: int) -> int:
    """Number of downward paths whose values add up to ``target_sum``."""

    def from_node(node: TreeNode | None, target: int) -> int:
        if node is None:
            return 0
        found = int(node.val == target)
        remaining = target - node.val
        if _INT_MIN <= remaining <= _INT_MAX:
            found += from_node(node.left, remaining) + from_node(node.right, remaining)
        return found

    def in_tree(node: TreeNode | None) -> int:
        if node is None:
            return 0
        return from_node(node, target_sum) + in_tree(node.left) + in_tree(node.right)

    return in_tree(root)


def _remove(node: TreeNode) -> TreeNode | None:
    """Remove ``node`` and return what takes its place."""
    if node.left is None and node.right is None:
        return None
    if node.left is None or node.right is None:
        child = node.left if node.left is not None else node.right
        node.val, node.left, node.right = child.val, child.left, child.right
        return node
    node.val, node.right = _pop_leftmost(node.right)
    return node


def _pop_leftmost(node: TreeNode) -> tuple[int, TreeNode | None]:
    if node.left is None:
        return node.val, _remove(node)
    value, node.left = _pop_leftmost(node.left)
    return value, node


def delete_node(root: TreeNode | None, key: int) -> TreeNode | None:
    """Delete the first node holding ``key`` in pre-order and return the new root.

    A node with two children takes the smallest value of its right subtree.
    """

    def replace(node: TreeNode | None) -> tuple[TreeNode | None, bool]:
        if node is None:
            return None, False
        if node.val == key:
            return _remove(node), True
        for side in ("left", "right"):
            subtree, found = replace(getattr(node, side))
            if found:
                setattr(node, side, subtree)
                return node, True
        return node, False

    new_root, _ = replace(root)
    return new_root


def leaf_sequence(root: TreeNode | None) -> list[int]:
    """Leaf values from left to right."""
    if root is None:
        return []
    if root.left is None and root.right is None:
        return [root.val]
    return leaf_sequence(root.left) + leaf_sequence(root.right)


def leaf_similar(root1: TreeNode | None, root2: TreeNode | None) -> bool:
    """Whether both trees have the same leaf sequence."""
    return leaf_sequence(root1) == leaf_sequence(root2)


def is_full_binary_tree(root: TreeNode | None) -> bool:
    """Whether the tree is complete: no node follows a gap in level order."""
    queue: deque[TreeNode | None] = deque([root])
    seen_gap = False
    while queue:
        node = queue.popleft()
        if node is None:
            seen_gap = True
            continue
        if seen_gap:
            return False
        queue.append(node.left)
        queue.append(node.right)
    return True