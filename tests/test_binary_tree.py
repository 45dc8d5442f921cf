import pytest

from algobox.binary_tree import (
    TreeNode,
    average_of_levels,
    build_tree,
    del_nodes,
    diameter_of_binary_tree,
    from_level_order,
    inorder_traversal,
    is_balanced,
    is_symmetric,
    max_depth,
    path_sum,
    postorder_traversal,
    preorder_traversal,
    recover_tree,
    trim_bst,
)

BST_LEVELS = [4, 2, 6, 1, 3, 5, 7]


def _chain(length):
    node = None
    for value in range(length):
        node = TreeNode(value, left=node)
    return node


def test_from_level_order_structure():
    root = from_level_order([3, 9, 20, None, None, 15, 7])
    assert root.val == 3
    assert root.left == TreeNode(9)
    assert root.right.left.val == 15
    assert root.right.right.val == 7


def test_from_level_order_empty():
    assert from_level_order([]) is None
    assert from_level_order([None]) is None


def test_inorder_of_bst_is_sorted():
    assert inorder_traversal(from_level_order(BST_LEVELS)) == sorted(BST_LEVELS)


def test_traversals_share_values_and_root_position():
    root = from_level_order([1, None, 2, 3])
    pre = preorder_traversal(root)
    post = postorder_traversal(root)
    ino = inorder_traversal(root)
    assert pre[0] == root.val
    assert post[-1] == root.val
    assert sorted(pre) == sorted(post) == sorted(ino) == [1, 2, 3]


def test_traversals_of_empty_tree():
    assert preorder_traversal(None) == []
    assert inorder_traversal(None) == []
    assert postorder_traversal(None) == []


def test_chain_traversals():
    root = _chain(4)
    assert preorder_traversal(root) == list(range(3, -1, -1))
    assert inorder_traversal(root) == list(range(4))
    assert postorder_traversal(root) == list(range(4))


@pytest.mark.parametrize(
    "levels", [BST_LEVELS, [3, 9, 20, None, None, 15, 7], [1, None, 2, 3], [1]]
)
def test_build_tree_round_trip(levels):
    root = from_level_order(levels)
    rebuilt = build_tree(preorder_traversal(root), inorder_traversal(root))
    assert rebuilt == root


def test_build_tree_empty():
    assert build_tree([], []) is None


def test_build_tree_inconsistent_input():
    with pytest.raises(ValueError):
        build_tree([1, 2], [1, 3])


def test_is_symmetric():
    assert is_symmetric(from_level_order([1, 2, 2, 3, 4, 4, 3])) is True
    assert is_symmetric(from_level_order([1, 2, 2, None, 3, None, 3])) is False
    assert is_symmetric(None) is True


def test_max_depth():
    assert max_depth(None) == 0
    assert max_depth(TreeNode(5)) == 1
    assert max_depth(_chain(6)) == 6


def test_is_balanced():
    assert is_balanced(from_level_order([3, 9, 20, None, None, 15, 7])) is True
    assert is_balanced(from_level_order([1, 2, 2, 3, 3, None, None, 4, 4])) is False
    assert is_balanced(None) is True
    assert is_balanced(_chain(3)) is False


def test_del_nodes():
    roots = del_nodes(from_level_order([1, 2, 3, 4, 5, 6, 7]), [3, 5])
    assert roots == [
        from_level_order([1, 2, None, 4]),
        from_level_order([6]),
        from_level_order([7]),
    ]


def test_del_nodes_leaves_no_deleted_values():
    doomed = {2, 4}
    roots = del_nodes(from_level_order(BST_LEVELS), doomed)
    remaining = [v for r in roots for v in preorder_traversal(r)]
    assert not doomed & set(remaining)
    assert sorted(remaining) == sorted(set(BST_LEVELS) - doomed)


def test_del_nodes_root_and_empty():
    assert del_nodes(TreeNode(1), [1]) == []
    assert del_nodes(None, [1]) == []


def test_path_sum_example():
    root = from_level_order([10, 5, -3, 3, 2, None, 11, 3, -2, None, 1])
    assert path_sum(root, 8) == 3


def test_path_sum_single_node_and_empty():
    assert path_sum(TreeNode(7), 7) == 1
    assert path_sum(TreeNode(7), 8) == 0
    assert path_sum(None, 0) == 0


def test_diameter():
    assert diameter_of_binary_tree(None) == 0
    assert diameter_of_binary_tree(TreeNode(1)) == 0
    assert diameter_of_binary_tree(_chain(5)) == 4


def test_average_of_levels_example():
    root = from_level_order([3, 9, 20, None, None, 15, 7])
    assert average_of_levels(root) == pytest.approx([3.0, 14.5, 11.0])


def test_average_of_levels_single_and_empty():
    assert average_of_levels(TreeNode(5)) == [5.0]
    assert average_of_levels(None) == []


@pytest.mark.parametrize("low,high", [(1, 7), (2, 5), (3, 3), (5, 9)])
def test_trim_bst_keeps_range(low, high):
    root = trim_bst(from_level_order(BST_LEVELS), low, high)
    expected = [v for v in sorted(BST_LEVELS) if low <= v <= high]
    assert inorder_traversal(root) == expected


def test_trim_bst_to_nothing():
    assert trim_bst(from_level_order(BST_LEVELS), 10, 20) is None


def test_recover_tree_distant_swap():
    root = from_level_order(BST_LEVELS)
    a, b = root.left.left, root.right.right
    a.val, b.val = b.val, a.val
    recover_tree(root)
    assert root == from_level_order(BST_LEVELS)


def test_recover_tree_adjacent_swap():
    root = from_level_order(BST_LEVELS)
    root.val, root.left.right.val = root.left.right.val, root.val
    recover_tree(root)
    assert inorder_traversal(root) == sorted(BST_LEVELS)


def test_recover_tree_errors():
    with pytest.raises(ValueError):
        recover_tree(None)
    with pytest.raises(ValueError):
        recover_tree(from_level_order(BST_LEVELS))