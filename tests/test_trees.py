import pytest

from dailyalgos.trees import (
    TreeNode,
    build_level_order,
    build_tree,
    good_nodes,
    has_path_sum,
    kth_smallest,
    max_depth,
    max_path_sum,
    right_side_view,
)


def _preorder(node):
    if node is None:
        return []
    return [node.val, *_preorder(node.left), *_preorder(node.right)]


def _inorder(node):
    if node is None:
        return []
    return [*_inorder(node.left), node.val, *_inorder(node.right)]


def _left_chain(values):
    result = [values[0]]
    for value in values[1:]:
        result.extend([value, None])
    return result


def test_build_level_order_shape():
    root = build_level_order([3, 9, 20, None, None, 15, 7])
    assert root == TreeNode(3, TreeNode(9), TreeNode(20, TreeNode(15), TreeNode(7)))


def test_build_level_order_empty():
    assert build_level_order([]) is None
    assert build_level_order([None]) is None


@pytest.mark.parametrize(
    "preorder, inorder",
    [([3, 9, 20, 15, 7], [9, 3, 15, 20, 7]), ([-1], [-1]), ([1, 2, 3], [3, 2, 1]), ([], [])],
)
def test_build_tree_round_trip(preorder, inorder):
    root = build_tree(preorder, inorder)
    assert _preorder(root) == preorder
    assert _inorder(root) == inorder


def test_build_tree_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        build_tree([1, 2], [1])


def test_build_tree_rejects_foreign_values():
    with pytest.raises(ValueError):
        build_tree([1, 2], [3, 4])


def test_has_path_sum_follows_a_leaf_path():
    values = [5, 4, 11, 2]
    root = build_level_order(_left_chain(values))
    assert has_path_sum(root, sum(values)) is True
    assert has_path_sum(root, sum(values) + 1) is False


def test_has_path_sum_needs_a_leaf():
    root = build_level_order([1, 2])
    assert has_path_sum(root, 1) is False


def test_has_path_sum_empty_tree():
    assert has_path_sum(None, 0) is False


@pytest.mark.parametrize("values", [[1], [1, 2], [4, 3, 2, 1, 0]])
def test_max_depth_of_chain(values):
    assert max_depth(build_level_order(_left_chain(values))) == len(values)


def test_max_depth_empty():
    assert max_depth(None) == 0


def test_max_path_sum_positive_triangle_uses_all():
    values = [1, 2, 3]
    assert max_path_sum(build_level_order(values)) == sum(values)


def test_max_path_sum_all_negative_picks_largest_node():
    values = [-3, -1, -2]
    assert max_path_sum(build_level_order(values)) == max(values)


def test_max_path_sum_single_node():
    assert max_path_sum(TreeNode(-7)) == -7


def test_max_path_sum_empty_raises():
    with pytest.raises(ValueError):
        max_path_sum(None)


def test_right_side_view_of_perfect_tree():
    values = [1, 2, 3, 4, 5, 6, 7]
    assert right_side_view(build_level_order(values)) == [values[0], values[2], values[6]]


def test_right_side_view_of_left_chain_sees_everything():
    values = [1, 2, 3, 4]
    assert right_side_view(build_level_order(_left_chain(values))) == values


def test_right_side_view_empty():
    assert right_side_view(None) == []


def test_kth_smallest_matches_sorted_order():
    level = [5, 3, 6, 2, 4, None, None, 1]
    root = build_level_order(level)
    ordered = sorted(v for v in level if v is not None)
    assert [kth_smallest(root, k) for k in range(1, len(ordered) + 1)] == ordered


@pytest.mark.parametrize("k", [0, 4])
def test_kth_smallest_out_of_range(k):
    with pytest.raises(ValueError):
        kth_smallest(build_level_order([2, 1, 3]), k)


def test_good_nodes_increasing_chain_all_good():
    values = [1, 2, 3, 4]
    assert good_nodes(build_level_order(_left_chain(values))) == len(values)


def test_good_nodes_decreasing_chain_only_root():
    assert good_nodes(build_level_order(_left_chain([4, 3, 2, 1]))) == 1


def test_good_nodes_equal_values_count():
    values = [3, 3, None, 4, 2]
    assert good_nodes(build_level_order(values)) == 3


def test_good_nodes_empty():
    assert good_nodes(None) == 0