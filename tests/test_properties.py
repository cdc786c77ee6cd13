import pytest

from treealgos.node import Node, build_tree
from treealgos.properties import (
    count_nodes,
    diameter,
    is_balanced,
    is_same_tree,
    is_symmetric,
    lowest_common_ancestor,
    max_depth,
    max_depth_bfs,
    max_path_sum,
)
from treealgos.traversals import level_order, preorder


def _chain(values):
    """A tree where every node hangs off the left of the previous one."""
    root = None
    for value in reversed(values):
        root = Node(value, left=root)
    return root


def _sample_tree():
    root = Node(1)
    root.left = Node(2)
    root.right = Node(3)
    root.left.left = Node(4)
    root.left.right = Node(5)
    root.right.right = Node(6)
    root.left.right.left = Node(7)
    root.left.right.right = Node(8)
    return root


TREES = [
    [1],
    [1, 2, 3],
    [1, 2, 3, 4, 5, 6, 7],
    [1, 2, None, 3, None, 4],
    [5, None, 6, None, 7, None, 8],
    [1, 2, 3, None, 4, None, 5, 6],
]


@pytest.mark.parametrize("values", TREES)
def test_count_nodes_matches_present_values(values):
    root = build_tree(values)
    assert count_nodes(root) == sum(v is not None for v in values)


def test_count_nodes_matches_preorder_length():
    root = _sample_tree()
    assert count_nodes(root) == len(preorder(root))


def test_count_nodes_empty():
    assert count_nodes(None) == 0


@pytest.mark.parametrize("values", TREES)
def test_depth_variants_agree_with_level_count(values):
    root = build_tree(values)
    assert max_depth(root) == max_depth_bfs(root) == len(level_order(root))


@pytest.mark.parametrize("length", [1, 2, 5, 9])
def test_depth_of_chain_is_its_length(length):
    root = _chain(list(range(length)))
    assert max_depth(root) == length
    assert max_depth_bfs(root) == length


def test_depth_of_empty_tree():
    assert max_depth(None) == max_depth_bfs(None) == 0


def test_balanced_trees():
    assert is_balanced(None)
    assert is_balanced(build_tree([1, 2, 3]))
    assert is_balanced(build_tree([1, 2, 3, 4, 5, 6, 7]))
    assert is_balanced(_chain([1, 2]))


def test_unbalanced_trees():
    assert not is_balanced(_chain([1, 2, 3]))
    # Root heights match, but a subtree below is lopsided.
    assert not is_balanced(build_tree([1, 2, 3, 4, None, None, 5, 6, None, None, 7]))


def test_diameter_source_example():
    root = Node(1, Node(2), Node(3))
    assert diameter(root) == 2


@pytest.mark.parametrize("length", [1, 2, 4, 7])
def test_diameter_of_chain(length):
    assert diameter(_chain(list(range(length)))) == length - 1


def test_diameter_bounded_by_node_count():
    root = _sample_tree()
    assert max_depth(root) - 1 <= diameter(root) <= count_nodes(root) - 1


def test_diameter_may_avoid_root():
    left = _chain([2, 3, 4, 5])
    left.right = _chain([6, 7, 8, 9])
    root = Node(1, left=left)
    assert diameter(root) > max_depth(root) - 1
    assert diameter(root) == diameter(left)


def test_max_path_sum_single_node():
    assert max_path_sum(Node(-7)) == -7


def test_max_path_sum_full_positive_triangle():
    values = [1, 2, 3]
    assert max_path_sum(build_tree(values)) == sum(values)


def test_max_path_sum_all_negative_is_best_single_node():
    values = [-3, -1, -4, -6, -2]
    assert max_path_sum(build_tree(values)) == max(values)


def test_max_path_sum_positive_chain_is_total():
    values = [4, 8, 15, 16, 23]
    assert max_path_sum(_chain(values)) == sum(values)


def test_max_path_sum_skips_negative_branch():
    values = [10, 5, -20]
    assert max_path_sum(build_tree(values)) == values[0] + values[1]


def test_max_path_sum_empty_raises():
    with pytest.raises(ValueError):
        max_path_sum(None)


@pytest.mark.parametrize("values", TREES)
def test_same_tree_from_same_values(values):
    assert is_same_tree(build_tree(values), build_tree(values))


def test_same_tree_differences():
    assert not is_same_tree(build_tree([1, 2, 3]), build_tree([1, 2, 4]))
    assert not is_same_tree(build_tree([1, 2]), build_tree([1, None, 2]))
    assert not is_same_tree(build_tree([1]), None)
    assert is_same_tree(None, None)


def test_symmetric_trees():
    assert is_symmetric(None)
    assert is_symmetric(Node(1))
    assert is_symmetric(build_tree([1, 2, 2, 3, 4, 4, 3]))


def test_asymmetric_trees():
    assert not is_symmetric(build_tree([1, 2, 2, None, 3, None, 3]))
    assert not is_symmetric(build_tree([1, 2, 3]))
    assert not is_symmetric(build_tree([1, 2]))


def test_lca_of_cousins_in_source_tree():
    root = _sample_tree()
    p = root.left.right.left
    q = root.left.right.right
    assert lowest_common_ancestor(root, p, q) is root.left.right


def test_lca_across_root():
    root = _sample_tree()
    assert lowest_common_ancestor(root, root.left.left, root.right.right) is root


def test_lca_when_one_is_ancestor_of_other():
    root = _sample_tree()
    ancestor = root.left
    descendant = root.left.right.right
    assert lowest_common_ancestor(root, ancestor, descendant) is ancestor


def test_lca_same_node():
    root = _sample_tree()
    node = root.right.right
    assert lowest_common_ancestor(root, node, node) is node


def test_lca_matches_by_identity_not_value():
    root = _sample_tree()
    assert lowest_common_ancestor(root, Node(7), Node(8)) is None
    assert lowest_common_ancestor(None, root, root) is None


def test_lca_with_only_one_node_present():
    root = _sample_tree()
    present = root.left.left
    assert lowest_common_ancestor(root, present, Node(99)) is present