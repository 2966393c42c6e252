"""
测试N叉树与节点工厂
"""
import sys

import pytest

from fixed_ntree import NTree, NodeFactory, TreeNode, TreeSettings
from fixed_ntree.exceptions import ConfigError


# ========== 树 ==========

def test_default_capacity_is_unbounded():
    tree = NTree()
    assert tree.max_children == sys.maxsize
    assert tree.root is None


def test_explicit_capacity():
    assert NTree(4).max_children == 4


def test_capacity_from_settings():
    tree = NTree(settings=TreeSettings(max_children=6))
    assert tree.max_children == 6
    # 显式参数优先
    assert NTree(2, settings=TreeSettings(max_children=6)).max_children == 2


@pytest.mark.parametrize("capacity", [0, -1, 2.5, "3", True])
def test_invalid_capacity(capacity):
    with pytest.raises(ConfigError) as exc_info:
        NTree(capacity)
    assert exc_info.value.details["config_key"] == "max_children"


def test_max_children_is_read_only():
    tree = NTree(3)
    with pytest.raises(AttributeError):
        tree.max_children = 5


def test_set_root_replaces_unconditionally():
    tree = NTree(3)
    first = TreeNode("first", 3)
    mismatched = TreeNode("second", 7)

    tree.set_root(first)
    assert tree.root is first

    # 容量不一致也直接替换
    tree.set_root(mismatched)
    assert tree.root is mismatched

    tree.set_root(None)
    assert tree.root is None


def test_empty_tree_delegates():
    tree = NTree(2)
    assert tree.depth_first_search("x") is None
    assert tree.breadth_first_search("x") is None
    assert tree.traverse_depth_first() == []
    assert tree.node_count() == 0
    assert tree.get_tree_depth() == 0
    assert tree.find_parent(TreeNode("x", 2)) is None


def test_tree_delegates(abc_tree):
    c = abc_tree.root.child_at(1)
    assert abc_tree.depth_first_search("C") is c
    assert abc_tree.breadth_first_search("C") is c
    assert abc_tree.depth_first_search("Z") is None
    assert abc_tree.traverse_depth_first() == ["B", "C"]
    assert abc_tree.node_count() == 3
    assert abc_tree.get_tree_depth() == 1


def test_traverse_capacity_two(three_level_tree):
    """容量2的根 R，子节点 X、Y 按顺序添加"""
    root = three_level_tree.root
    x, y = root.child_at(0), root.child_at(1)

    expected = [x.value, y.value] + x.traverse_depth_first() + y.traverse_depth_first()

    assert three_level_tree.traverse_depth_first() == expected
    assert expected == ["X", "Y", "X1", "X2", "Y1"]
    assert three_level_tree.get_tree_depth() == 2
    assert three_level_tree.node_count() == 6


def test_find_parent(three_level_tree):
    root = three_level_tree.root
    y = root.child_at(1)
    y1 = y.child_at(0)

    assert three_level_tree.find_parent(y1) == (y, 0)
    assert three_level_tree.find_parent(y) == (root, 1)
    assert three_level_tree.find_parent(root) is None
    assert three_level_tree.find_parent(TreeNode("Y1", 2)) is None


def test_repr(abc_tree):
    assert repr(abc_tree) == "NTree(max_children=3, nodes=3)"


# ========== 节点工厂 ==========

def test_factory_uses_tree_capacity():
    tree = NTree(4)
    factory = NodeFactory(tree)

    node = factory.create_node("a")

    assert isinstance(node, TreeNode)
    assert node.value == "a"
    assert node.capacity == 4
    assert factory.max_children == 4


def test_factory_captures_capacity_at_construction():
    tree = NTree(4)
    factory = tree.create_factory()
    # 模拟树容量在工厂创建后发生变化
    tree._max_children = 9

    assert factory.max_children == 4
    assert factory.create_node("a").capacity == 4


def test_factory_default_tree():
    node = NTree().create_factory().create_node(None)
    assert node.value is None
    assert node.capacity == sys.maxsize
    assert node.child_count() == 0
