"""
基础测试
"""
import sys
import os

# 添加src到路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))


def test_import():
    """测试导入"""
    from fixed_ntree import NTree, TreeNode, NodeFactory
    assert NTree is not None
    assert TreeNode is not None
    assert NodeFactory is not None
    print("✓ 导入测试通过")


def test_tree():
    """测试树的基本用法"""
    from fixed_ntree import NTree

    tree = NTree(3)
    assert tree.root is None
    assert tree.max_children == 3

    factory = tree.create_factory()
    root = factory.create_node("柴旦")
    root.add_child(factory.create_node("上游结算"))
    tree.set_root(root)

    assert tree.root is root
    assert tree.node_count() == 2
    assert tree.depth_first_search("上游结算").value == "上游结算"

    print("✓ 树测试通过")


if __name__ == "__main__":
    print("运行测试...")
    test_import()
    test_tree()
    print("所有测试通过！")
