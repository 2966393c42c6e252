"""
pytest配置文件
用于设置测试环境和共享fixtures
"""
import sys
import os

import pytest

# 将src目录添加到Python路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from fixed_ntree import NTree  # noqa: E402


@pytest.fixture
def abc_tree():
    """A 为根，子节点 B、C 的容量为3的树"""
    tree = NTree(3)
    factory = tree.create_factory()
    root = factory.create_node("A")
    root.add_child(factory.create_node("B"))
    root.add_child(factory.create_node("C"))
    tree.set_root(root)
    return tree


@pytest.fixture
def three_level_tree():
    """
    三层树（容量2）:

        R
        ├── X
        │   ├── X1
        │   └── X2
        └── Y
            └── Y1
    """
    tree = NTree(2)
    factory = tree.create_factory()
    root = factory.create_node("R")
    x = factory.create_node("X")
    y = factory.create_node("Y")
    x.add_child(factory.create_node("X1"))
    x.add_child(factory.create_node("X2"))
    y.add_child(factory.create_node("Y1"))
    root.add_child(x)
    root.add_child(y)
    tree.set_root(root)
    return tree
