"""
核心模块包
包含树、节点、槽位和节点工厂
"""

# 导入节点模块
from .node import TreeNode, NodeFactory, ChildSlots, SlotsView

# 导入树模块
from .tree import NTree

__all__ = [
    # 节点模块
    'TreeNode',
    'NodeFactory',
    'ChildSlots',
    'SlotsView',

    # 树模块
    'NTree',
]
