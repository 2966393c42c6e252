"""
节点模块 - 节点实体、槽位和节点工厂
"""

from .entity import TreeNode
from .factory import NodeFactory
from .slots import ChildSlots, SlotsView

__all__ = ['TreeNode', 'NodeFactory', 'ChildSlots', 'SlotsView']
