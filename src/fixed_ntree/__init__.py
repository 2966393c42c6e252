"""
定长扇出N叉树 - 节点插入、移除、深度/广度优先查找与遍历
"""

__version__ = "1.0.0"

from .core import NTree, TreeNode, NodeFactory
from .config import TreeSettings
from .exceptions import SlotIndexError, CapacityExceededError

__all__ = [
    'NTree',
    'TreeNode',
    'NodeFactory',
    'TreeSettings',
    'SlotIndexError',
    'CapacityExceededError',
]
