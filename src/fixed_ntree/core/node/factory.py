"""
节点工厂 - 按树的容量创建节点
"""
import logging
from typing import Generic, TYPE_CHECKING

from ...interfaces import T
from .entity import TreeNode

if TYPE_CHECKING:
    from ..tree import NTree

logger = logging.getLogger(__name__)


class NodeFactory(Generic[T]):
    """节点工厂，保证同一棵树的所有节点容量一致"""

    def __init__(self, tree: 'NTree[T]'):
        """
        初始化节点工厂

        Args:
            tree: 所属的树；创建时复制其容量，之后不再跟随树的变化
        """
        self._max_children = tree.max_children
        logger.debug(f"节点工厂初始化完成: 容量={self._max_children}")

    @property
    def max_children(self) -> int:
        """创建节点时使用的容量"""
        return self._max_children

    def create_node(self, value: T) -> TreeNode[T]:
        """创建节点"""
        return TreeNode(value, self._max_children)
