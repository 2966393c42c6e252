"""
N叉树模块
持有根节点和整棵树共享的子节点容量
"""

import logging
from collections import deque
from typing import Optional, List, Tuple, Generic

from ..interfaces import T
from ..config.settings import TreeSettings
from ..config.validator import ConfigValidator
from ..exceptions import ValidationError, ConfigError
from .node import TreeNode, NodeFactory

logger = logging.getLogger(__name__)


class NTree(Generic[T]):
    """
    定长扇出的N叉树

    树本身只保存根节点和容量；查找、遍历等算法由节点实现，
    树上的同名方法在空树时返回空结果。
    """

    def __init__(
            self,
            max_children: Optional[int] = None,
            settings: Optional[TreeSettings] = None
    ):
        """
        初始化N叉树

        Args:
            max_children: 每个节点的子节点容量，默认取配置值（sys.maxsize）
            settings: 树配置

        Raises:
            ConfigError: 容量不是正整数
        """
        self.settings = settings or TreeSettings()

        if max_children is None:
            max_children = self.settings.max_children
        try:
            self._max_children = ConfigValidator().validate_max_children(max_children)
        except ValidationError as e:
            raise ConfigError(e.message, config_key="max_children") from e

        self._root: Optional[TreeNode[T]] = None
        logger.debug(f"创建N叉树: 容量={self._max_children}")

    # ========== 基本属性 ==========

    @property
    def root(self) -> Optional[TreeNode[T]]:
        """根节点，未设置时为 None"""
        return self._root

    def set_root(self, node: Optional[TreeNode[T]]) -> None:
        """
        设置根节点，直接替换原有根节点

        不检查 node 的容量是否与树一致，需要一致时请通过 NodeFactory 创建。
        """
        if node is not None and node.capacity != self._max_children:
            logger.debug(f"根节点容量({node.capacity})与树容量({self._max_children})不一致")
        self._root = node
        logger.debug(f"设置根节点: {node!r}")

    @property
    def max_children(self) -> int:
        """子节点容量（只读）"""
        return self._max_children

    def create_factory(self) -> NodeFactory[T]:
        """创建绑定到当前容量的节点工厂"""
        return NodeFactory(self)

    # ========== 查找与遍历 ==========

    def depth_first_search(self, target: T) -> Optional[TreeNode[T]]:
        """从根节点深度优先查找"""
        if self._root is None:
            return None
        return self._root.depth_first_search(target)

    def breadth_first_search(self, target: T) -> Optional[TreeNode[T]]:
        """从根节点广度优先查找"""
        if self._root is None:
            return None
        return self._root.breadth_first_search(target)

    def traverse_depth_first(self) -> List[T]:
        """遍历根节点的子树（不含根节点自身的值）"""
        if self._root is None:
            return []
        return self._root.traverse_depth_first()

    def node_count(self) -> int:
        """节点总数（含根节点）"""
        if self._root is None:
            return 0
        return 1 + self._root.subtree_count()

    def get_tree_depth(self) -> int:
        """获取树的最大深度，只有根节点时为0"""
        if self._root is None:
            return 0

        max_depth = 0

        def calculate_depth(node: TreeNode[T], current_depth: int):
            nonlocal max_depth
            max_depth = max(max_depth, current_depth)

            for child in node.children.occupied():
                calculate_depth(child, current_depth + 1)

        calculate_depth(self._root, 0)
        return max_depth

    def find_parent(self, node: TreeNode[T]) -> Optional[Tuple[TreeNode[T], int]]:
        """
        自顶向下查找节点的父节点

        节点不保存父节点引用，这里从根节点按层序查找持有该节点的槽位。

        Returns:
            (父节点, 槽位下标)；node 是根节点或不在树中时返回 None
        """
        if self._root is None:
            return None

        row = deque([self._root])
        while row:
            current = row.popleft()
            for index, child in enumerate(current.children.occupied()):
                if child is node:
                    return current, index
                row.append(child)

        return None

    def __repr__(self) -> str:
        return f"NTree(max_children={self._max_children}, nodes={self.node_count()})"
