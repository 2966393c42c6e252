"""
节点接口定义
"""
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence, TextIO


class INode(ABC):
    """节点接口 - 定义定长槽位树节点的基本行为"""

    @property
    @abstractmethod
    def value(self) -> Any:
        """节点值（创建后不可变）"""
        pass

    @property
    @abstractmethod
    def capacity(self) -> int:
        """子节点槽位数"""
        pass

    @property
    @abstractmethod
    def children(self) -> Sequence[Optional['INode']]:
        """全部槽位的只读视图（包括空槽位）"""
        pass

    @abstractmethod
    def child_count(self) -> int:
        """直接子节点数量"""
        pass

    @abstractmethod
    def subtree_count(self) -> int:
        """子树节点数量（不含自身）"""
        pass

    @abstractmethod
    def child_at(self, index: int) -> Optional['INode']:
        """获取指定槽位的子节点"""
        pass

    @abstractmethod
    def add_child(self, node: 'INode') -> None:
        """添加子节点到第一个空槽位"""
        pass

    @abstractmethod
    def remove_child(self, index: int) -> None:
        """移除指定槽位并左移后续槽位"""
        pass

    @abstractmethod
    def depth_first_search(self, target: Any) -> Optional['INode']:
        """深度优先查找"""
        pass

    @abstractmethod
    def breadth_first_search(self, target: Any) -> Optional['INode']:
        """广度优先查找"""
        pass

    @abstractmethod
    def traverse_depth_first(self) -> List[Any]:
        """遍历子树，返回值列表"""
        pass

    @abstractmethod
    def print_depth_first(self, sink: Optional[TextIO] = None) -> None:
        """诊断输出"""
        pass
