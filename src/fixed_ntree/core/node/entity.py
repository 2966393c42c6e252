"""
树节点实体模块
定义定长槽位的树节点，查找和遍历算法都在节点上实现
"""

import sys
import logging
from collections import deque
from typing import Optional, List, Generic, TextIO

from .slots import ChildSlots, SlotsView
from ...interfaces import INode, T
from ...exceptions import ValidationError, CapacityExceededError

logger = logging.getLogger(__name__)

# 超过该数量的连续空槽位合并为一行输出
MAX_EMPTY_LINES = 64


class TreeNode(INode, Generic[T]):
    """
    树节点 - 保存一个值和固定数量的子节点槽位

    每个节点包含：
    1. 值：创建时设置，之后不可修改，查找时按相等比较
    2. 子节点槽位：长度等于容量，已占用槽位始终左对齐
    3. 节点独占其子节点，不保存父节点引用
    """

    def __init__(self, value: T, max_children: int):
        """
        初始化树节点

        Args:
            value: 节点值
            max_children: 子节点槽位数（容量）
        """
        self._value = value
        self._slots = ChildSlots(max_children)

    # ========== 基本属性 ==========

    @property
    def value(self) -> T:
        """节点值"""
        return self._value

    @property
    def capacity(self) -> int:
        """子节点槽位数"""
        return self._slots.capacity

    @property
    def children(self) -> SlotsView:
        """全部槽位的只读视图（包括空槽位）"""
        return self._slots.view()

    # ========== 计数 ==========

    def child_count(self) -> int:
        """直接子节点数量"""
        return self._slots.count()

    def subtree_count(self) -> int:
        """子树节点数量，不含自身"""
        count = 0
        for child in self._slots.occupied():
            count += 1 + child.subtree_count()
        return count

    def is_leaf(self) -> bool:
        return self._slots.count() == 0

    def is_full(self) -> bool:
        return self._slots.is_full()

    # ========== 槽位操作 ==========

    def child_at(self, index: int) -> Optional['TreeNode[T]']:
        """
        获取指定槽位的子节点

        Raises:
            SlotIndexError: index 不在 [0, capacity) 内
        """
        return self._slots.get(index)

    def add_child(self, node: 'TreeNode[T]') -> None:
        """
        将子节点放入第一个空槽位（下标 = 当前直接子节点数）

        Raises:
            ValidationError: node 不是节点，或添加后会形成环
            CapacityExceededError: 槽位已满
        """
        if not isinstance(node, TreeNode):
            raise ValidationError(
                message="子节点必须是树节点",
                field="node",
                value=node,
                reason="invalid_type"
            )
        if node is self or node._contains(self):
            raise ValidationError(
                message="不能把节点自身或其祖先添加为子节点",
                field="node",
                value=node,
                reason="cycle"
            )
        try:
            self._slots.append(node)
        except CapacityExceededError:
            logger.debug(f"添加子节点失败: {self!r} 槽位已满")
            raise

    def _contains(self, target: 'TreeNode[T]') -> bool:
        """target 是否在本节点的子树中（按对象身份）"""
        row = deque(self._slots.occupied())
        while row:
            current = row.popleft()
            if current is target:
                return True
            row.extend(current._slots.occupied())
        return False

    def remove_child(self, index: int) -> None:
        """
        移除指定槽位，其后槽位依次左移，最后一个槽位置空

        Raises:
            SlotIndexError: index 不在 [0, capacity) 内
        """
        self._slots.remove(index)

    # ========== 查找 ==========

    def depth_first_search(self, target: T) -> Optional['TreeNode[T]']:
        """
        深度优先（前序）查找

        先比较自身，再按槽位顺序递归查找子节点，返回第一个匹配的节点。
        """
        if target == self._value:
            return self

        for child in self._slots.occupied():
            found = child.depth_first_search(target)
            if found is not None:
                return found
        return None

    def breadth_first_search(self, target: T) -> Optional['TreeNode[T]']:
        """广度优先（层序）查找，队列为空仍未命中时返回 None"""
        row = deque([self])
        while row:
            # 取出队首节点
            current = row.popleft()

            if target == current._value:
                return current

            row.extend(current._slots.occupied())

        return None

    # ========== 遍历 ==========

    def traverse_depth_first(self) -> List[T]:
        """
        遍历子树，返回值列表（不含自身）

        顺序：先按槽位顺序列出全部直接子节点的值，
        再按槽位顺序依次追加每个子节点自己的遍历结果。
        注意这不是标准的前序遍历。
        """
        values = [child.value for child in self._slots.occupied()]
        for child in self._slots.occupied():
            values.extend(child.traverse_depth_first())
        return values

    def print_depth_first(self, sink: Optional[TextIO] = None, empty_marker: str = "NULL") -> None:
        """
        诊断输出：自身值、每个槽位一行、再递归输出各子节点

        Args:
            sink: 输出目标，需要有 write 方法，默认 sys.stdout
            empty_marker: 空槽位显示的标记
        """
        out = sink if sink is not None else sys.stdout
        out.write(f"this: {self._value}\n")
        occupied = self._slots.occupied()
        # 空槽位过多时只逐个列出已占用槽位
        listed = self.capacity
        if self.capacity > len(occupied) + MAX_EMPTY_LINES:
            listed = len(occupied)
        for index in range(listed):
            if index < len(occupied):
                out.write(f"\tchildren[{index}]: {occupied[index].value}\n")
            else:
                out.write(f"\tchildren[{index}]: {empty_marker}\n")
        if listed < self.capacity:
            out.write(f"\tchildren[{listed}..{self.capacity - 1}]: {empty_marker}\n")
        for child in occupied:
            child.print_depth_first(out, empty_marker)

    # ========== 特殊方法 ==========

    def __repr__(self) -> str:
        return f"TreeNode({self._value!r}, children={self.child_count()}/{self.capacity})"
