"""
子节点槽位模块
定长槽位序列，维护"已占用槽位左对齐"的不变式
"""

from collections.abc import Sequence
from typing import Optional, List, Tuple, Any

from ...exceptions import SlotIndexError, CapacityExceededError, ValidationError


class ChildSlots:
    """
    定长子节点槽位

    槽位数量在创建时固定。由于已占用槽位总是左对齐，
    只需保存已占用的前缀部分，前缀之后的槽位一律视为空槽位；
    容量为 sys.maxsize 时也不需要预先分配。
    """

    def __init__(self, capacity: int):
        self._capacity = capacity
        self._occupied: List[Any] = []

    @property
    def capacity(self) -> int:
        """槽位总数"""
        return self._capacity

    def check_index(self, index: int) -> None:
        """检查下标是否落在 [0, capacity) 内，负数下标不回绕"""
        # bool 是 int 的子类，需要单独排除
        if not isinstance(index, int) or isinstance(index, bool):
            raise ValidationError(
                message="槽位下标必须是整数",
                field="index",
                value=index,
                reason="invalid_type"
            )
        if index < 0 or index >= self._capacity:
            raise SlotIndexError(index, self._capacity)

    def get(self, index: int) -> Optional[Any]:
        """读取槽位，空槽位返回 None"""
        self.check_index(index)
        if index < len(self._occupied):
            return self._occupied[index]
        return None

    def count(self) -> int:
        """已占用槽位数"""
        return len(self._occupied)

    def is_full(self) -> bool:
        return len(self._occupied) >= self._capacity

    def append(self, item: Any) -> int:
        """
        放入第一个空槽位

        Returns:
            放入的槽位下标

        Raises:
            CapacityExceededError: 槽位已满，状态不变
        """
        if self.is_full():
            raise CapacityExceededError(self._capacity)
        self._occupied.append(item)
        return len(self._occupied) - 1

    def remove(self, index: int) -> Optional[Any]:
        """
        移除槽位：其后所有槽位左移一位，最后一个槽位置空

        先做越界检查再修改，失败时不改动任何槽位。

        Returns:
            被移除的子节点，空槽位返回 None
        """
        self.check_index(index)
        if index < len(self._occupied):
            return self._occupied.pop(index)
        # 空槽位：左移的都是空槽位，状态不变
        return None

    def occupied(self) -> Tuple[Any, ...]:
        """已占用槽位（按槽位顺序）"""
        return tuple(self._occupied)

    def view(self) -> 'SlotsView':
        return SlotsView(self)


class SlotsView(Sequence):
    """槽位只读视图，长度等于容量，空槽位读出 None"""

    def __init__(self, slots: ChildSlots):
        self._slots = slots

    def __len__(self) -> int:
        return self._slots.capacity

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self._slots.get(i) for i in range(self._slots.capacity)[index]]
        if isinstance(index, int) and index < 0:
            index += self._slots.capacity
        return self._slots.get(index)

    def __iter__(self):
        yield from self._slots.occupied()
        for _ in range(self._slots.capacity - self._slots.count()):
            yield None

    def __contains__(self, item) -> bool:
        if item is None:
            return not self._slots.is_full()
        return any(child is item for child in self._slots.occupied())

    def occupied(self) -> Tuple[Any, ...]:
        """已占用槽位（按槽位顺序）"""
        return self._slots.occupied()

    def __repr__(self) -> str:
        return f"SlotsView(occupied={self._slots.count()}, capacity={self._slots.capacity})"
