"""
可比较值约束

节点值只需支持相等比较即可参与查找，这里用结构化协议表达，
不要求值类型继承任何基类。
"""
from typing import Any, Protocol, TypeVar


class Comparable(Protocol):
    """
    支持相等比较的值

    查找只用 target == value 判断命中，树不按值排序，因此不要求全序（__lt__）；
    字典、None 等不可排序的值同样可以作为节点值。
    所有对象都有 __eq__，这个约束只用于标注类型，不在运行时检查。
    """

    def __eq__(self, other: Any) -> bool:
        ...


T = TypeVar('T', bound=Comparable)
