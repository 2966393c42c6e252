"""
接口定义包
"""

from .inode import INode
from .icomparable import Comparable, T

__all__ = [
    'INode',
    'Comparable',
    'T',
]
