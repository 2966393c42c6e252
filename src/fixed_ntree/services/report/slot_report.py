"""
槽位报表
把子树的槽位占用情况整理成 DataFrame，便于在调试时查看和筛选
"""
import io
from typing import List, Optional

import pandas as pd

from ...config.settings import TreeSettings
from ...core.node.entity import TreeNode, MAX_EMPTY_LINES


SLOT_COLUMNS = ['depth', 'parent', 'slot', 'child', 'occupied']
NODE_COLUMNS = ['depth', 'value', 'child_count', 'capacity']


def _walk(node: TreeNode, depth: int = 0):
    """按诊断输出的顺序访问节点：先自身，再按槽位顺序递归"""
    yield depth, node
    for child in node.children.occupied():
        yield from _walk(child, depth + 1)


def slot_table(node: TreeNode, include_empty: bool = True) -> pd.DataFrame:
    """
    生成槽位表，每个槽位一行

    行顺序与 print_depth_first 一致。空槽位过多（容量远大于已占用数）时，
    空槽位不逐行列出。

    Returns:
        列为 depth, parent, slot, child, occupied 的 DataFrame
    """
    rows = []
    for depth, current in _walk(node):
        occupied = current.children.occupied()
        for slot, child in enumerate(occupied):
            rows.append({
                'depth': depth,
                'parent': current.value,
                'slot': slot,
                'child': child.value,
                'occupied': True
            })

        if not include_empty or current.capacity > len(occupied) + MAX_EMPTY_LINES:
            continue
        for slot in range(len(occupied), current.capacity):
            rows.append({
                'depth': depth,
                'parent': current.value,
                'slot': slot,
                'child': None,
                'occupied': False
            })

    return pd.DataFrame(rows, columns=SLOT_COLUMNS)


def node_table(node: TreeNode) -> pd.DataFrame:
    """生成节点表，每个节点一行（含 node 自身）"""
    rows = [
        {
            'depth': depth,
            'value': current.value,
            'child_count': current.child_count(),
            'capacity': current.capacity
        }
        for depth, current in _walk(node)
    ]
    return pd.DataFrame(rows, columns=NODE_COLUMNS)


def depth_summary(node: TreeNode) -> pd.DataFrame:
    """
    按层统计节点数和子节点数

    Returns:
        以 depth 为索引，列为 nodes, children, leaves 的 DataFrame
    """
    df = node_table(node)
    df['is_leaf'] = df['child_count'] == 0
    summary = df.groupby('depth').agg(
        nodes=('value', 'size'),
        children=('child_count', 'sum'),
        leaves=('is_leaf', 'sum')
    )
    return summary.astype(int)


def format_dump(node: TreeNode, settings: Optional[TreeSettings] = None) -> List[str]:
    """把 print_depth_first 的输出收集为行列表"""
    settings = settings or TreeSettings()
    buffer = io.StringIO()
    node.print_depth_first(buffer, empty_marker=settings.empty_slot_marker)
    return buffer.getvalue().splitlines()
