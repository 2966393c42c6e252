"""
报表与诊断输出
"""

from .slot_report import slot_table, node_table, depth_summary, format_dump

__all__ = ['slot_table', 'node_table', 'depth_summary', 'format_dump']
