"""
配置模块
"""

from .settings import TreeSettings, setup_logging
from .validator import ConfigValidator

__all__ = ['TreeSettings', 'setup_logging', 'ConfigValidator']
