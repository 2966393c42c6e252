"""
树配置设置
"""
import sys
import logging
from typing import Dict, Any
from dataclasses import dataclass, asdict

from ..exceptions import ConfigError, ValidationError
from .validator import ConfigValidator


@dataclass
class TreeSettings:
    """
    树配置类
    使用dataclass确保配置的类型安全，创建时即完成校验
    """

    # 树结构配置，默认容量即"无上限"
    max_children: int = sys.maxsize

    # 日志配置
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # 诊断输出配置
    empty_slot_marker: str = "NULL"

    def __post_init__(self):
        """初始化后处理，验证配置"""
        self._validate_settings()

    def _validate_settings(self):
        """验证配置值"""
        # 验证日志级别
        valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if not isinstance(self.log_level, str) or self.log_level.upper() not in valid_log_levels:
            raise ConfigError(
                message=f"无效的日志级别: {self.log_level}",
                config_key="log_level"
            )
        self.log_level = self.log_level.upper()

        # 验证子节点容量和空槽位标记
        try:
            ConfigValidator().validate_tree_config({
                'max_children': self.max_children,
                'empty_slot_marker': self.empty_slot_marker
            })
        except ValidationError as e:
            raise ConfigError(
                message=f"{e.message}: {e.details.get('value')!r}",
                config_key=e.details.get('field')
            ) from e

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'TreeSettings':
        """从字典创建配置"""
        # 过滤无效的配置键
        valid_keys = {field.name for field in cls.__dataclass_fields__.values()}
        filtered_config = {k: v for k, v in config_dict.items() if k in valid_keys}

        return cls(**filtered_config)


def setup_logging(settings: TreeSettings) -> None:
    """配置日志系统"""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=settings.log_format,
        handlers=[logging.StreamHandler()]
    )
