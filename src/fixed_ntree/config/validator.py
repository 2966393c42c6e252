"""
配置验证器
"""
from typing import Dict, Any

from ..exceptions import ValidationError, ConfigError


class ConfigValidator:
    """配置验证器"""

    def validate_max_children(self, value: Any) -> int:
        """验证子节点容量，返回通过验证的值"""
        # bool 是 int 的子类，需要单独排除
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValidationError(
                message="子节点容量必须是整数",
                field="max_children",
                value=value,
                reason="invalid_type"
            )

        if value <= 0:
            raise ValidationError(
                message="子节点容量必须大于0",
                field="max_children",
                value=value,
                reason="non_positive"
            )

        return value

    def validate_tree_config(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """验证并清理树配置"""
        if not isinstance(config, dict):
            raise ConfigError(f"树配置必须是字典: {type(config).__name__}")

        validated_config = {}

        if 'max_children' in config:
            validated_config['max_children'] = self.validate_max_children(config['max_children'])

        if 'empty_slot_marker' in config:
            marker = config['empty_slot_marker']
            if not self._validate_string(marker, min_len=1, max_len=20):
                raise ValidationError(
                    message="空槽位标记必须是1-20个字符的字符串",
                    field="empty_slot_marker",
                    value=marker,
                    reason="invalid_length"
                )
            validated_config['empty_slot_marker'] = marker

        return validated_config

    def _validate_string(self, value: str, min_len: int = 1, max_len: int = 100) -> bool:
        """验证字符串"""
        return isinstance(value, str) and min_len <= len(value) <= max_len
