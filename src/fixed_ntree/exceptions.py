"""
N叉树异常体系
"""
from datetime import datetime
from typing import Dict, Any, Optional


class BaseError(Exception):
    """所有异常的基类"""
    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        self.context = context or {}
        self.timestamp = datetime.now()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典，便于日志输出"""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
            "context": self.context,
            "timestamp": self.timestamp.isoformat()
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


# ==================== 配置和验证异常 ====================
class ConfigError(BaseError):
    """配置错误"""
    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, code="CONFIG_ERROR", details=details, **kwargs)


class ValidationError(BaseError):
    """数据验证错误"""
    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        reason: Optional[str] = None,
        **kwargs
    ):
        details = {
            "field": field,
            "value": value,
            "reason": reason
        }
        super().__init__(message, code="VALIDATION_ERROR", details=details, **kwargs)


# ==================== 树结构相关异常 ====================
class TreeError(BaseError):
    """树结构错误基类"""
    pass


class NodeError(TreeError):
    """节点操作错误"""
    pass


class SlotIndexError(NodeError, IndexError):
    """子节点槽位下标越界，可按内置 IndexError 捕获"""
    def __init__(self, index: int, capacity: int, **kwargs):
        super().__init__(
            message=f"槽位下标越界: {index} 不在 [0, {capacity}) 内",
            code="SLOT_INDEX_OUT_OF_RANGE",
            details={"index": index, "capacity": capacity},
            **kwargs
        )


class CapacityExceededError(NodeError):
    """子节点槽位已满"""
    def __init__(self, capacity: int, **kwargs):
        super().__init__(
            message=f"无法继续添加子节点: 槽位已满 (容量={capacity})",
            code="CAPACITY_EXCEEDED",
            details={"capacity": capacity},
            **kwargs
        )
