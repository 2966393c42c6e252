"""
测试异常体系
"""
from fixed_ntree.exceptions import (
    BaseError, TreeError, NodeError, SlotIndexError,
    CapacityExceededError, ConfigError, ValidationError
)


def test_exception_creation():
    """测试异常创建"""
    error = SlotIndexError(index=5, capacity=3)

    assert error.code == "SLOT_INDEX_OUT_OF_RANGE"
    assert error.details == {"index": 5, "capacity": 3}
    assert str(error).startswith("[SLOT_INDEX_OUT_OF_RANGE]")
    assert "5" in str(error)
    print("✓ 异常创建测试通过")


def test_exception_inheritance():
    """测试异常继承关系"""
    assert issubclass(SlotIndexError, NodeError)
    assert issubclass(SlotIndexError, IndexError)
    assert issubclass(CapacityExceededError, NodeError)
    assert issubclass(NodeError, TreeError)
    assert issubclass(TreeError, BaseError)
    assert not issubclass(CapacityExceededError, IndexError)
    print("✓ 异常继承关系测试通过")


def test_to_dict():
    error = CapacityExceededError(capacity=2, context={"node": "root"})
    data = error.to_dict()

    assert data["code"] == "CAPACITY_EXCEEDED"
    assert data["details"] == {"capacity": 2}
    assert data["context"] == {"node": "root"}
    assert "timestamp" in data


def test_config_and_validation_errors():
    config_error = ConfigError("bad", config_key="max_children")
    assert config_error.code == "CONFIG_ERROR"
    assert config_error.details == {"config_key": "max_children"}

    validation_error = ValidationError("bad", field="node", value=1, reason="invalid_type")
    assert validation_error.code == "VALIDATION_ERROR"
    assert validation_error.details["reason"] == "invalid_type"
