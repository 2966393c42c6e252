"""
定长扇出N叉树基本使用示例
"""
import sys
import os

# 添加src到路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from fixed_ntree import NTree, TreeSettings, CapacityExceededError
from fixed_ntree.config import setup_logging
from fixed_ntree.services.report import slot_table, depth_summary


def build_tree(tree: NTree) -> None:
    """构建示例树结构"""
    factory = tree.create_factory()

    root = factory.create_node("柴旦")
    settlement = factory.create_node("上游结算")
    station = factory.create_node("场站设备")

    for name in ("S001+L+上游主路", "S002+L+上游副路", "S003+L+备用管路"):
        station.add_child(factory.create_node(name))

    settlement.add_child(station)
    root.add_child(settlement)
    root.add_child(factory.create_node("下游用户"))
    tree.set_root(root)


def main():
    """主函数"""
    print("=" * 60)
    print("定长扇出N叉树 - 基本使用示例")
    print("=" * 60)

    # 1. 创建树
    print("\n1. 初始化树...")
    settings = TreeSettings(max_children=3, log_level="DEBUG")
    setup_logging(settings)
    tree = NTree(settings=settings)
    build_tree(tree)
    print(f"   {tree!r}")
    print(f"   树深度: {tree.get_tree_depth()}")

    # 2. 查找
    print("\n2. 查找节点...")
    station = tree.depth_first_search("场站设备")
    print(f"   深度优先: {station!r}")
    print(f"   广度优先: {tree.breadth_first_search('下游用户')!r}")
    print(f"   不存在的节点: {tree.depth_first_search('不存在')}")

    # 3. 遍历
    print("\n3. 遍历:")
    for value in tree.traverse_depth_first():
        print(f"   - {value}")

    # 4. 容量限制
    print("\n4. 容量限制...")
    try:
        station.add_child(tree.create_factory().create_node("S004"))
    except CapacityExceededError as e:
        print(f"   {e}")

    # 5. 移除槽位
    print("\n5. 移除槽位0...")
    station.remove_child(0)
    print(f"   {[child.value if child else None for child in station.children]}")
    parent, index = tree.find_parent(station)
    print(f"   场站设备的父节点: {parent.value} (槽位 {index})")

    # 6. 诊断输出
    print("\n6. 诊断输出:")
    tree.root.print_depth_first()

    print("\n7. 槽位报表:")
    print(slot_table(tree.root, include_empty=False).to_string(index=False))
    print(depth_summary(tree.root).to_string())


if __name__ == "__main__":
    main()
