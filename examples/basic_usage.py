"""
基础用法示例
============

演示如何使用 NanoID SDK 生成短小、URL 安全的随机 ID，包括：
- 默认参数生成（21 个字符，64 字符 URL 安全字母表）
- 自定义长度、字母表与随机源
- 通过 GeneratorConfig 创建可复用的生成器
- 用生日界估算碰撞概率，选择合适的 ID 长度

运行方式:
    python examples/basic_usage.py
"""

from nanoid_sdk import (
    NO_LOOKALIKES,
    NUMBERS,
    GeneratorConfig,
    NanoID,
    SeededRandomSource,
    collision_probability,
    create_id_generator,
    entropy_bits,
    generate,
    ids_until_collision,
    nanoid,
    size_for_collision_probability,
)


# ---------------------------------------------------------------------------
# 1. 默认参数
# ---------------------------------------------------------------------------

def show_defaults() -> None:
    print("=" * 60)
    print("  默认 ID")
    print("=" * 60)
    for _ in range(3):
        print(f"  {generate()}")

    nid = nanoid()
    print(f"  NanoID 对象: {nid!r}  字节数={nid.size()}")


# ---------------------------------------------------------------------------
# 2. 自定义长度 / 字母表 / 随机源
# ---------------------------------------------------------------------------

def show_custom() -> None:
    print("\n" + "=" * 60)
    print("  自定义参数")
    print("=" * 60)
    print(f"  6 位数字验证码: {generate(6, NUMBERS)}")
    print(f"  无易混字符邀请码: {generate(10, NO_LOOKALIKES)}")

    # 固定种子的随机源：结果可复现，仅用于测试，不可用于安全场景
    a = nanoid(12, random_source=SeededRandomSource(42))
    b = nanoid(12, random_source=SeededRandomSource(42))
    print(f"  固定种子: {a} == {b} -> {a == b}")

    # 从已有字符串 / 字节包装
    restored = NanoID.from_string(str(a))
    print(f"  往返一致: {restored == a}")


# ---------------------------------------------------------------------------
# 3. 可复用生成器
# ---------------------------------------------------------------------------

def show_generator() -> None:
    print("\n" + "=" * 60)
    print("  GeneratorConfig 生成器")
    print("=" * 60)
    gen = create_id_generator(GeneratorConfig(size=12))
    for nid in gen.new_ids(3):
        print(f"  {nid}")
    print(f"  生成 100 万个 ID 的碰撞概率: {gen.collision_probability(1_000_000):.3e}")


# ---------------------------------------------------------------------------
# 4. 碰撞概率估算
# ---------------------------------------------------------------------------

def show_collision_math() -> None:
    print("\n" + "=" * 60)
    print("  碰撞概率")
    print("=" * 60)
    print(f"  默认 ID 熵: {entropy_bits(21, 64):.0f} bits")
    print(f"  默认 ID 达到 1% 碰撞概率需要: {ids_until_collision(0.01, 21, 64):.2e} 个")
    print(f"  10 亿个默认 ID 的碰撞概率: {collision_probability(10**9, 21, 64):.2e}")
    size = size_for_collision_probability(10_000_000, 0.001, 64)
    print(f"  1000 万个 ID 且碰撞概率 <= 0.1% 的最短长度: {size}")


def main() -> None:
    show_defaults()
    show_custom()
    show_generator()
    show_collision_math()


if __name__ == "__main__":
    main()
