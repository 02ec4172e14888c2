"""
Magnitude arithmetic: сложение, вычитание и умножение модулей

Все функции работают с беззнаковыми последовательностями limbs и
возвращают новый нормализованный список. Входные последовательности
никогда не модифицируются.

Знаковая арифметика (big_integer.py) маршрутизирует все операции через
add_magnitude / sub_magnitude в зависимости от комбинации знаков.
"""

from typing import Sequence

from src.core.bigint.limbs import (
    BASE,
    LIMB_BITS,
    LIMB_MASK,
    Limbs,
    compare_magnitude,
    normalize,
)

# =============================================================================
# ADD / SUBTRACT
# =============================================================================


def add_magnitude(a: Sequence[int], b: Sequence[int]) -> Limbs:
    """
    |a| + |b| с распространением переноса.

    Буфер результата имеет длину max(len(a), len(b)) + 1, старший limb
    получает финальный carry, затем результат нормализуется.
    """
    size = max(len(a), len(b))
    result = [0] * (size + 1)
    carry = 0
    for i in range(size):
        cur = (a[i] if i < len(a) else 0) + (b[i] if i < len(b) else 0) + carry
        carry = cur >> LIMB_BITS
        result[i] = cur & LIMB_MASK
    result[size] = carry
    return normalize(result)


def sub_magnitude(a: Sequence[int], b: Sequence[int]) -> Limbs:
    """
    |a| - |b| с распространением заёма.

    Args:
        a: Уменьшаемое, |a| >= |b|
        b: Вычитаемое

    Raises:
        ValueError: Если |a| < |b|
    """
    if compare_magnitude(a, b) < 0:
        raise ValueError("sub_magnitude requires |a| >= |b|")

    result = [0] * len(a)
    borrow = 0
    for i in range(len(a)):
        cur = a[i] - (b[i] if i < len(b) else 0) - borrow
        if cur < 0:
            cur += BASE
            borrow = 1
        else:
            borrow = 0
        result[i] = cur
    return normalize(result)


# =============================================================================
# MULTIPLY
# =============================================================================


def mul_magnitude(a: Sequence[int], b: Sequence[int]) -> Limbs:
    """
    Школьное умножение |a| * |b|, O(len(a) * len(b)).

    Буфер результата: len(a) + len(b) + 1. Перенос, выходящий за пределы
    текущей строки, добавляется в следующие limbs (никогда не теряется).
    """
    if not a or not b:
        return []

    result = [0] * (len(a) + len(b) + 1)
    for i, x in enumerate(a):
        if x == 0:
            continue
        carry = 0
        for j, y in enumerate(b):
            cur = x * y + result[i + j] + carry
            carry = cur >> LIMB_BITS
            result[i + j] = cur & LIMB_MASK
        k = i + len(b)
        while carry:
            cur = result[k] + carry
            carry = cur >> LIMB_BITS
            result[k] = cur & LIMB_MASK
            k += 1
    return normalize(result)


def mul_magnitude_small(a: Sequence[int], factor: int) -> Limbs:
    """
    |a| * factor для множителя, помещающегося в один limb.

    Raises:
        ValueError: Если factor вне [0, 2^32)
    """
    if not 0 <= factor <= LIMB_MASK:
        raise ValueError(f"factor {factor} does not fit one limb")
    if factor == 0:
        return []
    return mul_magnitude(a, [factor])
