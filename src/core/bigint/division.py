"""
Division engine: деление модулей

Два пути:
1. Делитель из одного limb: короткое деление (divmod_small)
2. Многолимбовый делитель: Knuth, TAOCP vol. 2, Algorithm D (divmod_knuth)

Algorithm D:
    f = BASE // (top(b) + 1)            нормализация: top(b * f) >= BASE / 2
    r = a * f, d = b * f
    для k = len(a) - len(b) .. 0:
        qt = min((r[k+m] * BASE + r[k+m-1]) // d[m-1], BASE - 1)
        пока qt > 0 и r[k..k+m] < d * qt: qt -= 1     (не более 2 коррекций)
        r[k..k+m] -= d * qt
        q[k] = qt
    remainder = r // f                  (деление точное)

Функции оперируют только модулями. Знаки частного (XOR знаков) и остатка
(знак делимого) выставляет big_integer.py.
"""

import logging
from typing import List, Sequence, Tuple

from src.core.bigint.errors import DivisionByZeroError
from src.core.bigint.limbs import (
    BASE,
    LIMB_BITS,
    LIMB_MASK,
    Limbs,
    compare_magnitude,
    normalize,
)
from src.core.bigint.magnitude import mul_magnitude_small, sub_magnitude

logger = logging.getLogger(__name__)


# =============================================================================
# SHORT DIVISION
# =============================================================================


def divmod_small(a: Sequence[int], divisor: int) -> Tuple[Limbs, int]:
    """
    Короткое деление |a| на делитель из одного limb.

    Limbs частного вычисляются от старшего к младшему, остаток предыдущего
    шага переносится: value = remainder * BASE + limb.

    Args:
        a: Делимое (limbs)
        divisor: Делитель в диапазоне [1, 2^32)

    Returns:
        (limbs частного, остаток как int < divisor)

    Raises:
        DivisionByZeroError: Если divisor == 0
        ValueError: Если divisor не помещается в один limb
    """
    if divisor == 0:
        raise DivisionByZeroError()
    if not 0 < divisor <= LIMB_MASK:
        raise ValueError(f"divisor {divisor} does not fit one limb")

    quotient = [0] * len(a)
    remainder = 0
    for i in range(len(a) - 1, -1, -1):
        value = (remainder << LIMB_BITS) | a[i]
        quotient[i], remainder = divmod(value, divisor)
    return normalize(quotient), remainder


# =============================================================================
# ALGORITHM D
# =============================================================================


def _padded(limbs: Limbs, size: int) -> Limbs:
    limbs.extend([0] * (size - len(limbs)))
    return limbs


def _window_less(r: Sequence[int], dq: Sequence[int], k: int, m: int) -> bool:
    """r[k..k+m] < dq[0..m], сравнение от старшего limb."""
    for i in range(m, -1, -1):
        if r[k + i] != dq[i]:
            return r[k + i] < dq[i]
    return False


def divmod_knuth(a: Sequence[int], b: Sequence[int]) -> Tuple[Limbs, Limbs]:
    """
    Деление |a| на многолимбовый |b| (Algorithm D).

    Args:
        a: Делимое, |a| >= |b|
        b: Делитель, len(b) >= 2

    Returns:
        (limbs частного, limbs остатка)

    Raises:
        ValueError: Если предусловия нарушены
    """
    m = len(b)
    n = len(a)
    if m < 2:
        raise ValueError("divmod_knuth requires a divisor of at least two limbs")
    if compare_magnitude(a, b) < 0:
        raise ValueError("divmod_knuth requires |a| >= |b|")

    scale = BASE // (b[-1] + 1)
    divisor = mul_magnitude_small(b, scale)
    remainder = _padded(mul_magnitude_small(a, scale), n + 1)
    quotient: List[int] = [0] * (n - m + 1)
    d_top = divisor[-1]

    corrections = 0
    for k in range(n - m, -1, -1):
        trial = ((remainder[k + m] << LIMB_BITS) | remainder[k + m - 1]) // d_top
        qt = min(trial, LIMB_MASK)
        if qt == 0:
            continue

        dq = _padded(mul_magnitude_small(divisor, qt), m + 1)
        while qt > 0 and _window_less(remainder, dq, k, m):
            qt -= 1
            dq = _padded(sub_magnitude(normalize(dq), divisor), m + 1)
            corrections += 1

        borrow = 0
        for i in range(m + 1):
            diff = remainder[k + i] - dq[i] - borrow
            if diff < 0:
                diff += BASE
                borrow = 1
            else:
                borrow = 0
            remainder[k + i] = diff

        quotient[k] = qt

    logger.debug(
        "knuth division: %d / %d limbs, scale=%d, corrections=%d",
        n,
        m,
        scale,
        corrections,
    )

    rest, leftover = divmod_small(normalize(remainder), scale)
    # Денормализация точная: остаток кратен f
    assert leftover == 0
    return normalize(quotient), rest


# =============================================================================
# DISPATCH
# =============================================================================


def divmod_magnitude(a: Sequence[int], b: Sequence[int]) -> Tuple[Limbs, Limbs]:
    """
    Деление модулей с выбором алгоритма.

    - b == 0 → DivisionByZeroError
    - |a| < |b| → частное 0, остаток |a|
    - len(b) == 1 → короткое деление
    - иначе → Algorithm D

    Returns:
        (limbs частного, limbs остатка)
    """
    if not b:
        raise DivisionByZeroError()
    if compare_magnitude(a, b) < 0:
        return [], list(a)
    if len(b) == 1:
        quotient, remainder = divmod_small(a, b[0])
        return quotient, ([remainder] if remainder else [])
    return divmod_knuth(a, b)
