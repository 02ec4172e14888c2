"""
Bitwise engine: AND / OR / XOR и арифметические сдвиги

Побитовые операции над отрицательными числами определены для two's complement
бесконечной ширины, а значения хранятся как sign-magnitude. Мост:

    two's complement(-m) = ~(m - 1)

Поэтому отрицательный операнд сначала инкрементируется как знаковое
значение (модуль уменьшается на 1), после чего каждый его limb читается
инвертированным. Limbs за пределами длины читаются как все единицы для
отрицательных и нули для неотрицательных (бесконечное знаковое расширение).

Знак результата = та же операция над знаковыми битами операндов.
Отрицательный результат переводится обратно: инверсия limbs, модуль + 1.
"""

from enum import Enum
from typing import Sequence, Tuple

from src.core.bigint.division import divmod_small
from src.core.bigint.limbs import LIMB_BITS, LIMB_MASK, Limbs, normalize
from src.core.bigint.magnitude import add_magnitude, mul_magnitude_small, sub_magnitude

_ONE: Tuple[int, ...] = (1,)


class BitOperation(str, Enum):
    """Закрытый набор побитовых операторов."""

    AND = "and"
    OR = "or"
    XOR = "xor"

    def apply(self, x: int, y: int) -> int:
        """Применение оператора к двум словам (limbs или знаковым битам)."""
        if self is BitOperation.AND:
            return x & y
        if self is BitOperation.OR:
            return x | y
        return x ^ y


# =============================================================================
# TWO'S COMPLEMENT BRIDGE
# =============================================================================


def _limb_at(sign: bool, limbs: Sequence[int], pos: int) -> int:
    if not sign:
        return limbs[pos] if pos < len(limbs) else 0
    return (~limbs[pos] & LIMB_MASK) if pos < len(limbs) else LIMB_MASK


def bitwise_operation(
    a_sign: bool,
    a: Sequence[int],
    b_sign: bool,
    b: Sequence[int],
    op: BitOperation,
) -> Tuple[bool, Limbs]:
    """
    Побитовая операция над двумя знаковыми значениями.

    Args:
        a_sign, a: Первый операнд (sign-magnitude)
        b_sign, b: Второй операнд (sign-magnitude)
        op: AND / OR / XOR

    Returns:
        (sign, limbs) результата в sign-magnitude, нормализованный

    Examples:
        -1 & 5 == 5, -1 | x == -1, -1 ^ 0 == -1
    """
    x = sub_magnitude(a, _ONE) if a_sign else list(a)
    y = sub_magnitude(b, _ONE) if b_sign else list(b)

    size = max(len(x), len(y))
    raw = [op.apply(_limb_at(a_sign, x, i), _limb_at(b_sign, y, i)) for i in range(size)]
    sign = bool(op.apply(int(a_sign), int(b_sign)))

    if not sign:
        return False, normalize(raw)

    inverted = normalize([~limb & LIMB_MASK for limb in raw])
    return True, add_magnitude(inverted, _ONE)


def invert(sign: bool, limbs: Sequence[int]) -> Tuple[bool, Limbs]:
    """~x == -x - 1."""
    if sign:
        # ~(-m) = m - 1
        return False, sub_magnitude(limbs, _ONE)
    # ~m = -(m + 1)
    return True, add_magnitude(limbs, _ONE)


# =============================================================================
# SHIFTS
# =============================================================================


def _check_shift(count: int) -> None:
    if count < 0:
        raise ValueError("negative shift count")


def shift_left(sign: bool, limbs: Sequence[int], count: int) -> Tuple[bool, Limbs]:
    """
    Арифметический сдвиг влево: x * 2^count, точный для обоих знаков.

    Умножение на 2^(count mod 32), затем count div 32 нулевых limbs снизу.
    """
    _check_shift(count)
    words, bits = divmod(count, LIMB_BITS)
    shifted = mul_magnitude_small(limbs, 1 << bits) if bits else list(limbs)
    if shifted and words:
        shifted[:0] = [0] * words
    return sign and bool(shifted), shifted


def shift_right(sign: bool, limbs: Sequence[int], count: int) -> Tuple[bool, Limbs]:
    """
    Арифметический сдвиг вправо: floor(x / 2^count).

    Отбрасываются count div 32 младших limbs, затем короткое деление на
    2^(count mod 32). Для отрицательного x с ненулевыми вытесненными битами
    модуль увеличивается на 1 (округление к минус бесконечности).
    """
    _check_shift(count)
    words, bits = divmod(count, LIMB_BITS)
    lost = any(limbs[:words])
    kept = list(limbs[words:])
    if bits and kept:
        kept, rest = divmod_small(kept, 1 << bits)
        lost = lost or rest != 0
    if sign and lost:
        kept = add_magnitude(kept, _ONE)
    return sign and bool(kept), kept
