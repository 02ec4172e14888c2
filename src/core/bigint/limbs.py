"""
Limbs: хранение цифр и нормализация

Модуль определяет каноническое представление модуля (magnitude) большого
целого: little-endian последовательность 32-битных limbs.

    value = Σ limbs[i] * 2^(32 * i)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый limb в диапазоне [0, 2^32)
2. Старший limb никогда не равен нулю (нет superfluous leading zero)
3. Ноль представлен пустой последовательностью
4. Каждая функция, порождающая limbs, нормализует результат перед возвратом
"""

from enum import Enum
from typing import Final, List, Sequence, Tuple

# =============================================================================
# LIMB GEOMETRY
# =============================================================================

# Ширина одного limb в битах
LIMB_BITS: Final[int] = 32

# Основание системы счисления (2^32)
BASE: Final[int] = 1 << LIMB_BITS

# Маска одного limb (все единицы)
LIMB_MASK: Final[int] = BASE - 1

# Последовательность limbs, младший limb первым
Limbs = List[int]


# =============================================================================
# NATIVE WIDTHS
# =============================================================================


class NativeWidth(str, Enum):
    """Нативные целочисленные типы, из которых допустимо конструирование."""

    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"

    @property
    def signed(self) -> bool:
        return not self.value.startswith("u")

    @property
    def bits(self) -> int:
        return int(self.value.lstrip("uint"))

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1


def check_native_range(value: int, width: NativeWidth) -> None:
    """
    Проверка, что value представимо в нативном типе width.

    Raises:
        OverflowError: Если value вне [min_value, max_value]
    """
    if not width.min_value <= value <= width.max_value:
        raise OverflowError(
            f"{value} out of range for {width.value} "
            f"[{width.min_value}, {width.max_value}]"
        )


# =============================================================================
# NORMALIZATION
# =============================================================================


def normalize(limbs: Limbs) -> Limbs:
    """
    Удаление старших нулевых limbs (in place).

    Args:
        limbs: Последовательность limbs (модифицируется)

    Returns:
        Тот же список без leading zero; ноль становится []
    """
    while limbs and limbs[-1] == 0:
        limbs.pop()
    return limbs


def is_zero_magnitude(limbs: Sequence[int]) -> bool:
    """Пустая последовательность limbs означает ноль."""
    return len(limbs) == 0


def validate_limbs(limbs: Sequence[int]) -> None:
    """
    Проверка инвариантов представления.

    Raises:
        ValueError: Если limb вне [0, 2^32) или старший limb равен нулю
    """
    for i, limb in enumerate(limbs):
        if not isinstance(limb, int) or isinstance(limb, bool):
            raise ValueError(f"limb[{i}] must be int, got {type(limb).__name__}")
        if not 0 <= limb <= LIMB_MASK:
            raise ValueError(f"limb[{i}] = {limb} out of range [0, {LIMB_MASK}]")
    if limbs and limbs[-1] == 0:
        raise ValueError("most significant limb must be non-zero")


# =============================================================================
# MAGNITUDE COMPARISON
# =============================================================================


def compare_magnitude(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Сравнение |a| и |b|.

    Сначала сравниваются длины (по инварианту нормализации более короткая
    последовательность строго меньше), затем limbs от старшего к младшему.

    Returns:
        -1 если |a| < |b|, 0 если равны, 1 если |a| > |b|

    Examples:
        >>> compare_magnitude([1], [0, 1])
        -1
        >>> compare_magnitude([5, 7], [4, 7])
        1
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1
    return 0


# =============================================================================
# BOUNDARY CONVERSION
# =============================================================================


def limbs_from_int(value: int) -> Limbs:
    """
    Разложение неотрицательного int на limbs.

    Raises:
        ValueError: Если value < 0
    """
    if value < 0:
        raise ValueError(f"magnitude must be non-negative, got {value}")
    limbs: Limbs = []
    while value > 0:
        limbs.append(value & LIMB_MASK)
        value >>= LIMB_BITS
    return limbs


def limbs_to_int(limbs: Sequence[int]) -> int:
    """Сборка неотрицательного int из limbs."""
    value = 0
    for limb in reversed(limbs):
        value = (value << LIMB_BITS) | limb
    return value


def split_native(value: int, width: NativeWidth) -> Tuple[bool, Limbs]:
    """
    Конструирование (sign, limbs) из нативного целого заданной ширины.

    Для INT64 минимальное значение -2^63 не имеет положительной пары в int64,
    поэтому модуль берётся после расширения до неограниченного int.

    Raises:
        OverflowError: Если value не помещается в width
    """
    check_native_range(value, width)
    negative = value < 0
    return negative, limbs_from_int(-value if negative else value)
