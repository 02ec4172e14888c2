"""
Тесты для модуля Bitwise

Проверяет:
1. AND / OR / XOR в семантике two's complement для всех комбинаций знаков
2. Инверсию ~x == -x - 1
3. Сдвиг влево как умножение на 2^n
4. Сдвиг вправо как floor-деление на 2^n (не усечение)
"""

import pytest

from src.core.bigint.bitwise import (
    BitOperation,
    bitwise_operation,
    invert,
    shift_left,
    shift_right,
)
from src.core.bigint.limbs import limbs_from_int, limbs_to_int


# =============================================================================
# HELPERS
# =============================================================================


def split(value: int):
    """int → (sign, limbs)."""
    return value < 0, limbs_from_int(abs(value))


def join(parts) -> int:
    """(sign, limbs) → int."""
    sign, limbs = parts
    magnitude = limbs_to_int(limbs)
    return -magnitude if sign else magnitude


def apply(a: int, b: int, op: BitOperation) -> int:
    return join(bitwise_operation(*split(a), *split(b), op))


SAMPLES = [0, 1, -1, 5, -5, 2**32 - 1, -(2**32), 2**32, -(2**64) + 3, 2**95 + 12345, -(3**60)]


# =============================================================================
# ТЕСТЫ BIT OPERATION
# =============================================================================


class TestBitOperation:
    """Тесты для BitOperation.apply"""

    def test_words(self) -> None:
        """Операции над словами"""
        assert BitOperation.AND.apply(0b1100, 0b1010) == 0b1000
        assert BitOperation.OR.apply(0b1100, 0b1010) == 0b1110
        assert BitOperation.XOR.apply(0b1100, 0b1010) == 0b0110

    def test_sign_bits(self) -> None:
        """Операции над знаковыми битами"""
        assert BitOperation.AND.apply(1, 0) == 0
        assert BitOperation.OR.apply(1, 0) == 1
        assert BitOperation.XOR.apply(1, 1) == 0


# =============================================================================
# ТЕСТЫ TWO'S COMPLEMENT
# =============================================================================


class TestBitwiseOperation:
    """Тесты для bitwise_operation"""

    def test_minus_one_and(self) -> None:
        """(-1) & 5 == 5"""
        assert apply(-1, 5, BitOperation.AND) == 5

    def test_minus_one_xor_zero(self) -> None:
        """(-1) ^ 0 == -1"""
        assert apply(-1, 0, BitOperation.XOR) == -1

    def test_minus_one_or(self) -> None:
        """(-1) | x == -1"""
        for x in SAMPLES:
            assert apply(-1, x, BitOperation.OR) == -1

    def test_negative_and_negative(self) -> None:
        """-4 & -6 == -8"""
        assert apply(-4, -6, BitOperation.AND) == -8

    def test_negative_and_positive_beyond_length(self) -> None:
        """Знаковое расширение отрицательного операнда"""
        assert apply(-(2**32), 2**64 + 7, BitOperation.AND) == (-(2**32)) & (2**64 + 7)

    @pytest.mark.parametrize("op", list(BitOperation))
    def test_against_reference(self, op: BitOperation) -> None:
        """Сверка со встроенной семантикой int для всех пар знаков"""
        reference = {
            BitOperation.AND: lambda x, y: x & y,
            BitOperation.OR: lambda x, y: x | y,
            BitOperation.XOR: lambda x, y: x ^ y,
        }[op]
        for a in SAMPLES:
            for b in SAMPLES:
                assert apply(a, b, op) == reference(a, b), (a, b)

    def test_zero_result_non_negative(self) -> None:
        """Нулевой результат всегда с sign=False"""
        assert bitwise_operation(*split(-5), *split(-5), BitOperation.XOR) == (False, [])


class TestInvert:
    """Тесты для invert"""

    @pytest.mark.parametrize("value", SAMPLES)
    def test_invert(self, value: int) -> None:
        """~x == -x - 1"""
        assert join(invert(*split(value))) == ~value

    def test_double_invert(self) -> None:
        """~~x == x"""
        for value in SAMPLES:
            assert join(invert(*invert(*split(value)))) == value


# =============================================================================
# ТЕСТЫ СДВИГОВ
# =============================================================================


class TestShiftLeft:
    """Тесты для shift_left"""

    @pytest.mark.parametrize("count", [0, 1, 31, 32, 33, 64, 100])
    def test_multiplies(self, count: int) -> None:
        """x << n == x * 2^n для обоих знаков"""
        for value in SAMPLES:
            assert join(shift_left(*split(value), count)) == value * 2**count

    def test_zero_stays_empty(self) -> None:
        """0 << n не создаёт нулевых limbs"""
        assert shift_left(False, [], 64) == (False, [])

    def test_negative_count_raises(self) -> None:
        """Отрицательный сдвиг"""
        with pytest.raises(ValueError, match="negative shift count"):
            shift_left(False, [1], -1)


class TestShiftRight:
    """Тесты для shift_right"""

    @pytest.mark.parametrize("count", [0, 1, 5, 31, 32, 33, 64, 200])
    def test_floor_division(self, count: int) -> None:
        """x >> n == floor(x / 2^n)"""
        for value in SAMPLES:
            assert join(shift_right(*split(value), count)) == value >> count

    def test_negative_exact(self) -> None:
        """-4 >> 1 == -2 (без лишнего декремента)"""
        assert join(shift_right(*split(-4), 1)) == -2

    def test_negative_inexact(self) -> None:
        """-7 >> 1 == -4 (округление к минус бесконечности)"""
        assert join(shift_right(*split(-7), 1)) == -4

    def test_negative_to_minus_one(self) -> None:
        """Отрицательное значение, сдвинутое за пределы, даёт -1"""
        assert join(shift_right(*split(-5), 100)) == -1

    def test_negative_count_raises(self) -> None:
        """Отрицательный сдвиг"""
        with pytest.raises(ValueError, match="negative shift count"):
            shift_right(False, [1], -3)
