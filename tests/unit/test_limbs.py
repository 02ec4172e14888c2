"""
Тесты для модуля Limbs

Проверяет:
1. Нормализацию (удаление старших нулевых limbs)
2. Сравнение модулей
3. Конверсию int <-> limbs
4. Таблицу нативных ширин и проверку диапазона
5. Валидацию инвариантов представления
"""

import pytest

from src.core.bigint.limbs import (
    BASE,
    LIMB_BITS,
    LIMB_MASK,
    NativeWidth,
    check_native_range,
    compare_magnitude,
    is_zero_magnitude,
    limbs_from_int,
    limbs_to_int,
    normalize,
    split_native,
    validate_limbs,
)

# =============================================================================
# ТЕСТЫ КОНСТАНТ
# =============================================================================


class TestConstants:
    """Геометрия limb"""

    def test_limb_geometry(self) -> None:
        """32-битные limbs, основание 2^32"""
        assert LIMB_BITS == 32
        assert BASE == 2**32
        assert LIMB_MASK == 0xFFFFFFFF


# =============================================================================
# ТЕСТЫ НОРМАЛИЗАЦИИ
# =============================================================================


class TestNormalize:
    """Тесты для normalize"""

    def test_strips_leading_zeros(self) -> None:
        """Старшие нули удаляются"""
        assert normalize([1, 2, 0, 0]) == [1, 2]

    def test_zero_becomes_empty(self) -> None:
        """Ноль представлен пустым списком"""
        assert normalize([0, 0, 0]) == []
        assert normalize([]) == []

    def test_inner_zeros_kept(self) -> None:
        """Внутренние нули сохраняются"""
        assert normalize([0, 0, 5]) == [0, 0, 5]

    def test_in_place(self) -> None:
        """Нормализация модифицирует тот же список"""
        limbs = [7, 0]
        assert normalize(limbs) is limbs
        assert limbs == [7]

    def test_is_zero_magnitude(self) -> None:
        """Пустой список означает ноль"""
        assert is_zero_magnitude([])
        assert not is_zero_magnitude([1])


# =============================================================================
# ТЕСТЫ СРАВНЕНИЯ
# =============================================================================


class TestCompareMagnitude:
    """Тесты для compare_magnitude"""

    def test_shorter_is_smaller(self) -> None:
        """Более короткая последовательность меньше"""
        assert compare_magnitude([LIMB_MASK], [0, 1]) == -1
        assert compare_magnitude([0, 1], [LIMB_MASK]) == 1

    def test_equal(self) -> None:
        """Равные последовательности"""
        assert compare_magnitude([3, 4], [3, 4]) == 0
        assert compare_magnitude([], []) == 0

    def test_most_significant_first(self) -> None:
        """Сравнение начинается со старшего limb"""
        assert compare_magnitude([9, 1], [0, 2]) == -1
        assert compare_magnitude([0, 2], [9, 1]) == 1

    def test_low_limb_decides(self) -> None:
        """При равных старших limbs решает младший"""
        assert compare_magnitude([4, 7], [5, 7]) == -1


# =============================================================================
# ТЕСТЫ КОНВЕРСИИ
# =============================================================================


class TestIntConversion:
    """Тесты для limbs_from_int / limbs_to_int"""

    def test_zero(self) -> None:
        """Ноль"""
        assert limbs_from_int(0) == []
        assert limbs_to_int([]) == 0

    def test_single_limb(self) -> None:
        """Значение в пределах одного limb"""
        assert limbs_from_int(LIMB_MASK) == [LIMB_MASK]

    def test_limb_boundary(self) -> None:
        """2^32 требует двух limbs"""
        assert limbs_from_int(2**32) == [0, 1]
        assert limbs_to_int([0, 1]) == 2**32

    def test_large_value(self) -> None:
        """Многолимбовое значение"""
        value = 3**100
        limbs = limbs_from_int(value)
        assert limbs[-1] != 0
        assert limbs_to_int(limbs) == value

    def test_negative_raises(self) -> None:
        """Отрицательный модуль невалиден"""
        with pytest.raises(ValueError, match="non-negative"):
            limbs_from_int(-1)


# =============================================================================
# ТЕСТЫ НАТИВНЫХ ШИРИН
# =============================================================================


class TestNativeWidth:
    """Тесты для NativeWidth и split_native"""

    @pytest.mark.parametrize(
        "width,lo,hi",
        [
            (NativeWidth.INT16, -(2**15), 2**15 - 1),
            (NativeWidth.UINT16, 0, 2**16 - 1),
            (NativeWidth.INT32, -(2**31), 2**31 - 1),
            (NativeWidth.UINT32, 0, 2**32 - 1),
            (NativeWidth.INT64, -(2**63), 2**63 - 1),
            (NativeWidth.UINT64, 0, 2**64 - 1),
        ],
    )
    def test_ranges(self, width: NativeWidth, lo: int, hi: int) -> None:
        """Диапазоны нативных типов"""
        assert width.min_value == lo
        assert width.max_value == hi
        check_native_range(lo, width)
        check_native_range(hi, width)

    def test_out_of_range_raises(self) -> None:
        """Значение вне диапазона вызывает OverflowError"""
        with pytest.raises(OverflowError):
            check_native_range(2**31, NativeWidth.INT32)
        with pytest.raises(OverflowError):
            check_native_range(-1, NativeWidth.UINT64)

    def test_int64_min(self) -> None:
        """Минимальный int64 не может быть инвертирован в int64"""
        sign, limbs = split_native(-(2**63), NativeWidth.INT64)
        assert sign is True
        assert limbs == [0, 0x80000000]

    def test_uint64_max(self) -> None:
        """Максимальный uint64 занимает два полных limb"""
        assert split_native(2**64 - 1, NativeWidth.UINT64) == (False, [LIMB_MASK, LIMB_MASK])


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidateLimbs:
    """Тесты для validate_limbs"""

    def test_valid(self) -> None:
        """Корректные последовательности проходят"""
        validate_limbs([])
        validate_limbs([0, LIMB_MASK])

    def test_leading_zero_rejected(self) -> None:
        """Старший ноль запрещён"""
        with pytest.raises(ValueError, match="most significant"):
            validate_limbs([1, 0])

    def test_out_of_range_rejected(self) -> None:
        """Limb вне [0, 2^32) запрещён"""
        with pytest.raises(ValueError, match="out of range"):
            validate_limbs([BASE])
        with pytest.raises(ValueError, match="out of range"):
            validate_limbs([-1])
