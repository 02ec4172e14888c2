"""
BigInteger: знаковое целое произвольной точности

Представление sign-magnitude:
- sign: True для строго отрицательных значений
- limbs: нормализованная little-endian последовательность base 2^32

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый экземпляр эксклюзивно владеет своим списком limbs (нет aliasing)
2. Если limbs пусты, sign принудительно False
3. Бинарные операторы возвращают новое значение; составные (+=, //=, <<= ...)
   модифицируют левый операнд и возвращают его
4. Деление по нулю поднимает DivisionByZeroError до любой модификации
5. // и % усекают к нулю (как decimal.Decimal): остаток имеет знак делимого

Экземпляры изменяемы через составные операторы, поэтому unhashable.
"""

from typing import Optional, TextIO, Tuple, Union

from src.core.bigint.bitwise import (
    BitOperation,
    bitwise_operation,
    invert,
    shift_left,
    shift_right,
)
from src.core.bigint.decimal_codec import (
    DEFAULT_DECIMAL_CONFIG,
    DecimalCodecConfig,
    format_decimal,
    parse_decimal,
)
from src.core.bigint.division import divmod_magnitude
from src.core.bigint.limbs import (
    Limbs,
    NativeWidth,
    compare_magnitude,
    limbs_from_int,
    limbs_to_int,
    split_native,
)
from src.core.bigint.magnitude import add_magnitude, mul_magnitude, sub_magnitude
from src.core.bigint.snapshot import BigIntegerSnapshot

Operand = Union["BigInteger", int]

_ONE: Tuple[int, ...] = (1,)


# =============================================================================
# SIGNED PRIMITIVES
# =============================================================================


def _signed_add(
    a_sign: bool, a: Limbs, b_sign: bool, b: Limbs
) -> Tuple[bool, Limbs]:
    if a_sign == b_sign:
        return a_sign, add_magnitude(a, b)
    if compare_magnitude(a, b) < 0:
        return b_sign, sub_magnitude(b, a)
    return a_sign, sub_magnitude(a, b)


def _signed_sub(
    a_sign: bool, a: Limbs, b_sign: bool, b: Limbs
) -> Tuple[bool, Limbs]:
    if a_sign != b_sign:
        return a_sign, add_magnitude(a, b)
    # Одинаковые знаки: a >= b ⇔ |a| >= |b| для положительных
    if compare_magnitude(a, b) >= 0:
        return a_sign, sub_magnitude(a, b)
    return not a_sign, sub_magnitude(b, a)


def _signed_divmod(
    a_sign: bool, a: Limbs, b_sign: bool, b: Limbs
) -> Tuple[Tuple[bool, Limbs], Tuple[bool, Limbs]]:
    quotient, remainder = divmod_magnitude(a, b)
    return (a_sign != b_sign, quotient), (a_sign, remainder)


# =============================================================================
# BIG INTEGER
# =============================================================================


class BigInteger:
    """
    Целое произвольной точности на 32-битных limbs.

    Конструирование:
        BigInteger()                      ноль
        BigInteger(12345)                 из Python int
        BigInteger("-987654321987654321") из десятичной строки
        BigInteger(other)                 копия
        BigInteger.from_native(v, NativeWidth.INT64)

    Examples:
        >>> str(BigInteger("123456789123456789") * 2)
        '246913578246913578'
        >>> BigInteger(-7) // 2, BigInteger(-7) % 2
        (BigInteger('-3'), BigInteger('-1'))
    """

    __slots__ = ("_sign", "_limbs")

    def __init__(self, value: Union["BigInteger", int, str] = 0) -> None:
        if isinstance(value, BigInteger):
            self._assign(value._sign, list(value._limbs))
        elif isinstance(value, bool):
            raise TypeError("bool is not a valid BigInteger source")
        elif isinstance(value, int):
            negative = value < 0
            self._assign(negative, limbs_from_int(-value if negative else value))
        elif isinstance(value, str):
            self._assign(*parse_decimal(value))
        else:
            raise TypeError(
                f"cannot construct BigInteger from {type(value).__name__}"
            )

    # -------------------------------------------------------------------------
    # Alternative constructors
    # -------------------------------------------------------------------------

    @classmethod
    def _from_parts(cls, sign: bool, limbs: Limbs) -> "BigInteger":
        result = cls.__new__(cls)
        result._assign(sign, limbs)
        return result

    @classmethod
    def from_native(cls, value: int, width: NativeWidth) -> "BigInteger":
        """
        Конструирование из нативного целого заданной ширины.

        Raises:
            OverflowError: Если value не помещается в width
        """
        return cls._from_parts(*split_native(value, width))

    @classmethod
    def from_string(
        cls, text: str, config: DecimalCodecConfig = DEFAULT_DECIMAL_CONFIG
    ) -> "BigInteger":
        """
        Разбор десятичной строки с явной конфигурацией.

        Raises:
            InvalidFormatError: Если строка не соответствует -?[0-9]+
        """
        return cls._from_parts(*parse_decimal(text, config))

    @classmethod
    def from_snapshot(cls, snapshot: BigIntegerSnapshot) -> "BigInteger":
        return cls._from_parts(snapshot.sign, list(snapshot.limbs))

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    def _assign(self, sign: bool, limbs: Limbs) -> "BigInteger":
        self._limbs = limbs
        self._sign = bool(sign) and bool(limbs)
        return self

    @property
    def sign(self) -> bool:
        """True для строго отрицательных значений."""
        return self._sign

    @property
    def limbs(self) -> Tuple[int, ...]:
        """Копия limbs (младший первым)."""
        return tuple(self._limbs)

    def is_zero(self) -> bool:
        return not self._limbs

    def copy(self) -> "BigInteger":
        return BigInteger(self)

    def to_snapshot(self) -> BigIntegerSnapshot:
        return BigIntegerSnapshot(sign=self._sign, limbs=list(self._limbs))

    __hash__ = None  # type: ignore[assignment]

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        return format_decimal(self._sign, self._limbs)

    def write_to(self, stream: TextIO) -> TextIO:
        """Запись десятичного представления в поток; возвращает поток."""
        stream.write(self.to_string())
        return stream

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInteger('{self.to_string()}')"

    def __int__(self) -> int:
        magnitude = limbs_to_int(self._limbs)
        return -magnitude if self._sign else magnitude

    def __bool__(self) -> bool:
        return bool(self._limbs)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def compare(self, other: Operand) -> int:
        """
        Полный порядок: -1 если self < other, 0 если равны, 1 если больше.

        Разные знаки разрешаются сразу (отрицательное меньше), одинаковые
        через сравнение модулей, инвертированное для отрицательных.
        """
        rhs = _coerce(other)
        if rhs is None:
            raise TypeError(f"cannot compare BigInteger with {type(other).__name__}")
        if not self._limbs and not rhs._limbs:
            return 0
        if self._sign != rhs._sign:
            return -1 if self._sign else 1
        result = compare_magnitude(self._limbs, rhs._limbs)
        return -result if self._sign else result

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        if not self._limbs and not rhs._limbs:
            return True
        return self._sign == rhs._sign and self._limbs == rhs._limbs

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: Operand) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) < 0

    def __le__(self, other: Operand) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) <= 0

    def __gt__(self, other: Operand) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) > 0

    def __ge__(self, other: Operand) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) >= 0

    # -------------------------------------------------------------------------
    # Unary
    # -------------------------------------------------------------------------

    def __pos__(self) -> "BigInteger":
        return self.copy()

    def __neg__(self) -> "BigInteger":
        return BigInteger._from_parts(not self._sign, list(self._limbs))

    def __abs__(self) -> "BigInteger":
        return BigInteger._from_parts(False, list(self._limbs))

    def __invert__(self) -> "BigInteger":
        return BigInteger._from_parts(*invert(self._sign, self._limbs))

    def increment(self) -> "BigInteger":
        """Префиксный ++: self += 1, возвращает self."""
        return self._assign(*_signed_add(self._sign, self._limbs, False, list(_ONE)))

    def decrement(self) -> "BigInteger":
        """Префиксный --: self -= 1, возвращает self."""
        return self._assign(*_signed_sub(self._sign, self._limbs, False, list(_ONE)))

    # -------------------------------------------------------------------------
    # Add / Subtract
    # -------------------------------------------------------------------------

    def __iadd__(self, other: Operand) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._assign(*_signed_add(self._sign, self._limbs, rhs._sign, rhs._limbs))

    def __add__(self, other: Operand) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return BigInteger._from_parts(
            *_signed_add(self._sign, self._limbs, rhs._sign, rhs._limbs)
        )

    def __radd__(self, other: int) -> "BigInteger":
        return self.__add__(other)

    def __isub__(self, other: Operand) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._assign(*_signed_sub(self._sign, self._limbs, rhs._sign, rhs._limbs))

    def __sub__(self, other: Operand) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return BigInteger._from_parts(
            *_signed_sub(self._sign, self._limbs, rhs._sign, rhs._limbs)
        )

    def __rsub__(self, other: int) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__sub__(self)

    # -------------------------------------------------------------------------
    # Multiply
    # -------------------------------------------------------------------------

    def __imul__(self, other: Operand) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._assign(self._sign != rhs._sign, mul_magnitude(self._limbs, rhs._limbs))

    def __mul__(self, other: Operand) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return BigInteger._from_parts(
            self._sign != rhs._sign, mul_magnitude(self._limbs, rhs._limbs)
        )

    def __rmul__(self, other: int) -> "BigInteger":
        return self.__mul__(other)

    # -------------------------------------------------------------------------
    # Divide (truncating toward zero)
    # -------------------------------------------------------------------------

    def divmod(self, other: Operand) -> Tuple["BigInteger", "BigInteger"]:
        """
        Частное и остаток с усечением к нулю.

        Raises:
            DivisionByZeroError: Если other == 0
        """
        rhs = _require(other)
        quotient, remainder = _signed_divmod(
            self._sign, self._limbs, rhs._sign, rhs._limbs
        )
        return BigInteger._from_parts(*quotient), BigInteger._from_parts(*remainder)

    def divide(self, other: Operand) -> "BigInteger":
        return self.divmod(other)[0]

    def remainder(self, other: Operand) -> "BigInteger":
        return self.divmod(other)[1]

    def __floordiv__(self, other: Operand) -> "BigInteger":
        if _coerce(other) is None:
            return NotImplemented
        return self.divide(other)

    def __rfloordiv__(self, other: int) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.divide(self)

    def __ifloordiv__(self, other: Operand) -> "BigInteger":
        if _coerce(other) is None:
            return NotImplemented
        quotient = self.divide(other)
        return self._assign(quotient._sign, quotient._limbs)

    def __mod__(self, other: Operand) -> "BigInteger":
        if _coerce(other) is None:
            return NotImplemented
        return self.remainder(other)

    def __rmod__(self, other: int) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.remainder(self)

    def __imod__(self, other: Operand) -> "BigInteger":
        if _coerce(other) is None:
            return NotImplemented
        rest = self.remainder(other)
        return self._assign(rest._sign, rest._limbs)

    def __divmod__(self, other: Operand) -> Tuple["BigInteger", "BigInteger"]:
        if _coerce(other) is None:
            return NotImplemented
        return self.divmod(other)

    def __rdivmod__(self, other: int) -> Tuple["BigInteger", "BigInteger"]:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.divmod(self)

    # -------------------------------------------------------------------------
    # Bitwise
    # -------------------------------------------------------------------------

    def _bitwise(self, other: Operand, op: BitOperation) -> Optional[Tuple[bool, Limbs]]:
        rhs = _coerce(other)
        if rhs is None:
            return None
        return bitwise_operation(self._sign, self._limbs, rhs._sign, rhs._limbs, op)

    def __and__(self, other: Operand) -> "BigInteger":
        parts = self._bitwise(other, BitOperation.AND)
        return NotImplemented if parts is None else BigInteger._from_parts(*parts)

    def __or__(self, other: Operand) -> "BigInteger":
        parts = self._bitwise(other, BitOperation.OR)
        return NotImplemented if parts is None else BigInteger._from_parts(*parts)

    def __xor__(self, other: Operand) -> "BigInteger":
        parts = self._bitwise(other, BitOperation.XOR)
        return NotImplemented if parts is None else BigInteger._from_parts(*parts)

    __rand__ = __and__
    __ror__ = __or__
    __rxor__ = __xor__

    def __iand__(self, other: Operand) -> "BigInteger":
        parts = self._bitwise(other, BitOperation.AND)
        return NotImplemented if parts is None else self._assign(*parts)

    def __ior__(self, other: Operand) -> "BigInteger":
        parts = self._bitwise(other, BitOperation.OR)
        return NotImplemented if parts is None else self._assign(*parts)

    def __ixor__(self, other: Operand) -> "BigInteger":
        parts = self._bitwise(other, BitOperation.XOR)
        return NotImplemented if parts is None else self._assign(*parts)

    # -------------------------------------------------------------------------
    # Shifts
    # -------------------------------------------------------------------------

    def __lshift__(self, count: int) -> "BigInteger":
        return BigInteger._from_parts(*shift_left(self._sign, self._limbs, _shift_count(count)))

    def __rshift__(self, count: int) -> "BigInteger":
        return BigInteger._from_parts(*shift_right(self._sign, self._limbs, _shift_count(count)))

    def __ilshift__(self, count: int) -> "BigInteger":
        return self._assign(*shift_left(self._sign, self._limbs, _shift_count(count)))

    def __irshift__(self, count: int) -> "BigInteger":
        return self._assign(*shift_right(self._sign, self._limbs, _shift_count(count)))


# =============================================================================
# HELPERS
# =============================================================================


def _coerce(value: object) -> Optional[BigInteger]:
    """BigInteger или int (но не bool) → BigInteger; иначе None."""
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInteger(value)
    return None


def _require(value: object) -> BigInteger:
    operand = _coerce(value)
    if operand is None:
        raise TypeError(f"unsupported operand type: {type(value).__name__}")
    return operand


def _shift_count(count: object) -> int:
    if isinstance(count, BigInteger):
        return int(count)
    if isinstance(count, int) and not isinstance(count, bool):
        return count
    raise TypeError(f"shift count must be int, got {type(count).__name__}")


def to_string(value: BigInteger) -> str:
    """Каноническое десятичное представление value."""
    return value.to_string()
