"""
Checked API: операции с явным результатом вместо исключений

Для вызывающего кода, который предпочитает проверять вид ошибки на месте
вызова. Каждая функция возвращает BigIntegerResult:
- ok=True: value заполнено, error=None
- ok=False: value=None, error указывает BigIntErrorKind
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from src.core.bigint.big_integer import BigInteger
from src.core.bigint.decimal_codec import DEFAULT_DECIMAL_CONFIG, DecimalCodecConfig
from src.core.bigint.errors import BigIntegerError, BigIntErrorKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BigIntegerResult:
    """Результат fallible операции."""

    ok: bool
    value: Optional[BigInteger]
    error: Optional[BigIntErrorKind]

    # Детали
    details: str = ""

    @classmethod
    def success(cls, value: BigInteger) -> "BigIntegerResult":
        return cls(ok=True, value=value, error=None)

    @classmethod
    def failure(cls, exc: BigIntegerError) -> "BigIntegerResult":
        logger.debug("operation failed: %s (%s)", exc.kind.value, exc)
        return cls(ok=False, value=None, error=exc.kind, details=str(exc))


def try_parse(
    text: str, config: DecimalCodecConfig = DEFAULT_DECIMAL_CONFIG
) -> BigIntegerResult:
    """Разбор десятичной строки; INVALID_FORMAT вместо исключения."""
    try:
        return BigIntegerResult.success(BigInteger.from_string(text, config))
    except BigIntegerError as exc:
        return BigIntegerResult.failure(exc)


def try_divide(
    dividend: Union[BigInteger, int], divisor: Union[BigInteger, int]
) -> BigIntegerResult:
    """Частное с усечением к нулю; DIVISION_BY_ZERO вместо исключения."""
    try:
        return BigIntegerResult.success(BigInteger(dividend).divide(divisor))
    except BigIntegerError as exc:
        return BigIntegerResult.failure(exc)


def try_remainder(
    dividend: Union[BigInteger, int], divisor: Union[BigInteger, int]
) -> BigIntegerResult:
    """Остаток со знаком делимого; DIVISION_BY_ZERO вместо исключения."""
    try:
        return BigIntegerResult.success(BigInteger(dividend).remainder(divisor))
    except BigIntegerError as exc:
        return BigIntegerResult.failure(exc)
