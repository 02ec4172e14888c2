"""
Ошибки движка больших целых

Виды ошибок:
- INVALID_FORMAT: некорректная десятичная строка при конструировании
- DIVISION_BY_ZERO: делитель с нулевым модулем для // и %

Исчерпание памяти не моделируется: MemoryError пропагирует к вызывающему
коду без перехвата.
"""

from enum import Enum


class BigIntErrorKind(str, Enum):
    """Вид ошибки, общий для исключений и result-style API."""

    INVALID_FORMAT = "INVALID_FORMAT"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"


class BigIntegerError(Exception):
    """Базовое исключение движка. Атрибут kind указывает вид ошибки."""

    kind: BigIntErrorKind


class InvalidFormatError(BigIntegerError, ValueError):
    """
    Некорректная десятичная строка.

    Пустая строка, одиночный '-', любой символ кроме ASCII цифр после
    необязательного ведущего '-', превышение лимита цифр.
    """

    kind = BigIntErrorKind.INVALID_FORMAT


class DivisionByZeroError(BigIntegerError, ZeroDivisionError):
    """Деление или взятие остатка по нулевому делителю."""

    kind = BigIntErrorKind.DIVISION_BY_ZERO

    def __init__(self, message: str = "Division by zero") -> None:
        super().__init__(message)
