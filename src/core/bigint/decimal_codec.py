"""
Decimal codec: разбор и форматирование десятичных строк

Формат: -?[0-9]+ (только ASCII цифры, без пробелов, без '+', без группировки).

Цифры обрабатываются чанками по 9, так как 10^9 < 2^32 помещается в один
limb: value = value * 10^k + chunk, где k = длина чанка (9 для всех, кроме,
возможно, более короткого старшего чанка).

Форматирование: повторное короткое деление на 10^9, каждая итерация даёт
одну группу из 9 десятичных цифр. Группы собираются от старшей к младшей,
все кроме старшей дополняются нулями до 9 знаков.
"""

from dataclasses import dataclass
from typing import Final, List, Optional, Sequence, Tuple

from src.core.bigint.division import divmod_small
from src.core.bigint.errors import InvalidFormatError
from src.core.bigint.limbs import Limbs
from src.core.bigint.magnitude import add_magnitude, mul_magnitude_small

# =============================================================================
# CONSTANTS
# =============================================================================

# Количество десятичных цифр в одном чанке
DECIMAL_CHUNK_DIGITS: Final[int] = 9

# 10^9: основание десятичных групп
DECIMAL_CHUNK_BASE: Final[int] = 10**DECIMAL_CHUNK_DIGITS

_ASCII_DIGITS: Final[frozenset] = frozenset("0123456789")


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class DecimalCodecConfig:
    """Конфигурация разбора десятичных строк.

    max_digits: максимальное число цифр (без знака); None = без ограничения.
    Длинные строки разбираются за квадратичное время, лимит защищает от
    неконтролируемого ввода.
    """

    max_digits: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_digits is not None and self.max_digits < 1:
            raise ValueError(f"max_digits must be positive, got {self.max_digits}")


DEFAULT_DECIMAL_CONFIG: Final[DecimalCodecConfig] = DecimalCodecConfig()


# =============================================================================
# PARSE
# =============================================================================


def parse_decimal(
    text: str, config: DecimalCodecConfig = DEFAULT_DECIMAL_CONFIG
) -> Tuple[bool, Limbs]:
    """
    Разбор десятичной строки в (sign, limbs).

    Args:
        text: Строка вида -?[0-9]+
        config: Ограничения разбора

    Returns:
        (sign, limbs); "-0" даёт (False, [])

    Raises:
        InvalidFormatError: Пустая строка, одиночный '-', не-цифровой символ,
            превышение config.max_digits
        TypeError: Если text не str

    Examples:
        >>> parse_decimal("4294967296")
        (False, [0, 1])
        >>> parse_decimal("-0")
        (False, [])
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    negative = text.startswith("-")
    digits = text[1:] if negative else text
    if not digits:
        raise InvalidFormatError(f"Invalid number: {text!r}")
    if not _ASCII_DIGITS.issuperset(digits):
        raise InvalidFormatError(f"Invalid number: {text!r}")
    if config.max_digits is not None and len(digits) > config.max_digits:
        raise InvalidFormatError(
            f"Invalid number: {len(digits)} digits exceed limit {config.max_digits}"
        )

    magnitude: Limbs = []
    pos = 0
    size = len(digits) % DECIMAL_CHUNK_DIGITS or DECIMAL_CHUNK_DIGITS
    while pos < len(digits):
        chunk = digits[pos : pos + size]
        magnitude = mul_magnitude_small(magnitude, 10 ** len(chunk))
        chunk_value = int(chunk)
        if chunk_value:
            magnitude = add_magnitude(magnitude, [chunk_value])
        pos += size
        size = DECIMAL_CHUNK_DIGITS

    return negative and bool(magnitude), magnitude


# =============================================================================
# FORMAT
# =============================================================================


def format_decimal(sign: bool, limbs: Sequence[int]) -> str:
    """
    Каноническое десятичное представление.

    "0" для нуля, без ведущих нулей, один ведущий '-' для отрицательных.
    Пустые limbs считаются нулём независимо от sign.
    """
    if not limbs:
        return "0"

    groups: List[int] = []
    current: Limbs = list(limbs)
    while current:
        current, group = divmod_small(current, DECIMAL_CHUNK_BASE)
        groups.append(group)

    text = str(groups[-1]) + "".join(
        f"{group:0{DECIMAL_CHUNK_DIGITS}d}" for group in reversed(groups[:-1])
    )
    return "-" + text if sign else text
