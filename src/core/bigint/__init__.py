"""
Big integer engine

Знаковые целые произвольной точности на 32-битных limbs: арифметика,
деление Knuth Algorithm D, побитовые операции в two's complement,
десятичный codec.
"""

# Limbs & normalization
from src.core.bigint.limbs import (
    BASE,
    LIMB_BITS,
    LIMB_MASK,
    NativeWidth,
    check_native_range,
    compare_magnitude,
    limbs_from_int,
    limbs_to_int,
    normalize,
    validate_limbs,
)

# Magnitude arithmetic
from src.core.bigint.magnitude import (
    add_magnitude,
    mul_magnitude,
    mul_magnitude_small,
    sub_magnitude,
)

# Division
from src.core.bigint.division import (
    divmod_knuth,
    divmod_magnitude,
    divmod_small,
)

# Bitwise
from src.core.bigint.bitwise import (
    BitOperation,
    bitwise_operation,
    shift_left,
    shift_right,
)

# Decimal codec
from src.core.bigint.decimal_codec import (
    DECIMAL_CHUNK_BASE,
    DECIMAL_CHUNK_DIGITS,
    DEFAULT_DECIMAL_CONFIG,
    DecimalCodecConfig,
    format_decimal,
    parse_decimal,
)

# Errors
from src.core.bigint.errors import (
    BigIntErrorKind,
    BigIntegerError,
    DivisionByZeroError,
    InvalidFormatError,
)

# Value type
from src.core.bigint.big_integer import BigInteger, to_string
from src.core.bigint.checked import (
    BigIntegerResult,
    try_divide,
    try_parse,
    try_remainder,
)
from src.core.bigint.snapshot import BigIntegerSnapshot

__all__ = [
    # Limbs: Constants
    "BASE",
    "LIMB_BITS",
    "LIMB_MASK",
    # Limbs: Types
    "NativeWidth",
    # Limbs: Functions
    "check_native_range",
    "compare_magnitude",
    "limbs_from_int",
    "limbs_to_int",
    "normalize",
    "validate_limbs",
    # Magnitude arithmetic
    "add_magnitude",
    "mul_magnitude",
    "mul_magnitude_small",
    "sub_magnitude",
    # Division
    "divmod_knuth",
    "divmod_magnitude",
    "divmod_small",
    # Bitwise
    "BitOperation",
    "bitwise_operation",
    "shift_left",
    "shift_right",
    # Decimal codec
    "DECIMAL_CHUNK_BASE",
    "DECIMAL_CHUNK_DIGITS",
    "DEFAULT_DECIMAL_CONFIG",
    "DecimalCodecConfig",
    "format_decimal",
    "parse_decimal",
    # Errors
    "BigIntErrorKind",
    "BigIntegerError",
    "DivisionByZeroError",
    "InvalidFormatError",
    # Value type
    "BigInteger",
    "BigIntegerResult",
    "BigIntegerSnapshot",
    "to_string",
    "try_divide",
    "try_parse",
    "try_remainder",
]
