"""
BigIntegerSnapshot: контрактная модель представления

Immutable Pydantic модель (sign, limbs), зеркалирующая внутреннее
представление BigInteger. Валидация гарантирует, что из снапшота можно
восстановить только корректно нормализованное значение.
"""

from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.bigint.limbs import validate_limbs


class BigIntegerSnapshot(BaseModel):
    """
    Снапшот большого целого.

    Инварианты:
    - каждый limb в [0, 2^32)
    - старший limb ненулевой, ноль = []
    - ноль неотрицателен
    """

    sign: bool = Field(False, description="True для строго отрицательных")
    limbs: List[int] = Field(
        default_factory=list, description="Limbs base 2^32, младший первым"
    )

    model_config = {"frozen": True}

    @field_validator("limbs")
    @classmethod
    def validate_limb_sequence(cls, v: List[int]) -> List[int]:
        validate_limbs(v)
        return v

    @model_validator(mode="after")
    def validate_zero_sign(self) -> "BigIntegerSnapshot":
        if self.sign and not self.limbs:
            raise ValueError("zero must be non-negative")
        return self
