"""Converter — преобразование Elbonian ↔ Arabic.

- ElbonianArabicConverter: классификация, валидация, конверсия одного числа
- encode_canonical: каноническое кодирование Arabic → Elbonian
- ConverterConfig: границы Arabic входа
"""

from .config import ConverterConfig
from .elbonian_arabic_converter import (
    ElbonianArabicConverter,
    arabic_to_elbonian,
    elbonian_to_arabic,
)
from src.core.encoding import (
    FOUR_PATTERN_LIMIT,
    DenominationPool,
    encode_canonical,
)

__all__ = [
    "ConverterConfig",
    "ElbonianArabicConverter",
    "arabic_to_elbonian",
    "elbonian_to_arabic",
    "FOUR_PATTERN_LIMIT",
    "DenominationPool",
    "encode_canonical",
]
