"""
Domain models and value objects.

Contains the numeral table (symbol ↔ magnitude) and the parsed input number.
"""

from src.core.domain.number import (
    ARABIC_PATTERN,
    NumberForm,
    ParsedNumber,
    is_arabic,
    parse_number,
)
from src.core.domain.numeral_table import (
    DEFAULT_NUMERAL_TABLE,
    ELBONIAN_MAX_VALUE,
    ELBONIAN_MIN_VALUE,
    MAX_SYMBOL_REPEATS,
    SYMBOL_MAGNITUDES,
    NumeralTable,
    NumeralTableInvariantError,
    UnrecognizedSymbolError,
)

__all__ = [
    # Numeral table
    "SYMBOL_MAGNITUDES",
    "MAX_SYMBOL_REPEATS",
    "ELBONIAN_MIN_VALUE",
    "ELBONIAN_MAX_VALUE",
    "DEFAULT_NUMERAL_TABLE",
    "NumeralTable",
    "NumeralTableInvariantError",
    "UnrecognizedSymbolError",
    # Number model
    "ARABIC_PATTERN",
    "NumberForm",
    "ParsedNumber",
    "is_arabic",
    "parse_number",
]
