"""
Number — Модель входного числа и классификатор формы

Вход конвертера — одна строка. После удаления внешних пробелов она либо:
- ARABIC: целиком парсится как десятичное целое (опционально со знаком)
- ELBONIAN: всё остальное (проверяется грамматикой в src.validation)

Immutable Pydantic модель, распарсенное целое кэшируется для ARABIC.
"""

import re
from enum import Enum
from typing import Final, Optional

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# CONSTANTS
# =============================================================================

# Только ASCII цифры: int() принимает "1_000" и не-ASCII цифры, нам это не нужно
ARABIC_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")


# =============================================================================
# ENUMS
# =============================================================================


class NumberForm(str, Enum):
    """Форма записи входного числа"""

    ARABIC = "ARABIC"
    ELBONIAN = "ELBONIAN"


# =============================================================================
# MODELS
# =============================================================================


class ParsedNumber(BaseModel):
    """
    Классифицированное входное число.

    Содержит:
    - text: вход без внешних пробелов
    - form: ARABIC или ELBONIAN
    - arabic_value: распарсенное целое (только для ARABIC)
    """

    text: str = Field(..., description="Вход без ведущих/хвостовых пробелов")
    form: NumberForm = Field(..., description="Форма записи")
    arabic_value: Optional[int] = Field(None, description="Целое для ARABIC формы")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_arabic_value(self) -> "ParsedNumber":
        """arabic_value задан тогда и только тогда, когда form == ARABIC"""
        if self.form == NumberForm.ARABIC and self.arabic_value is None:
            raise ValueError("arabic_value is required for ARABIC form")
        if self.form == NumberForm.ELBONIAN and self.arabic_value is not None:
            raise ValueError("arabic_value must be None for ELBONIAN form")
        return self

    @property
    def is_arabic(self) -> bool:
        return self.form == NumberForm.ARABIC


# =============================================================================
# CLASSIFIER
# =============================================================================


def is_arabic(text: str) -> bool:
    """
    Проверка, что строка целиком — десятичное целое.

    Examples:
        >>> is_arabic(" 42 ")
        True
        >>> is_arabic("-7")
        True
        >>> is_arabic("4 2")
        False
        >>> is_arabic("XLII")
        False
    """
    return ARABIC_PATTERN.fullmatch(text.strip()) is not None


def parse_number(raw: str) -> ParsedNumber:
    """
    Удаление внешних пробелов и классификация входа.

    Args:
        raw: исходная строка

    Returns:
        ParsedNumber с кэшированным целым для ARABIC формы
    """
    text = raw.strip()

    if is_arabic(text):
        return ParsedNumber(text=text, form=NumberForm.ARABIC, arabic_value=int(text))

    return ParsedNumber(text=text, form=NumberForm.ELBONIAN)
