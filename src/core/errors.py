"""
Ошибки конвертера Elbonian ↔ Arabic

Публичная таксономия состоит ровно из двух видов:
- MalformedNumberError: Elbonian строка нарушает грамматику
- ValueOutOfBoundsError: Arabic число вне представимого диапазона

Обе возникают только при создании конвертера (fail-fast).
"""

from typing import Optional


class ElbonianConversionError(Exception):
    """Базовый класс ошибок конвертера."""

    pass


class MalformedNumberError(ElbonianConversionError):
    """
    Elbonian строка не соответствует грамматике.

    Attributes:
        rule: имя нарушенного правила (например, "frequency_cap")
        fragment: подстрока, на которой сработало правило
    """

    def __init__(self, message: str, rule: str = "", fragment: Optional[str] = None):
        self.rule = rule
        self.fragment = fragment
        super().__init__(message)


class ValueOutOfBoundsError(ElbonianConversionError):
    """
    Arabic число не представимо в Elbonian.

    Attributes:
        value: исходное число
        min_value: нижняя граница (включительно)
        max_value: верхняя граница (включительно)
    """

    def __init__(self, value: int | str, min_value: int, max_value: int):
        self.value = value
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(
            f"Value {value} is out of bounds: Elbonian numbers must be "
            f"in range [{min_value}, {max_value}]"
        )
