"""Validation — грамматика чисел Elbonian.

Восемь независимых правил (src.validation.rules) и цепочка ElbonianValidator
с fail-fast проверкой.
"""

from .validator import DEFAULT_ELBONIAN_VALIDATOR, ElbonianValidator

__all__ = [
    "DEFAULT_ELBONIAN_VALIDATOR",
    "ElbonianValidator",
]
