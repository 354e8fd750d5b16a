"""ElbonianValidator — цепочка правил грамматики

Правила независимы и выполняются в фиксированном порядке (RULE 1 → RULE 8).
Порядок не влияет на корректность, но определяет, какая ошибка будет
показана первой при нескольких нарушениях.

Режимы:
- validate(): fail-fast, MalformedNumberError на первом нарушении
- first_failure(): первое нарушение без exception
- evaluate_all(): результаты всех правил (диагностика)
- is_valid(): bool без exception
"""

import logging
from typing import Final

from src.core.domain.numeral_table import DEFAULT_NUMERAL_TABLE, NumeralTable
from src.core.errors import MalformedNumberError
from src.validation.rules import (
    Rule01Alphabet,
    Rule02FrequencyCap,
    Rule03MinorPlacement,
    Rule04MajorOrdering,
    Rule05RedundantMajorPair,
    Rule06RedundantMinorFour,
    Rule07RedundantMinorNine,
    Rule08CanonicalForm,
    RuleResult,
)

logger = logging.getLogger(__name__)


class ElbonianValidator:
    """Цепочка правил грамматики Elbonian (RULE 1-8)."""

    def __init__(self, table: NumeralTable | None = None):
        self.table = table or DEFAULT_NUMERAL_TABLE
        self.rules = (
            Rule01Alphabet(self.table),
            Rule02FrequencyCap(self.table),
            Rule03MinorPlacement(self.table),
            Rule04MajorOrdering(self.table),
            Rule05RedundantMajorPair(self.table),
            Rule06RedundantMinorFour(self.table),
            Rule07RedundantMinorNine(self.table),
            Rule08CanonicalForm(self.table),
        )

    def evaluate_all(self, numeral: str) -> list[RuleResult]:
        """Результаты всех правил, без short-circuit."""
        return [rule.evaluate(numeral) for rule in self.rules]

    def first_failure(self, numeral: str) -> RuleResult | None:
        """Первое нарушенное правило или None."""
        for rule in self.rules:
            result = rule.evaluate(numeral)
            if not result.passed:
                return result
        return None

    def is_valid(self, numeral: str) -> bool:
        return self.first_failure(numeral) is None

    def validate(self, numeral: str) -> None:
        """
        Проверка Elbonian строки.

        Raises:
            MalformedNumberError: на первом нарушенном правиле
        """
        failure = self.first_failure(numeral)
        if failure is None:
            return

        logger.debug(f"Rejected Elbonian numeral {numeral!r}: {failure.rule_name} ({failure.block_reason})")
        raise MalformedNumberError(
            f"Malformed Elbonian number ({failure.rule_name}): {failure.details}",
            rule=failure.rule_name,
            fragment=failure.fragment,
        )


# Глобальный экземпляр для таблицы по умолчанию (правила без состояния)
DEFAULT_ELBONIAN_VALIDATOR: Final[ElbonianValidator] = ElbonianValidator()
