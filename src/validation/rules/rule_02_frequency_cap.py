"""RULE 2: Ограничение частоты

Ни одна буква (без учёта регистра) не встречается больше MAX_SYMBOL_REPEATS раз.
d и D считаются одной буквой: в "DdD" три D, в "DdDD" четыре.
"""

from collections import Counter

from src.core.domain.numeral_table import (
    DEFAULT_NUMERAL_TABLE,
    MAX_SYMBOL_REPEATS,
    NumeralTable,
)
from src.validation.rules.rule_result import RuleResult, blocked_result, pass_result


class Rule02FrequencyCap:
    """RULE 2: не больше трёх вхождений каждой буквы."""

    name = "frequency_cap"

    def __init__(self, table: NumeralTable | None = None, max_repeats: int = MAX_SYMBOL_REPEATS):
        self.table = table or DEFAULT_NUMERAL_TABLE
        self.max_repeats = max_repeats

    def evaluate(self, numeral: str) -> RuleResult:
        # Counter сохраняет порядок первого вхождения → детерминированное сообщение
        counts = Counter(ch.upper() for ch in numeral if self.table.is_symbol(ch))

        for letter, count in counts.items():
            if count > self.max_repeats:
                return blocked_result(
                    rule_name=self.name,
                    block_reason="symbol_repeated_too_often",
                    fragment=letter,
                    position=None,
                    details=(
                        f"{letter!r} occurs {count} times in {numeral!r} "
                        f"(max {self.max_repeats}, case-insensitive)"
                    ),
                )

        return pass_result(self.name)
