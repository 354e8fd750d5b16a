"""RULE 8: Каноническая форма

Финальная проверка после RULE 1-7. Сумма значений символов должна лежать
в [ELBONIAN_MIN_VALUE, ELBONIAN_MAX_VALUE], а сама строка совпадать с
каноническим кодированием этой суммы:

    XXXVV                  → 40   → lL                     ✗ non_canonical
    MMMDDD                 → 4500                          ✗ value_out_of_range
    MMMDDCCCLLXXXVVIII     → 4443 → MMMDDCCCLLXXXVVIII     ✓

Строки с символами вне алфавита (и пустая строка) пропускаются: это RULE 1.
"""

from src.core.domain.numeral_table import (
    DEFAULT_NUMERAL_TABLE,
    ELBONIAN_MAX_VALUE,
    ELBONIAN_MIN_VALUE,
    NumeralTable,
)
from src.core.encoding import encode_canonical
from src.validation.rules.rule_result import RuleResult, blocked_result, pass_result


class Rule08CanonicalForm:
    """RULE 8: строка равна каноническому кодированию своего значения."""

    name = "canonical_form"

    def __init__(self, table: NumeralTable | None = None):
        self.table = table or DEFAULT_NUMERAL_TABLE

    def evaluate(self, numeral: str) -> RuleResult:
        if not numeral or not all(self.table.is_symbol(ch) for ch in numeral):
            return pass_result(self.name, details="SKIP: not in alphabet")

        value = sum(self.table.magnitude_of(ch) for ch in numeral)

        if not ELBONIAN_MIN_VALUE <= value <= ELBONIAN_MAX_VALUE:
            return blocked_result(
                rule_name=self.name,
                block_reason="value_out_of_range",
                fragment=numeral,
                position=0,
                details=(
                    f"{numeral!r} sums to {value}, outside "
                    f"[{ELBONIAN_MIN_VALUE}, {ELBONIAN_MAX_VALUE}]"
                ),
            )

        canonical = encode_canonical(value, self.table)
        if canonical != numeral:
            return blocked_result(
                rule_name=self.name,
                block_reason="non_canonical",
                fragment=numeral,
                position=0,
                details=f"{numeral!r} ({value}) is not canonical; write {canonical!r}",
            )

        return pass_result(self.name)
