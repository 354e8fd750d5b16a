"""RULE 1: Алфавит

Каждый символ строки должен быть одним из десяти символов таблицы
(регистр значим: D и d — разные символы). Пустая строка не является числом.

Внутренние пробелы сюда тоже попадают: "X X" не Arabic и не Elbonian.
"""

from src.core.domain.numeral_table import DEFAULT_NUMERAL_TABLE, NumeralTable
from src.validation.rules.rule_result import RuleResult, blocked_result, pass_result


class Rule01Alphabet:
    """RULE 1: только символы алфавита, строка не пустая."""

    name = "alphabet"

    def __init__(self, table: NumeralTable | None = None):
        self.table = table or DEFAULT_NUMERAL_TABLE

    def evaluate(self, numeral: str) -> RuleResult:
        if not numeral:
            return blocked_result(
                rule_name=self.name,
                block_reason="empty_numeral",
                fragment="",
                position=None,
                details="Empty string is not an Elbonian number",
            )

        for position, ch in enumerate(numeral):
            if not self.table.is_symbol(ch):
                return blocked_result(
                    rule_name=self.name,
                    block_reason="unknown_symbol",
                    fragment=ch,
                    position=position,
                    details=(
                        f"Unknown symbol {ch!r} at position {position} in {numeral!r}; "
                        f"allowed symbols: {''.join(self.table.symbols)}"
                    ),
                )

        return pass_result(self.name)
