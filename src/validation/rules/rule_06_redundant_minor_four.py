"""RULE 6: Избыточная "четвёрка"

Minor символ на позиции i и major символ на позиции i+2, значение которого
равно -magnitude(minor):

    dDC → 400 + 100 = 500 → D
    lLX → 40 + 10 = 50   → L
    vVI → 4 + 1 = 5      → V

Такая запись схлопывается в один major символ и поэтому запрещена.
"""

from src.core.domain.numeral_table import DEFAULT_NUMERAL_TABLE, NumeralTable
from src.validation.rules.rule_result import RuleResult, blocked_result, pass_result


class Rule06RedundantMinorFour:
    """RULE 6: minor на i, -magnitude(minor) на i+2 → BLOCK."""

    name = "redundant_minor_four"

    def __init__(self, table: NumeralTable | None = None):
        self.table = table or DEFAULT_NUMERAL_TABLE

    def evaluate(self, numeral: str) -> RuleResult:
        for position in range(len(numeral) - 2):
            minor = numeral[position]
            target = numeral[position + 2]

            if not self.table.is_minor(minor) or not self.table.is_major(target):
                continue

            if self.table.magnitude_of(target) == -self.table.magnitude_of(minor):
                fragment = numeral[position : position + 3]
                collapsed = self.table.major_counterpart(minor)
                return blocked_result(
                    rule_name=self.name,
                    block_reason="redundant_minor_four",
                    fragment=fragment,
                    position=position,
                    details=f"{fragment!r} at position {position} in {numeral!r} is redundant; write {collapsed!r}",
                )

        return pass_result(self.name)
