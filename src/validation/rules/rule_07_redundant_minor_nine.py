"""RULE 7: Избыточная "девятка"

Minor символ на позиции i и на позиции i+2 major символ, равный uppercase-паре
minor символа:

    dDD → 400 + 500 = 900 → каноническая запись DdD
    lLL → 90              → LlL
    vVV → 9               → VvV

Девятка записывается только как S s S (major, minor, major).
"""

from src.core.domain.numeral_table import DEFAULT_NUMERAL_TABLE, NumeralTable
from src.validation.rules.rule_result import RuleResult, blocked_result, pass_result


class Rule07RedundantMinorNine:
    """RULE 7: minor на i, его uppercase-пара на i+2 → BLOCK."""

    name = "redundant_minor_nine"

    def __init__(self, table: NumeralTable | None = None):
        self.table = table or DEFAULT_NUMERAL_TABLE

    def evaluate(self, numeral: str) -> RuleResult:
        for position in range(len(numeral) - 2):
            minor = numeral[position]
            target = numeral[position + 2]

            if not self.table.is_minor(minor) or not self.table.is_major(target):
                continue

            counterpart = self.table.major_counterpart(minor)
            if self.table.magnitude_of(target) == self.table.magnitude_of(counterpart):
                fragment = numeral[position : position + 3]
                canonical = counterpart + minor + counterpart
                return blocked_result(
                    rule_name=self.name,
                    block_reason="redundant_minor_nine",
                    fragment=fragment,
                    position=position,
                    details=f"{fragment!r} at position {position} in {numeral!r} is redundant; write {canonical!r}",
                )

        return pass_result(self.name)
