"""RULE 3: Размещение minor символов

Каждый minor символ (d, l, v) сразу же сопровождается своей uppercase-парой:
    dD, lL, vV
Minor символ не может стоять последним.
"""

from src.core.domain.numeral_table import DEFAULT_NUMERAL_TABLE, NumeralTable
from src.validation.rules.rule_result import RuleResult, blocked_result, pass_result


class Rule03MinorPlacement:
    """RULE 3: minor символ → сразу его uppercase-пара."""

    name = "minor_placement"

    def __init__(self, table: NumeralTable | None = None):
        self.table = table or DEFAULT_NUMERAL_TABLE

    def evaluate(self, numeral: str) -> RuleResult:
        last = len(numeral) - 1

        for position, ch in enumerate(numeral):
            if not self.table.is_minor(ch):
                continue

            counterpart = self.table.major_counterpart(ch)

            if position == last:
                return blocked_result(
                    rule_name=self.name,
                    block_reason="minor_symbol_last",
                    fragment=ch,
                    position=position,
                    details=f"Minor symbol {ch!r} cannot end {numeral!r}; expected {ch + counterpart!r}",
                )

            follower = numeral[position + 1]
            if follower != counterpart:
                return blocked_result(
                    rule_name=self.name,
                    block_reason="minor_symbol_unpaired",
                    fragment=ch + follower,
                    position=position,
                    details=(
                        f"Minor symbol {ch!r} at position {position} in {numeral!r} "
                        f"must be followed by {counterpart!r}, got {follower!r}"
                    ),
                )

        return pass_result(self.name)
