"""RULE 5: Избыточная пара major символов

Пара DD, LL или VV равна одному символу следующего номинала (M, C, X).
Такая пара допустима только когда этот номинал уже исчерпан, т.е. в
строке есть опорная тройка:

    DD → требует MMM   (MMMDD = 4000)
    LL → требует CCC
    VV → требует XXX

Иначе пару следовало записать одним символом.
"""

from typing import Final

from src.core.domain.numeral_table import (
    DEFAULT_NUMERAL_TABLE,
    MAX_SYMBOL_REPEATS,
    NumeralTable,
)
from src.validation.rules.rule_result import RuleResult, blocked_result, pass_result


# Major символы, пара которых равна следующему номиналу
PAIRABLE_SYMBOLS: Final[frozenset[str]] = frozenset({"D", "L", "V"})


class Rule05RedundantMajorPair:
    """RULE 5: DD/LL/VV только при наличии MMM/CCC/XXX."""

    name = "redundant_major_pair"

    def __init__(self, table: NumeralTable | None = None):
        self.table = table or DEFAULT_NUMERAL_TABLE

    def evaluate(self, numeral: str) -> RuleResult:
        for position in range(len(numeral) - 1):
            ch = numeral[position]
            if ch not in PAIRABLE_SYMBOLS or numeral[position + 1] != ch:
                continue

            support = self.table.symbol_of(2 * self.table.magnitude_of(ch)) * MAX_SYMBOL_REPEATS
            if support not in numeral:
                return blocked_result(
                    rule_name=self.name,
                    block_reason="redundant_major_pair",
                    fragment=ch * 2,
                    position=position,
                    details=(
                        f"{ch * 2!r} at position {position} in {numeral!r} is redundant "
                        f"without {support!r}; write {support[0]!r} instead"
                    ),
                )

        return pass_result(self.name)
