"""RULE 4: Порядок major символов

Major символы идут в невозрастающем порядке значений. Пара minor+major
(dD, lL, vV) образует единую subtractive единицу и сравнивается суммарным
значением (dD = 400, lL = 40, vV = 4):

    MMMDdDLlLVvV → M M M D dD L lL V vV → 1000 1000 1000 500 400 50 40 5 4  ✓
    IV           → I V                  → 1 5                              ✗
    dDD          → dD D                 → 400 500                          ✗

Одиночные minor символы и символы вне алфавита пропускаются (RULE 1, 3).
"""

from typing import Iterator, NamedTuple

from src.core.domain.numeral_table import DEFAULT_NUMERAL_TABLE, NumeralTable
from src.validation.rules.rule_result import RuleResult, blocked_result, pass_result


class NumeralUnit(NamedTuple):
    """Единица сравнения: одиночный major или пара minor+major."""

    position: int
    text: str
    value: int


class Rule04MajorOrdering:
    """RULE 4: значения единиц не возрастают слева направо."""

    name = "major_ordering"

    def __init__(self, table: NumeralTable | None = None):
        self.table = table or DEFAULT_NUMERAL_TABLE

    def units(self, numeral: str) -> Iterator[NumeralUnit]:
        """Разбиение строки на единицы сравнения."""
        position = 0
        length = len(numeral)

        while position < length:
            ch = numeral[position]

            if self.table.is_minor(ch):
                if position + 1 < length and numeral[position + 1] == self.table.major_counterpart(ch):
                    pair = numeral[position : position + 2]
                    value = self.table.magnitude_of(ch) + self.table.magnitude_of(pair[1])
                    yield NumeralUnit(position, pair, value)
                    position += 2
                    continue
            elif self.table.is_major(ch):
                yield NumeralUnit(position, ch, self.table.magnitude_of(ch))

            position += 1

    def evaluate(self, numeral: str) -> RuleResult:
        previous: NumeralUnit | None = None

        for unit in self.units(numeral):
            if previous is not None and unit.value > previous.value:
                return blocked_result(
                    rule_name=self.name,
                    block_reason="major_order_increasing",
                    fragment=numeral[previous.position : unit.position + len(unit.text)],
                    position=previous.position,
                    details=(
                        f"{unit.text!r} ({unit.value}) at position {unit.position} in {numeral!r} "
                        f"follows smaller {previous.text!r} ({previous.value}); "
                        f"symbols must not increase in value"
                    ),
                )
            previous = unit

        return pass_result(self.name)
