"""Rules — индивидуальные правила грамматики Elbonian.

Фиксированный порядок проверок:
- RULE 1: Алфавит (и непустая строка)
- RULE 2: Не больше трёх вхождений буквы (без учёта регистра)
- RULE 3: Minor символ сразу сопровождается uppercase-парой
- RULE 4: Невозрастающий порядок major символов / subtractive пар
- RULE 5: DD/LL/VV только с опорной тройкой MMM/CCC/XXX
- RULE 6: Избыточная "четвёрка" (dDC → D)
- RULE 7: Избыточная "девятка" (dDD → DdD)
- RULE 8: Каноническая форма и диапазон значения (XXXVV → lL)
"""

from .rule_result import RuleResult, blocked_result, pass_result
from .rule_01_alphabet import Rule01Alphabet
from .rule_02_frequency_cap import Rule02FrequencyCap
from .rule_03_minor_placement import Rule03MinorPlacement
from .rule_04_major_ordering import NumeralUnit, Rule04MajorOrdering
from .rule_05_redundant_major_pair import PAIRABLE_SYMBOLS, Rule05RedundantMajorPair
from .rule_06_redundant_minor_four import Rule06RedundantMinorFour
from .rule_07_redundant_minor_nine import Rule07RedundantMinorNine
from .rule_08_canonical_form import Rule08CanonicalForm

__all__ = [
    "RuleResult",
    "blocked_result",
    "pass_result",
    "Rule01Alphabet",
    "Rule02FrequencyCap",
    "Rule03MinorPlacement",
    "Rule04MajorOrdering",
    "NumeralUnit",
    "Rule05RedundantMajorPair",
    "PAIRABLE_SYMBOLS",
    "Rule06RedundantMinorFour",
    "Rule07RedundantMinorNine",
    "Rule08CanonicalForm",
]
