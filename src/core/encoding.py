"""
Canonical Encoding — Arabic → Elbonian

Каноническая (самая компактная) запись целого из [1, 4443].

АЛГОРИТМ (пока remaining > 0):
    tier = 10^(digits(remaining) - 1)
    lead = старшая цифра remaining

    lead == 4 и remaining < 4000  → "четвёрка": minor + major(5·tier)    (400 → dD)
    lead == 9                     → "девятка": major + minor + major      (900 → DdD)
    иначе                         → наибольший доступный номинал ≤ remaining

Номиналы берутся из DenominationPool: каждое major-значение ровно трижды на
всё кодирование. "Четвёрка" расходует 2 копии 5·tier, "девятка" 3, и
используются только пока копии есть. Так результат всегда проходит
ограничение частоты (RULE 2): при 4000+ буква D уже занята парой DD и
4443 кодируется как MMMDDCCCLLXXXVVIII.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая итерация уменьшает remaining на положительную величину
2. В пределах [1, 4443] пул никогда не исчерпывается раньше времени
3. Сумма значений выданных символов == исходное число
"""

import logging
from collections import Counter
from typing import Final, Iterable

from src.core.domain.numeral_table import (
    DEFAULT_NUMERAL_TABLE,
    NumeralTable,
    NumeralTableInvariantError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# "Четвёрка" применяется только ниже этого значения (символа для 5000 нет)
FOUR_PATTERN_LIMIT: Final[int] = 4000

# Копии номинала 5·tier, которые расходуют шаблоны
FOUR_PATTERN_COPIES: Final[int] = 2
NINE_PATTERN_COPIES: Final[int] = 3


# =============================================================================
# DENOMINATION POOL
# =============================================================================


class DenominationPool:
    """
    Мультимножество номиналов с удалением после использования.

    Создаётся заново на каждое кодирование, таблица не мутируется.
    """

    def __init__(self, denominations: Iterable[int]):
        self._copies: Counter[int] = Counter(denominations)

    def available(self, magnitude: int) -> int:
        """Сколько копий номинала осталось."""
        return self._copies[magnitude]

    def take(self, magnitude: int, copies: int = 1) -> None:
        """
        Изъять copies копий номинала.

        Raises:
            NumeralTableInvariantError: если копий не хватает
        """
        if self._copies[magnitude] < copies:
            raise NumeralTableInvariantError(
                f"Denomination {magnitude} exhausted: need {copies}, "
                f"have {self._copies[magnitude]}"
            )
        self._copies[magnitude] -= copies

    def take_largest(self, limit: int) -> int:
        """
        Изъять наибольший доступный номинал ≤ limit.

        Raises:
            NumeralTableInvariantError: если подходящего номинала нет
        """
        for magnitude in sorted(self._copies, reverse=True):
            if magnitude <= limit and self._copies[magnitude] > 0:
                self._copies[magnitude] -= 1
                return magnitude

        raise NumeralTableInvariantError(f"No denomination left to encode remaining value {limit}")

    def __len__(self) -> int:
        return sum(self._copies.values())


# =============================================================================
# ENCODER
# =============================================================================


def _pattern_available(
    table: NumeralTable,
    pool: DenominationPool,
    tier: int,
    copies: int,
) -> bool:
    """Есть ли символы для шаблона на этом tier и хватает ли копий 5·tier."""
    five = 5 * tier
    return (
        table.has_magnitude(five)
        and table.has_magnitude(-tier)
        and pool.available(five) >= copies
    )


def encode_canonical(value: int, table: NumeralTable | None = None) -> str:
    """
    Каноническая Elbonian запись целого.

    Args:
        value: положительное целое (границы проверяет конвертер)
        table: таблица символов (default: DEFAULT_NUMERAL_TABLE)

    Returns:
        Elbonian строка

    Raises:
        ValueError: если value < 1
        NumeralTableInvariantError: если значение не представимо номиналами

    Examples:
        >>> encode_canonical(1666)
        'MDCLXVI'
        >>> encode_canonical(444)
        'dDlLvV'
        >>> encode_canonical(3999)
        'MMMDdDLlLVvV'
    """
    if value < 1:
        raise ValueError(f"value must be positive, got {value}")

    table = table or DEFAULT_NUMERAL_TABLE
    pool = DenominationPool(table.denominations)
    parts: list[str] = []
    remaining = value

    while remaining > 0:
        tier = 10 ** (len(str(remaining)) - 1)
        lead = remaining // tier

        if (
            lead == 4
            and remaining < FOUR_PATTERN_LIMIT
            and _pattern_available(table, pool, tier, FOUR_PATTERN_COPIES)
        ):
            major = table.symbol_of(5 * tier)
            parts.append(table.symbol_of(-tier) + major)
            pool.take(5 * tier, FOUR_PATTERN_COPIES)
            remaining -= 4 * tier

        elif lead == 9 and _pattern_available(table, pool, tier, NINE_PATTERN_COPIES):
            major = table.symbol_of(5 * tier)
            parts.append(major + table.symbol_of(-tier) + major)
            pool.take(5 * tier, NINE_PATTERN_COPIES)
            remaining -= 9 * tier

        else:
            magnitude = pool.take_largest(remaining)
            parts.append(table.symbol_of(magnitude))
            remaining -= magnitude

    numeral = "".join(parts)
    logger.debug(f"Encoded {value} as {numeral!r}")
    return numeral
