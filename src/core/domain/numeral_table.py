"""
NumeralTable — Таблица символов Elbonian

Единственный источник соответствия символ ↔ значение:
- 7 major символов (M, D, C, L, X, V, I) — положительные значения
- 3 minor символа (d, l, v) — subtractive единицы, отрицательные значения

Инвариант minor-символов:
    magnitude(minor) == -magnitude(major на одну ступень ниже uppercase-пары)
    d ↔ C, l ↔ X, v ↔ I

Таблица строится один раз и далее только читается (безопасно разделять
между экземплярами конвертера).
"""

from typing import Final


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Максимум повторений одной буквы (без учёта регистра) в числе
MAX_SYMBOL_REPEATS: Final[int] = 3

# Диапазон значений, представимых в Elbonian
ELBONIAN_MIN_VALUE: Final[int] = 1
ELBONIAN_MAX_VALUE: Final[int] = 4443

# Литерал таблицы: (символ, значение)
SYMBOL_MAGNITUDES: Final[tuple[tuple[str, int], ...]] = (
    ("M", 1000),
    ("D", 500),
    ("C", 100),
    ("L", 50),
    ("X", 10),
    ("V", 5),
    ("I", 1),
    ("d", -100),
    ("l", -10),
    ("v", -1),
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnrecognizedSymbolError(Exception):
    """Символ не входит в алфавит Elbonian."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Unrecognized Elbonian symbol: {symbol!r}")


class NumeralTableInvariantError(Exception):
    """
    Нарушение внутреннего инварианта таблицы.

    Возникает только при поиске значения, которого гарантированно нет
    по построению (например, symbol_of(5000)). Не является частью
    публичной таксономии ошибок конвертера.
    """

    pass


# =============================================================================
# NUMERAL TABLE
# =============================================================================


class NumeralTable:
    """
    Неизменяемое взаимно-однозначное отображение символ ↔ значение.

    Также предоставляет denominations: каждое major-значение трижды,
    по убыванию (используется при каноническом кодировании).
    """

    def __init__(self, pairs: tuple[tuple[str, int], ...] = SYMBOL_MAGNITUDES):
        self._magnitudes: dict[str, int] = {}
        self._symbols: dict[int, str] = {}

        for symbol, magnitude in pairs:
            if symbol in self._magnitudes or magnitude in self._symbols:
                raise ValueError(f"Duplicate entry in numeral table: {symbol}={magnitude}")
            self._magnitudes[symbol] = magnitude
            self._symbols[magnitude] = symbol

        self._check_minor_invariant()

        majors = sorted(
            (m for m in self._magnitudes.values() if m > 0),
            reverse=True,
        )
        self._denominations: tuple[int, ...] = tuple(
            m for m in majors for _ in range(MAX_SYMBOL_REPEATS)
        )

    def _check_minor_invariant(self) -> None:
        """Каждый minor = -(major на ступень ниже своей uppercase-пары)."""
        majors = sorted((m for m in self._magnitudes.values() if m > 0), reverse=True)

        for symbol, magnitude in self._magnitudes.items():
            if magnitude > 0:
                continue

            counterpart = symbol.upper()
            if counterpart not in self._magnitudes:
                raise ValueError(f"Minor symbol {symbol!r} has no major counterpart")

            index = majors.index(self._magnitudes[counterpart])
            if index + 1 >= len(majors) or majors[index + 1] != -magnitude:
                raise ValueError(
                    f"Minor symbol {symbol!r}={magnitude} must negate the major "
                    f"one step below {counterpart!r}"
                )

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def magnitude_of(self, symbol: str) -> int:
        """
        Значение символа.

        Raises:
            UnrecognizedSymbolError: если символ не из алфавита
        """
        try:
            return self._magnitudes[symbol]
        except KeyError:
            raise UnrecognizedSymbolError(symbol) from None

    def symbol_of(self, magnitude: int) -> str:
        """
        Символ с точно таким значением.

        Raises:
            NumeralTableInvariantError: если символа с таким значением нет
        """
        try:
            return self._symbols[magnitude]
        except KeyError:
            raise NumeralTableInvariantError(
                f"No Elbonian symbol has magnitude {magnitude}"
            ) from None

    def has_magnitude(self, magnitude: int) -> bool:
        return magnitude in self._symbols

    def is_symbol(self, ch: str) -> bool:
        return ch in self._magnitudes

    def is_major(self, ch: str) -> bool:
        return self._magnitudes.get(ch, 0) > 0

    def is_minor(self, ch: str) -> bool:
        return self._magnitudes.get(ch, 0) < 0

    def major_counterpart(self, minor: str) -> str:
        """
        Uppercase-пара minor символа (d → D).

        Raises:
            ValueError: если символ не minor (в том числе major или вне алфавита)
        """
        if not self.is_minor(minor):
            raise ValueError(f"{minor!r} is not a minor symbol")
        return minor.upper()

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def symbols(self) -> tuple[str, ...]:
        return tuple(self._magnitudes)

    @property
    def denominations(self) -> tuple[int, ...]:
        """Major-значения, каждое MAX_SYMBOL_REPEATS раз, по убыванию."""
        return self._denominations

    def __contains__(self, ch: object) -> bool:
        return ch in self._magnitudes

    def __len__(self) -> int:
        return len(self._magnitudes)


# Глобальный экземпляр таблицы (read-only)
DEFAULT_NUMERAL_TABLE: Final[NumeralTable] = NumeralTable()
