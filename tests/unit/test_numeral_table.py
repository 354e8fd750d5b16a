"""
Тесты для NumeralTable

Проверяет:
1. Значения всех десяти символов
2. Обратное отображение значение → символ
3. Инвариант minor-символов (d ↔ C, l ↔ X, v ↔ I)
4. Denominations: три копии каждого major, по убыванию
5. Ошибки поиска (UnrecognizedSymbolError, NumeralTableInvariantError)
"""

import pytest

from src.core.domain.numeral_table import (
    DEFAULT_NUMERAL_TABLE,
    MAX_SYMBOL_REPEATS,
    NumeralTable,
    NumeralTableInvariantError,
    UnrecognizedSymbolError,
)


@pytest.fixture
def table():
    """Глобальная таблица."""
    return DEFAULT_NUMERAL_TABLE


# =============================================================================
# ТЕСТЫ: lookups
# =============================================================================


@pytest.mark.parametrize(
    "symbol, magnitude",
    [
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
    ],
)
def test_magnitude_and_symbol_are_inverse(table, symbol, magnitude):
    """symbol_of(magnitude_of(s)) == s"""
    assert table.magnitude_of(symbol) == magnitude
    assert table.symbol_of(magnitude) == symbol


@pytest.mark.parametrize("symbol", ["A", "m", "c", "i", "x", " ", "", "MM"])
def test_magnitude_of_unknown_symbol(table, symbol):
    """Символ вне алфавита → UnrecognizedSymbolError"""
    with pytest.raises(UnrecognizedSymbolError):
        table.magnitude_of(symbol)


@pytest.mark.parametrize("magnitude", [0, 2, 4, 5000, -5, -50, -1000])
def test_symbol_of_missing_magnitude(table, magnitude):
    """Значения без символа → NumeralTableInvariantError"""
    with pytest.raises(NumeralTableInvariantError, match=str(magnitude)):
        table.symbol_of(magnitude)


def test_symbol_classification(table):
    """Major / minor / unknown"""
    assert table.is_major("M")
    assert table.is_major("I")
    assert not table.is_major("d")
    assert table.is_minor("d")
    assert table.is_minor("v")
    assert not table.is_minor("V")
    assert not table.is_minor("A")
    assert not table.is_major("A")
    assert table.is_symbol("l")
    assert not table.is_symbol("?")


def test_major_counterpart(table):
    """Uppercase-пара minor символа"""
    assert table.major_counterpart("d") == "D"
    assert table.major_counterpart("l") == "L"
    assert table.major_counterpart("v") == "V"

    with pytest.raises(ValueError, match="not a minor symbol"):
        table.major_counterpart("L")

    with pytest.raises(ValueError, match="not a minor symbol"):
        table.major_counterpart("?")


def test_table_size_and_membership(table):
    """10 символов, проверка через `in`"""
    assert len(table) == 10
    assert "d" in table
    assert "Q" not in table
    assert table.symbols == ("M", "D", "C", "L", "X", "V", "I", "d", "l", "v")


# =============================================================================
# ТЕСТЫ: инвариант minor-символов
# =============================================================================


@pytest.mark.parametrize("minor, lower_major", [("d", "C"), ("l", "X"), ("v", "I")])
def test_minor_negates_major_one_step_below(table, minor, lower_major):
    """magnitude(minor) == -magnitude(major на ступень ниже uppercase-пары)"""
    assert table.magnitude_of(minor) == -table.magnitude_of(lower_major)


def test_inconsistent_minor_rejected():
    """Таблица с нарушенным инвариантом не строится"""
    pairs = (("M", 1000), ("D", 500), ("C", 100), ("L", 50), ("d", -50))

    with pytest.raises(ValueError, match="must negate"):
        NumeralTable(pairs)


def test_minor_without_counterpart_rejected():
    pairs = (("C", 100), ("X", 10), ("l", -10))

    with pytest.raises(ValueError, match="no major counterpart"):
        NumeralTable(pairs)


def test_duplicate_entries_rejected():
    with pytest.raises(ValueError, match="Duplicate"):
        NumeralTable((("M", 1000), ("M", 1000)))

    with pytest.raises(ValueError, match="Duplicate"):
        NumeralTable((("M", 1000), ("N", 1000)))


# =============================================================================
# ТЕСТЫ: denominations
# =============================================================================


def test_denominations_three_copies_descending(table):
    """Каждое major-значение трижды, по убыванию"""
    denominations = table.denominations

    assert len(denominations) == 7 * MAX_SYMBOL_REPEATS
    assert list(denominations) == sorted(denominations, reverse=True)
    assert denominations[:3] == (1000, 1000, 1000)
    assert denominations[-3:] == (1, 1, 1)
    assert set(denominations) == {1000, 500, 100, 50, 10, 5, 1}


def test_denominations_immutable(table):
    """Denominations — tuple, таблица не мутируется снаружи"""
    assert isinstance(table.denominations, tuple)
