"""Тесты для ElbonianValidator (цепочка RULE 1-8)

Покрытие:
- Фиксированный порядок правил и fail-fast
- MalformedNumberError с rule/fragment
- evaluate_all: все нарушения сразу
- is_valid без exception
- Каноническая форма: принятая строка воспроизводится из своего значения
"""

import logging

import pytest

from src.converter import ElbonianArabicConverter
from src.core.domain import ELBONIAN_MAX_VALUE, ELBONIAN_MIN_VALUE
from src.core.errors import MalformedNumberError
from src.validation import DEFAULT_ELBONIAN_VALIDATOR, ElbonianValidator


@pytest.fixture
def validator():
    """Validator с таблицей по умолчанию."""
    return ElbonianValidator()


# =============================================================================
# ТЕСТЫ: порядок правил
# =============================================================================


def test_rule_order(validator):
    """RULE 1 → RULE 8."""
    assert [rule.name for rule in validator.rules] == [
        "alphabet",
        "frequency_cap",
        "minor_placement",
        "major_ordering",
        "redundant_major_pair",
        "redundant_minor_four",
        "redundant_minor_nine",
        "canonical_form",
    ]


@pytest.mark.parametrize(
    "numeral, rule_name",
    [
        ("", "alphabet"),
        ("X X", "alphabet"),
        ("XXXX", "frequency_cap"),
        ("v", "minor_placement"),
        ("lV", "minor_placement"),
        ("IV", "major_ordering"),
        ("dDD", "major_ordering"),
        ("DD", "redundant_major_pair"),
        ("dDC", "redundant_minor_four"),
        ("MDdDD", "frequency_cap"),
        ("XXXVV", "canonical_form"),
        ("MMMDDD", "canonical_form"),
    ],
)
def test_first_failure(validator, numeral, rule_name):
    """Первое нарушенное правило в фиксированном порядке."""
    failure = validator.first_failure(numeral)

    assert failure is not None
    assert failure.rule_name == rule_name


@pytest.mark.parametrize("numeral", ["I", "XXX", "vV", "MDCLXVI", "dDlLvV", "MMMDdDLlLVvV"])
def test_first_failure_none_for_valid(validator, numeral):
    assert validator.first_failure(numeral) is None
    assert validator.is_valid(numeral) is True


# =============================================================================
# ТЕСТЫ: validate
# =============================================================================


def test_validate_passes_silently(validator):
    assert validator.validate("MDCLXVI") is None


def test_validate_raises_with_diagnostics(validator):
    """MalformedNumberError несёт имя правила и подстроку."""
    with pytest.raises(MalformedNumberError, match="minor_placement") as exc_info:
        validator.validate("XlV")

    assert exc_info.value.rule == "minor_placement"
    assert exc_info.value.fragment == "lV"
    assert "'XlV'" in str(exc_info.value)


def test_validate_frequency_message(validator):
    with pytest.raises(MalformedNumberError, match="occurs 4 times"):
        validator.validate("XXXX")


def test_validate_logs_rejection(validator, caplog):
    """Отклонение логируется на DEBUG."""
    with caplog.at_level(logging.DEBUG, logger="src.validation.validator"):
        with pytest.raises(MalformedNumberError):
            validator.validate("IV")

    assert "Rejected Elbonian numeral 'IV'" in caplog.text


# =============================================================================
# ТЕСТЫ: evaluate_all
# =============================================================================


def test_evaluate_all_reports_every_violation(validator):
    """dDD нарушает RULE 4, RULE 5, RULE 7 и RULE 8 одновременно."""
    results = validator.evaluate_all("dDD")
    failed = [r.rule_name for r in results if not r.passed]

    assert len(results) == 8
    assert failed == [
        "major_ordering",
        "redundant_major_pair",
        "redundant_minor_nine",
        "canonical_form",
    ]


def test_evaluate_all_valid(validator):
    results = validator.evaluate_all("MMMDDCCCLLXXXVVIII")

    assert all(r.passed for r in results)


def test_is_valid_false(validator):
    assert validator.is_valid("IIII") is False
    assert validator.is_valid("") is False


def test_default_validator_shared():
    """Глобальный экземпляр использует таблицу по умолчанию."""
    assert isinstance(DEFAULT_ELBONIAN_VALIDATOR, ElbonianValidator)
    assert DEFAULT_ELBONIAN_VALIDATOR.is_valid("MDCLXVI") is True
    assert DEFAULT_ELBONIAN_VALIDATOR.is_valid("XXXVV") is False


# =============================================================================
# ТЕСТЫ: каноническая форма
# =============================================================================


@pytest.mark.parametrize(
    "numeral, block_reason",
    [
        ("XXXVV", "non_canonical"),
        ("CCCLL", "non_canonical"),
        ("MMMDDD", "value_out_of_range"),
        ("MMMDDDCCCLLLXXXVVVIII", "value_out_of_range"),
    ],
)
def test_validate_rejects_non_canonical(validator, numeral, block_reason):
    """Строки, прошедшие RULE 1-7, но не равные канонической записи."""
    failure = validator.first_failure(numeral)

    assert failure is not None
    assert failure.rule_name == "canonical_form"
    assert failure.block_reason == block_reason

    with pytest.raises(MalformedNumberError, match="canonical_form") as exc_info:
        validator.validate(numeral)

    assert exc_info.value.rule == "canonical_form"


def _all_numerals(max_length):
    """Все строки над алфавитом длины 1..max_length."""
    symbols = "MDCLXVIdlv"
    layer = [""]
    for _ in range(max_length):
        layer = [prefix + ch for prefix in layer for ch in symbols]
        yield from layer


def test_accepted_numerals_are_idempotent(validator):
    """Для каждой принятой строки s: encode(value(s)) == s."""
    accepted = 0

    for numeral in _all_numerals(4):
        if not validator.is_valid(numeral):
            continue
        accepted += 1

        value = ElbonianArabicConverter(numeral).to_arabic()
        assert ELBONIAN_MIN_VALUE <= value <= ELBONIAN_MAX_VALUE
        assert ElbonianArabicConverter(str(value)).to_elbonian() == numeral

    assert accepted > 0
