"""ElbonianArabicConverter — конвертер Elbonian ↔ Arabic

Поток:
    input → strip → classify
        ARABIC   → bounds check [1, 4443] → to_elbonian() = canonical encoding
        ELBONIAN → RULE 1-8               → to_arabic()   = сумма значений символов

Вся валидация выполняется при создании (fail-fast): объект существует
только для корректного входа, to_arabic()/to_elbonian() не бросают ошибок.
"""

import logging

from src.converter.config import ConverterConfig
from src.core.domain.number import NumberForm, ParsedNumber, parse_number
from src.core.domain.numeral_table import DEFAULT_NUMERAL_TABLE, NumeralTable
from src.core.encoding import encode_canonical
from src.core.errors import MalformedNumberError, ValueOutOfBoundsError
from src.validation.validator import DEFAULT_ELBONIAN_VALIDATOR, ElbonianValidator

logger = logging.getLogger(__name__)


class ElbonianArabicConverter:
    """Конвертер одного числа в Elbonian или Arabic форме.

    Строка может содержать ведущие и хвостовые пробелы (" 99 "), но не
    внутренние ("9 9").
    """

    def __init__(
        self,
        number: str,
        config: ConverterConfig | None = None,
        table: NumeralTable | None = None,
    ):
        """
        Args:
            number: Elbonian или Arabic число
            config: границы Arabic входа (default: [1, 4443])
            table: таблица символов (default: DEFAULT_NUMERAL_TABLE)

        Raises:
            MalformedNumberError: Elbonian строка нарушает грамматику
            ValueOutOfBoundsError: Arabic число вне границ
        """
        self.config = config or ConverterConfig()
        self.table = table or DEFAULT_NUMERAL_TABLE
        self.validator = (
            DEFAULT_ELBONIAN_VALIDATOR
            if self.table is DEFAULT_NUMERAL_TABLE
            else ElbonianValidator(self.table)
        )

        if not isinstance(number, str):
            raise MalformedNumberError(
                f"Expected a string, got {type(number).__name__}",
                rule="input_type",
            )

        try:
            self._parsed: ParsedNumber = parse_number(number)
        except ValueError:
            # int() отказывается от строк длиннее sys.get_int_max_str_digits()
            raise ValueOutOfBoundsError(
                number.strip(), self.config.min_value, self.config.max_value
            ) from None

        self._value: int | None = self._parsed.arabic_value
        logger.debug(f"Classified {number!r} as {self._parsed.form.value}")

        if self._parsed.is_arabic:
            self._check_bounds(self._parsed.arabic_value)
        else:
            self.validator.validate(self._parsed.text)

    def _check_bounds(self, value: int) -> None:
        if not self.config.contains(value):
            logger.info(f"Arabic value {value} outside [{self.config.min_value}, {self.config.max_value}]")
            raise ValueOutOfBoundsError(value, self.config.min_value, self.config.max_value)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def number(self) -> str:
        """Вход без внешних пробелов."""
        return self._parsed.text

    @property
    def form(self) -> NumberForm:
        return self._parsed.form

    @property
    def is_arabic(self) -> bool:
        return self._parsed.is_arabic

    # -------------------------------------------------------------------------
    # Conversions
    # -------------------------------------------------------------------------

    def to_arabic(self) -> int:
        """
        Arabic значение.

        Для Arabic входа возвращает кэшированное целое, для Elbonian сумму значений
        символов (включая отрицательные minor), вычисляется один раз.
        """
        if self._value is None:
            self._value = sum(self.table.magnitude_of(ch) for ch in self._parsed.text)
        return self._value

    def to_elbonian(self) -> str:
        """Elbonian запись: исходная строка или каноническое кодирование."""
        if self._parsed.form == NumberForm.ELBONIAN:
            return self._parsed.text
        return encode_canonical(self.to_arabic(), self.table)

    def __repr__(self) -> str:
        return f"ElbonianArabicConverter({self._parsed.text!r}, form={self._parsed.form.value})"


# =============================================================================
# HELPERS
# =============================================================================


def elbonian_to_arabic(numeral: str) -> int:
    """
    Elbonian → Arabic.

    Examples:
        >>> elbonian_to_arabic("MDCLXVI")
        1666
    """
    converter = ElbonianArabicConverter(numeral)
    if converter.is_arabic:
        raise MalformedNumberError(f"{numeral!r} is an Arabic number, not Elbonian", rule="input_form")
    return converter.to_arabic()


def arabic_to_elbonian(value: int) -> str:
    """
    Arabic → Elbonian.

    Examples:
        >>> arabic_to_elbonian(3999)
        'MMMDdDLlLVvV'
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedNumberError(f"Expected an int, got {type(value).__name__}", rule="input_type")
    return ElbonianArabicConverter(str(value)).to_elbonian()
