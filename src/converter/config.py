"""Конфигурация конвертера Elbonian ↔ Arabic."""

from dataclasses import dataclass

from src.core.domain.numeral_table import ELBONIAN_MAX_VALUE, ELBONIAN_MIN_VALUE


@dataclass(frozen=True)
class ConverterConfig:
    """Конфигурация ElbonianArabicConverter.

    Границы Arabic входа (включительно). Диапазон можно только сузить:
    значения вне [ELBONIAN_MIN_VALUE, ELBONIAN_MAX_VALUE] не представимы.
    """

    min_value: int = ELBONIAN_MIN_VALUE
    max_value: int = ELBONIAN_MAX_VALUE

    def __post_init__(self):
        """Validate configuration parameters after initialization."""
        if self.min_value < ELBONIAN_MIN_VALUE:
            raise ValueError(
                f"min_value must be >= {ELBONIAN_MIN_VALUE}, got {self.min_value}"
            )
        if self.max_value > ELBONIAN_MAX_VALUE:
            raise ValueError(
                f"max_value must be <= {ELBONIAN_MAX_VALUE}, got {self.max_value}"
            )
        if self.min_value > self.max_value:
            raise ValueError(
                f"min_value ({self.min_value}) must be <= max_value ({self.max_value})"
            )

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value
