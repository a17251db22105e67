"""
Word Types — Описание машинных слов и раскладки цифр

Immutable Pydantic модели, которые задают "тип" чисел:
- NativeWord: беззнаковое машинное слово фиксированной ширины (u8/u16/u32/u64)
- DigitLayout: упаковка цифр основания base внутри NativeWord

Модели frozen=True и hashable, поэтому используются как ключи кэша
при построении классов DigitWord.of(...) и WordSequence.of(...).
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator, model_validator

from radixnum.core.math.bit_constants import bits_mask, ceil_log2

# =============================================================================
# CONSTANTS
# =============================================================================

# Допустимые ширины машинного слова (бит)
SUPPORTED_WORD_BITS: Final[tuple[int, ...]] = (8, 16, 32, 64)

# Основание по умолчанию для печати и упаковки цифр
DEFAULT_BASE: Final[int] = 10

# Алфавит цифр; ограничивает максимальное основание
DIGIT_ALPHABET: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"

MIN_BASE: Final[int] = 2
MAX_BASE: Final[int] = len(DIGIT_ALPHABET)


# =============================================================================
# NATIVE WORD
# =============================================================================


class NativeWord(BaseModel):
    """
    Беззнаковое машинное слово фиксированной ширины.

    Старший бит слова в WordSequence зарезервирован под флаг переноса,
    поэтому полезная ширина (payload_bits) на единицу меньше bits.
    """

    bits: int = Field(..., description="Ширина слова в битах")

    model_config = {"frozen": True}

    @field_validator("bits")
    @classmethod
    def validate_bits(cls, v: int) -> int:
        if v not in SUPPORTED_WORD_BITS:
            raise ValueError(f"bits must be one of {SUPPORTED_WORD_BITS}, got {v}")
        return v

    @property
    def mask(self) -> int:
        """Маска всех бит слова."""
        return bits_mask(self.bits)

    @property
    def max_value(self) -> int:
        return self.mask

    @property
    def payload_bits(self) -> int:
        """Биты значения без зарезервированного бита переноса."""
        return self.bits - 1

    @property
    def payload_mask(self) -> int:
        return bits_mask(self.payload_bits)

    def validate_scalar(self, value: int) -> int:
        """
        Проверка, что value представимо в этом слове.

        Raises:
            ValueError: Если value не int, отрицательное или шире слова
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"scalar must be an int, got {type(value).__name__}")

        if value < 0:
            raise ValueError(f"scalar must be non-negative, got {value}")

        if value > self.max_value:
            raise ValueError(
                f"scalar {value} does not fit a {self.bits}-bit word "
                f"(max {self.max_value})"
            )

        return value

    def __str__(self) -> str:
        return f"u{self.bits}"


UINT8: Final[NativeWord] = NativeWord(bits=8)
UINT16: Final[NativeWord] = NativeWord(bits=16)
UINT32: Final[NativeWord] = NativeWord(bits=32)
UINT64: Final[NativeWord] = NativeWord(bits=64)


# =============================================================================
# DIGIT LAYOUT
# =============================================================================


class DigitLayout(BaseModel):
    """
    Раскладка цифр основания base в машинном слове.

    Каждая цифра занимает ceil_log2(base + 1) бит, цифры упакованы от
    младших бит к старшим. Ёмкость слова — bits // bits_per_digit цифр.
    """

    word: NativeWord = Field(..., description="Машинное слово-носитель")
    base: int = Field(
        DEFAULT_BASE, ge=MIN_BASE, le=MAX_BASE, description="Основание системы счисления"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_capacity(self) -> "DigitLayout":
        """Хотя бы одна цифра должна помещаться в слово."""
        if self.digits_per_word < 1:
            raise ValueError(
                f"base {self.base} digit ({self.bits_per_digit} bits) "
                f"does not fit a {self.word.bits}-bit word"
            )
        return self

    @property
    def bits_per_digit(self) -> int:
        return ceil_log2(self.base + 1)

    @property
    def digits_per_word(self) -> int:
        return self.word.bits // self.bits_per_digit

    @property
    def digit_mask(self) -> int:
        return bits_mask(self.bits_per_digit)

    @property
    def capacity_mask(self) -> int:
        """Биты, занятые цифрами; выше них слово не используется."""
        return bits_mask(self.bits_per_digit * self.digits_per_word)

    @property
    def capacity_radix(self) -> int:
        """Вес разряда overflow: base ** digits_per_word."""
        return self.base ** self.digits_per_word

    def __str__(self) -> str:
        return f"{self.word}/base{self.base}"
