"""
DigitWord — Упакованные цифры основания base в одном машинном слове

Двоично-кодированные цифры (BCD-подобная схема для любого основания):
- каждая цифра занимает ceil_log2(base + 1) бит, младшая цифра в младших битах
- ёмкость слова — layout.digits_per_word цифр
- всё, что не помещается в ёмкость, хранится в поле overflow
  (одна "цифра" с весом base ** digits_per_word)

Значение: sum(digit[i] * base**i) + overflow * base**digits_per_word

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Между операциями каждая цифра лежит в [0, base - 1]
2. overflow хранится в одном машинном слове: при переполнении самого
   overflow значение усекается до word.bits бит (WARNING в лог).
   Точный результат гарантирован, пока значение < base**digits_per_word * 2**bits
3. Поразрядное умножение требует нулевого overflow у множителя слева

Классы создаются фабрикой DigitWord.of(word, base) и кэшируются по раскладке.
"""

import io
import logging
from functools import lru_cache
from typing import ClassVar, Optional, TextIO

from radixnum.core.domain.word_types import (
    DEFAULT_BASE,
    DIGIT_ALPHABET,
    UINT16,
    DigitLayout,
    NativeWord,
)
from radixnum.core.math.segmented import (
    SegmentedNumber,
    UnresolvedOverflowError,
    UnsupportedResizeError,
    check_accumulator,
    segmented_add,
    segmented_multiply,
)

logger = logging.getLogger(__name__)


class DigitWord(SegmentedNumber):
    """
    Слово фиксированной ёмкости с упакованными цифрами и overflow-цифрой.

    Не инстанцируется напрямую: используйте DigitWord.of(word, base).

    Examples:
        >>> U16Digits = DigitWord.of(UINT16)
        >>> str(U16Digits(65407) + U16Digits(65407))
        '130814'
    """

    layout: ClassVar[Optional[DigitLayout]] = None

    # Заполняются фабрикой из layout
    _base: ClassVar[int] = 0
    _bits_per_digit: ClassVar[int] = 0
    _digits_per_word: ClassVar[int] = 0
    _digit_mask: ClassVar[int] = 0
    _capacity_mask: ClassVar[int] = 0
    _word_mask: ClassVar[int] = 0

    __hash__ = None  # mutable value type

    @classmethod
    def of(cls, word: NativeWord = UINT16, base: int = DEFAULT_BASE) -> type["DigitWord"]:
        """
        Класс DigitWord для заданного машинного слова и основания.

        Args:
            word: Машинное слово-носитель (default: UINT16)
            base: Основание (default: 10)

        Returns:
            Подкласс DigitWord (один и тот же для одинаковой раскладки)
        """
        return _digit_word_class(DigitLayout(word=word, base=base))

    def __init__(self, value: int = 0):
        if self.layout is None:
            raise TypeError("DigitWord needs a layout, use DigitWord.of(word, base)")

        self._value = 0
        self._overflow = 0
        self._init(self.layout.word.validate_scalar(value))

    def _init(self, value: int) -> None:
        # Малые значения: одна цифра
        if value < self._base:
            self._value = value
            return

        place_value = 0
        next_place_value = self._base
        for i in range(self._digits_per_word):
            place = value % next_place_value
            value -= place

            if place_value > 0:
                place //= place_value

            self.set_word(i, place)

            if value == 0:
                break

            place_value = next_place_value
            next_place_value *= self._base

        if value != 0:
            self._overflow = value // place_value

    def copy(self) -> "DigitWord":
        clone = type(self)()
        clone._value = self._value
        clone._overflow = self._overflow
        return clone

    # =========================================================================
    # SEGMENTED NUMBER
    # =========================================================================

    def get_word(self, index: int) -> int:
        self.check_word_index(index)

        offset = self._bits_per_digit * index
        return (self._value >> offset) & self._digit_mask

    def set_word(self, index: int, value: int) -> int:
        self.check_word_index(index)

        offset = self._bits_per_digit * index
        carry = 0
        if value >= self._base:
            carry, value = divmod(value, self._base)

        self._value &= ~(self._digit_mask << offset)
        self._value |= value << offset
        # Слот index == word count лежит над ёмкостью: запись туда теряется
        self._value &= self._capacity_mask

        return carry

    def get_word_count(self) -> int:
        return self._digits_per_word

    def resize(self, new_count: int) -> None:
        if new_count != self._digits_per_word:
            raise UnsupportedResizeError(
                f"{type(self).__name__} has a fixed capacity of "
                f"{self._digits_per_word} digits, cannot resize to {new_count}"
            )

    def set_overflow(self, value: int) -> None:
        truncated = value & self._word_mask
        if truncated != value:
            logger.warning(
                "Digit word overflow %d exceeds %d bits, truncated to %d",
                value,
                self.layout.word.bits,
                truncated,
            )
        self._overflow = truncated

    def get_overflow_segment(self) -> int:
        return self._overflow

    def is_zero(self) -> bool:
        return self._value == 0 and self._overflow == 0

    def zero_word(self) -> int:
        return 0

    # =========================================================================
    # OVERFLOW ACCESS
    # =========================================================================

    def get_and_clear_overflow(self) -> "DigitWord":
        """
        Вернуть overflow как новый DigitWord и обнулить его.

        Повторный вызов подряд возвращает ноль.
        """
        overflow = type(self)(self._overflow)
        self._overflow = 0
        return overflow

    def peek_overflow(self) -> "DigitWord":
        """Overflow как новый DigitWord без обнуления."""
        return type(self)(self._overflow)

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def _coerce(self, other):
        if isinstance(other, type(self)):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return type(self)(other)
        return None

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented

        result = type(self)()
        segmented_add(self, other, result)
        return result

    __radd__ = __add__

    def __iadd__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented

        segmented_add(self, other, self)
        return self

    def __mul__(self, other):
        if isinstance(other, type(self)):
            result = type(self)()
            self._multiply_digits(self, other, result)
            return result

        if isinstance(other, int) and not isinstance(other, bool):
            result = type(self)()
            segmented_multiply(self.layout.word.validate_scalar(other), self, result)
            return result

        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, int) and not isinstance(other, bool):
            return self.__mul__(other)
        return NotImplemented

    def __imul__(self, other):
        if isinstance(other, type(self)):
            # x и result не могут совпадать: цифры x читаются после записи
            product = self * other
            self._value = product._value
            self._overflow = product._overflow
            return self

        if isinstance(other, int) and not isinstance(other, bool):
            segmented_multiply(self.layout.word.validate_scalar(other), self, self)
            return self

        return NotImplemented

    @classmethod
    def _multiply_digits(cls, x: "DigitWord", y: "DigitWord", result: "DigitWord") -> None:
        """
        result = x * y "в столбик" по цифрам x.

        Для каждого разряда i (включая overflow x как разряд digits_per_word)
        y умножается на цифру, затем на base ** i, и складывается в result.

        Raises:
            UnresolvedOverflowError: Если у x ненулевой overflow
        """
        if x.get_overflow_segment() != 0:
            raise UnresolvedOverflowError(
                f"cannot multiply a digit word with unresolved overflow "
                f"{x.get_overflow_segment()}, call get_and_clear_overflow() first"
            )
        check_accumulator(x, result, y)

        n = x.get_word_count()
        place_value = 1
        for i in range(n + 1):
            xword = x.get_overflow_segment() if i == n else x.get_word(i)
            if xword != 0:
                partial = cls()
                segmented_multiply(xword, y, partial)
                segmented_multiply(place_value, partial, partial)
                segmented_add(result, partial, result)

            place_value *= cls._base

    # =========================================================================
    # COMPARISON
    # =========================================================================

    def __eq__(self, other):
        """
        DigitWord сравнивается поразрядно (цифры и overflow), int — по
        полному значению, включая overflow: U16(65407) + U16(65407) == 130814.
        """
        if isinstance(other, DigitWord):
            if type(other) is not type(self):
                return False
            return self._value == other._value and self._overflow == other._overflow

        if isinstance(other, int) and not isinstance(other, bool):
            return int(self) == other

        return NotImplemented

    # =========================================================================
    # PRINTING
    # =========================================================================

    def print(self, out: TextIO, leading_zeroes: bool = False) -> None:
        """
        Печать цифр (без overflow) от старшей к младшей.

        Args:
            out: Поток вывода
            leading_zeroes: Печатать ведущие нули. Позволяет напечатать
                overflow с False, а затем тело с True одной строкой
        """
        have_printed = leading_zeroes
        for i in range(self.get_word_count(), 0, -1):
            place = self.get_word(i - 1)

            if have_printed or place != 0:
                out.write(DIGIT_ALPHABET[place])
                have_printed = True

    def to_string(self, leading_zeroes: bool = False) -> str:
        out = io.StringIO()
        self.print(out, leading_zeroes)
        return out.getvalue()

    def __str__(self) -> str:
        overflow = self.peek_overflow()
        head = "" if overflow.is_zero() else str(overflow)
        text = head + self.to_string(leading_zeroes=bool(head))
        return text or "0"

    def __int__(self) -> int:
        value = 0
        for i in range(self.get_word_count() - 1, -1, -1):
            value = value * self._base + self.get_word(i)
        return value + self._overflow * self.layout.capacity_radix

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} digits={self.to_string(leading_zeroes=True)} "
            f"overflow={self._overflow}>"
        )


@lru_cache(maxsize=None)
def _digit_word_class(layout: DigitLayout) -> type[DigitWord]:
    return type(
        f"DigitWord_{layout.word}_base{layout.base}",
        (DigitWord,),
        {
            "__module__": __name__,
            "layout": layout,
            "_base": layout.base,
            "_bits_per_digit": layout.bits_per_digit,
            "_digits_per_word": layout.digits_per_word,
            "_digit_mask": layout.digit_mask,
            "_capacity_mask": layout.capacity_mask,
            "_word_mask": layout.word.mask,
        },
    )
