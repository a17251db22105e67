"""
WordSequence — Растущая цепочка слов произвольной длины

Число представлено списком слов, слово 0 — младшее:
    value = sum(word[i] * R**i)

Тип слова задаётся при построении класса WordSequence.of(element):
- NativeWord: обычное беззнаковое слово. Старший бит зарезервирован под
  флаг переноса, поэтому R = 2 ** (bits - 1)
- класс DigitWord: слово из упакованных цифр со своим overflow,
  R = base ** digits_per_word

Способ отделения переноса от слова (WordKind) выбирается один раз при
создании класса, а не на каждой операции.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Список слов никогда не пуст
2. Длина только растёт: вместо overflow-поля добавляются новые слова
3. Любая запись идёт через split_overflow: ни одно слово не хранит
   значение вне своего диапазона

Печать:
- DigitWord того же основания печатает себя сам (прямой путь)
- NativeWord перекодируется бит за битом в WordSequence[DigitWord]
  (обходной путь) и печатается прямым путём
"""

import io
import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any, ClassVar, Optional, TextIO, Union

from radixnum.core.domain.word_types import DEFAULT_BASE, NativeWord
from radixnum.core.math.digit_word import DigitWord
from radixnum.core.math.segmented import (
    SegmentedNumber,
    UnsupportedResizeError,
    segmented_add,
    segmented_multiply,
)

logger = logging.getLogger(__name__)


# =============================================================================
# WORD KINDS
# =============================================================================


class WordKind(ABC):
    """
    Поведение слова внутри WordSequence.

    Две реализации: NativeWordKind (флаг переноса в старшем бите)
    и DigitWordKind (делегирует в DigitWord.get_and_clear_overflow).
    """

    @abstractmethod
    def zero(self) -> Any:
        ...

    @abstractmethod
    def coerce(self, value: Any) -> Any:
        """Привести пользовательское значение к слову (копия, без алиасов)."""

    @abstractmethod
    def copy(self, word: Any) -> Any:
        ...

    @abstractmethod
    def split_overflow(self, word: Any) -> tuple[Any, Any]:
        """Отделить перенос: (слово в диапазоне, перенос)."""

    @abstractmethod
    def is_zero(self, word: Any) -> bool:
        ...

    @abstractmethod
    def prints_in_base(self, base: int) -> bool:
        ...

    @abstractmethod
    def to_int(self, words: list) -> int:
        ...

    @property
    @abstractmethod
    def default_base(self) -> int:
        ...


class NativeWordKind(WordKind):
    """Обычное машинное слово: старший бит — флаг переноса."""

    def __init__(self, word: NativeWord):
        self.word = word

    def zero(self) -> int:
        return 0

    def coerce(self, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"cannot use {type(value).__name__} as a {self.word} word")
        return self.word.validate_scalar(value)

    def copy(self, word: int) -> int:
        return word

    def split_overflow(self, word: int) -> tuple[int, int]:
        # Всё, что выше полезных бит, уходит в перенос
        return word & self.word.payload_mask, word >> self.word.payload_bits

    def is_zero(self, word: int) -> bool:
        return word == 0

    def prints_in_base(self, base: int) -> bool:
        return False

    def to_int(self, words: list) -> int:
        value = 0
        for word in reversed(words):
            value = (value << self.word.payload_bits) | word
        return value

    @property
    def default_base(self) -> int:
        return DEFAULT_BASE

    def __str__(self) -> str:
        return str(self.word)


class DigitWordKind(WordKind):
    """Слово из цифр: перенос — это overflow самого DigitWord."""

    def __init__(self, digit_word: type[DigitWord]):
        self.digit_word = digit_word

    def zero(self) -> DigitWord:
        return self.digit_word()

    def coerce(self, value: Any) -> DigitWord:
        if isinstance(value, self.digit_word):
            return value.copy()
        if isinstance(value, int) and not isinstance(value, bool):
            return self.digit_word(value)
        raise TypeError(
            f"cannot use {type(value).__name__} as a {self.digit_word.__name__} word"
        )

    def copy(self, word: DigitWord) -> DigitWord:
        return word.copy()

    def split_overflow(self, word: DigitWord) -> tuple[DigitWord, DigitWord]:
        carry = word.get_and_clear_overflow()
        return word, carry

    def is_zero(self, word: DigitWord) -> bool:
        return word.is_zero()

    def prints_in_base(self, base: int) -> bool:
        return base == self.digit_word.layout.base

    def to_int(self, words: list) -> int:
        radix = self.digit_word.layout.capacity_radix
        value = 0
        for word in reversed(words):
            value = value * radix + int(word)
        return value

    @property
    def default_base(self) -> int:
        return self.digit_word.layout.base

    def __str__(self) -> str:
        return str(self.digit_word.layout)


def word_kind_for(element: Union[NativeWord, type[DigitWord]]) -> WordKind:
    """
    Выбор WordKind по типу элемента.

    Raises:
        TypeError: Если element не NativeWord и не класс DigitWord
    """
    if isinstance(element, NativeWord):
        return NativeWordKind(element)

    if isinstance(element, type) and issubclass(element, DigitWord) and element.layout is not None:
        return DigitWordKind(element)

    raise TypeError(
        f"word sequence element must be a NativeWord or a DigitWord class, got {element!r}"
    )


# =============================================================================
# WORD SEQUENCE
# =============================================================================


class WordSequence(SegmentedNumber):
    """
    Число произвольной длины из цепочки слов.

    Не инстанцируется напрямую: используйте WordSequence.of(element).

    Examples:
        >>> Seq = WordSequence.of(UINT16)
        >>> x = Seq(0xFF7F)
        >>> x += 0xFF7F
        >>> str(x)
        '130814'
    """

    kind: ClassVar[Optional[WordKind]] = None

    __hash__ = None  # mutable value type

    @classmethod
    def of(cls, element: Union[NativeWord, type[DigitWord]]) -> type["WordSequence"]:
        """
        Класс WordSequence для заданного типа слова.

        Args:
            element: NativeWord (например, UINT16) или класс DigitWord.of(...)

        Returns:
            Подкласс WordSequence (один и тот же для одинакового element)
        """
        return _word_sequence_class(element)

    def __init__(self, value: Any = None):
        if self.kind is None:
            raise TypeError("WordSequence needs an element type, use WordSequence.of(element)")

        self._words: list = []
        if value is None:
            self._words.append(self.kind.zero())
            return

        word, carry = self.kind.split_overflow(self.kind.coerce(value))
        self._words.append(word)
        self._append_words(carry)

    def _append_words(self, value: Any) -> None:
        while not self.kind.is_zero(value):
            word, value = self.kind.split_overflow(value)
            self._words.append(word)

    def copy(self) -> "WordSequence":
        clone = type(self)()
        clone._words = [self.kind.copy(word) for word in self._words]
        return clone

    @property
    def words(self) -> tuple:
        """Снимок слов (копии), младшее первым."""
        return tuple(self.kind.copy(word) for word in self._words)

    def __len__(self) -> int:
        return len(self._words)

    # =========================================================================
    # SEGMENTED NUMBER
    # =========================================================================

    def get_word(self, index: int) -> Any:
        self.check_word_index(index)

        if index == len(self._words):
            return self.kind.zero()
        return self._words[index]

    def set_word(self, index: int, value: Any) -> Any:
        self.check_word_index(index)

        # Слово принадлежит последовательности: split_overflow меняет его на месте
        word, carry = self.kind.split_overflow(self.kind.copy(value))
        if index == len(self._words):
            self._words.append(word)
        else:
            self._words[index] = word
        return carry

    def get_word_count(self) -> int:
        return len(self._words)

    def resize(self, new_count: int) -> None:
        if new_count < len(self._words):
            raise UnsupportedResizeError(
                f"cannot shrink {type(self).__name__} from {len(self._words)} "
                f"to {new_count} words"
            )

        while len(self._words) < new_count:
            self._words.append(self.kind.zero())

    def set_overflow(self, value: Any) -> None:
        # Overflow становится новыми старшими словами
        self._append_words(self.kind.copy(value))

    def get_overflow_segment(self) -> Any:
        return self.kind.zero()

    def is_zero(self) -> bool:
        return all(self.kind.is_zero(word) for word in self._words)

    def zero_word(self) -> Any:
        return self.kind.zero()

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def _coerce(self, other: Any) -> Optional["WordSequence"]:
        if isinstance(other, type(self)):
            return other
        if other is None:
            return None
        try:
            return type(self)(other)
        except TypeError:
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

    def __mul__(self, scalar):
        try:
            scalar = self.kind.coerce(scalar)
        except TypeError:
            return NotImplemented

        result = type(self)()
        segmented_multiply(scalar, self, result)
        return result

    __rmul__ = __mul__

    def __imul__(self, scalar):
        try:
            scalar = self.kind.coerce(scalar)
        except TypeError:
            return NotImplemented

        segmented_multiply(scalar, self, self)
        return self

    def __eq__(self, other):
        if not isinstance(other, WordSequence):
            return NotImplemented
        if type(other) is not type(self):
            return False
        return self._significant_words() == other._significant_words()

    def _significant_words(self) -> list:
        # Старшие нулевые слова не меняют значение
        words = list(self._words)
        while len(words) > 1 and self.kind.is_zero(words[-1]):
            words.pop()
        return words

    def __int__(self) -> int:
        return self.kind.to_int(self._words)

    # =========================================================================
    # PRINTING
    # =========================================================================

    def print(self, out: TextIO, base: Optional[int] = None, leading_zeroes: bool = False) -> None:
        """
        Печать числа в основании base.

        Args:
            out: Поток вывода
            base: Основание (default: основание DigitWord или 10)
            leading_zeroes: Печатать ведущие нули старшего слова

        Raises:
            ValueError: Если слова из цифр другого основания
        """
        if base is None:
            base = self.kind.default_base

        if self.kind.prints_in_base(base):
            self._print_words(out, leading_zeroes)
            return

        if not isinstance(self.kind, NativeWordKind):
            raise ValueError(f"cannot print {self.kind} words in base {base}")

        self.to_digit_words(base)._print_words(out, leading_zeroes)

    def _print_words(self, out: TextIO, leading_zeroes: bool) -> None:
        # Ведущие нули подавляются до первой напечатанной цифры,
        # дальше каждое слово печатается полностью
        have_printed = leading_zeroes
        for word in reversed(self._words):
            chunk = word.to_string(leading_zeroes=have_printed)
            out.write(chunk)
            have_printed = have_printed or bool(chunk)

    def to_digit_words(self, base: int = DEFAULT_BASE) -> "WordSequence":
        """
        Перекодировать NativeWord-последовательность в WordSequence[DigitWord].

        Каждый полезный бит каждого слова (от младшего к старшему): если бит
        установлен, текущий вес прибавляется к результату; после каждого бита
        вес удваивается. Стоимость ~ (число бит) x (число слов в результате).

        Args:
            base: Основание цифр результата

        Returns:
            WordSequence.of(DigitWord.of(word, base)) с тем же значением
        """
        if not isinstance(self.kind, NativeWordKind):
            raise TypeError(f"{type(self).__name__} words are already digit words")

        native = self.kind.word
        target = WordSequence.of(DigitWord.of(native, base))
        logger.debug(
            "Converting %d %s words to base %d digit words", len(self._words), native, base
        )

        converted = target()
        place_value = target(1)
        for word in self._words:
            bit_mask = 1
            for _ in range(native.payload_bits):
                if word & bit_mask:
                    converted += place_value

                bit_mask <<= 1
                place_value *= 2

        return converted

    def to_string(self, base: Optional[int] = None, leading_zeroes: bool = False) -> str:
        out = io.StringIO()
        self.print(out, base, leading_zeroes)
        return out.getvalue()

    def __str__(self) -> str:
        return self.to_string() or "0"

    def __repr__(self) -> str:
        words = ", ".join(repr(word) for word in self._words)
        return f"<{type(self).__name__} [{words}]>"


@lru_cache(maxsize=None)
def _word_sequence_class(element: Union[NativeWord, type[DigitWord]]) -> type[WordSequence]:
    kind = word_kind_for(element)
    return type(
        f"WordSequence_{kind}".replace("/", "_"),
        (WordSequence,),
        {"__module__": __name__, "kind": kind},
    )
