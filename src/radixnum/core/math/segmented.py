"""
Segmented Numbers — общий контракт и алгоритмы переноса

Модуль задаёт набор возможностей, который реализует любое "сегментированное"
число (DigitWord, WordSequence), и два общих алгоритма поверх него:
- segmented_add: result = x + y
- segmented_multiply: result = x * scalar

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. result — это либо сам x (обновление на месте), либо нулевой аккумулятор.
   Любой другой result (в том числе алиас y) → AccumulatorAliasError
2. Перенос между словами возвращается из set_word и идёт в следующее слово
3. Overflow складывается один раз после цикла, а не на каждом слове:
   это корректно, только если вес overflow совпадает с весом следующего слова

Слова могут быть как int (цифры DigitWord, нативные слова), так и объектами
DigitWord: алгоритмы пользуются только операторами + и *.
"""

from abc import ABC, abstractmethod
from typing import Any

# =============================================================================
# EXCEPTIONS
# =============================================================================


class SegmentedNumberError(Exception):
    """Базовое нарушение контракта сегментированного числа."""

    pass


class WordIndexError(SegmentedNumberError, IndexError):
    """Индекс слова вне допустимого диапазона (index > word count)."""

    pass


class UnsupportedResizeError(SegmentedNumberError):
    """
    Недопустимое изменение размера.

    DigitWord имеет фиксированную ёмкость, WordSequence только растёт.
    """

    pass


class AccumulatorAliasError(SegmentedNumberError, ValueError):
    """result не является ни x, ни нулевым аккумулятором."""

    pass


class UnresolvedOverflowError(SegmentedNumberError, ValueError):
    """
    Поразрядное умножение DigitWord с ненулевым overflow.

    Перед умножением overflow нужно снять через get_and_clear_overflow().
    """

    pass


# =============================================================================
# CONTRACT
# =============================================================================


class SegmentedNumber(ABC):
    """
    Набор возможностей сегментированного числа.

    Число представлено словами word[0..n-1] (младшее первым) и отдельным
    overflow-сегментом. Вес слова i равен R ** i, где R — radix слова.
    """

    @abstractmethod
    def get_word(self, index: int) -> Any:
        """Слово с индексом index; index == word count допустим."""

    @abstractmethod
    def set_word(self, index: int, value: Any) -> Any:
        """Записать value mod radix в слово index, вернуть value // radix."""

    @abstractmethod
    def get_word_count(self) -> int:
        ...

    @abstractmethod
    def resize(self, new_count: int) -> None:
        ...

    @abstractmethod
    def set_overflow(self, value: Any) -> None:
        ...

    @abstractmethod
    def get_overflow_segment(self) -> Any:
        ...

    @abstractmethod
    def is_zero(self) -> bool:
        ...

    @abstractmethod
    def zero_word(self) -> Any:
        """Нулевое значение слова (0 или нулевой DigitWord)."""

    def check_word_index(self, index: int) -> None:
        """
        Проверка индекса слова.

        Граница нестрогая: index == word count пропускается и читается как
        слот сразу над ёмкостью.

        Raises:
            WordIndexError: Если index < 0 или index > word count
        """
        count = self.get_word_count()
        if index < 0 or index > count:
            raise WordIndexError(f"word index {index} is out of range (word count {count})")


# =============================================================================
# SHARED ALGORITHMS
# =============================================================================


def check_accumulator(x: SegmentedNumber, result: SegmentedNumber, y: Any = None) -> None:
    """
    Проверка предусловия для result.

    Raises:
        AccumulatorAliasError: Если result является алиасом y или ненулевой
    """
    if result is x:
        return

    if y is not None and result is y:
        raise AccumulatorAliasError("result must not alias the second operand")

    if not result.is_zero():
        raise AccumulatorAliasError(
            "result must be the first operand or a zero-valued accumulator"
        )


def segmented_add(x: SegmentedNumber, y: SegmentedNumber, result: SegmentedNumber) -> None:
    """
    result = x + y

    Недостающие слова более короткого операнда читаются как ноль.
    Перенос последнего слова плюс overflow обоих операндов уходит
    в result.set_overflow одним шагом после цикла.

    Args:
        x: Первый операнд (может совпадать с result)
        y: Второй операнд
        result: x или нулевой аккумулятор

    Raises:
        AccumulatorAliasError: Если нарушено предусловие для result
    """
    check_accumulator(x, result, y)

    n = max(x.get_word_count(), y.get_word_count())
    result.resize(n)

    carry = result.zero_word()
    for i in range(n):
        xn = x.get_word(i) if i < x.get_word_count() else result.zero_word()
        yn = y.get_word(i) if i < y.get_word_count() else result.zero_word()
        rn = xn + yn + carry

        carry = result.set_word(i, rn)

    carry = carry + (x.get_overflow_segment() + y.get_overflow_segment())
    result.set_overflow(carry)


def segmented_multiply(scalar: Any, x: SegmentedNumber, result: SegmentedNumber) -> None:
    """
    result = x * scalar

    Умножение "в столбик" на одно слово: каждое слово x умножается на scalar,
    перенос идёт в следующее слово, overflow x масштабируется отдельно.

    Args:
        scalar: Множитель того же типа, что и слова x
        x: Множимое (может совпадать с result)
        result: x или нулевой аккумулятор

    Raises:
        AccumulatorAliasError: Если нарушено предусловие для result
    """
    check_accumulator(x, result)

    n = x.get_word_count()
    result.resize(n)

    carry = result.zero_word()
    for i in range(n):
        xn = x.get_word(i)
        rn = xn * scalar + carry

        carry = result.set_word(i, rn)

    carry = carry + x.get_overflow_segment() * scalar
    result.set_overflow(carry)
