"""
Operations — Публичный API над значениями

Пары "чистая операция / операция на месте" вместо одной функции
с предусловием на алиас результата:
- add / add_in_place
- scalar_multiply / scalar_multiply_in_place
- multiply / multiply_in_place (только DigitWord)
- equals
- render

Все функции принимают DigitWord или WordSequence, созданные через
DigitWord.of(...) / WordSequence.of(...).
"""

from typing import Any, Optional, Union

from radixnum.core.math.digit_word import DigitWord
from radixnum.core.math.word_sequence import WordSequence

Number = Union[DigitWord, WordSequence]


def _require_number(value: Any, name: str) -> None:
    if not isinstance(value, (DigitWord, WordSequence)):
        raise TypeError(f"{name} must be a DigitWord or WordSequence, got {type(value).__name__}")


def _require_same_type(a: Number, b: Any) -> None:
    _require_number(a, "a")
    if isinstance(b, (DigitWord, WordSequence)) and type(b) is not type(a):
        raise TypeError(f"operands have different types: {type(a).__name__} and {type(b).__name__}")


# =============================================================================
# ADDITION
# =============================================================================


def add(a: Number, b: Any) -> Number:
    """
    a + b как новое значение.

    Args:
        a: Первый операнд
        b: Второй операнд того же типа или нативный скаляр

    Returns:
        Новое значение типа a
    """
    _require_same_type(a, b)
    return a + b


def add_in_place(a: Number, b: Any) -> Number:
    """a += b, возвращает сам a."""
    _require_same_type(a, b)
    if a.__iadd__(b) is NotImplemented:
        raise TypeError(f"cannot add {type(b).__name__} to {type(a).__name__}")
    return a


# =============================================================================
# MULTIPLICATION
# =============================================================================


def scalar_multiply(a: Number, k: Any) -> Number:
    """
    a * k как новое значение.

    Для DigitWord k — нативный скаляр, для WordSequence — слово
    элемента (int или DigitWord).
    """
    _require_number(a, "a")
    return a * k


def scalar_multiply_in_place(a: Number, k: Any) -> Number:
    _require_number(a, "a")
    if a.__imul__(k) is NotImplemented:
        raise TypeError(f"cannot multiply {type(a).__name__} by {type(k).__name__}")
    return a


def multiply(a: DigitWord, b: DigitWord) -> DigitWord:
    """
    Поразрядное умножение двух DigitWord.

    Raises:
        TypeError: Если операнды не DigitWord одной раскладки
        UnresolvedOverflowError: Если у a ненулевой overflow
    """
    if not isinstance(a, DigitWord) or not isinstance(b, DigitWord):
        raise TypeError("multiply is defined for digit words only")
    _require_same_type(a, b)
    return a * b


def multiply_in_place(a: DigitWord, b: DigitWord) -> DigitWord:
    if not isinstance(a, DigitWord) or not isinstance(b, DigitWord):
        raise TypeError("multiply is defined for digit words only")
    _require_same_type(a, b)
    a.__imul__(b)
    return a


# =============================================================================
# COMPARISON & RENDERING
# =============================================================================


def equals(a: Number, b: Any) -> bool:
    return bool(a == b)


def render(value: Number, base: Optional[int] = None, suppress_leading_zeros: bool = True) -> str:
    """
    Строковое представление значения в основании base.

    DigitWord печатается целиком: overflow (без ведущих нулей), затем
    цифры. С suppress_leading_zeros=False цифры дополняются нулями до
    полной ёмкости слова. Ноль печатается как "0".

    Args:
        value: DigitWord или WordSequence
        base: Основание (default: основание значения или 10)
        suppress_leading_zeros: Подавлять ведущие нули

    Raises:
        ValueError: Если base недоступно для этого значения
    """
    _require_number(value, "value")

    if isinstance(value, DigitWord):
        if base is not None and base != value.layout.base:
            raise ValueError(
                f"{type(value).__name__} holds base {value.layout.base} digits, "
                f"cannot render in base {base}"
            )
        if suppress_leading_zeros:
            return str(value)

        overflow = value.peek_overflow()
        head = "" if overflow.is_zero() else str(overflow)
        return head + value.to_string(leading_zeroes=True)

    return value.to_string(base, leading_zeroes=not suppress_leading_zeros) or "0"
