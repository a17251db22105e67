"""
radixnum — unsigned arbitrary-precision arithmetic over packed digit words

Two interchangeable word representations share one carry/overflow contract:
- DigitWord: several base-B digits packed into one native word plus overflow
- WordSequence: a growable chain of words, least significant first

Quick start:
    >>> from radixnum import UINT16, DigitWord, WordSequence
    >>> Seq = WordSequence.of(DigitWord.of(UINT16, base=10))
    >>> x = Seq(65407)
    >>> x += 65407
    >>> str(x)
    '130814'
"""

# Math must load before domain: word types depend on bit constants
from radixnum.core.math import (
    AccumulatorAliasError,
    DigitWord,
    SegmentedNumber,
    SegmentedNumberError,
    UnresolvedOverflowError,
    UnsupportedResizeError,
    WordIndexError,
    WordSequence,
    add,
    add_in_place,
    equals,
    multiply,
    multiply_in_place,
    render,
    scalar_multiply,
    scalar_multiply_in_place,
)
from radixnum.core.domain import (
    DEFAULT_BASE,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    DigitLayout,
    NativeWord,
)

__version__ = "0.1.0"

__all__ = [
    # Word types
    "DEFAULT_BASE",
    "DigitLayout",
    "NativeWord",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    # Numbers
    "DigitWord",
    "SegmentedNumber",
    "WordSequence",
    # Exceptions
    "AccumulatorAliasError",
    "SegmentedNumberError",
    "UnresolvedOverflowError",
    "UnsupportedResizeError",
    "WordIndexError",
    # Value API
    "add",
    "add_in_place",
    "equals",
    "multiply",
    "multiply_in_place",
    "render",
    "scalar_multiply",
    "scalar_multiply_in_place",
]
