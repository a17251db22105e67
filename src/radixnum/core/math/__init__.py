"""
Core math modules для radixnum

Сегментированные беззнаковые числа: упакованные цифры (DigitWord),
цепочки слов (WordSequence) и общий контракт переноса между ними.
"""

# Bit constants
from radixnum.core.math.bit_constants import bits_mask, ceil_log2

# Segmented number contract
from radixnum.core.math.segmented import (
    # Exceptions
    AccumulatorAliasError,
    SegmentedNumberError,
    UnresolvedOverflowError,
    UnsupportedResizeError,
    WordIndexError,
    # Contract
    SegmentedNumber,
    check_accumulator,
    segmented_add,
    segmented_multiply,
)

# Digit words
from radixnum.core.math.digit_word import DigitWord

# Word sequences
from radixnum.core.math.word_sequence import (
    DigitWordKind,
    NativeWordKind,
    WordKind,
    WordSequence,
    word_kind_for,
)

# Value API
from radixnum.core.math.operations import (
    add,
    add_in_place,
    equals,
    multiply,
    multiply_in_place,
    render,
    scalar_multiply,
    scalar_multiply_in_place,
)

__all__ = [
    # Bit constants
    "bits_mask",
    "ceil_log2",
    # Segmented: Exceptions
    "AccumulatorAliasError",
    "SegmentedNumberError",
    "UnresolvedOverflowError",
    "UnsupportedResizeError",
    "WordIndexError",
    # Segmented: Contract
    "SegmentedNumber",
    "check_accumulator",
    "segmented_add",
    "segmented_multiply",
    # Digit words
    "DigitWord",
    # Word sequences
    "DigitWordKind",
    "NativeWordKind",
    "WordKind",
    "WordSequence",
    "word_kind_for",
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
