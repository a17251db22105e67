"""
Domain models and value objects.

Contains the word type descriptions (native word widths and digit layouts)
that parameterise digit words and word sequences.
"""

from radixnum.core.domain.word_types import (
    DEFAULT_BASE,
    DIGIT_ALPHABET,
    MAX_BASE,
    MIN_BASE,
    SUPPORTED_WORD_BITS,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    DigitLayout,
    NativeWord,
)

__all__ = [
    # Constants
    "DEFAULT_BASE",
    "DIGIT_ALPHABET",
    "MAX_BASE",
    "MIN_BASE",
    "SUPPORTED_WORD_BITS",
    # Native words
    "NativeWord",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    # Digit packing
    "DigitLayout",
]
