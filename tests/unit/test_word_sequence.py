"""
Тесты для WordSequence

Проверяет:
1. Выбор WordKind по типу элемента (NativeWord / DigitWord)
2. Построение из скаляра и отделение переноса
3. Контракт: индексы, рост без сжатия, overflow как новые слова
4. Сложение и умножение на слово для обоих типов элементов
5. Печать: прямой путь (DigitWord) и перекодировка бит (NativeWord)
"""

import math

import pytest

from radixnum.core.domain import UINT8, UINT16, UINT32
from radixnum.core.math import (
    DigitWord,
    DigitWordKind,
    NativeWordKind,
    UnsupportedResizeError,
    WordIndexError,
    WordSequence,
    word_kind_for,
)

U16 = DigitWord.of(UINT16, base=10)
S16 = WordSequence.of(UINT16)
D16 = WordSequence.of(U16)


# =============================================================================
# WORD KINDS
# =============================================================================


class TestWordKinds:
    """Тесты выбора WordKind"""

    def test_native_kind(self) -> None:
        assert isinstance(word_kind_for(UINT16), NativeWordKind)
        assert isinstance(S16.kind, NativeWordKind)

    def test_digit_word_kind(self) -> None:
        assert isinstance(word_kind_for(U16), DigitWordKind)
        assert isinstance(D16.kind, DigitWordKind)

    def test_unknown_element_rejected(self) -> None:
        with pytest.raises(TypeError, match="NativeWord or a DigitWord class"):
            word_kind_for(16)

    def test_unbound_digit_word_rejected(self) -> None:
        with pytest.raises(TypeError):
            word_kind_for(DigitWord)

    def test_native_split_uses_top_bit(self) -> None:
        kind = NativeWordKind(UINT16)
        assert kind.split_overflow(0x7FFF) == (0x7FFF, 0)
        assert kind.split_overflow(0x8005) == (5, 1)

    def test_native_split_large_carry(self) -> None:
        kind = NativeWordKind(UINT8)
        assert kind.split_overflow(3 * 128 + 7) == (7, 3)

    def test_digit_split_clears_overflow(self) -> None:
        kind = DigitWordKind(U16)
        word, carry = kind.split_overflow(U16(65407))
        assert word == 5407
        assert carry == 6


# =============================================================================
# CONSTRUCTION
# =============================================================================


class TestConstruction:
    """Тесты построения WordSequence"""

    def test_factory_is_cached(self) -> None:
        assert WordSequence.of(UINT16) is S16
        assert WordSequence.of(DigitWord.of(UINT16)) is D16

    def test_base_class_needs_element(self) -> None:
        with pytest.raises(TypeError, match="WordSequence.of"):
            WordSequence(1)

    def test_default_is_single_zero_word(self) -> None:
        s = S16()
        assert len(s) == 1
        assert s.is_zero()
        assert s.words == (0,)

    def test_small_native_scalar(self) -> None:
        assert S16(100).words == (100,)

    def test_native_top_bit_becomes_second_word(self) -> None:
        assert S16(65407).words == (0x7F7F, 1)

    def test_digit_word_overflow_becomes_second_word(self) -> None:
        assert D16(65407).words == (U16(5407), U16(6))

    def test_from_digit_word_copies(self) -> None:
        source = U16(65407)
        seq = D16(source)
        assert source.get_overflow_segment() == 6
        assert seq.words == (U16(5407), U16(6))

    def test_native_rejects_too_wide(self) -> None:
        with pytest.raises(ValueError, match="does not fit"):
            S16(1 << 16)

    def test_native_rejects_non_int(self) -> None:
        with pytest.raises(TypeError):
            S16("5")

    def test_int_conversion(self) -> None:
        assert int(S16(65407)) == 65407
        assert int(D16(65407)) == 65407


# =============================================================================
# SEGMENTED NUMBER CONTRACT
# =============================================================================


class TestSegmentedContract:
    """Тесты контракта для WordSequence"""

    def test_index_equal_to_count_reads_zero(self) -> None:
        assert S16(5).get_word(1) == 0
        assert D16(5).get_word(1).is_zero()

    def test_index_above_count_raises(self) -> None:
        with pytest.raises(WordIndexError):
            S16(5).get_word(2)

    def test_set_word_splits_carry(self) -> None:
        s = S16()
        assert s.set_word(0, 0x8005) == 1
        assert s.words == (5,)

    def test_set_word_at_count_appends(self) -> None:
        s = S16(1)
        s.set_word(1, 2)
        assert s.words == (1, 2)

    def test_set_word_keeps_own_copy(self) -> None:
        seq = D16()
        word = U16(12)
        seq.set_word(0, word)
        word += 5
        assert str(seq) == "12"

    def test_set_word_leaves_caller_overflow(self) -> None:
        seq = D16()
        word = U16(65407)
        carry = seq.set_word(0, word)
        assert carry == 6
        assert word.get_overflow_segment() == 6
        assert seq.words == (U16(5407),)

    def test_set_overflow_leaves_caller_value(self) -> None:
        seq = D16(1)
        overflow = U16(65407)
        seq.set_overflow(overflow)
        assert overflow.get_overflow_segment() == 6
        assert seq.words == (U16(1), U16(5407), U16(6))

    def test_resize_grows_with_zero_words(self) -> None:
        s = S16(7)
        s.resize(3)
        assert s.words == (7, 0, 0)
        assert int(s) == 7

    def test_resize_shrink_raises(self) -> None:
        s = S16(65407)
        with pytest.raises(UnsupportedResizeError, match="cannot shrink"):
            s.resize(1)

    def test_set_overflow_zero_adds_nothing(self) -> None:
        s = S16(3)
        s.set_overflow(0)
        assert len(s) == 1

    def test_set_overflow_appends_word(self) -> None:
        s = S16(3)
        s.set_overflow(2)
        assert s.words == (3, 2)

    def test_set_overflow_splits_wide_value(self) -> None:
        s = S16()
        s.set_overflow(1 << 40)
        assert s.words == (0, 0, 0, 1 << 10)
        assert int(s) == 1 << 55

    def test_overflow_segment_is_zero_word(self) -> None:
        assert S16(65407).get_overflow_segment() == 0
        assert D16(65407).get_overflow_segment().is_zero()

    def test_is_zero_checks_every_word(self) -> None:
        s = S16()
        s.resize(3)
        assert s.is_zero()
        s.set_word(2, 1)
        assert not s.is_zero()


# =============================================================================
# ADDITION
# =============================================================================


class TestAddition:
    """Тесты сложения"""

    def test_digit_word_sequence(self) -> None:
        """WordSequence[DigitWord[u16]]: 65407 + 65407"""
        xyz = D16(0xFF7F)
        xyz += U16(0xFF7F)
        assert xyz.words == (U16(814), U16(13))
        assert xyz.to_string(10) == "130814"

    def test_native_sequence(self) -> None:
        """WordSequence[u16]: 65407 + 65407"""
        seq = S16(0xFF7F)
        seq += 0xFF7F
        assert seq.words == (32510, 3)
        assert seq.to_string(10) == "130814"

    def test_both_paths_agree(self) -> None:
        digit_seq = D16(0xFF7F) + D16(0xFF7F)
        native_seq = S16(0xFF7F) + S16(0xFF7F)
        assert int(digit_seq) == int(native_seq) == 130814
        assert str(digit_seq) == str(native_seq)
        assert native_seq.to_digit_words(10) == digit_seq

    def test_shorter_operand_padded(self) -> None:
        total = S16(5) + S16(65407)
        assert total.words == (32644, 1)
        assert int(total) == 65412

    def test_pure_add_leaves_operands(self) -> None:
        a = D16(9999)
        b = D16(1)
        c = a + b
        assert str(c) == "10000"
        assert str(a) == "9999"
        assert str(b) == "1"

    def test_carry_ripples_into_new_word(self) -> None:
        a = D16(9999)
        a += 1
        assert a.words == (U16(0), U16(1))
        assert str(a) == "10000"

    def test_word_count_never_decreases(self) -> None:
        s = S16(1)
        counts = [len(s)]
        for _ in range(40):
            s += s
            counts.append(len(s))

        assert counts == sorted(counts)
        assert int(s) == 1 << 40

    def test_add_int(self) -> None:
        assert int(S16(1) + 5) == 6
        assert int(5 + S16(1)) == 6

    def test_add_other_sequence_type(self) -> None:
        with pytest.raises(TypeError):
            S16(1) + D16(1)

    def test_add_none_rejected(self) -> None:
        with pytest.raises(TypeError):
            S16(5) + None
        with pytest.raises(TypeError):
            None + D16(5)


# =============================================================================
# MULTIPLICATION
# =============================================================================


class TestMultiplication:
    """Тесты умножения на слово"""

    def test_native_scalar(self) -> None:
        product = S16(65407) * 3
        assert int(product) == 196221
        assert str(product) == "196221"

    def test_native_in_place(self) -> None:
        s = S16(0x7FFF)
        s *= 2
        assert s.words == (0x7FFE, 1)

    def test_digit_word_scalar(self) -> None:
        assert str(D16(65407) * 2) == "130814"

    def test_digit_word_square(self) -> None:
        assert str(D16(9999) * 9999) == "99980001"

    def test_internal_zero_word_printed_in_full(self) -> None:
        seq = D16(65407)
        seq *= 10000
        assert seq.words == (U16(0), U16(5407), U16(6))
        assert str(seq) == "654070000"

    def test_native_factorial(self) -> None:
        f = S16(1)
        for k in range(2, 21):
            f *= k
        assert int(f) == math.factorial(20)
        assert str(f) == str(math.factorial(20))

    def test_digit_word_factorial(self) -> None:
        D32 = WordSequence.of(DigitWord.of(UINT32))
        f = D32(1)
        for k in range(2, 26):
            f *= k
        assert str(f) == str(math.factorial(25))

    def test_scalar_wider_than_word(self) -> None:
        with pytest.raises(ValueError, match="does not fit"):
            S16(1) * (1 << 16)


# =============================================================================
# COMPARISON & PRINTING
# =============================================================================


class TestComparison:
    """Тесты сравнения"""

    def test_equal_values(self) -> None:
        assert S16(5) == S16(5)
        assert D16(65407) == D16(65407)
        assert S16(5) != S16(6)

    def test_high_zero_words_ignored(self) -> None:
        a = S16(5)
        a.resize(3)
        assert a == S16(5)

    def test_different_element_types(self) -> None:
        assert S16(5) != D16(5)

    def test_copy_is_independent(self) -> None:
        a = D16(5)
        b = a.copy()
        b += 1
        assert str(a) == "5"
        assert str(b) == "6"

    def test_words_snapshot_is_a_copy(self) -> None:
        seq = D16(5)
        seq.words[0].set_word(0, 9)
        assert str(seq) == "5"


class TestPrinting:
    """Тесты печати"""

    def test_zero(self) -> None:
        assert str(S16()) == "0"
        assert str(D16()) == "0"
        assert S16().to_string() == ""

    def test_leading_zeroes_of_top_word(self) -> None:
        assert D16(42).to_string(leading_zeroes=True) == "0042"

    def test_high_zero_word_does_not_add_leading_zeroes(self) -> None:
        seq = D16(65407)
        seq.resize(3)
        assert str(seq) == "65407"

    def test_native_in_hex(self) -> None:
        seq = S16(0xFF7F) + S16(0xFF7F)
        assert seq.to_string(16) == "1fefe"

    def test_native_in_binary(self) -> None:
        assert S16(5).to_string(2) == "101"

    def test_native_u8_words(self) -> None:
        S8 = WordSequence.of(UINT8)
        seq = S8(255)
        seq += 255
        assert seq.words == (126, 3)
        assert str(seq) == "510"

    def test_digit_words_in_other_base_rejected(self) -> None:
        with pytest.raises(ValueError, match="cannot print"):
            D16(5).to_string(16)

    def test_hex_digit_word_sequence(self) -> None:
        H16 = WordSequence.of(DigitWord.of(UINT16, base=16))
        seq = H16(0xFFFF)
        seq += 1
        assert str(seq) == "10000"

    def test_to_digit_words_only_for_native(self) -> None:
        with pytest.raises(TypeError, match="already digit words"):
            D16(5).to_digit_words(10)
