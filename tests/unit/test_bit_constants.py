"""
Тесты для модуля Bit Constants

Проверяет:
1. Ширину слота цифры ceil_log2(base + 1)
2. Битовые маски
3. Недопустимые аргументы
"""

import pytest

from radixnum.core.math.bit_constants import bits_mask, ceil_log2


class TestCeilLog2:
    """Тесты для ceil_log2"""

    @pytest.mark.parametrize(
        "n, expected",
        [(1, 1), (2, 2), (3, 2), (4, 3), (7, 3), (8, 4), (11, 4), (16, 5), (17, 5), (37, 6)],
    )
    def test_values(self, n: int, expected: int) -> None:
        assert ceil_log2(n) == expected

    def test_digit_slot_widths(self) -> None:
        """Ширина слота для типичных оснований"""
        assert ceil_log2(2 + 1) == 2
        assert ceil_log2(10 + 1) == 4
        assert ceil_log2(16 + 1) == 5
        assert ceil_log2(36 + 1) == 6

    def test_zero_undefined(self) -> None:
        with pytest.raises(ValueError, match="undefined"):
            ceil_log2(0)

    def test_negative_undefined(self) -> None:
        with pytest.raises(ValueError, match="undefined"):
            ceil_log2(-5)


class TestBitsMask:
    """Тесты для bits_mask"""

    def test_values(self) -> None:
        assert bits_mask(0) == 0
        assert bits_mask(1) == 1
        assert bits_mask(4) == 0xF
        assert bits_mask(8) == 0xFF
        assert bits_mask(64) == 0xFFFF_FFFF_FFFF_FFFF

    def test_mask_covers_digit(self) -> None:
        """Маска слота покрывает любую цифру основания"""
        for base in range(2, 37):
            assert base - 1 <= bits_mask(ceil_log2(base + 1))

    def test_negative_width_raises(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            bits_mask(-1)
