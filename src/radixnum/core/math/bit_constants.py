"""
Bit Constants — ширина разряда и битовые маски

Константные функции для раскладки цифр внутри машинного слова:
- ceil_log2(n): сколько бит нужно, чтобы хранить значения 0..n-1 с запасом
  под значение n (используется как ширина слота цифры для основания base,
  вызывается с n = base + 1)
- bits_mask(n): маска из n единичных бит

Результаты кэшируются: функции вызываются при построении каждого класса
DigitWord и не зависят ни от чего, кроме аргумента.
"""

from functools import lru_cache


@lru_cache(maxsize=None)
def ceil_log2(n: int) -> int:
    """
    Ширина в битах, достаточная для хранения n.

    Считается рекурсивно: ceil_log2(1) = 1, ceil_log2(n) = 1 + ceil_log2(n >> 1).
    Для n = base + 1 это даёт ширину слота цифры.

    Args:
        n: Положительное целое

    Returns:
        Количество бит (>= 1)

    Raises:
        ValueError: Если n < 1 (log2(0) не определён)

    Examples:
        >>> ceil_log2(1)
        1
        >>> ceil_log2(11)  # base 10
        4
        >>> ceil_log2(17)  # base 16
        5
    """
    if n < 1:
        raise ValueError(f"ceil_log2 is undefined for n < 1, got {n}")

    if n == 1:
        return 1

    return 1 + ceil_log2(n >> 1)


@lru_cache(maxsize=None)
def bits_mask(n: int) -> int:
    """
    Маска из n младших единичных бит.

    Examples:
        >>> bits_mask(0)
        0
        >>> bits_mask(4)
        15
    """
    if n < 0:
        raise ValueError(f"bits_mask width must be non-negative, got {n}")

    return (1 << n) - 1
