from .base import BoundaryError, WORD_SIZE_IN_BITS, WidthError


def word_count_for_bits(bits: int) -> int:
    """Number of 64-bit words needed to hold `bits` bits (never less than one)."""
    if bits < 0:
        raise BoundaryError(f"Bit count must be non-negative, got {bits}")
    if bits == 0:
        return 1
    if bits % WORD_SIZE_IN_BITS == 0:
        return bits // WORD_SIZE_IN_BITS
    return (bits // WORD_SIZE_IN_BITS) + 1


def word_index_for_bit(bit: int) -> int:
    """Index of the word holding absolute bit position `bit`."""
    if bit < 0:
        raise BoundaryError(f"Bit position must be non-negative, got {bit}")
    return bit // WORD_SIZE_IN_BITS


def last_word_index(offset: int, bits: int) -> int:
    """
    Index of the word holding the last occupied bit of a field.

    The last bit of an n-bit field at `offset` is `offset + bits - 1`. Using
    `offset + bits` instead points one word too far whenever the field ends
    exactly on a word boundary.
    """
    if bits == 0:
        return word_index_for_bit(offset)
    return word_index_for_bit(offset + bits - 1)


def bit_in_word(bit: int) -> int:
    return bit % WORD_SIZE_IN_BITS


def low_bits_mask(bits: int) -> int:
    if not 0 <= bits <= WORD_SIZE_IN_BITS:
        raise WidthError(f"Mask width must be within 0..{WORD_SIZE_IN_BITS}, got {bits}")
    return (1 << bits) - 1
