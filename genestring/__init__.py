from typing import Optional

from .base import (
    BoundaryError,
    Field,
    GenestringError,
    WORD_MASK,
    WORD_SIZE_IN_BITS,
    WORD_SIZE_IN_BYTES,
    WidthError,
)
from .engine import Genestring, WordGenerator, random_words
from .sizing import (
    bit_in_word,
    last_word_index,
    low_bits_mask,
    word_count_for_bits,
    word_index_for_bit,
)


__all__ = [
    "Genestring",
    "Field",
    "GenestringError",
    "WidthError",
    "BoundaryError",
    "WordGenerator",
    "random_words",
    "word_count_for_bits",
    "word_index_for_bit",
    "last_word_index",
    "bit_in_word",
    "low_bits_mask",
    "WORD_SIZE_IN_BITS",
    "WORD_SIZE_IN_BYTES",
    "WORD_MASK",
    "new_genestring"
]

__version__ = "1.0.0"


def new_genestring(bits: int, filler: Optional[WordGenerator] = None) -> Genestring:
    """
    Factory function to build a genestring for a genome of `bits` bits.

    Args:
        bits: Requested capacity, rounded up to whole 64-bit words.
        filler: Optional word generator used to fill the new array,
                e.g. `random_words()`. Left zeroed if not provided.
    """
    genes = Genestring.with_bit_capacity(bits)
    if filler is not None:
        genes.fill(filler)
    return genes
