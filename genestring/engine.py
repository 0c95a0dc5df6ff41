import array
import logging
import random
from typing import Callable, Iterable, List, Optional

from .base import (
    BoundaryError,
    Field,
    WORD_SIZE_IN_BITS,
    WORD_SIZE_IN_BYTES,
    WidthError,
)
from .sizing import (
    bit_in_word,
    last_word_index,
    low_bits_mask,
    word_count_for_bits,
    word_index_for_bit,
)


logger = logging.getLogger(__name__)

WordGenerator = Callable[[], int]


def random_words(rng: Optional[random.Random] = None) -> WordGenerator:
    """Build a zero-argument word generator for `Genestring.fill`."""
    source = rng if rng is not None else random

    def next_word() -> int:
        return source.getrandbits(WORD_SIZE_IN_BITS)

    return next_word


class Genestring:
    """
    Fixed-capacity bit-addressable array packed into 64-bit words.

    Bit positions are absolute and 0-based, least significant bit first
    within each word. Fields of up to 64 bits are read and written with
    `get`/`set`; wider fields are copied between arrays with `transplant`.
    """

    def __init__(self, word_count: int = 0):
        self._words = array.array("Q")  # unsigned 64-bit words
        self._words.extend([0] * word_count)

    @classmethod
    def with_bit_capacity(cls, count: int) -> "Genestring":
        """Creates a zeroed genestring holding at least `count` bits."""
        result = cls(word_count_for_bits(count))
        logger.debug(f"Allocated {result.word_len} words for {count} bits")
        return result

    @classmethod
    def from_words(cls, words: Iterable[int]) -> "Genestring":
        """Creates a genestring holding a copy of `words`, index 0 first."""
        result = cls()
        result._words = array.array("Q", words)
        return result

    # --- Capacity ---

    @property
    def bit_len(self) -> int:
        return len(self._words) * WORD_SIZE_IN_BITS

    @property
    def byte_len(self) -> int:
        return len(self._words) * WORD_SIZE_IN_BYTES

    @property
    def word_len(self) -> int:
        return len(self._words)

    @property
    def is_empty(self) -> bool:
        return len(self._words) == 0

    def __len__(self) -> int:
        return len(self._words)

    # --- Validation ---

    @staticmethod
    def _check_width(bits: int):
        if bits < 0 or bits > WORD_SIZE_IN_BITS:
            raise WidthError(f"Can only access 0..{WORD_SIZE_IN_BITS} bits at a time, got {bits}")

    @staticmethod
    def _check_range(offset: int, bits: int, capacity: int, role: str = "genestring"):
        if offset < 0:
            raise BoundaryError(f"Offset must be non-negative, got {offset}")
        if offset + bits > capacity:
            raise BoundaryError(
                f"Bits [{offset}, {offset + bits}) are out of bounds for {role} of {capacity} bits"
            )

    # --- Field access ---

    def get(self, offset: int, bits: int) -> int:
        """
        Read the `bits`-wide unsigned integer stored at bit `offset`.

        Args:
            offset: Absolute position of the field's lowest bit.
            bits: Field width, 0 to 64.

        Raises:
            WidthError: `bits` is above 64 or negative.
            BoundaryError: the field does not fit in the array.
        """
        self._check_width(bits)
        self._check_range(offset, bits, self.bit_len)
        if bits == 0:
            return 0

        first = word_index_for_bit(offset)
        last = last_word_index(offset, bits)
        shift = bit_in_word(offset)

        if first == last:
            return (self._words[first] >> shift) & low_bits_mask(bits)

        # Field straddles two words: low part ends word `first`, high part
        # starts word `last`.
        low_width = WORD_SIZE_IN_BITS - shift
        high_width = bits - low_width
        low = self._words[first] >> shift
        high = self._words[last] & low_bits_mask(high_width)
        return low | (high << low_width)

    def set(self, offset: int, bits: int, value: int):
        """
        Write the low `bits` bits of `value` at bit `offset`.

        Bits outside the field are left untouched. Both words of a
        straddling field are validated before either is written.
        """
        self._check_width(bits)
        self._check_range(offset, bits, self.bit_len)
        if bits == 0:
            return

        value &= low_bits_mask(bits)
        first = word_index_for_bit(offset)
        last = last_word_index(offset, bits)
        shift = bit_in_word(offset)

        if first == last:
            mask = low_bits_mask(bits) << shift
            self._words[first] = (self._words[first] & ~mask) | (value << shift)
            return

        low_width = WORD_SIZE_IN_BITS - shift
        high_width = bits - low_width

        low_mask = low_bits_mask(low_width) << shift
        self._words[first] = (self._words[first] & ~low_mask) | ((value & low_bits_mask(low_width)) << shift)

        high_mask = low_bits_mask(high_width)
        self._words[last] = (self._words[last] & ~high_mask) | (value >> low_width)

    def get_field(self, field: Field) -> int:
        return self.get(field.offset, field.bits)

    def set_field(self, field: Field, value: int):
        self.set(field.offset, field.bits, value)

    # --- Bulk operations ---

    def fill(self, generator: WordGenerator):
        """
        Replace every word with the next value from `generator`, index 0 first.

        The assumed usage is inserting random values for new DNA, e.g.
        `genes.fill(random_words())`.
        """
        for index in range(len(self._words)):
            self._words[index] = generator()
        logger.debug(f"Refilled {len(self._words)} words")

    def transplant(self, donor: "Genestring", offset: int, bits: int):
        """
        Copy the field [offset, offset+bits) from `donor` into this genestring.

        Fields wider than 64 bits are copied as consecutive 64-bit windows
        followed by one shorter window for the remainder. The donor is only
        read. The assumed usage is crossover between generations.

        Raises:
            WidthError: `bits` is negative.
            BoundaryError: the field does not fit in either genestring.
        """
        if bits < 0:
            raise WidthError(f"Field width must be non-negative, got {bits}")
        self._check_range(offset, bits, self.bit_len, "destination")
        self._check_range(offset, bits, donor.bit_len, "donor")

        if donor is self:
            # Source and destination positions coincide.
            return

        if bits <= WORD_SIZE_IN_BITS:
            self.set(offset, bits, donor.get(offset, bits))
            logger.debug(f"Transplanted [{offset}, {offset + bits}) in 1 window")
            return

        end = offset + bits
        position = offset
        windows = 0
        while end - position >= WORD_SIZE_IN_BITS:
            self.set(position, WORD_SIZE_IN_BITS, donor.get(position, WORD_SIZE_IN_BITS))
            position += WORD_SIZE_IN_BITS
            windows += 1

        remaining = end - position
        if remaining:
            self.set(position, remaining, donor.get(position, remaining))
            windows += 1

        logger.debug(f"Transplanted [{offset}, {end}) in {windows} windows")

    def transplant_field(self, donor: "Genestring", field: Field):
        self.transplant(donor, field.offset, field.bits)

    # --- Misc ---

    def words(self) -> List[int]:
        """Snapshot of the word sequence."""
        return self._words.tolist()

    def copy(self) -> "Genestring":
        return Genestring.from_words(self._words)

    def __eq__(self, other):
        if not isinstance(other, Genestring):
            return NotImplemented
        return self._words == other._words

    __hash__ = None

    def __repr__(self) -> str:
        words = ", ".join(f"0x{word:016X}" for word in self._words)
        return f"Genestring(words={self.word_len}, [{words}])"
