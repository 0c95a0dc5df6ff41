from dataclasses import dataclass


WORD_SIZE_IN_BITS = 64
WORD_SIZE_IN_BYTES = 8
WORD_MASK = (1 << WORD_SIZE_IN_BITS) - 1


class GenestringError(Exception):
    """Base class for genestring errors."""


class WidthError(GenestringError, ValueError):
    """Raised when a single access asks for more than one word of bits."""


class BoundaryError(GenestringError, IndexError):
    """Raised when a bit range falls outside the array."""


@dataclass(frozen=True)
class Field:
    """A contiguous run of bits, addressed by absolute offset and width."""
    offset: int
    bits: int

    @property
    def end(self) -> int:
        """First bit position past the field."""
        return self.offset + self.bits

    @property
    def last_bit(self) -> int:
        # A zero-width field occupies no bit; report its start instead.
        if self.bits == 0:
            return self.offset
        return self.offset + self.bits - 1

    def __str__(self) -> str:
        return f"[{self.offset}, {self.end})"
