"""Small integer helpers for bit masks, alignment and error-value checks."""

MAX_ERRNO = 4095
WORD_BITS = 32
_WORD_MASK = (1 << WORD_BITS) - 1


def bit(b: int) -> int:
    """Return an integer with only bit ``b`` set."""
    if b < 0:
        raise ValueError(f"bit index must not be negative: {b}")
    return 1 << b


def mask(width: int) -> int:
    """Return an integer with the lowest ``width`` bits set."""
    return bit(width) - 1


def align(x: int, a: int) -> int:
    """Round ``x`` up to the next multiple of ``a``, which must be a power of two."""
    if a <= 0 or a & (a - 1):
        raise ValueError(f"alignment must be a positive power of two: {a}")
    m = a - 1
    return (x + m) & ~m


def roundup(x: int, y: int) -> int:
    """Round ``x`` up to the next multiple of ``y``."""
    if y <= 0:
        raise ValueError(f"divisor must be positive: {y}")
    return ((x + y - 1) // y) * y


def is_err_value(x: int) -> bool:
    """Tell whether ``x``, read as an unsigned machine word, encodes an error number."""
    return (x & _WORD_MASK) >= ((-MAX_ERRNO) & _WORD_MASK)