from collections.abc import Iterable
import logging


logger = logging.getLogger(__name__)


DIGITS = frozenset("0123456789")

# Range of a 64-bit unsigned machine integer
UNSIGNED_MAX = 2**64 - 1

# Key used when a filename yields no usable number
FALLBACK_KEY = 0


def extract_digits(name: str) -> str:
    "Concatenate every ASCII decimal digit of `name`, keeping their order."
    return "".join(char for char in name if char in DIGITS)


def parse_unsigned(digits: str) -> int:
    """
    Parse a string of ASCII digits as an unsigned integer.

    Falls back to FALLBACK_KEY when there are no digits or when the value
    does not fit in UNSIGNED_MAX.
    """
    if not digits:
        return FALLBACK_KEY

    # Leading zeros count toward int()'s digit limit, drop them first.
    significant = digits.lstrip("0")

    # Anything longer than the widest representable value cannot fit.
    if len(significant) > len(str(UNSIGNED_MAX)):
        logger.debug(
            "Digit run of length %d is too long, using %d", len(digits), FALLBACK_KEY
        )
        return FALLBACK_KEY

    value = int(significant or "0")
    if value > UNSIGNED_MAX:
        logger.debug("Digit run %r overflows, using %d", digits, FALLBACK_KEY)
        return FALLBACK_KEY

    return value


def numeric_key(name: str) -> int:
    return parse_unsigned(extract_digits(name))


def compare_filenames(a: str, b: str) -> int:
    key_a, key_b = numeric_key(a), numeric_key(b)
    return (key_a > key_b) - (key_a < key_b)


def sort_filenames(names: Iterable[str]) -> tuple[str, ...]:
    # sorted() is stable, names with equal keys keep their input order.
    return tuple(sorted(names, key=numeric_key))
