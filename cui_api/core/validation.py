import logging
import re


logger = logging.getLogger(__name__)

MIN_CUI_LENGTH = 4
MAX_CUI_LENGTH = 10
BASE_LENGTH = MAX_CUI_LENGTH - 1
WEIGHT_KEY = (7, 5, 3, 2, 1, 7, 5, 3, 2)

# [0-9] rather than \d: str patterns match every Unicode Nd digit with \d
_DIGITS_RE = re.compile(r'[0-9]*')
_BASE_RE = re.compile(r'[0-9]{1,%d}' % BASE_LENGTH)


def compute_check_digit(base: str) -> str:
    """Return the expected check digit for a CUI base (the number without its last digit).

    The base is left-padded with zeros to 9 digits, weighted with 753217532
    and reduced modulo 11. A remainder of 10 maps to '0'.

    Raises:
        ValueError: if base is not 1-9 ASCII digits
    """
    if not isinstance(base, str) or not _BASE_RE.fullmatch(base):
        raise ValueError(f"CUI base must be 1-{BASE_LENGTH} ASCII digits")

    padded = base.rjust(BASE_LENGTH, '0')
    total = sum(int(digit) * weight for digit, weight in zip(padded, WEIGHT_KEY))
    rest = total % 11
    if rest == 10:
        return '0'
    return str(rest)


def validate_cui(cui: str) -> bool:
    """Check a Romanian company identification number (CUI).

    Never raises: malformed input (non-digits, wrong length) is simply invalid.
    """
    if not isinstance(cui, str) or not _DIGITS_RE.fullmatch(cui):
        logger.debug("CUI rejected: non-digit characters")
        return False

    if not MIN_CUI_LENGTH <= len(cui) <= MAX_CUI_LENGTH:
        logger.debug(f"CUI rejected: length {len(cui)} outside {MIN_CUI_LENGTH}-{MAX_CUI_LENGTH}")
        return False

    return cui[-1] == compute_check_digit(cui[:-1])
