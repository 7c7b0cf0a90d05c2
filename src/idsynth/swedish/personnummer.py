"""
Swedish personnummer (personal identity number) encoding and validation.

Format: YYMMDD-XXXC or YYMMDD+XXXC (11 characters)
- First 6 digits: birth date, two-digit year
- Separator: '-' for people under 100, '+' for people 100 or older
- Next 3 digits: serial (birth number), never 000
- Last digit: Luhn checksum over the date and serial digits

The separator is the only century signal; the date digits never carry one.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

logger = logging.getLogger(__name__)

PERSONNUMMER_LENGTH = 11
SEPARATORS = ("+", "-")

# Reference century for two-digit years (matches the yyMMdd parse rule)
BASE_CENTURY = 2000

_DATE_RE = re.compile(r"[0-9]{6}")
_TAIL_RE = re.compile(r"[0-9]{4}")


@dataclass(frozen=True)
class PersonnummerCheck:
    """Outcome of validating a personnummer candidate."""

    is_valid: bool
    reason: Optional[str] = None  # Name of the first failed rule


def encode_date(d: date) -> str:
    """Encode a date as YYMMDD, truncating the year to two digits."""
    return f"{d.year % 100:02d}{d.month:02d}{d.day:02d}"


def decode_date(digits: str) -> Optional[date]:
    """
    Decode YYMMDD into a date.

    The decoded date is re-encoded and compared with the input, so only
    strings that name a real calendar day are accepted. Returns None for
    anything that does not decode, never raises.
    """
    if not isinstance(digits, str) or not _DATE_RE.fullmatch(digits):
        return None

    year = int(digits[:2])
    month = int(digits[2:4])
    day = int(digits[4:6])

    if not 1 <= month <= 12 or not 1 <= day <= 31:
        return None

    try:
        decoded = date(BASE_CENTURY + year, month, day)
    except ValueError:
        # Day overflow for the month, e.g. 30 February
        return None

    if encode_date(decoded) != digits:
        return None
    return decoded


def luhn_checksum(digits: str) -> int:
    """
    Calculate the personnummer check digit over 9 digits.

    The Luhn variant:
    1. Double the digits at even positions (0, 2, 4, 6, 8)
    2. Sum the decimal digits of every product and kept digit
    3. Checksum is (10 - (sum % 10)) % 10
    """
    if len(digits) != 9 or not digits.isascii() or not digits.isdigit():
        raise ValueError(f"Expected 9 digits, got {digits!r}")

    total = 0
    for i, digit in enumerate(digits):
        d = int(digit)
        if i % 2 == 0:
            d *= 2
        total += d // 10 + d % 10
    return (10 - (total % 10)) % 10


def calculate_checksum(number: str) -> int:
    """Check digit for a YYMMDD?XXX[C] candidate, ignoring the separator."""
    return luhn_checksum(number[:6] + number[7:10])


def _reject(candidate: Any, reason: str) -> PersonnummerCheck:
    logger.debug("Rejected personnummer candidate %r: %s", candidate, reason)
    return PersonnummerCheck(is_valid=False, reason=reason)


def validate_personnummer(candidate: Any) -> PersonnummerCheck:
    """
    Validate a Swedish personnummer in YYMMDD-XXXC / YYMMDD+XXXC form.

    Rules are checked in order and the first failure is reported:
    length, date, separator, format, serial, checksum.

    Never raises; malformed input produces a failed PersonnummerCheck.
    """
    if not isinstance(candidate, str):
        return _reject(candidate, "not_a_string")

    if len(candidate) != PERSONNUMMER_LENGTH:
        return _reject(candidate, "length")

    if decode_date(candidate[:6]) is None:
        return _reject(candidate, "date")

    if candidate[6] not in SEPARATORS:
        return _reject(candidate, "separator")

    if not _TAIL_RE.fullmatch(candidate[7:]):
        return _reject(candidate, "format")

    if candidate[7:10] == "000":
        return _reject(candidate, "serial")

    if calculate_checksum(candidate) != int(candidate[10]):
        return _reject(candidate, "checksum")

    return PersonnummerCheck(is_valid=True)


def is_valid_swedish_ssn(candidate: Any) -> bool:
    """Return True if candidate is a valid personnummer."""
    return validate_personnummer(candidate).is_valid
