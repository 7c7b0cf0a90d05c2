"""Swedish personnummer encoding, validation and test-data generation."""

from idsynth.swedish.personnummer import (
    PersonnummerCheck,
    calculate_checksum,
    decode_date,
    encode_date,
    is_valid_swedish_ssn,
    luhn_checksum,
    validate_personnummer,
)
from idsynth.swedish.generator import (
    COUNTRY_CODE,
    INVALID_PATTERNS,
    VALID_SEED,
    SwedenIdNumber,
)

__all__ = [
    # Personnummer
    "PersonnummerCheck",
    "calculate_checksum",
    "decode_date",
    "encode_date",
    "is_valid_swedish_ssn",
    "luhn_checksum",
    "validate_personnummer",
    # Generator
    "COUNTRY_CODE",
    "INVALID_PATTERNS",
    "VALID_SEED",
    "SwedenIdNumber",
]
