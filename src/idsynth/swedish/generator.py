"""
Swedish personnummer generation for test data.

Valid numbers combine a birth date, a random serial and a random
separator with the Luhn check digit. The separator is picked at random
and does not follow the age of the generated person.

Invalid numbers are sampled from the personnummer shape until one fails
validation, so they look plausible but are guaranteed to be rejected.
"""

import logging
import warnings
from typing import Optional

from idsynth.base import GenerationError, IdNumberGenerator, register_generator
from idsynth.config import settings
from idsynth.providers import Providers
from idsynth.schemas import IdNumberRequest, PersonIdNumber
from idsynth.swedish.personnummer import (
    SEPARATORS,
    calculate_checksum,
    encode_date,
    is_valid_swedish_ssn,
)

logger = logging.getLogger(__name__)

COUNTRY_CODE = "SE"

INVALID_PATTERNS = ("######-####", "######+####")

# Known valid number, guarantees at least one sampling round
VALID_SEED = "121212-1212"


@register_generator
class SwedenIdNumber(IdNumberGenerator):
    """Generator for Swedish personnummer."""

    COUNTRY_CODE = COUNTRY_CODE

    def __init__(
        self,
        providers: Optional[Providers] = None,
        max_invalid_attempts: Optional[int] = None,
    ):
        self.providers = providers or Providers.create()
        if max_invalid_attempts is None:
            max_invalid_attempts = settings.max_invalid_attempts
        self.max_invalid_attempts = max_invalid_attempts

    def generate_end_part(self) -> str:
        """Random three digit serial, 001-999."""
        return f"{self.providers.random.uniform_int(1, 999):03d}"

    def generate_valid(
        self, request: Optional[IdNumberRequest] = None
    ) -> PersonIdNumber:
        """
        Generate a valid personnummer.

        Args:
            request: Age and gender constraints (default: settings age range, any gender)

        Returns:
            PersonIdNumber with the number, birth date and gender
        """
        if request is None:
            request = IdNumberRequest(
                min_age=settings.default_min_age,
                max_age=settings.default_max_age,
            )

        birth_date = self.providers.birthday.pick(request)
        serial = self.generate_end_part()
        separator = self.providers.random.pick_one(SEPARATORS)

        base_part = encode_date(birth_date) + separator + serial
        id_number = f"{base_part}{calculate_checksum(base_part)}"

        gender = self.providers.gender.infer(request, serial)
        logger.debug("Generated personnummer %s (born %s)", id_number, birth_date)

        return PersonIdNumber(id_number=id_number, birth_date=birth_date, gender=gender)

    def generate_invalid(self) -> str:
        """
        Generate a personnummer-shaped string that fails validation.

        Raises:
            GenerationError: If every sampled candidate was valid
        """
        candidate = VALID_SEED
        attempts = 0
        while is_valid_swedish_ssn(candidate):
            if attempts >= self.max_invalid_attempts:
                raise GenerationError(
                    f"No invalid personnummer after {attempts} attempts"
                )
            pattern = self.providers.random.pick_one(INVALID_PATTERNS)
            candidate = self.providers.random.fill_pattern(pattern)
            attempts += 1

        logger.debug(
            "Generated invalid personnummer %s after %d attempts", candidate, attempts
        )
        return candidate

    def get_valid_ssn(self) -> str:
        """Deprecated alias of generate_valid_ssn."""
        warnings.warn(
            "get_valid_ssn is deprecated, use generate_valid_ssn",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.generate_valid_ssn()

    def get_invalid_ssn(self) -> str:
        """Deprecated alias of generate_invalid."""
        warnings.warn(
            "get_invalid_ssn is deprecated, use generate_invalid",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.generate_invalid()
