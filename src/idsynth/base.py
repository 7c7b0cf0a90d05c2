"""
Generator interface and country registry.

Every national scheme implements IdNumberGenerator and registers itself
under its ISO 3166-1 alpha-2 country code.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from idsynth.schemas import IdNumberRequest, PersonIdNumber

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Raised when a generator cannot produce a number."""

    pass


class UnknownCountryError(LookupError):
    """Raised when no generator is registered for a country code."""

    pass


class IdNumberGenerator(ABC):
    """Base class for national identity number generators."""

    COUNTRY_CODE: str = ""

    def country_code(self) -> str:
        """ISO 3166-1 alpha-2 code of the scheme."""
        return self.COUNTRY_CODE

    @abstractmethod
    def generate_valid(
        self, request: Optional[IdNumberRequest] = None
    ) -> PersonIdNumber:
        """Generate a valid number honouring the request constraints."""
        pass

    @abstractmethod
    def generate_invalid(self) -> str:
        """Generate a well-shaped number that fails validation."""
        pass

    def generate_valid_ssn(self) -> str:
        """Generate a valid number with default constraints, string only."""
        return self.generate_valid().id_number


_REGISTRY: dict[str, type[IdNumberGenerator]] = {}


def register_generator(cls: type[IdNumberGenerator]) -> type[IdNumberGenerator]:
    """Class decorator adding a generator to the registry."""
    code = cls.COUNTRY_CODE.upper()
    if not code:
        raise ValueError(f"{cls.__name__} does not define COUNTRY_CODE")
    if code in _REGISTRY and _REGISTRY[code] is not cls:
        raise ValueError(f"Generator already registered for {code}")
    _REGISTRY[code] = cls
    logger.debug("Registered %s for %s", cls.__name__, code)
    return cls


def _load_builtin_generators() -> None:
    # Importing the scheme packages registers their generators
    import idsynth.swedish  # noqa: F401


def get_generator(country_code: str, **kwargs) -> IdNumberGenerator:
    """Instantiate the generator registered for a country code."""
    _load_builtin_generators()
    code = country_code.upper()
    try:
        cls = _REGISTRY[code]
    except KeyError:
        raise UnknownCountryError(
            f"No identity number generator for country {country_code!r}"
        ) from None
    return cls(**kwargs)


def available_country_codes() -> list[str]:
    """Sorted country codes with a registered generator."""
    _load_builtin_generators()
    return sorted(_REGISTRY)
