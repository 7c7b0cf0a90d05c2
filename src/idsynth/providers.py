"""
Default collaborators for identity number generation.

Generators only rely on the small contracts below, so any object with the
same methods can be injected instead:

- RandomSource: uniform_int(lo, hi), pick_one(options), fill_pattern(pattern)
- BirthdayPolicy: pick(request) -> date
- GenderPolicy: infer(request, serial) -> Gender
"""

import logging
import random
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional, Sequence, TypeVar

from idsynth.config import settings
from idsynth.schemas import Gender, IdNumberRequest

logger = logging.getLogger(__name__)

T = TypeVar("T")

DIGIT_PLACEHOLDER = "#"


class RandomSource:
    """Random numbers and choices backed by a private random.Random."""

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = settings.random_seed
        self._random = random.Random(seed)

    def uniform_int(self, lo: int, hi: int) -> int:
        """Random integer in [lo, hi], both bounds inclusive."""
        return self._random.randint(lo, hi)

    def pick_one(self, options: Sequence[T]) -> T:
        """Pick one option uniformly at random."""
        if not options:
            raise ValueError("Cannot pick from an empty sequence")
        return self._random.choice(options)

    def fill_pattern(self, pattern: str) -> str:
        """Replace every '#' in pattern with a random digit."""
        return "".join(
            str(self._random.randint(0, 9)) if ch == DIGIT_PLACEHOLDER else ch
            for ch in pattern
        )


def _years_before(d: date, years: int) -> date:
    """Same calendar day `years` earlier; 29 February falls back to the 28th."""
    try:
        return d.replace(year=d.year - years)
    except ValueError:
        return d.replace(year=d.year - years, day=28)


class BirthdayPolicy:
    """Picks a birth date giving an age within the request's bounds."""

    def __init__(self, random_source: RandomSource, today: Optional[date] = None):
        self.random_source = random_source
        self.today = today

    def date_range(self, request: IdNumberRequest) -> tuple[date, date]:
        """Earliest and latest birth date for the requested age range."""
        today = self.today or date.today()
        latest = _years_before(today, request.min_age)
        earliest = _years_before(today, request.max_age + 1) + timedelta(days=1)
        return earliest, latest

    def pick(self, request: IdNumberRequest) -> date:
        earliest, latest = self.date_range(request)
        offset = self.random_source.uniform_int(0, (latest - earliest).days)
        return earliest + timedelta(days=offset)


class GenderPolicy:
    """Uses the requested gender, or picks one at random for ANY."""

    CHOICES = (Gender.MALE, Gender.FEMALE)

    def __init__(self, random_source: RandomSource):
        self.random_source = random_source

    def infer(self, request: IdNumberRequest, serial: str) -> Gender:
        if request.gender != Gender.ANY:
            return request.gender
        return self.random_source.pick_one(self.CHOICES)


class SerialParityGenderPolicy:
    """
    Derives gender from the last serial digit when the request allows any.

    Odd is male, even is female, as in real personnummer. The generated
    serial is not adjusted, so a specific requested gender may disagree
    with the serial parity.
    """

    def infer(self, request: IdNumberRequest, serial: str) -> Gender:
        if request.gender != Gender.ANY:
            return request.gender
        return Gender.MALE if int(serial[-1]) % 2 == 1 else Gender.FEMALE


@dataclass
class Providers:
    """The collaborators a generator needs, sharing one random source."""

    random: RandomSource
    birthday: BirthdayPolicy
    gender: GenderPolicy

    @classmethod
    def create(
        cls, seed: Optional[int] = None, today: Optional[date] = None
    ) -> "Providers":
        """Build the default collaborators around a single RandomSource."""
        source = RandomSource(seed)
        logger.debug("Created default providers (seed=%s)", seed)
        return cls(
            random=source,
            birthday=BirthdayPolicy(source, today=today),
            gender=GenderPolicy(source),
        )
