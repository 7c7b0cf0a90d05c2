#!/usr/bin/env python3
"""
Generate or check Swedish personnummer for test fixtures.

The generated numbers are synthetic. Valid ones pass the checksum and
date rules but are not checked against the population register, so they
may belong to real people; use them only in test environments.

Usage:
    python -m idsynth.scripts.generate_personnummer --count 5
    python -m idsynth.scripts.generate_personnummer --count 5 --invalid
    python -m idsynth.scripts.generate_personnummer --min-age 18 --max-age 30 --gender FEMALE
    python -m idsynth.scripts.generate_personnummer --validate 121212-1212 000101-0000
"""

import argparse
import logging
import sys
from typing import Optional

from pydantic import ValidationError

from idsynth.config import configure_logging, settings
from idsynth.providers import Providers
from idsynth.schemas import Gender, IdNumberRequest
from idsynth.swedish import SwedenIdNumber, validate_personnummer

logger = logging.getLogger(__name__)

# Upper bound on numbers per run
MAX_COUNT = 10_000


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate or validate Swedish personnummer test data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
NOTICE:
  Generated numbers are for testing only and may collide with real ones.
  Max %d numbers per run.
        """ % MAX_COUNT,
    )
    parser.add_argument(
        "--count",
        "-n",
        type=int,
        default=1,
        help="Number of personnummer to generate (default: 1)",
    )
    parser.add_argument(
        "--invalid",
        action="store_true",
        help="Generate numbers that fail validation",
    )
    parser.add_argument("--min-age", type=int, default=None, help="Minimum age")
    parser.add_argument("--max-age", type=int, default=None, help="Maximum age")
    parser.add_argument(
        "--gender",
        choices=[g.value for g in Gender],
        default=Gender.ANY.value,
        help="Gender of generated people (default: ANY)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--validate",
        type=str,
        nargs="+",
        metavar="NUMBER",
        help="Validate the given number(s) instead of generating",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def run_validate(numbers: list[str]) -> int:
    """Print the verdict for each number; exit status 1 if any is invalid."""
    status = 0
    for number in numbers:
        check = validate_personnummer(number)
        if check.is_valid:
            print(f"{number}\tVALID")
        else:
            print(f"{number}\tINVALID ({check.reason})")
            status = 1
    return status


def run_generate(
    generator: SwedenIdNumber, count: int, invalid: bool, request: IdNumberRequest
) -> int:
    for _ in range(count):
        if invalid:
            print(generator.generate_invalid())
        else:
            person = generator.generate_valid(request)
            print(
                f"{person.id_number}\t{person.birth_date.isoformat()}"
                f"\t{person.gender.value}"
            )
    logger.info("Generated %d %s personnummer", count, "invalid" if invalid else "valid")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging()
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.validate:
        return run_validate(args.validate)

    if not 1 <= args.count <= MAX_COUNT:
        print(f"ERROR: --count must be between 1 and {MAX_COUNT}")
        return 2

    min_age = settings.default_min_age if args.min_age is None else args.min_age
    max_age = settings.default_max_age if args.max_age is None else args.max_age

    try:
        request = IdNumberRequest(
            min_age=min_age, max_age=max_age, gender=Gender(args.gender)
        )
    except ValidationError as e:
        print(f"ERROR: invalid age or gender constraints:\n{e}")
        return 2

    generator = SwedenIdNumber(providers=Providers.create(seed=args.seed))
    return run_generate(generator, args.count, args.invalid, request)


if __name__ == "__main__":
    sys.exit(main())
