"""
idsynth - Synthetic national identity numbers for test data

Generates and validates identity numbers that:
- Pass every structural and checksum rule of the national scheme
- Deliberately fail those rules, for negative-test fixtures
- Are checked by the same validator that the generators rely on
"""

__version__ = "0.1.0"
