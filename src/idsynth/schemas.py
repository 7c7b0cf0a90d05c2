"""
Request and result schemas shared by all identity number generators.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from pydantic import BaseModel, Field, model_validator


class Gender(str, Enum):
    """Gender of a generated person."""

    MALE = "MALE"
    FEMALE = "FEMALE"
    ANY = "ANY"  # Request value only, never produced


class IdNumberRequest(BaseModel):
    """Constraints for generating a valid identity number."""

    min_age: int = Field(default=0, ge=0, le=150)
    max_age: int = Field(default=100, ge=0, le=150)
    gender: Gender = Gender.ANY

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_age_range(self) -> "IdNumberRequest":
        """Ensure the age range is not empty."""
        if self.min_age > self.max_age:
            raise ValueError(
                f"min_age ({self.min_age}) must not exceed max_age ({self.max_age})"
            )
        return self


@dataclass(frozen=True)
class PersonIdNumber:
    """A generated identity number together with the person it describes."""

    id_number: str
    birth_date: date
    gender: Gender
