from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# -------------------------
# Value objects
# -------------------------
class Address(BaseModel):
    model_config = ConfigDict(frozen=True)

    line: str = ""
    city: str = ""
    post_code: str = Field(..., min_length=2)


class Company(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str


class Employee(BaseModel):
    model_config = ConfigDict(frozen=True)

    first_name: str
    surname: str
    home_address: Address
    correspondence_address: Optional[Address] = None
    company: Optional[Company] = None
    salary: Decimal = Field(..., ge=0)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.surname}"
