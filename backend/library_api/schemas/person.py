"""Person Schemas — boundary fields shared by librarian and reader payloads.

Invariants:
    - tax_id: exactly 11 digits; phone: 10 or 11 digits when present
    - email: well-formed when present (EmailStr)
    - name: required, stripped, non-empty
    - Address: every field optional

Design Decisions:
    - Shape checks only: business rules (salary floor, tier, credit range) stay in core/
      so boundary failures are VALIDATION_FAILED and rule failures INVALID_DATA
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class AddressSchema(BaseModel):
    """Postal address, all parts optional."""
    model_config = ConfigDict(from_attributes=True)

    postal_code: str | None = Field(None, max_length=20)
    street: str | None = Field(None, max_length=200)
    complement: str | None = Field(None, max_length=200)
    number: str | None = Field(None, max_length=20)
    district: str | None = Field(None, max_length=100)
    city: str | None = Field(None, max_length=100)
    state: str | None = Field(None, max_length=50)


class PersonIn(BaseModel):
    """Fields every person payload carries."""
    name: str = Field(max_length=200)
    tax_id: str = Field(pattern=r"^\d{11}$")
    email: EmailStr | None = None
    phone: str | None = Field(None, pattern=r"^\d{10,11}$")
    address: AddressSchema | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class PersonOut(BaseModel):
    """Fields every person response carries."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    tax_id: str
    email: str | None = None
    phone: str | None = None
    address: AddressSchema
