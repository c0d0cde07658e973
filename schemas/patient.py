"""Patient collection schemas."""

from datetime import date
from typing import Annotated, List, Optional

from pydantic import Field, StringConstraints

from schemas.base import CamelModel, PartialUpdate
from schemas.enums import Gender
from schemas.user import Email

PHONE_PATTERN = r"^[+\d][\d\s()-]{6,}$"

FullName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3)]
Phone = Annotated[str, StringConstraints(strip_whitespace=True, pattern=PHONE_PATTERN)]


class PatientCreate(CamelModel):
    """Patient registration payload."""
    full_name: FullName = Field(..., description="Full name")
    gender: Gender = Field(..., description="Gender")
    birth_date: date = Field(..., description="Birth date (YYYY-MM-DD)")
    phone: Phone = Field(..., description="Phone number")
    email: Email = Field(..., description="Email")
    lean_body_mass: Optional[float] = Field(None, ge=0, description="Lean body mass in kg")

    model_config = {
        "json_schema_extra": {
            "example": {
                "fullName": "Jane Doe",
                "gender": "female",
                "birthDate": "1990-05-20",
                "phone": "+55 11 91234-5678",
                "email": "jane.doe@example.com",
            }
        }
    }


class PatientUpdate(PartialUpdate):
    """Partial update of a patient."""
    full_name: Optional[FullName] = Field(None, description="Full name")
    gender: Optional[Gender] = Field(None, description="Gender")
    birth_date: Optional[date] = Field(None, description="Birth date (YYYY-MM-DD)")
    phone: Optional[Phone] = Field(None, description="Phone number")
    email: Optional[Email] = Field(None, description="Email")
    lean_body_mass: Optional[float] = Field(None, ge=0, description="Lean body mass in kg")


class PatientResponse(CamelModel):
    """Patient as returned by the API."""
    id: str
    full_name: str
    gender: Gender
    birth_date: str
    phone: str
    email: str
    lean_body_mass: Optional[float] = None


class PatientCreated(CamelModel):
    """Identifier of a newly registered patient."""
    id: str


class PatientPage(CamelModel):
    """Page of the caller's patients."""
    page: int
    page_size: int
    total: int
    total_pages: int
    items: List[PatientResponse]
