"""
Person-related Pydantic models
"""

from typing import Any, Dict
from datetime import datetime
from pydantic import BaseModel, Field
from uuid import UUID
from models.enums import Gender


class PersonFields(BaseModel):
    """Validated business fields, ready to be written to the store"""
    name: str = Field(..., min_length=1)
    age: int = Field(..., ge=0)
    gender: Gender
    mobile_number: str = Field(..., min_length=1)

    def to_record(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "age": self.age,
            "gender": self.gender.value,
            "mobile_number": self.mobile_number,
        }


class Person(BaseModel):
    person_id: UUID
    name: str
    age: int
    gender: Gender
    mobile_number: str
    created_at: datetime
    updated_at: datetime

    @property
    def id(self) -> str:
        return str(self.person_id)

    def to_form_values(self) -> Dict[str, Any]:
        """Values keyed by the HTML form field names"""
        return {
            "id": self.id,
            "name": self.name,
            "age": self.age,
            "gender": self.gender.value,
            "mobileNumber": self.mobile_number,
        }
