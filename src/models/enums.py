"""
Enum definitions for the Person Records service
"""

from enum import Enum

class Gender(str, Enum):
    """
    Gender values accepted for a person.
    Matches the CHECK constraint on the people table.
    """
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"

    @classmethod
    def values(cls):
        return [member.value for member in cls]
